"""rtlflags/adapters/__init__.py

Concrete implementations of the :class:`~rtlflags.ports.Radio` port.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from .dry_run import LoggingRadio
from .rtlsdr_radio import (
    DEFAULT_TCP_PORT,
    RtlSdrRadio,
    RtlSdrRadioError,
    open_local,
    open_tcp,
    parse_address,
)

__all__ = [
    "DEFAULT_TCP_PORT",
    "LoggingRadio",
    "RtlSdrRadio",
    "RtlSdrRadioError",
    "open_local",
    "open_tcp",
    "parse_address",
]
