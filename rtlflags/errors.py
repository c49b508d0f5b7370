"""rtlflags/errors.py

Exception hierarchy shared by the value parsers and the configuration
context.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations


class RtlFlagsError(Exception):
    """Base class for every error raised by :mod:`rtlflags`."""


class InvalidFormat(RtlFlagsError, ValueError):
    """Raised when flag text cannot be parsed into its value type."""

    def __init__(self, kind: str, text: str) -> None:
        super().__init__(f"invalid {kind}: {text!r}")
        self.kind = kind
        self.text = text


class DeviceRejected(RtlFlagsError):
    """Raised when a radio setter fails while applying a flag.

    Attributes
    ----------
    flag:
        Name of the command-line flag whose setter failed.
    cause:
        The exception raised by the device.
    """

    def __init__(self, flag: str, cause: BaseException) -> None:
        super().__init__(f"{flag}: {cause}")
        self.flag = flag
        self.cause = cause


class RadioUnavailable(RtlFlagsError):
    """Raised when the radio cannot be opened or reached."""


__all__ = ["RtlFlagsError", "InvalidFormat", "DeviceRejected", "RadioUnavailable"]
