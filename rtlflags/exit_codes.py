"""Documented exit codes for the ``rtlflags`` command.

Usage:
    from rtlflags.exit_codes import ExitCode
    sys.exit(ExitCode.DEVICE_REJECTED)
"""

from __future__ import annotations


class ExitCode:
    """Exit code constants for the ``rtlflags`` process.

    Attributes:
        SUCCESS: Every supplied flag was applied.
        DEVICE_REJECTED: A radio setter failed; later flags were not applied.
        INVALID_ARGS: Command-line parsing failed (argparse exits with this)
            or the log directory is not writable.
        DEVICE_UNAVAILABLE: The rtl-sdr device could not be opened.
    """

    SUCCESS: int = 0
    DEVICE_REJECTED: int = 1
    INVALID_ARGS: int = 2
    DEVICE_UNAVAILABLE: int = 3
