"""rtlflags/logging_utils.py

Shared ``rtlflags`` logger.

Library modules log through :func:`logprintf` with the numeric levels
(0 error, 1 warning, 2 info, 3 debug); the CLI adjusts the level and may add
a file handler. Each applied radio setting is logged at debug level.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

import logging
import os
import sys

_FORMAT = "%(asctime)s %(levelname)s: %(message)s"

logger = logging.getLogger("rtlflags")
logger.setLevel(logging.INFO)
_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter(_FORMAT))
if not logger.handlers:
    logger.addHandler(_handler)


def set_debug(enabled: bool) -> None:
    logger.setLevel(logging.DEBUG if enabled else logging.INFO)


def set_level(name: str) -> None:
    """Set the level from a name such as ``"debug"``; unknown names mean INFO."""
    logger.setLevel(getattr(logging, name.upper(), logging.INFO))


def logprintf(level: int, fmt: str, *args: object) -> None:
    msg = fmt % args if args else fmt
    if level == 0:
        logger.error(msg)
    elif level == 1:
        logger.warning(msg)
    elif level == 2:
        logger.info(msg)
    elif level == 3:
        logger.debug(msg)
    else:
        logger.info(msg)


def setup_file_logging(logdir: str, log_filename: str = "rtlflags.log") -> logging.FileHandler:
    """Append log records to ``logdir/log_filename``.

    Returns the handler so callers can detach it with
    :func:`remove_file_logging`. Raises :class:`OSError` when the directory
    cannot be created or written.
    """

    os.makedirs(logdir, exist_ok=True)
    if not os.access(logdir, os.W_OK):
        raise PermissionError(f"Cannot write to log directory: {logdir}")

    fh = logging.FileHandler(os.path.join(logdir, log_filename))
    fh.setFormatter(logging.Formatter(_FORMAT))
    logger.addHandler(fh)
    return fh


def remove_file_logging(handler: logging.Handler) -> None:
    logger.removeHandler(handler)
    handler.close()
