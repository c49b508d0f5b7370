"""Command-line interface for rtlflags.

Parses the radio flags (``-centerfreq 100M``, ``-samplerate 2.4M`` ...)
together with a few tool options, opens the selected radio and applies
only the flags that were given. The radio is a local dongle
(``--device``), a pyrtlsdr TCP server (``--rtltcp``) or, when neither is
given, a dry-run radio that just logs the settings.

Process-level defaults may also come from ``RTLFLAGS_*`` environment
variables (see :mod:`rtlflags.config.settings`).
"""

from __future__ import annotations

import argparse
from typing import Sequence

from .adapters import LoggingRadio, RtlSdrRadio, open_local, open_tcp, parse_address
from .application import Context
from .config import Settings, load_settings
from .errors import DeviceRejected, RadioUnavailable
from .exit_codes import ExitCode
from .logging_utils import (
    logprintf,
    remove_file_logging,
    set_debug,
    set_level,
    setup_file_logging,
)


def _build_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rtlflags", description="Apply rtl-sdr settings given as flags"
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--rtltcp",
        metavar="HOST[:PORT]",
        default=settings.rtltcp_address,
        help="pyrtlsdr TCP server to configure",
    )
    source.add_argument(
        "--device",
        metavar="INDEX",
        type=int,
        default=settings.device_index,
        help="local rtl-sdr dongle index (default: dry run, log only)",
    )
    parser.add_argument(
        "--log-dir",
        metavar="DIR",
        default=settings.log_dir,
        help="Also write rtlflags.log into DIR",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def _open_radio(args: argparse.Namespace):
    if args.rtltcp:
        host, port = parse_address(args.rtltcp)
        return open_tcp(host, port)
    if args.device is not None:
        return open_local(args.device)
    logprintf(2, "No rtl-sdr device given, running dry")
    return LoggingRadio()


def _run(context: Context, args: argparse.Namespace) -> int:
    try:
        radio = _open_radio(args)
    except (RadioUnavailable, ValueError) as exc:
        logprintf(0, "Radio unavailable: %s", exc)
        return ExitCode.DEVICE_UNAVAILABLE

    context.radio = radio
    try:
        context.handle_flags(args)
    except DeviceRejected as exc:
        logprintf(0, "failed to apply %s: %s", exc.flag, exc.cause)
        return ExitCode.DEVICE_REJECTED
    finally:
        if isinstance(radio, RtlSdrRadio):
            radio.close()

    return ExitCode.SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point used by the ``rtlflags`` script."""

    settings = load_settings()
    set_level(settings.log_level)

    parser = _build_arg_parser(settings)
    context = Context(LoggingRadio())
    context.register_flags(parser)
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.debug:
        set_debug(True)

    file_handler = None
    if args.log_dir:
        try:
            file_handler = setup_file_logging(args.log_dir)
        except OSError as exc:
            logprintf(0, "Cannot write log to %s: %s", args.log_dir, exc)
            return ExitCode.INVALID_ARGS

    try:
        return _run(context, args)
    finally:
        if file_handler is not None:
            remove_file_logging(file_handler)
