from __future__ import annotations

import logging

from rtlflags.adapters import LoggingRadio
from rtlflags.ports import Radio


def test_logging_radio_satisfies_radio_port() -> None:
    assert isinstance(LoggingRadio(), Radio)


def test_logging_radio_records_and_logs(caplog) -> None:
    radio = LoggingRadio()

    with caplog.at_level(logging.INFO, logger="rtlflags"):
        radio.set_tuner_bw(2_400_000)
        radio.set_offset_tuning(True)

    assert radio.calls == [("set_tuner_bw", 2_400_000), ("set_offset_tuning", True)]
    assert "[dry-run] set_tuner_bw(2400000)" in caplog.text
