"""Dry-run radio that only logs what would be sent."""

from __future__ import annotations

from typing import Any

from ..logging_utils import logprintf


class LoggingRadio:
    """Accept every setting, log it and keep a record in :attr:`calls`."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, Any]] = []

    def _record(self, setter: str, value: Any) -> None:
        self.calls.append((setter, value))
        logprintf(2, "[dry-run] %s(%r)", setter, value)

    def set_agc_mode(self, enabled: bool) -> None:
        self._record("set_agc_mode", enabled)

    def set_center_freq(self, hz: int) -> None:
        self._record("set_center_freq", hz)

    def set_direct_sampling(self, mode: int) -> None:
        self._record("set_direct_sampling", mode)

    def set_freq_correction(self, ppm: int) -> None:
        self._record("set_freq_correction", ppm)

    def set_offset_tuning(self, enabled: bool) -> None:
        self._record("set_offset_tuning", enabled)

    def set_sample_rate(self, hz: int) -> None:
        self._record("set_sample_rate", hz)

    def set_test_mode(self, enabled: bool) -> None:
        self._record("set_test_mode", enabled)

    def set_tuner_bw(self, hz: int) -> None:
        self._record("set_tuner_bw", hz)

    def set_tuner_gain(self, tenths_db: int) -> None:
        self._record("set_tuner_gain", tenths_db)

    def set_tuner_gain_mode(self, manual: bool) -> None:
        self._record("set_tuner_gain_mode", manual)
