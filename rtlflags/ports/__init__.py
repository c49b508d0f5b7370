"""rtlflags/ports/__init__.py

Device capability port.

:class:`Radio` is the contract the configuration context drives. Adapters in
:mod:`rtlflags.adapters` provide concrete implementations; tests use plain
recording doubles.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Radio(Protocol):
    """Setter set common to rtl-sdr front ends.

    Each method raises on failure and returns ``None`` on success.
    Concrete implementations: :class:`rtlflags.adapters.RtlSdrRadio`,
    :class:`rtlflags.adapters.LoggingRadio`.
    """

    def set_agc_mode(self, enabled: bool) -> None:  # pragma: no cover - structural
        """Enable or disable the RTL2832U digital AGC."""

    def set_center_freq(self, hz: int) -> None:  # pragma: no cover - structural
        """Tune to ``hz``."""

    def set_direct_sampling(self, mode: int) -> None:  # pragma: no cover - structural
        """Select direct sampling by ordinal (0 off, 1 I-ADC, 2 Q-ADC)."""

    def set_freq_correction(self, ppm: int) -> None:  # pragma: no cover - structural
        """Apply an oscillator correction in parts per million."""

    def set_offset_tuning(self, enabled: bool) -> None:  # pragma: no cover - structural
        """Enable or disable offset tuning."""

    def set_sample_rate(self, hz: int) -> None:  # pragma: no cover - structural
        """Set the sample rate in Hz."""

    def set_test_mode(self, enabled: bool) -> None:  # pragma: no cover - structural
        """Enable the counter test mode."""

    def set_tuner_bw(self, hz: int) -> None:  # pragma: no cover - structural
        """Set the tuner IF bandwidth in Hz."""

    def set_tuner_gain(self, tenths_db: int) -> None:  # pragma: no cover - structural
        """Set the tuner gain in tenths of a dB."""

    def set_tuner_gain_mode(self, manual: bool) -> None:  # pragma: no cover - structural
        """``True`` selects manual gain, ``False`` tuner AGC."""


__all__ = ["Radio"]
