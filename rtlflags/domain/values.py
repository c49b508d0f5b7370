"""rtlflags/domain/values.py

Parseable value types used by the radio flags.

Every type follows the same small contract (:class:`FlagValue`):
``parse`` builds a value from command-line text and raises
:class:`~rtlflags.errors.InvalidFormat` on bad input, ``str()`` gives the
display form, and ``as_int`` gives the integer handed to the radio.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

import math
import re
from decimal import Decimal, InvalidOperation
from enum import IntEnum
from typing import Protocol, runtime_checkable

from ..errors import InvalidFormat


@runtime_checkable
class FlagValue(Protocol):
    """Contract shared by the custom flag value types."""

    @classmethod
    def parse(cls, text: str) -> "FlagValue":  # pragma: no cover - structural
        """Build a value from command-line text."""

    def as_int(self) -> int:  # pragma: no cover - structural
        """Integer form passed to the radio."""


# SI multiplier suffix -> power of 1000
_SI_POWERS: dict[str, int] = {
    "p": -4,
    "n": -3,
    "u": -2,
    "µ": -2,
    "m": -1,
    "": 0,
    "k": 1,
    "M": 2,
    "G": 3,
    "T": 4,
}

# largest first, used only for display
_DISPLAY_SUFFIXES: tuple[tuple[str, int], ...] = (
    ("T", 4),
    ("G", 3),
    ("M", 2),
    ("k", 1),
)

_SCI_RE = re.compile(
    r"^(?P<number>[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)\s*(?P<suffix>[^\s\d]?)$"
)


class ScientificNotation(float):
    """A magnitude written with an optional SI suffix, e.g. ``2.4M``.

    The numeric part is scaled with :class:`decimal.Decimal` so that
    ``"2.4M"`` is exactly ``2400000.0`` rather than a nearby float.
    """

    def __new__(cls, value: float = 0.0) -> "ScientificNotation":
        return super().__new__(cls, value)

    @classmethod
    def parse(cls, text: str) -> "ScientificNotation":
        m = _SCI_RE.match(text.strip())
        if not m:
            raise InvalidFormat("scientific notation", text)
        power = _SI_POWERS.get(m.group("suffix"))
        if power is None:
            raise InvalidFormat("scientific notation", text)
        try:
            number = Decimal(m.group("number"))
        except InvalidOperation as exc:  # pragma: no cover - regex guards
            raise InvalidFormat("scientific notation", text) from exc
        value = float(number.scaleb(3 * power))
        if not math.isfinite(value):
            raise InvalidFormat("scientific notation", text)
        return cls(value)

    def __str__(self) -> str:
        value = float(self)
        magnitude = abs(value)
        for suffix, power in _DISPLAY_SUFFIXES:
            scale = 1000**power
            if magnitude >= scale:
                return f"{value / scale:.12g}{suffix}"
        return f"{value:.12g}"

    def __repr__(self) -> str:
        return f"ScientificNotation({str(self)!r})"

    def as_int(self) -> int:
        return int(self)


class SamplingMode(IntEnum):
    """Direct sampling mode of the RTL2832U.

    Input spellings (``none``, ``inphase``, ``quadrature``) differ from the
    display labels returned by ``str()``.
    """

    NONE = 0
    IN_PHASE = 1
    QUADRATURE = 2
    UNKNOWN = 3

    @classmethod
    def parse(cls, text: str) -> "SamplingMode":
        mode = _SAMPLING_INPUTS.get(text.lower())
        if mode is None:
            raise InvalidFormat("sampling mode", text)
        return mode

    def __str__(self) -> str:
        return _SAMPLING_LABELS[self]

    def as_int(self) -> int:
        return int(self)


_SAMPLING_INPUTS: dict[str, SamplingMode] = {
    "none": SamplingMode.NONE,
    "inphase": SamplingMode.IN_PHASE,
    "quadrature": SamplingMode.QUADRATURE,
}

_SAMPLING_LABELS: dict[SamplingMode, str] = {
    SamplingMode.NONE: "None",
    SamplingMode.IN_PHASE: "In-Phase ADC",
    SamplingMode.QUADRATURE: "Quadrature ADC",
    SamplingMode.UNKNOWN: "Unknown",
}

_TRUE_WORDS = {"1", "t", "true"}
_FALSE_WORDS = {"0", "f", "false"}


def parse_bool(text: str) -> bool:
    """Parse a boolean flag value (``1/t/true`` or ``0/f/false``, any case)."""

    lowered = text.strip().lower()
    if lowered in _TRUE_WORDS:
        return True
    if lowered in _FALSE_WORDS:
        return False
    raise InvalidFormat("boolean", text)


__all__ = ["FlagValue", "ScientificNotation", "SamplingMode", "parse_bool"]
