"""rtlflags/application/context.py

Configuration context: maps command-line flags onto radio setters.

The context keeps one pending value per radio property. Flags are
registered on an :class:`argparse.ArgumentParser` with
``argparse.SUPPRESS`` as their namespace default, so after parsing the
namespace only carries the flags the user actually typed. That record is
what :meth:`Context.handle_flags` walks; flags left at their default are
never sent to the radio.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

import argparse
import math
from typing import Any, Callable, Sequence

from ..domain import FlagSpec, SamplingMode, ScientificNotation, parse_bool
from ..errors import DeviceRejected, InvalidFormat
from ..logging_utils import logprintf
from ..ports import Radio

# Declared in ascending name order, which is also the apply order.
FLAGS: tuple[FlagSpec, ...] = (
    FlagSpec(
        name="agcmode",
        attr="agc_mode",
        setter="set_agc_mode",
        kind="bool",
        description="enable rtl2832u agc",
        default="false",
    ),
    FlagSpec(
        name="centerfreq",
        attr="center_freq",
        setter="set_center_freq",
        kind="sci",
        description="center frequency to receive on",
        default="100M",
    ),
    FlagSpec(
        name="directsampling",
        attr="direct_sampling",
        setter="set_direct_sampling",
        kind="sampling",
        description="set sampling mode: none, inphase, quadrature",
        default="none",
    ),
    FlagSpec(
        name="freqcorrection",
        attr="freq_correction",
        setter="set_freq_correction",
        kind="int",
        description="frequency correction in ppm",
        default="0",
    ),
    FlagSpec(
        name="offsettuning",
        attr="offset_tuning",
        setter="set_offset_tuning",
        kind="bool",
        description="enable offset tuning",
        default="false",
    ),
    FlagSpec(
        name="samplerate",
        attr="sample_rate",
        setter="set_sample_rate",
        kind="sci",
        description="sample rate",
        default="2.4M",
    ),
    FlagSpec(
        name="testmode",
        attr="test_mode",
        setter="set_test_mode",
        kind="bool",
        description="enable test mode",
        default="false",
    ),
    FlagSpec(
        name="tunerbandwidth",
        attr="tuner_bandwidth",
        setter="set_tuner_bw",
        kind="sci",
        description="tuner bandwidth",
        default="2.4M",
    ),
    FlagSpec(
        name="tunergain",
        attr="tuner_gain",
        setter="set_tuner_gain",
        kind="gain_db",
        description="set tuner gain in dB",
        default="0.0",
    ),
    FlagSpec(
        name="tunergainmode",
        attr="tuner_gain_mode",
        setter="set_tuner_gain_mode",
        kind="bool",
        description="enable manual gain",
        default="false",
    ),
)

_FLAGS_BY_NAME: dict[str, FlagSpec] = {spec.name: spec for spec in FLAGS}


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError as exc:
        raise InvalidFormat("integer", text) from exc


def _parse_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise InvalidFormat("float", text) from exc
    if not math.isfinite(value):
        raise InvalidFormat("float", text)
    return value


_PARSERS: dict[str, Callable[[str], Any]] = {
    "bool": parse_bool,
    "int": _parse_int,
    "gain_db": _parse_float,
    "sci": ScientificNotation.parse,
    "sampling": SamplingMode.parse,
}

_METAVARS: dict[str, str] = {
    "bool": "BOOL",
    "int": "PPM",
    "gain_db": "DB",
    "sci": "HZ",
    "sampling": "MODE",
}


def _argument_type(spec: FlagSpec) -> Callable[[str], Any]:
    """Wrap the value parser so argparse reports our message verbatim."""

    parse = _PARSERS[spec.kind]

    def convert(text: str) -> Any:
        try:
            return parse(text)
        except InvalidFormat as exc:
            raise argparse.ArgumentTypeError(str(exc)) from exc

    convert.__name__ = spec.kind
    return convert


class _StoreFlag(argparse.Action):
    """Store a parsed flag value on the context and in the namespace."""

    def __init__(self, option_strings, dest, *, context: "Context", spec: FlagSpec, **kwargs):
        super().__init__(option_strings, dest, **kwargs)
        self._context = context
        self._spec = spec

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(self._context, self._spec.attr, values)
        setattr(namespace, self.dest, values)


def visited_flags(namespace: argparse.Namespace) -> list[str]:
    """Return the registered flags present in ``namespace``, by ascending name."""

    return sorted(spec.name for spec in FLAGS if hasattr(namespace, spec.name))


class Context:
    """Pending radio settings plus the radio they will be applied to.

    The radio is shared with the caller, which keeps ownership and must keep
    it open until :meth:`handle_flags` has returned.
    """

    def __init__(self, radio: Radio) -> None:
        self.radio = radio

        self.agc_mode: bool = False
        self.center_freq: ScientificNotation = ScientificNotation()
        self.direct_sampling: SamplingMode = SamplingMode.NONE
        self.freq_correction: int = 0
        self.offset_tuning: bool = False
        self.sample_rate: ScientificNotation = ScientificNotation()
        self.test_mode: bool = False
        self.tuner_bandwidth: ScientificNotation = ScientificNotation()
        self.tuner_gain: float = 0.0
        self.tuner_gain_mode: bool = False

    def register_flags(self, parser: argparse.ArgumentParser) -> None:
        """Declare every radio flag on ``parser``.

        The default shown in ``--help`` comes from the flag table and does not
        change the pending value, which stays at its zero value until the
        flag is supplied.
        """

        group = parser.add_argument_group("radio settings")
        for spec in FLAGS:
            extra: dict[str, Any] = {}
            if spec.kind == "bool":
                extra = {"nargs": "?", "const": True}
            group.add_argument(
                f"-{spec.name}",
                f"--{spec.name}",
                dest=spec.name,
                action=_StoreFlag,
                context=self,
                spec=spec,
                type=_argument_type(spec),
                default=argparse.SUPPRESS,
                metavar=_METAVARS[spec.kind],
                help=f"{spec.description} (default: {spec.default})",
                **extra,
            )

    def device_value(self, spec: FlagSpec) -> Any:
        """Return the pending value of ``spec`` in the radio's units."""

        value = getattr(self, spec.attr)
        if spec.kind in ("sci", "sampling"):
            return value.as_int()
        if spec.kind == "gain_db":
            # tenths of a dB, truncated
            return int(value * 10)
        return value

    def handle_flags(self, namespace: argparse.Namespace) -> list[str]:
        """Apply the flags present in ``namespace`` to the radio.

        Must be called after parsing. Setters run in ascending flag name
        order. The first failing setter stops the walk and is reported as
        :class:`~rtlflags.errors.DeviceRejected`; settings already applied
        are left in place.

        Returns
        -------
        list[str]
            Names of the flags that were applied.
        """

        applied: list[str] = []
        for name in visited_flags(namespace):
            spec = _FLAGS_BY_NAME[name]
            value = self.device_value(spec)
            logprintf(3, "%s: %s(%r)", name, spec.setter, value)
            setter = getattr(self.radio, spec.setter)
            try:
                setter(value)
            except Exception as exc:
                raise DeviceRejected(name, exc) from exc
            applied.append(name)

        if applied:
            logprintf(2, "Applied %d radio setting(s): %s", len(applied), ", ".join(applied))
        else:
            logprintf(3, "No radio settings supplied")
        return applied

    def apply(
        self,
        argv: Sequence[str] | None = None,
        parser: argparse.ArgumentParser | None = None,
    ) -> argparse.Namespace:
        """Register, parse ``argv`` and apply in one call."""

        if parser is None:
            parser = argparse.ArgumentParser(prog="rtlflags")
        self.register_flags(parser)
        namespace = parser.parse_args(list(argv) if argv is not None else None)
        self.handle_flags(namespace)
        return namespace


__all__ = ["Context", "FLAGS", "visited_flags"]
