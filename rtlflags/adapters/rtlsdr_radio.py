"""rtlflags/adapters/rtlsdr_radio.py

pyrtlsdr wrapper implementing the :class:`~rtlflags.ports.Radio` port.

The same wrapper drives a local dongle (``rtlsdr.RtlSdr``) or a remote one
served by pyrtlsdr's TCP server (``rtlsdr.RtlSdrTcpClient``). Setters the
wrapped device does not offer are refused with :class:`RtlSdrRadioError`.
Offset tuning and test mode have no pyrtlsdr method and go straight to
librtlsdr, which needs a local device.

Arguments are range checked before they reach the device: librtlsdr takes
frequencies and rates as uint32 and ppm / tenths of dB as int32, and a
value outside those would be wrapped silently.

Copyright BINGO Collaboration
Last modified: 2026-10-19
"""

from __future__ import annotations

from typing import Any, Optional

from ..errors import RadioUnavailable
from ..logging_utils import logprintf

# pyrtlsdr's RtlSdrTcpServer default
DEFAULT_TCP_PORT: int = 1235

UINT32: tuple[int, int] = (0, 0xFFFFFFFF)
INT32: tuple[int, int] = (-0x80000000, 0x7FFFFFFF)
SAMPLING_MODES: tuple[int, int] = (0, 2)


class RtlSdrRadioError(RuntimeError):
    """Raised when a setting is out of range or not offered by the device."""


def _checked(what: str, value: int, bounds: tuple[int, int]) -> int:
    low, high = bounds
    value = int(value)
    if not low <= value <= high:
        raise RtlSdrRadioError(f"{what} {value} outside [{low}, {high}]")
    return value


def parse_address(text: str, default_port: int = DEFAULT_TCP_PORT) -> tuple[str, int]:
    """Split ``HOST[:PORT]`` (or ``[V6HOST]:PORT``) into host and port."""

    text = text.strip()
    if not text:
        raise ValueError("empty server address")
    if text.startswith("["):
        host, sep, rest = text[1:].partition("]")
        if not sep:
            raise ValueError(f"invalid server address: {text!r}")
        port_text = rest[1:] if rest.startswith(":") else ""
    elif text.count(":") == 1:
        host, port_text = text.split(":", 1)
    else:
        host, port_text = text, ""
    if not port_text:
        return host, default_port
    try:
        port = int(port_text)
    except ValueError as exc:
        raise ValueError(f"invalid server port: {port_text!r}") from exc
    if not 0 < port < 65536:
        raise ValueError(f"server port out of range: {port}")
    return host, port


class RtlSdrRadio:
    """Apply radio settings through a pyrtlsdr device object.

    ``lib`` is the librtlsdr binding used for offset tuning and test mode;
    it defaults to ``rtlsdr.librtlsdr.librtlsdr`` and is loaded on first use.
    """

    def __init__(self, device: Any, lib: Any = None) -> None:
        self.device: Optional[Any] = device
        self._lib = lib

    def _device(self) -> Any:
        if self.device is None:
            raise RtlSdrRadioError("rtl-sdr device is closed")
        return self.device

    def _call(self, method: str, *args: Any) -> None:
        fn = getattr(self._device(), method, None)
        if fn is None:
            raise RtlSdrRadioError(f"{type(self.device).__name__} has no {method}")
        fn(*args)

    def _lib_call(self, symbol: str, enabled: bool) -> None:
        dev_p = getattr(self._device(), "dev_p", None)
        if dev_p is None:
            raise RtlSdrRadioError(f"{symbol} needs a local rtl-sdr device")
        if self._lib is None:
            from rtlsdr.librtlsdr import librtlsdr

            self._lib = librtlsdr
        result = getattr(self._lib, symbol)(dev_p, int(enabled))
        if result < 0:
            raise RtlSdrRadioError(f"{symbol} failed with code {result}")

    # --- Radio port --------------------------------------------------------

    def set_agc_mode(self, enabled: bool) -> None:
        self._call("set_agc_mode", bool(enabled))

    def set_center_freq(self, hz: int) -> None:
        self._call("set_center_freq", _checked("center frequency", hz, UINT32))

    def set_direct_sampling(self, mode: int) -> None:
        self._call("set_direct_sampling", _checked("direct sampling mode", mode, SAMPLING_MODES))

    def set_freq_correction(self, ppm: int) -> None:
        self._call("set_freq_correction", _checked("frequency correction", ppm, INT32))

    def set_offset_tuning(self, enabled: bool) -> None:
        self._lib_call("rtlsdr_set_offset_tuning", enabled)

    def set_sample_rate(self, hz: int) -> None:
        self._call("set_sample_rate", _checked("sample rate", hz, UINT32))

    def set_test_mode(self, enabled: bool) -> None:
        self._lib_call("rtlsdr_set_testmode", enabled)

    def set_tuner_bw(self, hz: int) -> None:
        self._call("set_bandwidth", _checked("tuner bandwidth", hz, UINT32))

    def set_tuner_gain(self, tenths_db: int) -> None:
        # pyrtlsdr takes dB
        self._call("set_gain", _checked("tuner gain", tenths_db, INT32) / 10)

    def set_tuner_gain_mode(self, manual: bool) -> None:
        self._call("set_manual_gain_enabled", bool(manual))

    # --- lifecycle ---------------------------------------------------------

    def close(self) -> None:
        if self.device is None:
            return
        try:
            self.device.close()
        finally:
            self.device = None

    def __enter__(self) -> "RtlSdrRadio":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def open_local(
    device_index: int = 0,
    serial_number: Optional[str] = None,
    *,
    sdr_class: Any = None,
) -> RtlSdrRadio:
    """Open a USB dongle by index or serial number."""

    try:
        if sdr_class is None:
            from rtlsdr import RtlSdr as sdr_class
        if serial_number:
            device = sdr_class(serial_number=str(serial_number))
        else:
            device = sdr_class(device_index=int(device_index))
    except (ImportError, OSError) as exc:
        raise RadioUnavailable(f"cannot open rtl-sdr device: {exc}") from exc
    logprintf(2, "Opened rtl-sdr %s", serial_number or f"#{device_index}")
    return RtlSdrRadio(device)


def open_tcp(host: str, port: int = DEFAULT_TCP_PORT, *, client_class: Any = None) -> RtlSdrRadio:
    """Attach to a pyrtlsdr TCP server."""

    try:
        if client_class is None:
            from rtlsdr import RtlSdrTcpClient as client_class
        device = client_class(hostname=host, port=port)
    except (ImportError, OSError) as exc:
        raise RadioUnavailable(f"cannot reach rtl-sdr server {host}:{port}: {exc}") from exc
    logprintf(2, "Using rtl-sdr server at %s:%d", host, port)
    return RtlSdrRadio(device)


__all__ = [
    "DEFAULT_TCP_PORT",
    "RtlSdrRadio",
    "RtlSdrRadioError",
    "open_local",
    "open_tcp",
    "parse_address",
]
