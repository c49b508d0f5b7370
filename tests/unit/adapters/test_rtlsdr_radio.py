from __future__ import annotations

import argparse

import pytest

from rtlflags.adapters import (
    DEFAULT_TCP_PORT,
    RtlSdrRadio,
    RtlSdrRadioError,
    open_local,
    open_tcp,
    parse_address,
)
from rtlflags.application import Context
from rtlflags.errors import DeviceRejected, RadioUnavailable
from rtlflags.ports import Radio


class FakeSdr:
    """Stands in for rtlsdr.RtlSdr: records every method call."""

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs
        self.calls: list[tuple[str, object]] = []
        self.dev_p = object()
        self.closed = 0

    def __getattr__(self, name):
        if not name.startswith("set_"):
            raise AttributeError(name)
        return lambda value: self.calls.append((name, value))

    def close(self) -> None:
        self.closed += 1


class FakeTcpClient:
    """Remote device: only the basic pyrtlsdr setters, no dev_p."""

    def __init__(self, hostname: str, port: int) -> None:
        self.hostname = hostname
        self.port = port
        self.calls: list[tuple[str, object]] = []

    def set_center_freq(self, value) -> None:
        self.calls.append(("set_center_freq", value))

    def set_sample_rate(self, value) -> None:
        self.calls.append(("set_sample_rate", value))

    def close(self) -> None:
        pass


class FakeLib:
    def __init__(self, result: int = 0) -> None:
        self.result = result
        self.calls: list[tuple[str, object, int]] = []

    def __getattr__(self, symbol):
        def call(dev_p, value):
            self.calls.append((symbol, dev_p, value))
            return self.result

        return call


def test_radio_satisfies_port() -> None:
    assert isinstance(RtlSdrRadio(FakeSdr()), Radio)


def test_setters_map_to_pyrtlsdr_methods() -> None:
    sdr = FakeSdr()
    radio = RtlSdrRadio(sdr)

    radio.set_center_freq(100_000_000)
    radio.set_sample_rate(2_400_000)
    radio.set_tuner_bw(350_000)
    radio.set_tuner_gain_mode(True)
    radio.set_tuner_gain(496)
    radio.set_agc_mode(False)
    radio.set_direct_sampling(2)
    radio.set_freq_correction(-5)

    assert sdr.calls == [
        ("set_center_freq", 100_000_000),
        ("set_sample_rate", 2_400_000),
        ("set_bandwidth", 350_000),
        ("set_manual_gain_enabled", True),
        ("set_gain", 49.6),
        ("set_agc_mode", False),
        ("set_direct_sampling", 2),
        ("set_freq_correction", -5),
    ]


@pytest.mark.parametrize(
    "setter, value",
    [
        ("set_center_freq", 5_000_000_000),
        ("set_center_freq", -100_000_000),
        ("set_sample_rate", 2**32),
        ("set_tuner_bw", -1),
        ("set_freq_correction", 2**31),
        ("set_tuner_gain", -(2**31) - 1),
        ("set_direct_sampling", 3),
    ],
)
def test_out_of_range_values_are_refused(setter: str, value: int) -> None:
    sdr = FakeSdr()

    with pytest.raises(RtlSdrRadioError, match="outside"):
        getattr(RtlSdrRadio(sdr), setter)(value)

    assert sdr.calls == []


def test_range_edges_are_accepted() -> None:
    sdr = FakeSdr()
    radio = RtlSdrRadio(sdr)

    radio.set_center_freq(0xFFFFFFFF)
    radio.set_freq_correction(-(2**31))

    assert sdr.calls == [("set_center_freq", 0xFFFFFFFF), ("set_freq_correction", -(2**31))]


def test_context_reports_out_of_range_frequency() -> None:
    sdr = FakeSdr()
    context = Context(RtlSdrRadio(sdr))
    p = argparse.ArgumentParser()
    context.register_flags(p)
    args = p.parse_args(["-agcmode", "-centerfreq", "5G", "-samplerate", "2M"])

    with pytest.raises(DeviceRejected) as err:
        context.handle_flags(args)

    assert err.value.flag == "centerfreq"
    assert isinstance(err.value.cause, RtlSdrRadioError)
    assert sdr.calls == [("set_agc_mode", True)]


def test_offset_tuning_and_test_mode_use_librtlsdr() -> None:
    sdr = FakeSdr()
    lib = FakeLib()
    radio = RtlSdrRadio(sdr, lib=lib)

    radio.set_offset_tuning(True)
    radio.set_test_mode(False)

    assert lib.calls == [
        ("rtlsdr_set_offset_tuning", sdr.dev_p, 1),
        ("rtlsdr_set_testmode", sdr.dev_p, 0),
    ]


def test_librtlsdr_error_code_is_raised() -> None:
    radio = RtlSdrRadio(FakeSdr(), lib=FakeLib(result=-2))

    with pytest.raises(RtlSdrRadioError, match="-2"):
        radio.set_offset_tuning(True)


def test_remote_device_refuses_missing_setters() -> None:
    radio = RtlSdrRadio(FakeTcpClient("sdr", 1235), lib=FakeLib())

    with pytest.raises(RtlSdrRadioError, match="set_bandwidth"):
        radio.set_tuner_bw(1_000_000)
    with pytest.raises(RtlSdrRadioError, match="local"):
        radio.set_test_mode(True)


def test_close_is_idempotent_and_blocks_setters() -> None:
    sdr = FakeSdr()
    with RtlSdrRadio(sdr) as radio:
        pass
    radio.close()

    assert sdr.closed == 1
    with pytest.raises(RtlSdrRadioError, match="closed"):
        radio.set_sample_rate(1_000_000)


def test_open_local_by_index_and_serial() -> None:
    by_index = open_local(1, sdr_class=FakeSdr)
    by_serial = open_local(serial_number="00000042", sdr_class=FakeSdr)

    assert by_index.device.kwargs == {"device_index": 1}
    assert by_serial.device.kwargs == {"serial_number": "00000042"}


def test_open_local_failure_is_unavailable() -> None:
    def broken(**kwargs):
        raise OSError("No devices found")

    with pytest.raises(RadioUnavailable, match="No devices found"):
        open_local(0, sdr_class=broken)


def test_open_tcp_passes_host_and_port() -> None:
    radio = open_tcp("10.0.0.2", 7373, client_class=FakeTcpClient)

    assert (radio.device.hostname, radio.device.port) == ("10.0.0.2", 7373)
    radio.set_center_freq(162_400_000)
    assert radio.device.calls == [("set_center_freq", 162_400_000)]


@pytest.mark.parametrize(
    "text, expected",
    [
        ("localhost", ("localhost", DEFAULT_TCP_PORT)),
        ("10.0.0.2:7373", ("10.0.0.2", 7373)),
        ("[::1]:1234", ("::1", 1234)),
        ("[::1]", ("::1", DEFAULT_TCP_PORT)),
        ("::1", ("::1", DEFAULT_TCP_PORT)),
    ],
)
def test_parse_address(text: str, expected: tuple[str, int]) -> None:
    assert parse_address(text) == expected


@pytest.mark.parametrize("text", ["", "host:abc", "host:70000", "[::1"])
def test_parse_address_rejects_bad_text(text: str) -> None:
    with pytest.raises(ValueError):
        parse_address(text)
