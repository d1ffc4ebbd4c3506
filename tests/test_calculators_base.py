from __future__ import annotations

import io

import pytest

from audiofp.calculators import (
    REGISTRY,
    ChromaprintCalculator,
    FpcalcCalculator,
    RawInfo,
    get_calculator,
    read_pcm,
    register,
)


class _ChunkedReader:
    """Stream returning at most three bytes per read."""

    def __init__(self, data: bytes) -> None:
        self._buffer = io.BytesIO(data)

    def read(self, size: int = -1) -> bytes:
        return self._buffer.read(min(size, 3))


def test_raw_info_rejects_invalid_values() -> None:
    src = io.BytesIO(b"")
    with pytest.raises(ValueError):
        RawInfo(src=src, channels=0, rate=44100, max_seconds=1)
    with pytest.raises(ValueError):
        RawInfo(src=src, channels=2, rate=-1, max_seconds=1)
    with pytest.raises(ValueError):
        RawInfo(src=src, channels=2, rate=44100, max_seconds=True)


def test_max_bytes() -> None:
    info = RawInfo(src=io.BytesIO(b""), channels=2, rate=11025, max_seconds=3)
    assert info.max_bytes == 3 * 11025 * 2 * 2


def test_read_pcm_stops_at_max_seconds() -> None:
    info = RawInfo(src=io.BytesIO(b"\x01" * 20), channels=1, rate=4, max_seconds=1)
    assert read_pcm(info) == b"\x01" * 8


def test_read_pcm_drops_partial_frames() -> None:
    info = RawInfo(src=io.BytesIO(b"\x02" * 7), channels=2, rate=44100, max_seconds=1)
    assert read_pcm(info) == b"\x02" * 4


def test_read_pcm_handles_short_reads() -> None:
    info = RawInfo(src=_ChunkedReader(bytes(range(16))), channels=1, rate=5, max_seconds=1)
    assert read_pcm(info) == bytes(range(10))


def test_builtin_calculators_are_registered() -> None:
    assert REGISTRY["fpcalc"] is FpcalcCalculator
    assert REGISTRY["chromaprint"] is ChromaprintCalculator


def test_get_calculator_passes_options() -> None:
    calculator = get_calculator("fpcalc", fpcalc_path="/opt/chromaprint/fpcalc")
    assert isinstance(calculator, FpcalcCalculator)
    assert calculator.fpcalc_path == "/opt/chromaprint/fpcalc"


def test_get_calculator_unknown_name() -> None:
    with pytest.raises(KeyError) as excinfo:
        get_calculator("missing")
    assert "fpcalc" in str(excinfo.value)


def test_register_requires_name(monkeypatch: pytest.MonkeyPatch) -> None:
    class Nameless:
        pass

    with pytest.raises(ValueError):
        register(Nameless)

    class Named:
        name = "named"

    monkeypatch.setitem(REGISTRY, "named", None)
    assert register(Named) is Named
    assert REGISTRY["named"] is Named
