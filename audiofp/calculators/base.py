"""Calculator protocol, raw audio descriptor and registry."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, BinaryIO, Callable, Dict, List, Protocol

CalculatorFactory = Callable[..., "Calculator"]

# Raw audio is signed 16-bit little-endian interleaved PCM.
BYTES_PER_SAMPLE = 2


class FingerprintError(RuntimeError):
    """Raised when a calculator fails to fingerprint an audio stream."""


class CalculatorNotAvailable(FingerprintError):
    """Raised when the tool or library backing a calculator is missing."""


@dataclass(frozen=True)
class RawInfo:
    """Description of a raw audio stream handed to a calculator."""

    # Stream delivering the audio data
    src: BinaryIO
    # Number of interleaved channels
    channels: int
    # Sampling rate, e.g. 44100
    rate: int
    # Maximum number of seconds taken from the stream
    max_seconds: int

    def __post_init__(self) -> None:
        for field_name in ("channels", "rate", "max_seconds"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"RawInfo.{field_name} must be a positive integer, got {value!r}")

    @property
    def max_bytes(self) -> int:
        return self.max_seconds * self.rate * self.channels * BYTES_PER_SAMPLE


def read_pcm(info: RawInfo) -> bytes:
    """Read at most ``info.max_seconds`` of whole frames from ``info.src``."""

    remaining = info.max_bytes
    chunks: List[bytes] = []
    while remaining > 0:
        chunk = info.src.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    frame = info.channels * BYTES_PER_SAMPLE
    return data[: len(data) - len(data) % frame]


class Calculator(Protocol):
    """Backend producing acoustic fingerprints from raw audio."""

    name: str

    def fingerprint(self, info: RawInfo) -> str:
        """Return the fingerprint of ``info`` as an encoded string."""

    def raw_fingerprint(self, info: RawInfo) -> List[int]:
        """Return the fingerprint of ``info`` as signed 32-bit integers."""


REGISTRY: Dict[str, CalculatorFactory] = {}


def register(calculator_cls: CalculatorFactory) -> CalculatorFactory:
    """Class decorator registering a calculator implementation."""

    name = getattr(calculator_cls, "name", None)
    if not name:
        raise ValueError("Calculators must define a 'name' attribute for registration")
    REGISTRY[name] = calculator_cls
    return calculator_cls


def get_calculator(name: str, **kwargs: Any) -> Calculator:
    """Return an instantiated calculator by ``name``."""

    if name not in REGISTRY:
        raise KeyError(f"Unknown calculator '{name}'. Registered: {', '.join(sorted(REGISTRY))}")
    return REGISTRY[name](**kwargs)
