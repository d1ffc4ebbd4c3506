"""Similarity and distance utilities for acoustic fingerprints."""
from __future__ import annotations

from typing import List, Sequence, Union

import numpy as np

BITS_PER_INT = 32
SAME_RECORDING_THRESHOLD = 0.95

_INT32_MIN = -(2 ** 31)
_UINT32_LIMIT = 2 ** 32

Fingerprint = Union[Sequence[int], np.ndarray]

__all__ = [
    "BITS_PER_INT",
    "SAME_RECORDING_THRESHOLD",
    "Fingerprint",
    "LengthMismatchError",
    "as_fingerprint",
    "compare",
    "distance",
    "hamming",
    "is_same_recording",
]


class LengthMismatchError(ValueError):
    """Raised when two fingerprints of different length are compared."""

    def __init__(self, len_a: int, len_b: int) -> None:
        super().__init__(
            f"unable to compare fingerprints with different length ({len_a} != {len_b})"
        )
        self.len_a = len_a
        self.len_b = len_b


def _to_uint32(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"{label} is not an integer: {value!r}")
    value = int(value)
    if value < _INT32_MIN or value >= _UINT32_LIMIT:
        raise ValueError(f"{label} does not fit in 32 bits: {value}")
    return value % _UINT32_LIMIT


def as_fingerprint(values: Fingerprint) -> np.ndarray:
    """Return ``values`` as a fresh one-dimensional ``int32`` array.

    Unsigned 32-bit values are reinterpreted as their signed counterpart, which
    is how ``fpcalc -raw`` output without ``-signed`` maps onto subfingerprints.
    """

    if isinstance(values, np.ndarray):
        if values.ndim != 1:
            raise ValueError(f"Fingerprint must be one-dimensional, got shape {values.shape}")
        if values.dtype == np.int32:
            return values.copy()
        if values.dtype.kind not in "iu":
            raise ValueError(f"Fingerprint must hold integers, got dtype {values.dtype}")
        values = values.tolist()

    normalized = [_to_uint32(value, f"Subfingerprint {index}") for index, value in enumerate(values)]
    return np.array(normalized, dtype=np.uint32).view(np.int32)


def hamming(a: int, b: int) -> int:
    """Return the number of differing bits between two 32-bit integers.

    Both values must fit in 32 bits, signed or unsigned; anything else raises
    ``ValueError`` just like :func:`as_fingerprint`.
    """

    return bin(_to_uint32(a, "First value") ^ _to_uint32(b, "Second value")).count("1")


def _xor(fprint_a: Fingerprint, fprint_b: Fingerprint) -> np.ndarray:
    arr_a = as_fingerprint(fprint_a)
    arr_b = as_fingerprint(fprint_b)
    if arr_a.shape[0] != arr_b.shape[0]:
        raise LengthMismatchError(arr_a.shape[0], arr_b.shape[0])
    return np.bitwise_xor(arr_a, arr_b)


def compare(fprint_a: Fingerprint, fprint_b: Fingerprint) -> float:
    """Return how similar two fingerprints are as a value from 0 to 1.

    The score is ``1 - D / (len * 32)`` where ``D`` is the total Hamming
    distance across all subfingerprints. Two fingerprints are usually treated
    as the same recording when the score is at least
    :data:`SAME_RECORDING_THRESHOLD`.
    """

    xor = _xor(fprint_a, fprint_b)
    if xor.size == 0:
        return 1.0
    dist = int(np.unpackbits(xor.view(np.uint8)).sum())
    return 1.0 - dist / float(xor.size * BITS_PER_INT)


def distance(fprint_a: Fingerprint, fprint_b: Fingerprint) -> List[int]:
    """Return the pairwise XOR of two fingerprints."""

    return [int(value) for value in _xor(fprint_a, fprint_b)]


def is_same_recording(score: float, threshold: float = SAME_RECORDING_THRESHOLD) -> bool:
    return score >= threshold
