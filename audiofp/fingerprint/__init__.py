"""Fingerprint comparison utilities."""

from .similarity import (
    BITS_PER_INT,
    SAME_RECORDING_THRESHOLD,
    LengthMismatchError,
    as_fingerprint,
    compare,
    distance,
    hamming,
    is_same_recording,
)

__all__ = [
    "BITS_PER_INT",
    "SAME_RECORDING_THRESHOLD",
    "LengthMismatchError",
    "as_fingerprint",
    "compare",
    "distance",
    "hamming",
    "is_same_recording",
]
