"""Compare and visualize acoustic fingerprints.

An acoustic fingerprint is an ordered sequence of 32-bit integers produced by
an external algorithm such as Chromaprint. This package scores the similarity
of two fingerprints, derives their bitwise difference and renders both as
monochrome bitmaps.
"""

from .fingerprint import LengthMismatchError, compare, distance
from .viz import BitImage, image_distance, to_image

__version__ = "0.1.0"

__all__ = [
    "BitImage",
    "LengthMismatchError",
    "compare",
    "distance",
    "image_distance",
    "to_image",
    "__version__",
]
