"""Bitmap rendering helpers for audiofp fingerprints."""
from __future__ import annotations

from .bitmap import BitImage, image_distance, to_image

__all__ = [
    "BitImage",
    "image_distance",
    "to_image",
]
