"""Monochrome bitmap rendering of fingerprints and fingerprint distances."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image

from audiofp.fingerprint.similarity import BITS_PER_INT, Fingerprint, as_fingerprint, distance

WHITE = 0xFF
BLACK = 0x00

__all__ = ["BitImage", "image_distance", "to_image"]


@dataclass(frozen=True)
class BitImage:
    """Pixel grid with one column per subfingerprint and one row per bit.

    ``pixels[j, i]`` is white when bit ``j`` of subfingerprint ``i`` is set.
    Row 0 holds the least significant bit.
    """

    pixels: np.ndarray

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def pixel(self, x: int, y: int) -> bool:
        """Return ``True`` when the pixel in column ``x`` and row ``y`` is white."""

        return bool(self.pixels[y, x] == WHITE)

    def to_pil(self, scale: int = 1) -> Image.Image:
        """Return a greyscale Pillow image, optionally upscaled by ``scale``."""

        if scale < 1:
            raise ValueError(f"Scale must be a positive integer, got {scale}")
        if self.width == 0:
            raise ValueError("Cannot build an image from an empty fingerprint")
        image = Image.fromarray(self.pixels.copy())
        if scale > 1:
            image = image.resize((self.width * scale, self.height * scale), Image.Resampling.NEAREST)
        return image

    def save(self, path: str | Path, scale: int = 1) -> Path:
        """Encode the bitmap to ``path``; the format follows the file suffix."""

        file_path = Path(path)
        file_path.parent.mkdir(parents=True, exist_ok=True)
        self.to_pil(scale).save(file_path)
        return file_path


def to_image(fprint: Fingerprint) -> BitImage:
    """Render a single fingerprint as a black-and-white bit grid."""

    values = as_fingerprint(fprint).view(np.uint32)
    shifts = np.arange(BITS_PER_INT, dtype=np.uint32)[:, None]
    bits = (values[None, :] >> shifts) & np.uint32(1)
    pixels = (bits * WHITE).astype(np.uint8)
    pixels.setflags(write=False)
    return BitImage(pixels=pixels)


def image_distance(fprint_a: Fingerprint, fprint_b: Fingerprint) -> BitImage:
    """Render the bits in which two fingerprints differ.

    Raises :class:`~audiofp.fingerprint.LengthMismatchError` on unequal length.
    """

    return to_image(distance(fprint_a, fprint_b))
