"""Calculator backed by the Chromaprint library through ``pyacoustid``."""
from __future__ import annotations

from typing import Any, List, Optional

from audiofp.calculators.base import (
    CalculatorNotAvailable,
    FingerprintError,
    RawInfo,
    read_pcm,
    register,
)
from audiofp.fingerprint.similarity import as_fingerprint
from audiofp.utils.logging import get_logger

logger = get_logger(__name__)


def _load_chromaprint() -> Any:
    try:
        import chromaprint
    except ImportError as exc:
        raise CalculatorNotAvailable(
            "pyacoustid and libchromaprint must be installed to use the chromaprint calculator"
        ) from exc
    return chromaprint


@register
class ChromaprintCalculator:
    """Feed raw PCM to an in-process ``chromaprint.Fingerprinter``."""

    name = "chromaprint"

    def __init__(self, module: Optional[Any] = None) -> None:
        self._module = module

    @property
    def module(self) -> Any:
        if self._module is None:
            self._module = _load_chromaprint()
        return self._module

    def fingerprint(self, info: RawInfo) -> str:
        encoded = self._encoded(info)
        if isinstance(encoded, bytes):
            return encoded.decode("ascii")
        return str(encoded)

    def raw_fingerprint(self, info: RawInfo) -> List[int]:
        encoded = self._encoded(info)
        try:
            values, _algorithm = self.module.decode_fingerprint(encoded)
        except self.module.FingerprintError as exc:
            raise FingerprintError(f"chromaprint could not decode fingerprint: {exc}") from exc
        return [int(sub) for sub in as_fingerprint(values)]

    def _encoded(self, info: RawInfo) -> bytes:
        chromaprint = self.module
        payload = read_pcm(info)
        logger.debug("chromaprint_invoked", rate=info.rate, channels=info.channels, pcm_bytes=len(payload))
        try:
            fper = chromaprint.Fingerprinter()
            fper.start(info.rate, info.channels)
            fper.feed(payload)
            return fper.finish()
        except chromaprint.FingerprintError as exc:
            logger.warning("chromaprint_failed", error=str(exc))
            raise FingerprintError(f"chromaprint failed: {exc}") from exc


__all__ = ["ChromaprintCalculator"]
