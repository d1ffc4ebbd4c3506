"""Calculator delegating to Chromaprint's ``fpcalc`` command line tool."""
from __future__ import annotations

import json
import subprocess
from typing import Any, Callable, Dict, List, Optional

from audiofp.calculators.base import (
    CalculatorNotAvailable,
    FingerprintError,
    RawInfo,
    read_pcm,
    register,
)
from audiofp.fingerprint.similarity import as_fingerprint
from audiofp.utils.logging import get_logger

Runner = Callable[[List[str], bytes], "subprocess.CompletedProcess[bytes]"]

logger = get_logger(__name__)


def _default_runner(cmd: List[str], payload: bytes) -> "subprocess.CompletedProcess[bytes]":
    return subprocess.run(cmd, input=payload, stdout=subprocess.PIPE, stderr=subprocess.PIPE)


@register
class FpcalcCalculator:
    """Pipe raw PCM into ``fpcalc`` and parse its JSON output."""

    name = "fpcalc"

    def __init__(self, fpcalc_path: str = "fpcalc", runner: Optional[Runner] = None) -> None:
        self.fpcalc_path = fpcalc_path
        self._runner = runner or _default_runner

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fingerprint(self, info: RawInfo) -> str:
        result = self._calculate(info, raw=False)
        value = result.get("fingerprint")
        if not isinstance(value, str) or not value:
            raise FingerprintError("fpcalc returned no encoded fingerprint")
        return value

    def raw_fingerprint(self, info: RawInfo) -> List[int]:
        result = self._calculate(info, raw=True)
        value = result.get("fingerprint")
        if not isinstance(value, list):
            raise FingerprintError("fpcalc returned no raw fingerprint")
        try:
            return [int(sub) for sub in as_fingerprint(value)]
        except ValueError as exc:
            raise FingerprintError(f"fpcalc returned a malformed fingerprint: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def build_command(self, info: RawInfo, *, raw: bool) -> List[str]:
        cmd = [
            self.fpcalc_path,
            "-format", "s16le",
            "-rate", str(info.rate),
            "-channels", str(info.channels),
            "-length", str(info.max_seconds),
            "-json",
        ]
        if raw:
            cmd += ["-raw", "-signed"]
        cmd.append("-")
        return cmd

    def _calculate(self, info: RawInfo, *, raw: bool) -> Dict[str, Any]:
        payload = read_pcm(info)
        cmd = self.build_command(info, raw=raw)
        logger.debug("fpcalc_invoked", command=" ".join(cmd), pcm_bytes=len(payload))
        try:
            proc = self._runner(cmd, payload)
        except FileNotFoundError as exc:
            raise CalculatorNotAvailable(
                f"'{self.fpcalc_path}' not found; install the Chromaprint tools and check PATH"
            ) from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", "replace").strip()
            logger.warning("fpcalc_failed", returncode=proc.returncode, stderr=stderr[:200])
            raise FingerprintError(f"fpcalc failed ({proc.returncode}): {stderr}")

        try:
            result = json.loads(proc.stdout.decode("utf-8", "replace"))
        except json.JSONDecodeError as exc:
            raise FingerprintError(f"fpcalc produced invalid JSON: {exc}") from exc
        if not isinstance(result, dict):
            raise FingerprintError("fpcalc produced an unexpected JSON payload")
        return result


__all__ = ["FpcalcCalculator"]
