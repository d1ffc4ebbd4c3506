"""CLI for fingerprinting raw audio with a registered calculator."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from audiofp.calculators import REGISTRY, FingerprintError, RawInfo, get_calculator
from audiofp.cli.common import fail
from audiofp.config import Settings, load_settings
from audiofp.utils.io import write_fingerprint
from audiofp.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Fingerprint raw s16le PCM audio.",
)


def _calculator_kwargs(backend: str, settings: Settings) -> dict:
    if backend == "fpcalc":
        return {"fpcalc_path": settings.fpcalc_path}
    return {}


@app.callback()
def calc(
    audio: Path = typer.Option(..., "--audio", exists=True, readable=True, path_type=Path, help="Raw s16le PCM input"),
    out: Path = typer.Option(..., "--out", path_type=Path, help="Destination fingerprint JSON"),
    backend: Optional[str] = typer.Option(None, "--backend", help="Calculator name (default from config)"),
    channels: Optional[int] = typer.Option(None, "--channels", min=1, help="Number of interleaved channels"),
    rate: Optional[int] = typer.Option(None, "--rate", min=1, help="Sampling rate in Hz"),
    max_seconds: Optional[int] = typer.Option(None, "--max-seconds", min=1, help="Maximum seconds to consume"),
    config: Optional[Path] = typer.Option(None, "--config", exists=True, readable=True, path_type=Path, help="YAML config"),
) -> None:
    """Fingerprint ``audio`` and persist the raw and encoded forms to ``out``."""

    try:
        settings = load_settings(config)
    except (OSError, ValueError) as exc:
        raise fail(f"Invalid configuration: {exc}") from exc
    if config is not None:
        configure_logging(settings.log_level, json_logs=settings.json_logs)

    name = backend or settings.calculator
    if name not in REGISTRY:
        raise fail(f"Unknown calculator '{name}'. Registered: {', '.join(sorted(REGISTRY))}")
    calculator = get_calculator(name, **_calculator_kwargs(name, settings))

    def _info(handle) -> RawInfo:  # type: ignore[no-untyped-def]
        return RawInfo(
            src=handle,
            channels=channels or settings.channels,
            rate=rate or settings.rate,
            max_seconds=max_seconds or settings.max_seconds,
        )

    logger.info("calc_started", calculator=name, audio=str(audio))
    try:
        with audio.open("rb") as handle:
            raw = calculator.raw_fingerprint(_info(handle))
        with audio.open("rb") as handle:
            encoded = calculator.fingerprint(_info(handle))
    except FingerprintError as exc:
        raise fail(f"{name} failed: {exc}") from exc

    write_fingerprint(out, raw, algorithm=name, encoded=encoded, source=audio.name)
    logger.info("calc_finished", calculator=name, subfingerprints=len(raw))
    typer.secho(f"Fingerprint written to {out} (subfingerprints={len(raw)})", fg=typer.colors.GREEN)


def run() -> None:
    """Entrypoint for ``python -m audiofp.cli.calc`` usage."""

    app()


__all__ = ["app", "calc", "run"]
