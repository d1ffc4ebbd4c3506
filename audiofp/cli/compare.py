"""CLI for comparing two acoustic fingerprints."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from audiofp.cli.common import fail, load_fingerprint
from audiofp.config import load_settings
from audiofp.fingerprint.similarity import (
    LengthMismatchError,
    compare as compare_fingerprints,
    is_same_recording,
)

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Compute the similarity score of two fingerprints.",
)


@app.callback()
def compare(
    a: Path = typer.Option(..., "--a", exists=True, readable=True, path_type=Path, help="First fingerprint"),
    b: Path = typer.Option(..., "--b", exists=True, readable=True, path_type=Path, help="Second fingerprint"),
    threshold: Optional[float] = typer.Option(
        None,
        "--threshold",
        min=0.0,
        max=1.0,
        help="Score from which both fingerprints count as the same recording (default from config)",
    ),
) -> None:
    """Compare fingerprints ``a`` and ``b``."""

    fp_a = load_fingerprint(a)
    fp_b = load_fingerprint(b)

    try:
        score = compare_fingerprints(fp_a, fp_b)
    except LengthMismatchError as exc:
        raise fail(str(exc)) from exc

    typer.echo(f"Similarity: {score:.4f}")
    if threshold is None:
        try:
            threshold = load_settings().similarity_threshold
        except (OSError, ValueError) as exc:
            raise fail(f"Invalid configuration: {exc}") from exc

    typer.echo(f"Same recording: {'yes' if is_same_recording(score, threshold) else 'no'}")


def run() -> None:
    """Entrypoint for ``python -m audiofp.cli.compare`` usage."""

    app()


__all__ = ["app", "compare", "run"]
