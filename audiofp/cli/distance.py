"""CLI for computing the bitwise difference of two fingerprints."""
from __future__ import annotations

from pathlib import Path

import typer

from audiofp.cli.common import fail, load_fingerprint
from audiofp.fingerprint.similarity import LengthMismatchError, distance as fingerprint_distance, hamming
from audiofp.utils.io import write_fingerprint
from audiofp.viz.bitmap import to_image

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="XOR two fingerprints and optionally render the difference.",
)


@app.callback()
def distance(
    a: Path = typer.Option(..., "--a", exists=True, readable=True, path_type=Path, help="First fingerprint"),
    b: Path = typer.Option(..., "--b", exists=True, readable=True, path_type=Path, help="Second fingerprint"),
    out: Path | None = typer.Option(None, "--out", path_type=Path, help="Optional distance fingerprint JSON"),
    image: Path | None = typer.Option(None, "--image", path_type=Path, help="Optional distance bitmap (e.g. PNG)"),
    scale: int = typer.Option(1, "--scale", min=1, help="Integer upscaling factor for the bitmap"),
) -> None:
    """Compute the distance vector of ``a`` and ``b``."""

    fp_a = load_fingerprint(a)
    fp_b = load_fingerprint(b)

    try:
        dist = fingerprint_distance(fp_a, fp_b)
    except LengthMismatchError as exc:
        raise fail(str(exc)) from exc

    differing = sum(hamming(sub, 0) for sub in dist)
    changed = sum(1 for sub in dist if sub != 0)
    typer.echo(f"Differing bits: {differing} of {len(dist) * 32}")
    typer.echo(f"Changed subfingerprints: {changed} of {len(dist)}")

    if out is not None:
        write_fingerprint(out, dist, algorithm="xor", source=f"{a.name} ^ {b.name}")
        typer.echo(f"Distance written to {out}")

    if image is not None:
        try:
            to_image(dist).save(image, scale=scale)
        except (OSError, ValueError) as exc:
            raise fail(f"Failed to write image: {exc}") from exc
        typer.echo(f"Distance image written to {image}")


def run() -> None:
    """Entrypoint for ``python -m audiofp.cli.distance`` usage."""

    app()


__all__ = ["app", "distance", "run"]
