"""CLI for rendering a fingerprint as a bitmap."""
from __future__ import annotations

from pathlib import Path

import typer

from audiofp.cli.common import fail, load_fingerprint
from audiofp.viz.bitmap import to_image

app = typer.Typer(
    add_completion=False,
    invoke_without_command=True,
    help="Render a fingerprint as a black-and-white bitmap.",
)


@app.callback()
def image(
    fp: Path = typer.Option(..., "--fp", exists=True, readable=True, path_type=Path, help="Fingerprint JSON"),
    out: Path = typer.Option(..., "--out", path_type=Path, help="Destination image (e.g. PNG)"),
    scale: int = typer.Option(1, "--scale", min=1, help="Integer upscaling factor"),
) -> None:
    """Render ``fp`` to ``out``."""

    bitmap = to_image(load_fingerprint(fp))
    try:
        bitmap.save(out, scale=scale)
    except (OSError, ValueError) as exc:
        raise fail(f"Failed to write image: {exc}") from exc

    typer.secho(f"Image written to {out} ({bitmap.width * scale}x{bitmap.height * scale})", fg=typer.colors.GREEN)


def run() -> None:
    """Entrypoint for ``python -m audiofp.cli.image`` usage."""

    app()


__all__ = ["app", "image", "run"]
