"""Root CLI entry point for audiofp."""
from __future__ import annotations

import typer

from audiofp.config import load_settings
from audiofp.utils.logging import configure_logging

from . import calc as calc_cli
from . import compare as compare_cli
from . import distance as distance_cli
from . import image as image_cli

app = typer.Typer(add_completion=False, help="audiofp command line interface")
app.add_typer(compare_cli.app, name="compare", help="Compute the similarity of two fingerprints")
app.add_typer(distance_cli.app, name="distance", help="XOR two fingerprints and render the difference")
app.add_typer(image_cli.app, name="image", help="Render a fingerprint as a bitmap")
app.add_typer(calc_cli.app, name="calc", help="Fingerprint raw audio with a calculator backend")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any sub-command runs."""

    try:
        settings = load_settings()
    except (OSError, ValueError) as exc:
        typer.secho(f"[ERROR] Invalid configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc
    configure_logging("DEBUG" if verbose else settings.log_level, json_logs=settings.json_logs)


def run() -> None:
    """Execute the root CLI."""

    app()


__all__ = ["app", "run"]
