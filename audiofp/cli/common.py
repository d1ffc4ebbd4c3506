"""Helpers shared by the audiofp commands."""
from __future__ import annotations

from pathlib import Path
from typing import List

import typer

from audiofp.utils.io import read_fingerprint
from audiofp.utils.validate import SchemaValidationError


def fail(message: str) -> typer.Exit:
    typer.secho(f"[ERROR] {message}", fg=typer.colors.RED, err=True)
    return typer.Exit(code=1)


def load_fingerprint(path: Path) -> List[int]:
    try:
        return read_fingerprint(path)
    except SchemaValidationError as exc:
        typer.secho(f"[ERROR] Fingerprint '{path}' failed schema validation:", fg=typer.colors.RED, err=True)
        typer.echo(exc.message, err=True)
        raise typer.Exit(code=1) from exc
    except (OSError, ValueError, RuntimeError) as exc:
        raise fail(f"Failed to load fingerprint '{path}': {exc}") from exc


__all__ = ["fail", "load_fingerprint"]
