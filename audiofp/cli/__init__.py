"""Command-line interfaces for audiofp."""

from .main import app, run

__all__ = ["app", "run"]
