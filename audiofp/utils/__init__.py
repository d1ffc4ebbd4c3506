"""Utility helpers for audiofp."""

from .io import ensure_parent_dir, read_fingerprint, read_json, write_fingerprint, write_json
from .logging import configure_logging, get_logger
from .validate import SchemaValidationError, validate_fingerprint_document

__all__ = [
    "configure_logging",
    "get_logger",
    "ensure_parent_dir",
    "read_fingerprint",
    "read_json",
    "write_fingerprint",
    "write_json",
    "SchemaValidationError",
    "validate_fingerprint_document",
]
