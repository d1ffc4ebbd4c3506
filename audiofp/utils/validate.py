"""Schema validation helpers."""
from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import validators

SCHEMA_PATH = Path(__file__).resolve().parents[1] / "schema" / "fingerprint.schema.json"


class SchemaValidationError(RuntimeError):
    """Raised when a fingerprint document fails JSON Schema validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@lru_cache(maxsize=1)
def _load_schema() -> Dict[str, Any]:
    with SCHEMA_PATH.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def _is_strict_integer(checker: Any, instance: Any) -> bool:
    # Draft-07 counts 1.0 as an integer; subfingerprints must be real ints.
    return isinstance(instance, int) and not isinstance(instance, bool)


FingerprintValidator = validators.extend(
    jsonschema.Draft7Validator,
    type_checker=jsonschema.Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_integer),
)


@lru_cache(maxsize=1)
def _build_validator() -> Any:
    return FingerprintValidator(_load_schema())


def validate_fingerprint_document(document: Any) -> None:
    """Validate ``document`` or raise :class:`SchemaValidationError`."""

    errors = sorted(_build_validator().iter_errors(document), key=lambda err: [str(x) for x in err.path])
    if errors:
        formatted = "\n".join(
            f"{'/'.join(str(x) for x in error.path)}: {error.message}" if error.path else error.message
            for error in errors
        )
        raise SchemaValidationError(formatted)


__all__ = ["SCHEMA_PATH", "SchemaValidationError", "validate_fingerprint_document"]
