"""JSON IO helpers for fingerprint documents."""
from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List

from audiofp.fingerprint.similarity import Fingerprint, as_fingerprint
from audiofp.utils.validate import validate_fingerprint_document

__all__ = ["read_json", "write_json", "ensure_parent_dir", "read_fingerprint", "write_fingerprint"]


def read_json(path: str | Path) -> Dict[str, Any]:
    """Load a JSON file and return the decoded object."""

    file_path = Path(path)
    try:
        content = file_path.read_text(encoding="utf-8")
    except FileNotFoundError:  # pragma: no cover - upstream handling
        raise
    except OSError as exc:  # pragma: no cover - I/O edge cases
        raise RuntimeError(f"Failed to read JSON file '{file_path}': {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in '{file_path}': {exc}") from exc


def ensure_parent_dir(path: str | Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return the resolved ``Path``."""

    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    return file_path


def write_json(path: str | Path, obj: Dict[str, Any]) -> None:
    """Persist ``obj`` to ``path`` with deterministic formatting."""

    file_path = ensure_parent_dir(path)
    serialized = json.dumps(obj, ensure_ascii=False, indent=2, sort_keys=True)
    file_path.write_text(serialized + "\n", encoding="utf-8")


def read_fingerprint(path: str | Path) -> List[int]:
    """Load a fingerprint document and return its signed subfingerprints."""

    document = read_json(path)
    validate_fingerprint_document(document)
    return [int(sub) for sub in as_fingerprint(document["fingerprint"])]


def write_fingerprint(path: str | Path, fingerprint: Fingerprint, **metadata: Any) -> Dict[str, Any]:
    """Validate and persist ``fingerprint`` with optional ``metadata`` fields."""

    document: Dict[str, Any] = {
        "fingerprint": [int(sub) for sub in as_fingerprint(fingerprint)],
        "created_at": datetime.now(timezone.utc).isoformat(),
    }
    document.update({key: value for key, value in metadata.items() if value is not None})
    validate_fingerprint_document(document)
    write_json(path, document)
    return document
