"""Pytest configuration for audiofp tests."""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Callable, Iterator, List

import pytest
import structlog

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from audiofp.config import CONFIG_ENV, FPCALC_ENV, LOG_LEVEL_ENV  # noqa: E402


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (CONFIG_ENV, FPCALC_ENV, LOG_LEVEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def isolated_logging() -> Iterator[None]:
    """Restore structlog and root logger configuration after a test."""

    original_config = structlog.get_config()
    root = logging.getLogger()
    original_handlers = list(root.handlers)
    original_level = root.level
    yield
    structlog.configure(**original_config)
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def write_fp(tmp_path: Path) -> Callable[..., Path]:
    """Return a factory writing fingerprint documents into ``tmp_path``."""

    def _write(name: str, fingerprint: List[int], **extra: Any) -> Path:
        path = tmp_path / name
        document = {"fingerprint": fingerprint, **extra}
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write
