"""Configuration loading for the audiofp command line.

Settings come from three layers, later ones winning:

- the defaults of :class:`Settings`
- a YAML mapping, read from ``path`` or from ``$AUDIOFP_CONFIG``
- the ``AUDIOFP_LOG_LEVEL`` and ``AUDIOFP_FPCALC`` environment variables

The comparison core never reads configuration.
"""
from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml

CONFIG_ENV = "AUDIOFP_CONFIG"
LOG_LEVEL_ENV = "AUDIOFP_LOG_LEVEL"
FPCALC_ENV = "AUDIOFP_FPCALC"

__all__ = ["CONFIG_ENV", "FPCALC_ENV", "LOG_LEVEL_ENV", "Settings", "load_settings"]


@dataclass(frozen=True)
class Settings:
    calculator: str = "fpcalc"
    fpcalc_path: str = "fpcalc"
    channels: int = 2
    rate: int = 44100
    max_seconds: int = 120
    similarity_threshold: float = 0.95
    log_level: str = "INFO"
    json_logs: bool = False


def _expand_path(path: Any) -> Any:
    return os.path.expanduser(path) if isinstance(path, str) and path.startswith("~") else path


def _from_mapping(data: Mapping[str, Any]) -> Dict[str, Any]:
    known = {field.name for field in fields(Settings)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown configuration keys: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, raw in data.items():
        default = getattr(Settings, key)
        if isinstance(default, bool):
            if not isinstance(raw, bool):
                raise ValueError(f"Configuration key '{key}' must be a boolean")
            values[key] = raw
        elif isinstance(default, int):
            if isinstance(raw, bool) or not isinstance(raw, int) or raw <= 0:
                raise ValueError(f"Configuration key '{key}' must be a positive integer")
            values[key] = raw
        elif isinstance(default, float):
            if isinstance(raw, bool) or not isinstance(raw, (int, float)) or not 0.0 <= raw <= 1.0:
                raise ValueError(f"Configuration key '{key}' must be a number between 0 and 1")
            values[key] = float(raw)
        else:
            values[key] = str(raw)
    if "fpcalc_path" in values:
        values["fpcalc_path"] = _expand_path(values["fpcalc_path"])
    return values


def load_settings(path: Optional[str | Path] = None) -> Settings:
    """Return :class:`Settings` merged from YAML and environment overrides."""

    settings = Settings()

    config_path = path or os.environ.get(CONFIG_ENV)
    if config_path:
        with Path(config_path).open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
        if not isinstance(data, Mapping):
            raise ValueError(f"Configuration file '{config_path}' must contain a mapping")
        settings = replace(settings, **_from_mapping(data))

    overrides: Dict[str, Any] = {}
    if os.environ.get(LOG_LEVEL_ENV):
        overrides["log_level"] = os.environ[LOG_LEVEL_ENV]
    if os.environ.get(FPCALC_ENV):
        overrides["fpcalc_path"] = _expand_path(os.environ[FPCALC_ENV])
    return replace(settings, **overrides)
