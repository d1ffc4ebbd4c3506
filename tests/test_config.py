from __future__ import annotations

import os
from pathlib import Path

import pytest

from audiofp.config import CONFIG_ENV, FPCALC_ENV, LOG_LEVEL_ENV, Settings, load_settings


def _write_config(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "audiofp.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_defaults_without_config() -> None:
    assert load_settings() == Settings()


def test_yaml_values_override_defaults(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        "calculator: chromaprint\nrate: 22050\nchannels: 1\nmax_seconds: 30\nsimilarity_threshold: 0.9\njson_logs: true\n",
    )
    settings = load_settings(path)
    assert settings.calculator == "chromaprint"
    assert settings.rate == 22050
    assert settings.channels == 1
    assert settings.max_seconds == 30
    assert settings.similarity_threshold == pytest.approx(0.9)
    assert settings.json_logs is True
    assert settings.fpcalc_path == "fpcalc"


def test_config_path_from_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write_config(tmp_path, "rate: 8000\n")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert load_settings().rate == 8000


def test_environment_overrides_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = _write_config(tmp_path, "log_level: WARNING\nfpcalc_path: /opt/fpcalc\n")
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    monkeypatch.setenv(FPCALC_ENV, "/usr/bin/fpcalc")
    settings = load_settings(path)
    assert settings.log_level == "DEBUG"
    assert settings.fpcalc_path == "/usr/bin/fpcalc"


def test_home_is_expanded(tmp_path: Path) -> None:
    path = _write_config(tmp_path, "fpcalc_path: ~/bin/fpcalc\n")
    assert load_settings(path).fpcalc_path == os.path.expanduser("~/bin/fpcalc")


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_settings(_write_config(tmp_path, "")) == Settings()


@pytest.mark.parametrize(
    "text",
    [
        "unknown_key: 1\n",
        "rate: fast\n",
        "channels: 0\n",
        "similarity_threshold: 1.5\n",
        "json_logs: 1\n",
        "- rate\n",
    ],
)
def test_invalid_config(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_settings(_write_config(tmp_path, text))
