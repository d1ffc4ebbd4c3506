from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from audiofp.cli import compare as compare_cli
from audiofp.config import CONFIG_ENV


def test_compare_cli_reports_similarity(write_fp) -> None:  # type: ignore[no-untyped-def]
    runner = CliRunner()
    a = write_fp("a.json", [0])
    b = write_fp("b.json", [15])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b)])

    assert result.exit_code == 0
    assert "Similarity: 0.8750" in result.stdout
    assert "Same recording: no" in result.stdout


def test_compare_cli_identical_fingerprints(write_fp) -> None:  # type: ignore[no-untyped-def]
    runner = CliRunner()
    a = write_fp("a.json", [5, 9], algorithm="fpcalc")
    b = write_fp("b.json", [5, 9])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b)])

    assert result.exit_code == 0
    assert "Similarity: 1.0000" in result.stdout
    assert "Same recording: yes" in result.stdout


def test_compare_cli_threshold_option(write_fp) -> None:  # type: ignore[no-untyped-def]
    runner = CliRunner()
    a = write_fp("a.json", [0])
    b = write_fp("b.json", [15])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b), "--threshold", "0.8"])

    assert result.exit_code == 0
    assert "Same recording: yes" in result.stdout


def test_compare_cli_threshold_from_config(write_fp, tmp_path: Path, monkeypatch) -> None:  # type: ignore[no-untyped-def]
    config = tmp_path / "audiofp.yaml"
    config.write_text("similarity_threshold: 0.85\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(config))
    runner = CliRunner()
    a = write_fp("a.json", [0])
    b = write_fp("b.json", [15])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b)])

    assert result.exit_code == 0
    assert "Same recording: yes" in result.stdout


def test_compare_cli_length_mismatch(write_fp) -> None:  # type: ignore[no-untyped-def]
    runner = CliRunner()
    a = write_fp("a.json", [1, 2])
    b = write_fp("b.json", [1, 2, 3])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b)])

    assert result.exit_code == 1
    assert "[ERROR]" in result.output
    assert "different length" in result.output


def test_compare_cli_invalid_document(write_fp) -> None:  # type: ignore[no-untyped-def]
    runner = CliRunner()
    a = write_fp("a.json", [1], bogus=True)
    b = write_fp("b.json", [1])

    result = runner.invoke(compare_cli.app, ["--a", str(a), "--b", str(b)])

    assert result.exit_code == 1
    assert "schema validation" in result.output
