"""CLI error-handling tests for concise stage-aware diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from dlcnames.cli import app


def test_strip_xml_reports_missing_file_with_hint(tmp_path: Path) -> None:
    """A missing content file should fail at the `read` stage with exit code 1."""

    missing = tmp_path / "missing.xml"

    result = CliRunner().invoke(app, ["strip-xml", str(missing)])

    assert result.exit_code == 1
    assert "strip-xml failed at stage `read`: Content file not found" in result.output
    assert "Hint: Verify the path points to an existing XML file." in result.output


def test_command_reports_missing_config_file() -> None:
    """A missing `--config` path should fail at the `config` stage."""

    result = CliRunner().invoke(
        app, ["sortable", "The Beatles", "--config", "missing-dlcnames.yaml"]
    )

    assert result.exit_code == 1
    assert "sortable failed at stage `config`" in result.output
    assert "Config file not found: `missing-dlcnames.yaml`." in result.output


def test_command_reports_invalid_config_payload(tmp_path: Path) -> None:
    """Schema errors in the config file should be reported with a fix hint."""

    config_path = tmp_path / "invalid.yaml"
    config_path.write_text("platform: amiga\n", encoding="utf-8")

    result = CliRunner().invoke(
        app, ["filename", "AC/DC", "--config", str(config_path)]
    )

    assert result.exit_code == 1
    assert "filename failed at stage `config`: Invalid config file" in result.output
    assert "Hint: Fix config schema/values and rerun." in result.output


def test_command_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """Invalid `DLCNAMES_*` variables should fail at the `config` stage."""

    monkeypatch.setenv("DLCNAMES_PLATFORM", "amiga")

    result = CliRunner().invoke(app, ["key", "Song"])

    assert result.exit_code == 1
    assert "key failed at stage `config`: Invalid environment configuration" in result.output


def test_command_reports_unexpected_error_and_logs_failure(monkeypatch: MonkeyPatch) -> None:
    """Non-stage exceptions should be reported generically and logged as failures."""

    def _failing_sortable(_text: object) -> str:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected rule error")

    monkeypatch.setattr("dlcnames.cli.to_sortable_name", _failing_sortable)

    result = CliRunner().invoke(app, ["sortable", "The Beatles"])

    assert result.exit_code == 1
    assert "sortable failed: unexpected rule error" in result.output
    assert (
        "[command] level=ERROR command=sortable event=failure error_type=RuntimeError"
        in result.output
    )
