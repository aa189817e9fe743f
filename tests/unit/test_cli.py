"""Tests for the CLI commands."""

import pytest
from typer.testing import CliRunner

from injury_info import cli
from injury_info.config import Settings

runner = CliRunner()


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """Settings without any backend, so commands serve default data."""
    settings = Settings(
        google_api_key=None, google_spreadsheet_id=None, hubspot_access_token=None
    )
    monkeypatch.setattr(cli, "get_settings", lambda: settings)
    return settings


class TestCli:
    def test_sources(self) -> None:
        result = runner.invoke(cli.app, ["sources", "asbestos exposure", "-n", "2"])

        assert result.exit_code == 0
        assert "Asbestos" in result.output

    def test_check_case_match(self) -> None:
        result = runner.invoke(cli.app, ["check-case", "asbestos at my old job"])

        assert result.exit_code == 0
        assert "Mesothelioma" in result.output

    def test_check_case_no_match(self) -> None:
        result = runner.invoke(cli.app, ["check-case", "car accident"])

        assert result.exit_code == 0
        assert "No active case matched" in result.output

    def test_check_sheet_requires_configuration(self) -> None:
        result = runner.invoke(cli.app, ["check-sheet"])

        assert result.exit_code == 1
        assert "requires an API key" in result.output
