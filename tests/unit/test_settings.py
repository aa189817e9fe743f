"""Tests for settings loading."""

from pathlib import Path

import pytest

from injury_info.config import Settings
from injury_info.config._utils import resolve_env_file_path


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(google_api_key=None, hubspot_access_token=None)
        assert settings.sources_sheet == "Reputable_Sources"
        assert settings.sources_cache_ttl_seconds == 600
        assert settings.content_cache_ttl_seconds == 300
        assert not settings.sheets_configured
        assert not settings.hubspot_configured

    def test_env_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INJURY_INFO_GOOGLE_API_KEY", "key")
        monkeypatch.setenv("INJURY_INFO_GOOGLE_SPREADSHEET_ID", "sheet")
        monkeypatch.setenv("INJURY_INFO_DEFAULT_SOURCE_LIMIT", "5")

        settings = Settings()

        assert settings.sheets_configured
        assert settings.default_source_limit == 5

    def test_env_file_override(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        env_file = tmp_path / "test.env"
        env_file.write_text("INJURY_INFO_LOG_LEVEL=DEBUG\n")
        monkeypatch.setenv("INJURY_INFO_ENV_FILE", str(env_file))

        assert resolve_env_file_path() == env_file
