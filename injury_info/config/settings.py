from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ._utils import resolve_env_file_path


class Settings(BaseSettings):
    """Injury info service configuration."""

    log_level: str = "INFO"

    # Google Sheets (read-only, API key auth)
    google_api_key: str | None = None
    google_spreadsheet_id: str | None = None
    google_sheets_base_url: str = "https://sheets.googleapis.com/v4/spreadsheets"

    # HubSpot CRM is optional; without a token every CRM read returns nothing
    hubspot_access_token: str | None = None
    hubspot_portal_id: str | None = None
    hubspot_base_url: str = "https://api.hubapi.com"

    request_timeout: float = 10.0

    # Sheet (tab) names
    sources_sheet: str = "Reputable_Sources"
    active_cases_sheet: str = "Legal Injury Advocates Active cases"
    cases_sheet: str = "Top_10_Cases"
    amounts_sheet: str = "Case_Amounts"
    firms_sheet: str = "Top_10_Firms"

    # Cache lifetimes
    sources_cache_ttl_seconds: float = 10 * 60
    cases_cache_ttl_seconds: float = 10 * 60
    content_cache_ttl_seconds: float = 5 * 60

    default_source_limit: int = 3

    @property
    def sheets_configured(self) -> bool:
        return bool(self.google_api_key and self.google_spreadsheet_id)

    @property
    def hubspot_configured(self) -> bool:
        return bool(self.hubspot_access_token)

    model_config = SettingsConfigDict(
        env_file=resolve_env_file_path(),
        env_file_encoding="utf-8",
        env_prefix="INJURY_INFO_",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
