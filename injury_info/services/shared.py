"""Service wiring shared by the API and the CLI."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from injury_info.config import Settings
from injury_info.connectors import (
    CrmPort,
    GoogleSheetsAdapter,
    HubSpotAdapter,
    SpreadsheetPort,
)
from injury_info.records import DefaultDataProvider, StaticDefaultData

from .active_cases import ActiveCaseService
from .data_integration import DataIntegrationService
from .reputable_sources import ReputableSourcesService

logger = logging.getLogger(__name__)


@dataclass
class SharedServices:
    """Services built once per process (in the app lifespan or a CLI run).

    - reader: Spreadsheet adapter, None when Google Sheets is not configured
    - crm: CRM adapter; returns nothing without an access token
    """

    reader: SpreadsheetPort | None
    crm: CrmPort
    sources: ReputableSourcesService
    cases: ActiveCaseService
    content: DataIntegrationService

    @classmethod
    def create(
        cls,
        settings: Settings,
        reader: SpreadsheetPort | None = None,
        crm: CrmPort | None = None,
        defaults: DefaultDataProvider | None = None,
    ) -> SharedServices:
        """Create adapters and services from settings.

        Explicit ``reader`` and ``crm`` arguments replace the adapters the
        settings would build.
        """
        if reader is None and settings.sheets_configured:
            reader = GoogleSheetsAdapter(
                api_key=settings.google_api_key,
                spreadsheet_id=settings.google_spreadsheet_id,
                base_url=settings.google_sheets_base_url,
                timeout=settings.request_timeout,
            )
        elif reader is None:
            logger.warning("Google Sheets not configured, serving default data")

        if crm is None:
            crm = HubSpotAdapter(
                access_token=settings.hubspot_access_token,
                portal_id=settings.hubspot_portal_id,
                base_url=settings.hubspot_base_url,
                timeout=settings.request_timeout,
            )

        defaults = defaults or StaticDefaultData()
        return cls(
            reader=reader,
            crm=crm,
            sources=ReputableSourcesService(
                reader,
                defaults,
                sheet_name=settings.sources_sheet,
                cache_ttl_seconds=settings.sources_cache_ttl_seconds,
                default_limit=settings.default_source_limit,
            ),
            cases=ActiveCaseService(
                reader,
                defaults,
                sheet_name=settings.active_cases_sheet,
                cache_ttl_seconds=settings.cases_cache_ttl_seconds,
            ),
            content=DataIntegrationService(
                reader,
                crm,
                defaults,
                cases_sheet=settings.cases_sheet,
                amounts_sheet=settings.amounts_sheet,
                firms_sheet=settings.firms_sheet,
                cache_ttl_seconds=settings.content_cache_ttl_seconds,
            ),
        )
