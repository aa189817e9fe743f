"""Shared test fixtures."""

from collections.abc import Callable, Generator
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from injury_info import __version__
from injury_info.api.routes import cache, cases, content, health, sources
from injury_info.connectors.sheets import SheetData
from injury_info.data_models import SourceRecord
from injury_info.exceptions import SpreadsheetError
from injury_info.records import StaticDefaultData
from injury_info.services import (
    ActiveCaseService,
    DataIntegrationService,
    ReputableSourcesService,
)

SOURCE_HEADERS = [
    "ID",
    "Disease_Ailment",
    "Source_Title",
    "Source_URL",
    "Source_Type",
    "Priority",
    "Keywords",
    "Description",
    "Last_Updated",
    "Active",
]

SOURCE_ROWS = [
    [
        "1",
        "Mesothelioma",
        "Mesothelioma Treatment Guide",
        "https://www.cancer.gov/types/mesothelioma",
        "Government",
        "1",
        "mesothelioma, asbestos, pleural",
        "Treatment options for mesothelioma patients",
        "2024-01-01",
        "TRUE",
    ],
    [
        "2",
        "Non-Hodgkin Lymphoma",
        "Lymphoma Overview",
        "https://www.cancer.gov/types/lymphoma",
        "Medical",
        "2",
        "lymphoma, roundup, glyphosate",
        "What lymphoma is and how it is treated",
        "2024-01-01",
        "TRUE",
    ],
    [
        "3",
        "Ovarian Cancer",
        "Talc and Ovarian Cancer",
        "https://www.cancer.org/talc",
        "Research",
        "2",
        "talc, talcum powder, ovarian cancer",
        "Research on talc use",
        "2024-01-01",
        "FALSE",
    ],
]

CASE_HEADERS = ["Case Type", "Description", "Active"]

CASE_ROWS = [
    ["Roundup", "Roundup weed killer cases", "TRUE"],
    ["Talcum Powder", "Talc ovarian cancer cases", "FALSE"],
    ["Mesothelioma", "Asbestos exposure cases", "yes"],
]


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


def make_reader(sheets: dict[str, list[list[str]]]) -> AsyncMock:
    """Spreadsheet reader mock serving raw values per sheet name."""

    async def read_sheet(sheet_name: str) -> SheetData:
        if sheet_name not in sheets:
            raise SpreadsheetError("Unable to parse range", sheet_name=sheet_name)
        return SheetData.from_values(sheets[sheet_name])

    reader = AsyncMock()
    reader.read_sheet.side_effect = read_sheet
    return reader


def make_source(**overrides) -> SourceRecord:
    fields = {
        "id": "source_1",
        "disease_or_category": "Mesothelioma",
        "title": "Mesothelioma Treatment Guide",
        "url": "https://example.org/mesothelioma",
        "priority": 3,
        "keywords": ("mesothelioma", "asbestos"),
        "description": "Treatment options",
    }
    fields.update(overrides)
    return SourceRecord(**fields)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def defaults() -> StaticDefaultData:
    return StaticDefaultData()


@pytest.fixture
def sheets() -> dict[str, list[list[str]]]:
    return {
        "Reputable_Sources": [SOURCE_HEADERS, *SOURCE_ROWS],
        "Legal Injury Advocates Active cases": [CASE_HEADERS, *CASE_ROWS],
    }


@pytest.fixture
def reader(sheets: dict[str, list[list[str]]]) -> AsyncMock:
    return make_reader(sheets)


@pytest.fixture
def source_factory() -> Callable[..., SourceRecord]:
    return make_source


@pytest.fixture
def reader_factory() -> Callable[[dict[str, list[list[str]]]], AsyncMock]:
    return make_reader


@pytest.fixture
def test_client(
    reader: AsyncMock, defaults: StaticDefaultData, clock: FakeClock
) -> Generator[TestClient, None, None]:
    """Test client over services backed by the mocked spreadsheet."""
    # Create app without lifespan so no real adapters are built
    app = FastAPI(title="Injury Info Service (Test)", version=__version__)

    app.include_router(health.router)
    app.include_router(sources.router)
    app.include_router(cases.router)
    app.include_router(content.router)
    app.include_router(cache.router)

    app.state.sources_service = ReputableSourcesService(reader, defaults, clock=clock)
    app.state.case_service = ActiveCaseService(reader, defaults, clock=clock)
    app.state.content_service = DataIntegrationService(
        reader, None, defaults, clock=clock
    )

    with TestClient(app) as client:
        yield client
