"""Tests for the Google Sheets and HubSpot adapters."""

import httpx
import pytest

from injury_info.connectors import GoogleSheetsAdapter, HubSpotAdapter, SheetData
from injury_info.exceptions import (
    ColumnNotFoundError,
    ConnectorNotConfiguredError,
    SpreadsheetError,
)

VALUES = {
    "values": [
        ["Case Type", "Settlement_Amount_USD"],
        ["Mesothelioma", "2400000"],
        ["Paraquat"],
    ]
}


def _sheets(handler) -> GoogleSheetsAdapter:
    return GoogleSheetsAdapter(
        api_key="test-key",
        spreadsheet_id="sheet-id",
        transport=httpx.MockTransport(handler),
    )


class TestSheetData:
    def test_pads_short_rows(self) -> None:
        sheet = SheetData.from_values(VALUES["values"])
        assert sheet.headers == ["Case Type", "Settlement_Amount_USD"]
        assert sheet.data[1] == {"Case Type": "Paraquat", "Settlement_Amount_USD": ""}

    def test_empty_values(self) -> None:
        assert SheetData.from_values([]).data == []


class TestGoogleSheetsAdapter:
    def test_requires_credentials(self) -> None:
        with pytest.raises(ConnectorNotConfiguredError):
            GoogleSheetsAdapter(api_key=None, spreadsheet_id="sheet-id")
        with pytest.raises(ConnectorNotConfiguredError):
            GoogleSheetsAdapter(api_key="key", spreadsheet_id="")

    @pytest.mark.asyncio
    async def test_read_sheet(self) -> None:
        requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json=VALUES)

        sheet = await _sheets(handler).read_sheet("Case Amounts")

        assert len(sheet.data) == 2
        assert requests[0].url.params["key"] == "test-key"
        assert requests[0].url.params["majorDimension"] == "ROWS"
        assert "/sheet-id/values/Case%20Amounts" in str(requests[0].url)

    @pytest.mark.asyncio
    async def test_empty_sheet(self) -> None:
        sheet = await _sheets(lambda r: httpx.Response(200, json={})).read_sheet("x")
        assert sheet.data == []

    @pytest.mark.asyncio
    async def test_http_error_raises_spreadsheet_error(self) -> None:
        adapter = _sheets(lambda r: httpx.Response(403, json={"error": "denied"}))

        with pytest.raises(SpreadsheetError) as exc_info:
            await adapter.read_sheet("Reputable_Sources")

        assert exc_info.value.status_code == 403
        assert exc_info.value.sheet_name == "Reputable_Sources"

    @pytest.mark.asyncio
    async def test_transport_error_raises_spreadsheet_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(SpreadsheetError):
            await _sheets(handler).read_sheet("Reputable_Sources")

    @pytest.mark.asyncio
    async def test_search_sheet_by_column(self) -> None:
        adapter = _sheets(lambda r: httpx.Response(200, json=VALUES))

        result = await adapter.search_sheet("Case_Amounts", "meso", "case type")

        assert result.total == 1
        assert result.results[0]["Case Type"] == "Mesothelioma"

        with pytest.raises(ColumnNotFoundError):
            await adapter.search_sheet("Case_Amounts", "meso", "Missing")

    @pytest.mark.asyncio
    async def test_list_sheets(self) -> None:
        payload = {"sheets": [{"properties": {"title": "Reputable_Sources"}}]}
        adapter = _sheets(lambda r: httpx.Response(200, json=payload))
        assert await adapter.list_sheets() == ["Reputable_Sources"]


class TestHubSpotAdapter:
    @pytest.mark.asyncio
    async def test_unconfigured_returns_nothing(self) -> None:
        adapter = HubSpotAdapter(access_token=None)
        assert not adapter.configured
        assert await adapter.find_law_firms("mesothelioma") == []

    @pytest.mark.asyncio
    async def test_find_law_firms(self) -> None:
        payload = {
            "results": [
                {
                    "id": "101",
                    "properties": {
                        "name": "Smith Law",
                        "city": "Austin",
                        "state": "TX",
                        "specialties": "Mesothelioma; Asbestos",
                    },
                },
                {"id": "102", "properties": {"name": "Far Away", "state": "WA"}},
            ]
        }

        def handler(request: httpx.Request) -> httpx.Response:
            assert request.headers["Authorization"] == "Bearer token"
            return httpx.Response(200, json=payload)

        adapter = HubSpotAdapter("token", transport=httpx.MockTransport(handler))
        firms = await adapter.find_law_firms("mesothelioma", location="tx")

        assert len(firms) == 1
        assert firms[0]["location"] == "Austin, TX"
        assert firms[0]["specialties"] == ["Mesothelioma", "Asbestos"]

    @pytest.mark.asyncio
    async def test_http_error_returns_nothing(self) -> None:
        adapter = HubSpotAdapter(
            "token", transport=httpx.MockTransport(lambda r: httpx.Response(500))
        )
        assert await adapter.find_law_firms("mesothelioma") == []
