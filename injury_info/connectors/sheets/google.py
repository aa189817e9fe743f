from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx

from injury_info.exceptions import (
    ColumnNotFoundError,
    ConnectorNotConfiguredError,
    SpreadsheetError,
)

from .port import SheetData, SheetSearchResult, SpreadsheetPort

logger = logging.getLogger(__name__)


class GoogleSheetsAdapter(SpreadsheetPort):
    """Read-only Google Sheets v4 adapter using API key auth."""

    def __init__(
        self,
        api_key: str | None,
        spreadsheet_id: str | None,
        base_url: str = "https://sheets.googleapis.com/v4/spreadsheets",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        if not api_key:
            raise ConnectorNotConfiguredError("Google Sheets", "an API key")
        if not spreadsheet_id:
            raise ConnectorNotConfiguredError("Google Sheets", "a spreadsheet id")

        self.api_key = api_key
        self.spreadsheet_id = spreadsheet_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _request(
        self,
        path: str,
        params: dict[str, str],
        sheet_name: str | None = None,
    ) -> dict[str, Any]:
        url = f"{self.base_url}/{self.spreadsheet_id}{path}"
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                resp = await client.get(url, params={**params, "key": self.api_key})
                resp.raise_for_status()
                return resp.json()
            except httpx.HTTPStatusError as e:
                raise SpreadsheetError(
                    f"Google Sheets API error {e.response.status_code}",
                    sheet_name=sheet_name,
                    status_code=e.response.status_code,
                ) from e
            except (httpx.HTTPError, ValueError) as e:
                raise SpreadsheetError(
                    f"Google Sheets request failed: {e}", sheet_name=sheet_name
                ) from e

    async def read_sheet(self, sheet_name: str) -> SheetData:
        logger.debug("Reading Google Sheet: %s", sheet_name)
        result = await self._request(
            f"/values/{quote(sheet_name, safe='')}",
            {"majorDimension": "ROWS"},
            sheet_name=sheet_name,
        )

        values = result.get("values") or []
        if not values:
            logger.info("No data found in sheet: %s", sheet_name)
            return SheetData()

        sheet = SheetData.from_values(values)
        logger.info("Read %d rows from %s", len(sheet.data), sheet_name)
        return sheet

    async def search_sheet(
        self,
        sheet_name: str,
        query: str | None,
        column: str | None = None,
        limit: int = 10,
    ) -> SheetSearchResult:
        """Case-insensitive substring search over one column or all columns."""
        sheet = await self.read_sheet(sheet_name)
        if not sheet.data:
            return SheetSearchResult(
                results=[], total=0, query=query or "", column=column or "all"
            )

        if not query or not query.strip():
            return SheetSearchResult(
                results=sheet.data[:limit],
                total=len(sheet.data),
                query="",
                column=column or "all",
            )

        needle = query.lower()
        if column:
            header = next(
                (h for h in sheet.headers if h.lower() == column.lower()), None
            )
            if header is None:
                raise ColumnNotFoundError(column, sheet_name)
            matches = [
                row for row in sheet.data if needle in (row.get(header) or "").lower()
            ]
        else:
            matches = [
                row
                for row in sheet.data
                if any(needle in (value or "").lower() for value in row.values())
            ]

        return SheetSearchResult(
            results=matches[:limit],
            total=len(matches),
            query=query,
            column=column or "all",
        )

    async def list_sheets(self) -> list[str]:
        result = await self._request("", {"fields": "sheets.properties.title"})
        return [
            sheet.get("properties", {}).get("title", "")
            for sheet in result.get("sheets", [])
        ]
