"""Spreadsheet reader collaborator."""

from .google import GoogleSheetsAdapter
from .port import SheetData, SheetRow, SheetSearchResult, SpreadsheetPort

__all__ = [
    "GoogleSheetsAdapter",
    "SheetData",
    "SheetRow",
    "SheetSearchResult",
    "SpreadsheetPort",
]
