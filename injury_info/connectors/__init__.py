"""Spreadsheet and CRM collaborators."""

from .crm import CrmPort, HubSpotAdapter
from .sheets import GoogleSheetsAdapter, SheetData, SheetRow, SpreadsheetPort

__all__ = [
    "CrmPort",
    "GoogleSheetsAdapter",
    "HubSpotAdapter",
    "SheetData",
    "SheetRow",
    "SpreadsheetPort",
]
