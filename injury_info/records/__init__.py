"""Record stores, per-sheet row mapping and default data."""

from .case_keywords import CASE_SYNONYMS, find_case_synonyms, generate_case_keywords
from .defaults import DefaultDataProvider, StaticDefaultData
from .mapping import (
    Ok,
    RowMapper,
    Skipped,
    format_settlement_amount,
    map_amount_row,
    map_case_row,
    map_firm_row,
    map_rows,
    map_settlement_row,
    map_source_row,
    map_top_case_row,
)
from .store import RecordSnapshot, RecordStore

__all__ = [
    "CASE_SYNONYMS",
    "DefaultDataProvider",
    "Ok",
    "RecordSnapshot",
    "RecordStore",
    "RowMapper",
    "Skipped",
    "StaticDefaultData",
    "find_case_synonyms",
    "format_settlement_amount",
    "generate_case_keywords",
    "map_amount_row",
    "map_case_row",
    "map_firm_row",
    "map_rows",
    "map_settlement_row",
    "map_source_row",
    "map_top_case_row",
]
