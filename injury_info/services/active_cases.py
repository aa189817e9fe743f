"""Detection of queries about actively marketed case types."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable

from injury_info.connectors.sheets import SpreadsheetPort
from injury_info.data_models import ActiveCases, CaseDefinition, MatchResult
from injury_info.records import DefaultDataProvider, RecordStore, map_case_row
from injury_info.search import normalize_tokens
from injury_info.storage import TTLCache

logger = logging.getLogger(__name__)


def match_active_case(cases: Iterable[CaseDefinition], query: str) -> MatchResult:
    """Match a query against active cases by exact token equality.

    Keyword phrases are split into tokens, so "talcum powder" matches a
    query containing "powder" but "lymph" never matches "lymphoma". The
    first active case with any shared token wins.
    """
    query_tokens = set(normalize_tokens(query))
    if not query_tokens:
        return MatchResult.no_match()

    for case in cases:
        if not case.active:
            continue
        case_tokens = (
            token for keyword in case.keywords for token in normalize_tokens(keyword)
        )
        matched = tuple(dict.fromkeys(t for t in case_tokens if t in query_tokens))
        if matched:
            return MatchResult.for_case(case, matched)

    return MatchResult.no_match()


class ActiveCaseService:
    """Active case definitions from the case sheet, cached for a TTL."""

    def __init__(
        self,
        reader: SpreadsheetPort | None,
        defaults: DefaultDataProvider,
        sheet_name: str = "Legal Injury Advocates Active cases",
        cache_ttl_seconds: float = 10 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.cache = TTLCache(cache_ttl_seconds, name="active_cases", clock=clock)
        self.store: RecordStore[CaseDefinition] = RecordStore(
            name="active_cases",
            reader=reader,
            sheet_name=sheet_name,
            mapper=map_case_row,
            fallback=defaults.cases,
            cache=self.cache,
            cache_key="lia_active_cases",
        )

    async def get_active_cases(self) -> ActiveCases:
        snapshot = await self.store.get()
        return ActiveCases.from_cases(
            snapshot.records, last_updated=snapshot.loaded_at, source=snapshot.origin
        )

    async def check_active_case(self, query: str) -> MatchResult:
        if not isinstance(query, str) or not query.strip():
            return MatchResult.no_match()

        try:
            cases = await self.get_active_cases()
            result = match_active_case(cases.active_cases, query)
        except Exception:
            logger.exception("Error checking active case for %r", query)
            return MatchResult.no_match()

        if result.is_active:
            logger.info(
                "Active case match: %s (matched %s)",
                result.name,
                ", ".join(result.matched_keywords),
            )
        return result

    def clear_cache(self) -> None:
        self.cache.clear()
