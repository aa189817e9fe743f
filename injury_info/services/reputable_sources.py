"""Reputable source lookup for chat responses."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Mapping
from urllib.parse import urlparse

from injury_info.connectors.sheets import SpreadsheetPort
from injury_info.data_models import ScoredCandidate, SourceRecord
from injury_info.records import DefaultDataProvider, RecordSnapshot, RecordStore
from injury_info.records.mapping import (
    SOURCE_DISEASE,
    SOURCE_KEYWORDS,
    SOURCE_PRIORITY,
    SOURCE_TITLE,
    SOURCE_TYPE,
    SOURCE_URL,
    first_value,
    map_source_row,
)
from injury_info.search import SearchIndex, extract_query_words, rank_sources
from injury_info.storage import TTLCache

logger = logging.getLogger(__name__)

SOURCE_TYPE_LABELS = {
    "Medical": "Medical Authority",
    "Government": "Government Source",
    "Research": "Research Study",
    "Legal": "Legal Database",
    "News": "News Source",
}

MIN_PRIORITY = 1
MAX_PRIORITY = 5


def get_source_type_label(source_type: str) -> str:
    return SOURCE_TYPE_LABELS.get(source_type, source_type)


def is_valid_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_source_row(row: Mapping[str, str]) -> list[str]:
    """Validation errors for one raw row of the sources sheet."""
    required = (
        ("Disease_Ailment", SOURCE_DISEASE),
        ("Source_Title", SOURCE_TITLE),
        ("Source_URL", SOURCE_URL),
        ("Source_Type", SOURCE_TYPE),
        ("Priority", SOURCE_PRIORITY),
        ("Keywords", SOURCE_KEYWORDS),
    )
    errors = [
        f"{label} is required"
        for label, columns in required
        if not first_value(row, columns)
    ]

    url = first_value(row, SOURCE_URL)
    if url and not is_valid_url(url):
        errors.append("Source_URL must be a valid URL")

    priority = first_value(row, SOURCE_PRIORITY)
    if priority:
        try:
            value = int(priority)
        except ValueError:
            errors.append("Priority must be a number")
        else:
            if not MIN_PRIORITY <= value <= MAX_PRIORITY:
                errors.append("Priority must be between 1 and 5")
    return errors


class ReputableSourcesService:
    """Finds the reputable sources most relevant to a free-text query.

    Sources come from the reputable sources sheet, are indexed by keyword
    and disease on every reload and ranked by the relevance scorer. Query
    results are cached alongside the records for the same TTL.
    """

    def __init__(
        self,
        reader: SpreadsheetPort | None,
        defaults: DefaultDataProvider,
        sheet_name: str = "Reputable_Sources",
        cache_ttl_seconds: float = 10 * 60,
        default_limit: int = 3,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_limit = default_limit
        self.index = SearchIndex()
        self.cache = TTLCache(cache_ttl_seconds, name="reputable_sources", clock=clock)
        self.store: RecordStore[SourceRecord] = RecordStore(
            name="reputable_sources",
            reader=reader,
            sheet_name=sheet_name,
            mapper=map_source_row,
            fallback=defaults.sources,
            cache=self.cache,
            cache_key="all_sources",
            on_refresh=self.index.build,
        )

    async def _snapshot(self) -> RecordSnapshot[SourceRecord]:
        return await self.store.get()

    async def get_all_reputable_sources(self) -> list[SourceRecord]:
        snapshot = await self._snapshot()
        return list(snapshot.records)

    async def find_relevant_sources(
        self, query: str, limit: int | None = None
    ) -> list[ScoredCandidate]:
        """Up to ``limit`` scored sources for a query, best match first.

        A blank or non-string query returns no sources. Results are cached
        per snapshot generation, so a reload never serves an older ranking.
        """
        if limit is None:
            limit = self.default_limit
        if not isinstance(query, str) or not query.strip():
            return []

        try:
            snapshot = await self._snapshot()
            cache_key = f"relevant:{snapshot.generation}:{limit}:{query}"
            cached = self.cache.get(cache_key)
            if cached is not None:
                return list(cached)

            query_words = extract_query_words(query)
            candidates = self.index.pre_filter(query_words, query)
            ranked = rank_sources(candidates, query_words, query, limit)
        except Exception:
            logger.exception("Error finding relevant sources for %r", query)
            return []

        if ranked:
            logger.debug(
                "Top sources for %r: %s",
                query,
                ", ".join(f"{c.record.title} ({c.score})" for c in ranked),
            )
        # Results computed from fallback data are not kept.
        if not snapshot.is_fallback:
            self.cache.set(cache_key, tuple(ranked))
        return ranked

    async def find_sources_for_disease(
        self, disease: str, limit: int = 5
    ) -> list[SourceRecord]:
        """Sources whose disease label contains or is contained in ``disease``."""
        if not disease or not disease.strip():
            return []

        disease_lower = disease.strip().lower()
        snapshot = await self._snapshot()
        matches = [
            record
            for record in snapshot.records
            if disease_lower in record.disease_or_category.lower()
            or record.disease_or_category.lower() in disease_lower
        ]
        matches.sort(key=lambda record: record.priority)
        return matches[:limit]

    def format_sources_for_response(
        self, sources: Iterable[SourceRecord | ScoredCandidate]
    ) -> str:
        """Markdown citation block appended to a chat response."""
        records = [
            source.record if isinstance(source, ScoredCandidate) else source
            for source in sources
        ]
        lines = [
            f"• **{record.title}** ({get_source_type_label(record.source_type)})"
            f" - [Read More]({record.url})"
            for record in records
        ]
        if not lines:
            return ""
        return "\n\n**Reputable Sources:**\n" + "\n".join(lines)

    def validate_source(self, source: SourceRecord) -> list[str]:
        errors: list[str] = []
        if not source.source_type:
            errors.append("Source_Type is required")
        if not source.keywords:
            errors.append("Keywords is required")
        if not is_valid_url(source.url):
            errors.append("Source_URL must be a valid URL")
        if not MIN_PRIORITY <= source.priority <= MAX_PRIORITY:
            errors.append("Priority must be between 1 and 5")
        return errors

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Reputable sources cache cleared")
