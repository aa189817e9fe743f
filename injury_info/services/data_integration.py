"""Content aggregation across the spreadsheet and the CRM.

Articles, law firms and settlement figures are read from their sheets and
from the CRM concurrently, merged, and cached for a short TTL. When
neither backend yields anything the built-in default data is served and
left uncached.
"""

from __future__ import annotations

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable, Iterable

from pydantic import ValidationError

from injury_info.connectors.crm import CrmPort, CrmRecord
from injury_info.connectors.sheets import SpreadsheetPort
from injury_info.data_models import (
    Article,
    ArticleContent,
    ConditionSearchResult,
    LawFirm,
    Settlement,
)
from injury_info.records import (
    DefaultDataProvider,
    RowMapper,
    map_amount_row,
    map_firm_row,
    map_rows,
    map_settlement_row,
    map_top_case_row,
)
from injury_info.search.text import create_slug
from injury_info.storage import TTLCache

logger = logging.getLogger(__name__)

CRM_FIRM_LIMIT = 20
CRM_DISEASE_LIMIT = 100
SUMMARY_OVERVIEW_CHARS = 200
DEFAULT_RANGE = Settlement.model_fields["settlement_range"].default


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


def merge_articles(articles: Iterable[Article]) -> list[Article]:
    """Drop articles whose lowercased title was already seen."""
    seen: set[str] = set()
    merged: list[Article] = []
    for article in articles:
        key = article.title.lower()
        if key in seen:
            continue
        seen.add(key)
        merged.append(article)
    return merged


def merge_settlements(settlements: Iterable[Settlement]) -> list[Settlement]:
    """One settlement per condition and state, preferring a concrete range."""
    grouped: dict[tuple[str, str], Settlement] = {}
    for settlement in settlements:
        key = (settlement.condition, settlement.state.lower())
        best = grouped.get(key)
        if best is None or (
            best.settlement_range == DEFAULT_RANGE
            and settlement.settlement_range != DEFAULT_RANGE
        ):
            grouped[key] = settlement
    return list(grouped.values())


def filter_firms(
    firms: Iterable[LawFirm], specialty: str | None, location: str | None
) -> list[LawFirm]:
    result = []
    for firm in firms:
        if specialty and not any(_contains(s, specialty) for s in firm.specialties):
            continue
        if location and not _contains(firm.location, location):
            continue
        result.append(firm)
    return result


def generate_summary(
    condition: str, articles: list[Article], settlements: list[Settlement]
) -> str:
    summary = f"Information about {condition}"
    if articles:
        overview = articles[0].content.overview[:SUMMARY_OVERVIEW_CHARS]
        summary += f". {overview}..."
    if settlements:
        summary += f" Typical settlements range from {settlements[0].settlement_range}."
    return summary


def _article_from_crm(record: CrmRecord) -> Article | None:
    title = record.get("name") or record.get("title")
    if not title:
        return None
    description = record.get("description") or ""
    return Article(
        id=f"hubspot_{record.get('id', create_slug(title))}",
        title=title,
        description=description,
        slug=create_slug(title),
        category=record.get("category") or "medical",
        date=record.get("updated_at") or record.get("date") or "",
        content=ArticleContent(overview=description),
        origin="hubspot",
    )


def _firm_from_crm(record: CrmRecord) -> LawFirm | None:
    try:
        firm_id = f"hubspot_firm_{record.get('id', '')}"
        return LawFirm.model_validate({**record, "id": firm_id, "origin": "hubspot"})
    except ValidationError as e:
        logger.warning("Skipping HubSpot firm %r: %s", record.get("name"), e)
        return None


def _settlement_from_crm(record: CrmRecord) -> Settlement | None:
    try:
        return Settlement.model_validate({**record, "origin": "hubspot"})
    except ValidationError as e:
        logger.warning("Skipping HubSpot settlement %r: %s", record.get("condition"), e)
        return None


class DataIntegrationService:
    """Merges articles, law firms and settlements from sheets and CRM."""

    def __init__(
        self,
        reader: SpreadsheetPort | None,
        crm: CrmPort | None,
        defaults: DefaultDataProvider,
        cases_sheet: str = "Top_10_Cases",
        amounts_sheet: str = "Case_Amounts",
        firms_sheet: str = "Top_10_Firms",
        cache_ttl_seconds: float = 5 * 60,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.reader = reader
        self.crm = crm
        self.defaults = defaults
        self.cases_sheet = cases_sheet
        self.amounts_sheet = amounts_sheet
        self.firms_sheet = firms_sheet
        self.cache = TTLCache(cache_ttl_seconds, name="content", clock=clock)

    async def _read_rows(self, sheet_name: str, mapper: RowMapper) -> list:
        if self.reader is None:
            return []
        try:
            sheet = await self.reader.read_sheet(sheet_name)
        except Exception as e:
            logger.warning("Could not read sheet %r: %s", sheet_name, e)
            return []
        records, _ = map_rows(sheet.data, mapper, sheet_name)
        return records

    async def _crm_read(
        self,
        operation: str,
        read: Callable[[CrmPort], Awaitable[list[CrmRecord]]],
    ) -> list[CrmRecord]:
        if self.crm is None:
            return []
        try:
            return await read(self.crm)
        except Exception as e:
            logger.warning("CRM %s failed: %s", operation, e)
            return []

    async def get_all_articles(self) -> list[Article]:
        cached = self.cache.get("articles")
        if cached is not None:
            return list(cached)

        top_cases, amounts, crm_records = await asyncio.gather(
            self._read_rows(self.cases_sheet, map_top_case_row),
            self._read_rows(self.amounts_sheet, map_amount_row),
            self._crm_read(
                "search_diseases",
                lambda crm: crm.search_diseases("", None, CRM_DISEASE_LIMIT),
            ),
        )
        crm_articles = [a for a in map(_article_from_crm, crm_records) if a is not None]
        articles = merge_articles([*top_cases, *amounts, *crm_articles])

        if not articles:
            logger.info("No articles from sheets or CRM, using fallback articles")
            return self.defaults.articles()

        logger.info(
            "Loaded %d articles (%d sheet cases, %d amounts, %d CRM)",
            len(articles),
            len(top_cases),
            len(amounts),
            len(crm_articles),
        )
        self.cache.set("articles", tuple(articles))
        return articles

    async def search_articles(self, condition: str) -> list[Article]:
        if not condition:
            return []
        articles = await self.get_all_articles()
        return [
            article
            for article in articles
            if _contains(article.title, condition)
            or _contains(article.description, condition)
            or _contains(article.content.overview, condition)
        ]

    async def get_article(self, slug: str) -> Article | None:
        for article in await self.get_all_articles():
            if article.slug == slug:
                return article
        return None

    async def get_law_firms(
        self, specialty: str | None = None, location: str | None = None
    ) -> list[LawFirm]:
        cache_key = f"law_firms:{specialty}:{location}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return list(cached)

        sheet_firms, crm_records = await asyncio.gather(
            self._read_rows(self.firms_sheet, map_firm_row),
            self._crm_read(
                "find_law_firms",
                lambda crm: crm.find_law_firms(
                    specialty or "", location, CRM_FIRM_LIMIT
                ),
            ),
        )
        crm_firms = [f for f in map(_firm_from_crm, crm_records) if f is not None]
        firms = [*filter_firms(sheet_firms, specialty, location), *crm_firms]

        if not firms:
            logger.info("No law firms from sheets or CRM, using fallback firms")
            return filter_firms(self.defaults.law_firms(), specialty, None)

        self.cache.set(cache_key, tuple(firms))
        return firms

    async def get_settlement_data(
        self, condition: str | None, state: str | None = None
    ) -> list[Settlement]:
        cache_key = f"settlements:{condition}:{state}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return list(cached)

        if not condition:
            return self.defaults.settlements(condition)

        sheet_rows, crm_records = await asyncio.gather(
            self._read_rows(self.amounts_sheet, map_settlement_row),
            self._crm_read(
                "get_settlement_data",
                lambda crm: crm.get_settlement_data(condition, state),
            ),
        )
        sheet_settlements = [s for s in sheet_rows if _contains(s.condition, condition)]
        crm_settlements = [
            s for s in map(_settlement_from_crm, crm_records) if s is not None
        ]
        settlements = merge_settlements([*sheet_settlements, *crm_settlements])
        if state:
            settlements = [
                s for s in settlements if s.state == "All" or _contains(s.state, state)
            ]

        if not settlements:
            logger.info("No settlement data for %r, using defaults", condition)
            return self.defaults.settlements(condition)

        self.cache.set(cache_key, tuple(settlements))
        return settlements

    async def search_condition(self, condition: str) -> ConditionSearchResult:
        cache_key = f"search:{condition}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        articles, law_firms, settlements = await asyncio.gather(
            self.search_articles(condition),
            self.get_law_firms(condition),
            self.get_settlement_data(condition),
        )
        result = ConditionSearchResult(
            condition=condition,
            articles=tuple(articles),
            law_firms=tuple(law_firms),
            settlements=tuple(settlements),
            summary=generate_summary(condition, articles, settlements),
        )
        self.cache.set(cache_key, result)
        return result

    def clear_cache(self) -> None:
        self.cache.clear()
        logger.info("Content cache cleared")
