"""Per-sheet mapping of raw spreadsheet rows into typed records.

Every mapper returns ``Ok(record)`` or ``Skipped(reason)``; a row missing
a required field is rejected here and never reaches the record store.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Generic, TypeVar

from pydantic import ValidationError

from injury_info.connectors.sheets import SheetRow
from injury_info.data_models import (
    Article,
    ArticleContent,
    CaseDefinition,
    LawFirm,
    Settlement,
    SourceRecord,
)
from injury_info.search.text import create_slug, parse_keywords, parse_list

from .case_keywords import generate_case_keywords

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_PRIORITY = 3
LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
AMOUNT_PATTERN = re.compile(r"[^0-9.]")

FALSE_VALUES = frozenset({"false", "no", "0", "inactive"})

# Column fallback chains: the first non-empty column wins.
SOURCE_ID = ("ID", "Id", "id")
SOURCE_DISEASE = ("Disease_Ailment", "Disease/Ailment", "Disease", "Category")
SOURCE_TITLE = ("Source_Title", "Title")
SOURCE_URL = ("Source_URL", "URL", "Url")
SOURCE_TYPE = ("Source_Type", "Type")
SOURCE_PRIORITY = ("Priority",)
SOURCE_KEYWORDS = ("Keywords",)
SOURCE_DESCRIPTION = ("Description",)
SOURCE_UPDATED = ("Last_Updated", "Last Updated")
ACTIVE = ("Active", "active", "Status", "status")
SOURCE_ACTIVE = ("Active", "active")

CASE_NAME = ("Case Type", "Name", "name")
CASE_DESCRIPTION = ("Description",)
CASE_UPDATED = ("Last Updated",)

ARTICLE_TITLE = ("Case Name", "Name", "Case Type")
AMOUNT_TITLE = ("Case Type", "Name")
ARTICLE_DESCRIPTION = ("Description", "Case Summary")

FIRM_NAME = ("Name", "Firm Name")
SETTLEMENT_AMOUNT = (
    "Settlement_Amount_USD",
    "Settlement Amount USD",
    "Settlement Amount",
    "Amount",
)
SOURCE_LINK = ("Source_Link", "Source Link")


@dataclass(frozen=True)
class Ok(Generic[T]):
    record: T


@dataclass(frozen=True)
class Skipped:
    reason: str


RowMapper = Callable[[SheetRow, int], "Ok[T] | Skipped"]


def _now() -> str:
    return datetime.now(UTC).isoformat()


def first_value(
    row: SheetRow, columns: Sequence[str], first_column: bool = False
) -> str:
    """Value of the first non-empty column in ``columns``.

    With ``first_column`` the row's first column is the last resort.
    """
    for column in columns:
        value = (row.get(column) or "").strip()
        if value:
            return value
    if first_column and row:
        return (next(iter(row.values())) or "").strip()
    return ""


def parse_active(value: str | None) -> bool:
    """Interpret an Active/Status cell; blank or unrecognized means active."""
    if not value:
        return True
    normalized = value.strip().lower()
    if normalized in FALSE_VALUES:
        return False
    return True


def parse_source_active(value: str | None) -> bool:
    """Sources are active only when the cell is blank or TRUE."""
    if not value:
        return True
    return value.strip().upper() == "TRUE"


def parse_priority(value: str | None) -> int:
    match = LEADING_INT_PATTERN.match(value or "")
    if not match:
        return DEFAULT_PRIORITY
    return int(match.group(1))


def format_settlement_amount(value: str | None) -> str:
    """Render a raw dollar amount as e.g. ``$1.2 million`` or ``$250K``."""
    if not value:
        return ""
    digits = AMOUNT_PATTERN.sub("", value)
    try:
        amount = float(digits)
    except ValueError:
        return ""

    if amount >= 1_000_000_000:
        return f"${amount / 1_000_000_000:.1f} billion"
    if amount >= 1_000_000:
        return f"${amount / 1_000_000:.1f} million"
    if amount >= 1_000:
        return f"${amount / 1_000:.0f}K"
    return f"${amount:,g}"


def map_source_row(row: SheetRow, position: int) -> Ok[SourceRecord] | Skipped:
    if not parse_source_active(first_value(row, SOURCE_ACTIVE)):
        return Skipped("inactive")

    disease = first_value(row, SOURCE_DISEASE)
    title = first_value(row, SOURCE_TITLE)
    url = first_value(row, SOURCE_URL)
    missing = [
        name
        for name, value in (("disease", disease), ("title", title), ("url", url))
        if not value
    ]
    if missing:
        return Skipped(f"missing required fields: {', '.join(missing)}")

    row_id = first_value(row, SOURCE_ID) or f"row_{position + 1}"
    try:
        record = SourceRecord(
            id=f"source_{row_id}",
            disease_or_category=disease,
            title=title,
            url=url,
            source_type=first_value(row, SOURCE_TYPE) or "Medical",
            priority=parse_priority(first_value(row, SOURCE_PRIORITY)),
            keywords=parse_keywords(first_value(row, SOURCE_KEYWORDS)),
            description=first_value(row, SOURCE_DESCRIPTION),
            last_updated=first_value(row, SOURCE_UPDATED),
            active=True,
        )
    except ValidationError as e:
        return Skipped(f"invalid source: {e.error_count()} errors")
    return Ok(record)


def map_case_row(row: SheetRow, position: int) -> Ok[CaseDefinition] | Skipped:
    """Map an active-cases row; inactive cases are kept for the full view."""
    name = first_value(row, CASE_NAME, first_column=True)
    if not name:
        return Skipped("missing case name")

    return Ok(
        CaseDefinition(
            case_type=create_slug(name),
            name=name,
            description=first_value(row, CASE_DESCRIPTION) or f"{name} cases",
            keywords=generate_case_keywords(name),
            active=parse_active(first_value(row, ACTIVE)),
            last_updated=first_value(row, CASE_UPDATED) or _now(),
        )
    )


def map_top_case_row(row: SheetRow, position: int) -> Ok[Article] | Skipped:
    title = first_value(row, ARTICLE_TITLE)
    if not title:
        return Skipped("missing case name")

    description = first_value(row, ARTICLE_DESCRIPTION)
    return Ok(
        Article(
            id=f"sheets_case_{first_value(row, SOURCE_ID) or position + 1}",
            title=title,
            description=description,
            slug=create_slug(title),
            category="legal",
            date=first_value(row, ("Date Filed", "Last Updated")) or _now(),
            content=ArticleContent(
                overview=description,
                symptoms=parse_list(row.get("Symptoms")),
                causes=parse_list(row.get("Alleged Causes")),
                legal_options=parse_list(row.get("Legal Options")),
                settlements=first_value(row, ("Settlement Amount", "Settlements")),
            ),
        )
    )


def map_amount_row(row: SheetRow, position: int) -> Ok[Article] | Skipped:
    title = first_value(row, AMOUNT_TITLE)
    if not title:
        return Skipped("missing case type")

    description = first_value(row, ARTICLE_DESCRIPTION)
    return Ok(
        Article(
            id=f"sheets_settlement_{first_value(row, SOURCE_ID) or position + 1}",
            title=title,
            description=description,
            slug=create_slug(title),
            category="settlement",
            date=first_value(row, ("Date", "Last Updated")) or _now(),
            content=ArticleContent(
                overview=description,
                settlements=first_value(
                    row, ("Settlement Amount", "Amount", "Settlements")
                ),
            ),
        )
    )


def map_firm_row(row: SheetRow, position: int) -> Ok[LawFirm] | Skipped:
    name = first_value(row, FIRM_NAME)
    if not name:
        return Skipped("missing firm name")

    location = first_value(row, ("Location",))
    if not location:
        city = first_value(row, ("City",))
        state = first_value(row, ("State",))
        location = ", ".join(part for part in (city, state) if part)
    return Ok(
        LawFirm(
            id=f"sheets_firm_{first_value(row, SOURCE_ID) or position + 1}",
            name=name,
            location=location,
            phone=first_value(row, ("Phone",)),
            website=first_value(row, ("Website",)),
            specialties=parse_list(row.get("Specialties")),
            experience=first_value(row, ("Years Experience", "Experience")),
            success_rate=first_value(row, ("Success Rate",)),
            notable_settlements=parse_list(row.get("Notable Settlements")),
        )
    )


def map_settlement_row(row: SheetRow, position: int) -> Ok[Settlement] | Skipped:
    condition = first_value(row, ("Case Type",))
    if not condition:
        return Skipped("missing case type")

    amount = format_settlement_amount(first_value(row, SETTLEMENT_AMOUNT))
    return Ok(
        Settlement(
            condition=condition,
            settlement_range=amount or "Varies by case",
            average_settlement=amount or "Contact attorney for estimate",
            source_link=first_value(row, SOURCE_LINK),
        )
    )


def map_rows(
    rows: Sequence[SheetRow], mapper: RowMapper, sheet_name: str
) -> tuple[list[T], int]:
    """Map rows, logging and counting the skipped ones."""
    records: list[T] = []
    skipped = 0
    for position, row in enumerate(rows):
        result = mapper(row, position)
        if isinstance(result, Ok):
            records.append(result.record)
            continue
        skipped += 1
        if result.reason != "inactive":
            logger.warning(
                "Skipping row %d of %s: %s", position + 2, sheet_name, result.reason
            )
    return records, skipped
