"""Sheet-backed record collections with fallback to default data."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from typing import Generic, TypeVar

from injury_info.connectors.sheets import SpreadsheetPort
from injury_info.data_models import Origin
from injury_info.storage import TTLCache

from .mapping import RowMapper, map_rows

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RecordSnapshot(Generic[T]):
    """One immutable generation of a store's records."""

    records: tuple[T, ...]
    origin: Origin
    loaded_at: str
    skipped: int = 0
    generation: int = 0

    @property
    def is_fallback(self) -> bool:
        return self.origin == "fallback"

    def __len__(self) -> int:
        return len(self.records)


class RecordStore(Generic[T]):
    """Records of one sheet, refreshed on demand and cached for a TTL.

    A refresh replaces the whole snapshot in a single assignment, so
    readers see either the old generation or the new one. When the sheet
    cannot be read, is empty, or yields no usable rows the store serves
    the fallback records instead; those are not cached, so the next
    ``get`` tries the sheet again.
    """

    def __init__(
        self,
        name: str,
        reader: SpreadsheetPort | None,
        sheet_name: str,
        mapper: RowMapper,
        fallback: Callable[[], list[T]],
        cache: TTLCache,
        cache_key: str | None = None,
        on_refresh: Callable[[tuple[T, ...]], None] | None = None,
    ):
        self._name = name
        self._reader = reader
        self._sheet_name = sheet_name
        self._mapper = mapper
        self._fallback = fallback
        self._cache = cache
        self._cache_key = cache_key or f"records:{name}"
        self._on_refresh = on_refresh
        self._snapshot: RecordSnapshot[T] | None = None
        self._generation = 0

    @property
    def name(self) -> str:
        return self._name

    @property
    def sheet_name(self) -> str:
        return self._sheet_name

    @property
    def snapshot(self) -> RecordSnapshot[T] | None:
        """The most recently loaded snapshot, fresh or not."""
        return self._snapshot

    async def get(self) -> RecordSnapshot[T]:
        """Return the cached snapshot, refreshing it when stale."""
        cached = self._cache.get(self._cache_key)
        if cached is not None:
            return cached
        return await self.refresh()

    async def refresh(self) -> RecordSnapshot[T]:
        """Reload from the sheet, falling back to default records."""
        self._generation += 1
        snapshot = replace(await self._load(), generation=self._generation)
        self._snapshot = snapshot

        if self._on_refresh is not None:
            self._on_refresh(snapshot.records)

        if not snapshot.is_fallback:
            self._cache.set(self._cache_key, snapshot)
        return snapshot

    def invalidate(self) -> None:
        self._cache.invalidate(self._cache_key)

    async def _load(self) -> RecordSnapshot[T]:
        if self._reader is None:
            logger.info("%s: no spreadsheet configured, using fallback", self._name)
            return self._fallback_snapshot()

        try:
            sheet = await self._reader.read_sheet(self._sheet_name)
        except Exception as e:
            logger.warning(
                "%s: failed to read sheet %r, using fallback data: %s",
                self._name,
                self._sheet_name,
                e,
            )
            return self._fallback_snapshot()

        if not sheet.data:
            logger.warning(
                "%s: sheet %r has no rows, using fallback data",
                self._name,
                self._sheet_name,
            )
            return self._fallback_snapshot()

        records, skipped = map_rows(sheet.data, self._mapper, self._sheet_name)
        if not records:
            logger.warning(
                "%s: no usable rows in sheet %r (%d skipped), using fallback data",
                self._name,
                self._sheet_name,
                skipped,
            )
            return self._fallback_snapshot()

        logger.info(
            "%s: loaded %d records from %r (%d skipped)",
            self._name,
            len(records),
            self._sheet_name,
            skipped,
        )
        return RecordSnapshot(
            records=tuple(records),
            origin="google_sheets",
            loaded_at=datetime.now(UTC).isoformat(),
            skipped=skipped,
        )

    def _fallback_snapshot(self) -> RecordSnapshot[T]:
        return RecordSnapshot(
            records=tuple(self._fallback()),
            origin="fallback",
            loaded_at=datetime.now(UTC).isoformat(),
        )
