"""Inverted indexes over the reputable source records."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable, Sequence

from injury_info.data_models import SourceRecord

logger = logging.getLogger(__name__)

# Below this size scoring every record is cheaper than consulting the index.
FULL_SCAN_MAX_RECORDS = 50
# Fewer candidates than this means the index hit was too narrow to trust.
MIN_CANDIDATES = 5


class SearchIndex:
    """Keyword and disease/category indexes for candidate pre-filtering.

    Both indexes map a lowercased key to record positions in the list the
    index was built from, so candidates always come back in store order.
    """

    def __init__(self) -> None:
        self._records: tuple[SourceRecord, ...] = ()
        self._keyword_index: dict[str, set[int]] = {}
        self._disease_index: dict[str, set[int]] = {}

    @property
    def records(self) -> tuple[SourceRecord, ...]:
        return self._records

    @property
    def keyword_count(self) -> int:
        return len(self._keyword_index)

    @property
    def disease_count(self) -> int:
        return len(self._disease_index)

    def build(self, records: Iterable[SourceRecord]) -> None:
        """Rebuild both indexes from scratch."""
        records = tuple(records)
        keyword_index: dict[str, set[int]] = defaultdict(set)
        disease_index: dict[str, set[int]] = defaultdict(set)

        for position, record in enumerate(records):
            disease_index[record.disease_or_category.lower()].add(position)
            for keyword in record.keywords:
                keyword_index[keyword.lower()].add(position)

        self._records = records
        self._keyword_index = dict(keyword_index)
        self._disease_index = dict(disease_index)

        logger.info(
            "Built search indexes: %d diseases, %d keywords",
            len(self._disease_index),
            len(self._keyword_index),
        )

    def pre_filter(
        self, query_words: Sequence[str], raw_query: str
    ) -> list[SourceRecord]:
        """Narrow the records down to plausible candidates for a query."""
        if len(self._records) <= FULL_SCAN_MAX_RECORDS:
            return list(self._records)

        query_lower = raw_query.lower()
        positions: set[int] = set()

        for word in query_words:
            positions.update(self._keyword_index.get(word, ()))
            positions.update(self._disease_index.get(word, ()))

        for disease, disease_positions in self._disease_index.items():
            if disease in query_lower or query_lower in disease:
                positions.update(disease_positions)

        if len(positions) < MIN_CANDIDATES:
            logger.debug(
                "Pre-filtering too restrictive (%d sources), using all sources",
                len(positions),
            )
            return list(self._records)

        logger.debug(
            "Pre-filtered %d sources down to %d candidates",
            len(self._records),
            len(positions),
        )
        return [self._records[position] for position in sorted(positions)]
