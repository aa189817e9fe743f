"""Relevance scoring and ranking of reputable sources."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from injury_info.data_models import ScoredCandidate, SourceRecord

KEYWORD_MATCH = 10
TITLE_MATCH = 5
DESCRIPTION_MATCH = 3
PHRASE_BONUS = 15
DISEASE_BONUS = 20


def score_source(
    record: SourceRecord, query_words: Sequence[str], raw_query: str
) -> int:
    """Score how well a source answers a query.

    Per query word: +10 if it is one of the record's keywords, +5 if it
    appears in the title, +3 if it appears in the description. Once per
    record: +15 if any keyword appears verbatim in the raw query, +20 if
    the raw query and the disease/category label contain one another.
    """
    keywords = [keyword.lower() for keyword in record.keywords]
    title = record.title.lower()
    description = record.description.lower()
    query_lower = raw_query.lower()
    disease = record.disease_or_category.lower()

    score = 0
    for word in query_words:
        if word in keywords:
            score += KEYWORD_MATCH
        if word in title:
            score += TITLE_MATCH
        if word in description:
            score += DESCRIPTION_MATCH

    if any(keyword in query_lower for keyword in keywords):
        score += PHRASE_BONUS

    if disease in query_lower or query_lower in disease:
        score += DISEASE_BONUS

    return score


def rank_sources(
    candidates: Iterable[SourceRecord],
    query_words: Sequence[str],
    raw_query: str,
    limit: int,
) -> list[ScoredCandidate]:
    """Score, sort and deduplicate candidates, returning at most ``limit``.

    Ordering is score descending, then priority ascending; records that
    tie on both keep their candidate order. Only the first record seen for
    a URL is kept.
    """
    if limit <= 0:
        return []

    scored = [
        ScoredCandidate(
            record=record, score=score_source(record, query_words, raw_query)
        )
        for record in candidates
    ]
    scored.sort(key=lambda candidate: (-candidate.score, candidate.priority))

    ranked: list[ScoredCandidate] = []
    seen_urls: set[str] = set()
    for candidate in scored:
        if candidate.url in seen_urls:
            continue
        seen_urls.add(candidate.url)
        ranked.append(candidate)
        if len(ranked) >= limit:
            break
    return ranked
