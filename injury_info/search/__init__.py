"""Keyword index, relevance scoring and text normalization."""

from .index import SearchIndex
from .scorer import rank_sources, score_source
from .text import extract_query_words, normalize_tokens, parse_keywords

__all__ = [
    "SearchIndex",
    "extract_query_words",
    "normalize_tokens",
    "parse_keywords",
    "rank_sources",
    "score_source",
]
