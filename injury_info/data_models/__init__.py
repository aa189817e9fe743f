"""Pydantic domain models."""

from .article import Article, ArticleContent
from .case import ActiveCases, CaseDefinition, MatchResult
from .law_firm import LawFirm
from .settlement import ConditionSearchResult, Settlement
from .source import Origin, ScoredCandidate, SourceRecord

__all__ = [
    "ActiveCases",
    "Article",
    "ArticleContent",
    "CaseDefinition",
    "ConditionSearchResult",
    "LawFirm",
    "MatchResult",
    "Origin",
    "ScoredCandidate",
    "Settlement",
    "SourceRecord",
]
