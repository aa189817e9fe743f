"""Request and response models for the HTTP API."""

from __future__ import annotations

from pydantic import BaseModel, Field

from injury_info.data_models import (
    Article,
    CaseDefinition,
    LawFirm,
    MatchResult,
    ScoredCandidate,
    Settlement,
    SourceRecord,
)


class HealthResponse(BaseModel):
    status: str
    version: str
    sheets_configured: bool
    hubspot_configured: bool


class SourceResult(SourceRecord):
    """A source with its relevance score; disease lookups carry no score."""

    score: int | None = None

    @classmethod
    def from_candidate(cls, candidate: ScoredCandidate) -> SourceResult:
        return cls(**candidate.record.model_dump(), score=candidate.score)

    @classmethod
    def from_record(cls, record: SourceRecord) -> SourceResult:
        return cls(**record.model_dump())


class SourcesResponse(BaseModel):
    """Reputable sources for a query or disease."""

    sources: list[SourceResult]
    count: int
    query: str | None = None
    disease: str | None = None
    formatted: str = ""


class ActiveCasesResponse(BaseModel):
    active_cases: list[CaseDefinition]
    all_cases: list[CaseDefinition]
    total_active: int
    total_cases: int
    last_updated: str
    source: str


class CheckCaseRequest(BaseModel):
    query: str | None = None


class CheckCaseResponse(BaseModel):
    query: str
    result: MatchResult


class ArticlesResponse(BaseModel):
    articles: list[Article]
    count: int


class LawFirmsResponse(BaseModel):
    law_firms: list[LawFirm]
    count: int


class SettlementsResponse(BaseModel):
    settlements: list[Settlement]
    count: int


class CacheClearResponse(BaseModel):
    cleared: list[str] = Field(default_factory=list)
    message: str


class CacheStats(BaseModel):
    name: str
    entries: int
    ttl_seconds: float
    hits: int
    misses: int


class CacheStatsResponse(BaseModel):
    caches: list[CacheStats]
