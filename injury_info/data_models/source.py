"""Reputable source records."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Origin = Literal["google_sheets", "hubspot", "fallback"]


class SourceRecord(BaseModel):
    """A reputable source that can be cited in a chat answer."""

    model_config = ConfigDict(frozen=True)

    id: str
    disease_or_category: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    source_type: str = "Medical"
    priority: int = 3
    keywords: tuple[str, ...] = ()
    description: str = ""
    last_updated: str = ""
    active: bool = True
    origin: Origin = "google_sheets"


class ScoredCandidate(BaseModel):
    """Source with its relevance score for one ranking pass."""

    model_config = ConfigDict(frozen=True)

    record: SourceRecord
    score: int = Field(..., ge=0)

    @property
    def url(self) -> str:
        return self.record.url

    @property
    def priority(self) -> int:
        return self.record.priority
