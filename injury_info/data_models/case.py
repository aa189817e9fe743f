"""Active case definitions and match results."""

from pydantic import BaseModel, ConfigDict, Field

from .source import Origin


class CaseDefinition(BaseModel):
    """A case type that may be actively marketed for referrals."""

    model_config = ConfigDict(frozen=True)

    case_type: str
    name: str = Field(..., min_length=1)
    description: str = ""
    keywords: tuple[str, ...] = ()
    active: bool = True
    last_updated: str = ""
    origin: Origin = "google_sheets"


class ActiveCases(BaseModel):
    """Active and full views over one case collection."""

    model_config = ConfigDict(frozen=True)

    active_cases: tuple[CaseDefinition, ...]
    all_cases: tuple[CaseDefinition, ...]
    last_updated: str
    source: Origin

    @classmethod
    def from_cases(
        cls,
        cases: tuple[CaseDefinition, ...],
        last_updated: str,
        source: Origin,
    ) -> "ActiveCases":
        return cls(
            active_cases=tuple(case for case in cases if case.active),
            all_cases=cases,
            last_updated=last_updated,
            source=source,
        )

    @property
    def total_active(self) -> int:
        return len(self.active_cases)

    @property
    def total_cases(self) -> int:
        return len(self.all_cases)


class MatchResult(BaseModel):
    """Outcome of checking a query against the active cases."""

    model_config = ConfigDict(frozen=True)

    is_active: bool
    case_type: str | None = None
    name: str | None = None
    description: str | None = None
    keywords: tuple[str, ...] = ()
    last_updated: str | None = None
    matched_keywords: tuple[str, ...] = ()

    @classmethod
    def no_match(cls) -> "MatchResult":
        return cls(is_active=False)

    @classmethod
    def for_case(
        cls, case: CaseDefinition, matched_keywords: tuple[str, ...]
    ) -> "MatchResult":
        return cls(
            is_active=True,
            case_type=case.case_type,
            name=case.name,
            description=case.description,
            keywords=case.keywords,
            last_updated=case.last_updated,
            matched_keywords=matched_keywords,
        )
