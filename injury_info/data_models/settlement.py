"""Settlement figures and condition search results."""

from pydantic import BaseModel, ConfigDict

from .article import Article
from .law_firm import LawFirm
from .source import Origin


class Settlement(BaseModel):
    """Settlement figures for one condition and state."""

    model_config = ConfigDict(frozen=True)

    condition: str
    state: str = "All"
    settlement_range: str = "Varies by case"
    average_settlement: str = "Contact attorney for estimate"
    total_cases: str = "Varies"
    year: str = "2024"
    source_link: str = ""
    origin: Origin = "google_sheets"


class ConditionSearchResult(BaseModel):
    """Everything known about one condition."""

    model_config = ConfigDict(frozen=True)

    condition: str
    articles: tuple[Article, ...] = ()
    law_firms: tuple[LawFirm, ...] = ()
    settlements: tuple[Settlement, ...] = ()
    summary: str = ""
