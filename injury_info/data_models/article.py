"""Article content shown on the website."""

from pydantic import BaseModel, ConfigDict, Field

from .source import Origin


class ArticleContent(BaseModel):
    model_config = ConfigDict(frozen=True)

    overview: str = ""
    symptoms: tuple[str, ...] = ()
    causes: tuple[str, ...] = ()
    treatments: tuple[str, ...] = ()
    legal_options: tuple[str, ...] = ()
    settlements: str = ""


class Article(BaseModel):
    """Injury or case article merged from sheets and CRM."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    slug: str
    category: str
    date: str
    content: ArticleContent = Field(default_factory=ArticleContent)
    origin: Origin = "google_sheets"
