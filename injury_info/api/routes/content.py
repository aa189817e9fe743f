"""Article, law firm and settlement endpoints."""

from fastapi import APIRouter, HTTPException

from injury_info.api.dependencies import ContentServiceDep
from injury_info.api.schemas import (
    ArticlesResponse,
    LawFirmsResponse,
    SettlementsResponse,
)
from injury_info.data_models import Article, ConditionSearchResult

router = APIRouter(prefix="/api")


@router.get("/articles", response_model=ArticlesResponse)
async def list_articles(
    service: ContentServiceDep, condition: str | None = None
) -> ArticlesResponse:
    if condition:
        articles = await service.search_articles(condition)
    else:
        articles = await service.get_all_articles()
    return ArticlesResponse(articles=articles, count=len(articles))


@router.get("/articles/{slug}", response_model=Article)
async def get_article(slug: str, service: ContentServiceDep) -> Article:
    article = await service.get_article(slug)
    if article is None:
        raise HTTPException(status_code=404, detail=f"Article {slug!r} not found")
    return article


@router.get("/law-firms", response_model=LawFirmsResponse)
async def list_law_firms(
    service: ContentServiceDep,
    specialty: str | None = None,
    location: str | None = None,
) -> LawFirmsResponse:
    firms = await service.get_law_firms(specialty, location)
    return LawFirmsResponse(law_firms=firms, count=len(firms))


@router.get("/settlements", response_model=SettlementsResponse)
async def list_settlements(
    service: ContentServiceDep,
    condition: str | None = None,
    state: str | None = None,
) -> SettlementsResponse:
    settlements = await service.get_settlement_data(condition, state)
    return SettlementsResponse(settlements=settlements, count=len(settlements))


@router.get("/search/{condition}", response_model=ConditionSearchResult)
async def search_condition(
    condition: str, service: ContentServiceDep
) -> ConditionSearchResult:
    """Articles, law firms and settlements for one condition."""
    return await service.search_condition(condition)
