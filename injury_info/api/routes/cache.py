"""Cache management endpoint."""

import logging

from fastapi import APIRouter

from injury_info.api.dependencies import (
    CaseServiceDep,
    ContentServiceDep,
    SourcesServiceDep,
)
from injury_info.api.schemas import CacheClearResponse, CacheStatsResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/api/cache/clear", response_model=CacheClearResponse)
async def clear_cache(
    sources: SourcesServiceDep,
    cases: CaseServiceDep,
    content: ContentServiceDep,
) -> CacheClearResponse:
    """Drop every cached record and query result."""
    sources.clear_cache()
    cases.clear_cache()
    content.clear_cache()
    logger.info("All caches cleared")
    return CacheClearResponse(
        cleared=["reputable_sources", "active_cases", "content"],
        message="All caches cleared",
    )


@router.get("/api/cache/stats", response_model=CacheStatsResponse)
async def cache_stats(
    sources: SourcesServiceDep,
    cases: CaseServiceDep,
    content: ContentServiceDep,
) -> CacheStatsResponse:
    return CacheStatsResponse(
        caches=[sources.cache.stats, cases.cache.stats, content.cache.stats]
    )
