"""Reputable source lookup endpoint."""

from fastapi import APIRouter, HTTPException, Query

from injury_info.api.dependencies import SourcesServiceDep
from injury_info.api.schemas import SourceResult, SourcesResponse

router = APIRouter()


@router.get("/api/reputable-sources", response_model=SourcesResponse)
async def get_reputable_sources(
    service: SourcesServiceDep,
    query: str | None = None,
    disease: str | None = None,
    limit: int = Query(default=3, ge=1, le=20),
) -> SourcesResponse:
    """Sources relevant to a free-text query, or to one disease."""
    if query:
        ranked = await service.find_relevant_sources(query, limit)
        results = [SourceResult.from_candidate(candidate) for candidate in ranked]
    elif disease:
        records = await service.find_sources_for_disease(disease, limit)
        results = [SourceResult.from_record(record) for record in records]
    else:
        raise HTTPException(
            status_code=400, detail="Either 'query' or 'disease' is required"
        )

    return SourcesResponse(
        sources=results,
        count=len(results),
        query=query,
        disease=disease,
        formatted=service.format_sources_for_response(results),
    )
