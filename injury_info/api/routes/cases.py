"""Active case endpoints."""

from fastapi import APIRouter, HTTPException

from injury_info.api.dependencies import CaseServiceDep
from injury_info.api.schemas import (
    ActiveCasesResponse,
    CheckCaseRequest,
    CheckCaseResponse,
)

router = APIRouter(prefix="/api/lia")


@router.get("/active-cases", response_model=ActiveCasesResponse)
async def get_active_cases(service: CaseServiceDep) -> ActiveCasesResponse:
    cases = await service.get_active_cases()
    return ActiveCasesResponse(
        active_cases=list(cases.active_cases),
        all_cases=list(cases.all_cases),
        total_active=cases.total_active,
        total_cases=cases.total_cases,
        last_updated=cases.last_updated,
        source=cases.source,
    )


@router.post("/check-case", response_model=CheckCaseResponse)
async def check_case(
    request: CheckCaseRequest, service: CaseServiceDep
) -> CheckCaseResponse:
    """Check whether a query is about an actively marketed case type."""
    if not request.query or not request.query.strip():
        raise HTTPException(status_code=400, detail="'query' is required")

    result = await service.check_active_case(request.query)
    return CheckCaseResponse(query=request.query, result=result)
