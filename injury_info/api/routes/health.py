"""Health check endpoint."""

from fastapi import APIRouter

from injury_info import __version__
from injury_info.api.dependencies import SettingsDep
from injury_info.api.schemas import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: SettingsDep) -> HealthResponse:
    """Report service status and which backends are configured."""
    return HealthResponse(
        status="ok",
        version=__version__,
        sheets_configured=settings.sheets_configured,
        hubspot_configured=settings.hubspot_configured,
    )
