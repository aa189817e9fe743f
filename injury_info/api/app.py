"""FastAPI application with lifespan management."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from injury_info import __version__
from injury_info.config import get_settings
from injury_info.services import SharedServices


def configure_logging() -> None:
    """Configure logging for the injury info service."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("injury_info").setLevel(log_level)

    # Quiet noisy third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


configure_logging()
logger = logging.getLogger(__name__)


def _log_settings() -> None:
    """Log current settings without credentials."""
    settings = get_settings()

    logger.info("=" * 60)
    logger.info("Injury Info Service Configuration")
    logger.info("=" * 60)
    logger.info("  Log level: %s", settings.log_level)
    logger.info("  Google Sheets:")
    logger.info("    Configured: %s", settings.sheets_configured)
    if settings.sheets_configured:
        logger.info("    Spreadsheet: %s", settings.google_spreadsheet_id)
        logger.info("    Sources sheet: %s", settings.sources_sheet)
        logger.info("    Active cases sheet: %s", settings.active_cases_sheet)
    logger.info("  HubSpot:")
    logger.info("    Configured: %s", settings.hubspot_configured)
    logger.info("  Cache TTLs:")
    logger.info("    Sources: %.0fs", settings.sources_cache_ttl_seconds)
    logger.info("    Active cases: %.0fs", settings.cases_cache_ttl_seconds)
    logger.info("    Content: %.0fs", settings.content_cache_ttl_seconds)
    logger.info("=" * 60)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Build adapters and services at startup, release them at shutdown."""
    settings = get_settings()

    _log_settings()

    services = SharedServices.create(settings)
    app.state.sources_service = services.sources
    app.state.case_service = services.cases
    app.state.content_service = services.content

    # Warm the source index so the first query does not pay for the load
    snapshot = await services.sources.store.get()
    logger.info(
        "Injury info service ready - %d reputable sources (%s)",
        len(snapshot),
        snapshot.origin,
    )
    yield

    logger.info("Shutting down")
    del app.state.sources_service
    del app.state.case_service
    del app.state.content_service


def create_app() -> FastAPI:
    """Create FastAPI application."""
    from injury_info.api.routes import cache, cases, content, health, sources

    app = FastAPI(
        title="Injury Info Service",
        description="Reputable sources, active case detection and legal content",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(health.router, tags=["health"])
    app.include_router(sources.router, tags=["sources"])
    app.include_router(cases.router, tags=["cases"])
    app.include_router(content.router, tags=["content"])
    app.include_router(cache.router, tags=["cache"])

    return app


# For uvicorn
app = create_app()
