"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, Request

from injury_info.config import Settings, get_settings
from injury_info.services import (
    ActiveCaseService,
    DataIntegrationService,
    ReputableSourcesService,
)


def get_sources_service(request: Request) -> ReputableSourcesService:
    return request.app.state.sources_service


def get_case_service(request: Request) -> ActiveCaseService:
    return request.app.state.case_service


def get_content_service(request: Request) -> DataIntegrationService:
    return request.app.state.content_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
SourcesServiceDep = Annotated[ReputableSourcesService, Depends(get_sources_service)]
CaseServiceDep = Annotated[ActiveCaseService, Depends(get_case_service)]
ContentServiceDep = Annotated[DataIntegrationService, Depends(get_content_service)]
