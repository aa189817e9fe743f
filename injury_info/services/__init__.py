"""Query services built on the record stores."""

from .active_cases import ActiveCaseService, match_active_case
from .data_integration import DataIntegrationService
from .reputable_sources import (
    ReputableSourcesService,
    get_source_type_label,
    validate_source_row,
)
from .shared import SharedServices

__all__ = [
    "ActiveCaseService",
    "DataIntegrationService",
    "ReputableSourcesService",
    "SharedServices",
    "get_source_type_label",
    "match_active_case",
    "validate_source_row",
]
