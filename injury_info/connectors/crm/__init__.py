"""CRM reader collaborator."""

from .hubspot import HubSpotAdapter
from .port import CrmPort, CrmRecord

__all__ = ["CrmPort", "CrmRecord", "HubSpotAdapter"]
