from __future__ import annotations

import logging
from typing import Any

import httpx

from .port import CrmPort, CrmRecord

logger = logging.getLogger(__name__)

COMPANY_PROPERTIES = [
    "name",
    "phone",
    "website",
    "city",
    "state",
    "location",
    "specialties",
    "years_experience",
    "success_rate",
    "notable_settlements",
]


def _split_list(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.replace(";", ",").split(",") if item.strip()]


class HubSpotAdapter(CrmPort):
    """HubSpot CRM adapter.

    Law firms are read from company records. Disease content and settlement
    figures have no CRM objects yet, so those reads return nothing.
    """

    def __init__(
        self,
        access_token: str | None,
        portal_id: str | None = None,
        base_url: str = "https://api.hubapi.com",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.access_token = access_token
        self.portal_id = portal_id
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def configured(self) -> bool:
        return bool(self.access_token)

    def _parse_company(self, item: dict[str, Any]) -> CrmRecord:
        props = item.get("properties") or {}
        city = props.get("city") or ""
        state = props.get("state") or ""
        location = props.get("location") or ", ".join(p for p in (city, state) if p)
        return {
            "id": str(item.get("id", "")),
            "name": props.get("name") or "",
            "location": location,
            "phone": props.get("phone") or "",
            "website": props.get("website") or "",
            "specialties": _split_list(props.get("specialties")),
            "experience": props.get("years_experience") or "",
            "success_rate": props.get("success_rate") or "",
            "notable_settlements": _split_list(props.get("notable_settlements")),
        }

    async def search_diseases(
        self, query: str, category: str | None = None, limit: int = 10
    ) -> list[CrmRecord]:
        logger.debug("HubSpot disease search not configured (query=%r)", query)
        return []

    async def find_law_firms(
        self, specialty: str, location: str | None = None, limit: int = 10
    ) -> list[CrmRecord]:
        if not self.configured:
            return []

        body = {
            "query": specialty or "",
            "limit": limit,
            "properties": COMPANY_PROPERTIES,
        }
        async with httpx.AsyncClient(
            timeout=self.timeout,
            transport=self._transport,
            headers={"Authorization": f"Bearer {self.access_token}"},
        ) as client:
            try:
                resp = await client.post(
                    f"{self.base_url}/crm/v3/objects/companies/search", json=body
                )
                resp.raise_for_status()
                data = resp.json()
            except httpx.HTTPStatusError as e:
                logger.warning(
                    "HubSpot company search returned %d", e.response.status_code
                )
                return []
            except (httpx.HTTPError, ValueError) as e:
                logger.warning("HubSpot company search failed: %s", e)
                return []

        firms = [self._parse_company(item) for item in data.get("results", [])]
        if location:
            needle = location.lower()
            firms = [f for f in firms if needle in f["location"].lower()]
        return firms

    async def get_settlement_data(
        self, condition: str, state: str | None = None
    ) -> list[CrmRecord]:
        logger.debug("HubSpot settlement data not configured (condition=%r)", condition)
        return []
