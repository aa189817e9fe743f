from typing import Any, Protocol

CrmRecord = dict[str, Any]


class CrmPort(Protocol):
    """Port for CRM backends.

    Every read returns an empty list when the backend is unconfigured or
    unreachable.
    """

    async def search_diseases(
        self, query: str, category: str | None = None, limit: int = 10
    ) -> list[CrmRecord]:
        ...

    async def find_law_firms(
        self, specialty: str, location: str | None = None, limit: int = 10
    ) -> list[CrmRecord]:
        ...

    async def get_settlement_data(
        self, condition: str, state: str | None = None
    ) -> list[CrmRecord]:
        ...
