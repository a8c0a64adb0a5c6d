from __future__ import annotations

from typing import List, Protocol

from app.core.pyd_schemas import SearchResult, SearchSource


class ISearchGateway(Protocol):
    """Transport used by the aggregator to reach a provider.

    A gateway may call the adapters in-process or go over the network to the
    provider endpoints. Failures are raised; the aggregator captures them.
    """

    async def fetch(self, source: SearchSource, keyword: str) -> List[SearchResult]:
        ...
