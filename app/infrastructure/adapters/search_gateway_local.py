from __future__ import annotations

from typing import Dict, Iterable, List

from app.application.interfaces import ISearchGateway, ISearchProvider
from app.core.pyd_schemas import SearchResult, SearchSource


class LocalSearchGateway(ISearchGateway):
    """ISearchGateway calling provider adapters in-process."""

    def __init__(self, providers: Iterable[ISearchProvider]) -> None:
        self._providers: Dict[SearchSource, ISearchProvider] = {
            p.source: p for p in providers
        }

    def provider(self, source: SearchSource) -> ISearchProvider:
        try:
            return self._providers[source]
        except KeyError:
            raise LookupError(f"No provider registered for {source.value}") from None

    async def fetch(self, source: SearchSource, keyword: str) -> List[SearchResult]:
        return await self.provider(source).search(keyword)
