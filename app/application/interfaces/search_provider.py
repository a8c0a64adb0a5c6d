from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from app.core.pyd_schemas import SearchResult, SearchSource


@runtime_checkable
class ISearchProvider(Protocol):
    """Adapter for one external content-search provider.

    Implementations call Twitter, Facebook, Google, etc. and normalize the
    vendor payload into SearchResult items. The application layer should not
    know about concrete vendors.
    """

    source: SearchSource

    async def search(self, keyword: str) -> List[SearchResult]:
        """Return normalized results for the keyword.

        Raises SearchServiceError subclasses for configuration and upstream
        failures; never retries.
        """
        ...
