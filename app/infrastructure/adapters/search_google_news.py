from __future__ import annotations

import logging
from typing import Any, List, Optional

from app.core.config import ProviderCredentials, settings
from app.core.pyd_schemas import SearchResult, SearchSource
from app.infrastructure.adapters.search_base import BaseSearchAdapter
from utils.http_utils import as_dict

logger = logging.getLogger(__name__)


class GoogleNewsSearch(BaseSearchAdapter):
    """ISearchProvider over Google Custom Search, biased to news.

    Requires both an API key and a search engine id (``cx``).
    """

    source = SearchSource.google_news
    provider_name = "Google"
    required_credentials = ("google_api_key", "google_search_engine_id")

    def __init__(
        self,
        credentials: ProviderCredentials,
        *,
        base_url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(credentials, **kwargs)
        self.base_url = base_url or settings.google_search_url

    async def _search(self, keyword: str) -> List[SearchResult]:
        logger.info("Searching Google News for keyword: %s", keyword)
        payload = as_dict(
            await self._get(
                self.base_url,
                params={
                    "key": self.credentials.google_api_key,
                    "cx": self.credentials.google_search_engine_id,
                    "q": f"{keyword} news",
                    "num": str(self.max_results),
                },
            )
        )

        fetched_at = self.now_iso()
        return [
            SearchResult(
                title=item.get("title", ""),
                snippet=item.get("snippet", ""),
                link=item.get("link", ""),
                source=self.source,
                date=fetched_at,
            )
            for item in payload.get("items") or []
        ]
