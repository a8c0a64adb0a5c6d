from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

from app.core.config import ProviderCredentials, settings
from app.core.pyd_schemas import SearchResult, SearchSource
from app.infrastructure.adapters.search_base import BaseSearchAdapter
from utils.http_utils import as_dict

logger = logging.getLogger(__name__)

NO_DESCRIPTION = "No description available"


def facebook_search_link(keyword: str) -> str:
    """Facebook's own web search UI for the keyword."""
    return f"https://www.facebook.com/search/posts/?q={quote(keyword, safe='')}"


class FacebookPlaceholderSearch(BaseSearchAdapter):
    """Facebook adapter that never calls the Graph API.

    The Graph API offers no general public post search, so this policy
    answers with a single informational result pointing at Facebook's own
    search page for the keyword.
    """

    source = SearchSource.facebook
    provider_name = "Facebook"
    required_credentials = ("facebook_api_key",)

    async def _search(self, keyword: str) -> List[SearchResult]:
        logger.info(
            "Facebook Graph API doesn't support public post search; "
            "returning placeholder for keyword: %s",
            keyword,
        )
        return [
            SearchResult(
                title="Facebook Search Limited",
                snippet=(
                    "Facebook's API doesn't support general public post searches. "
                    "To search Facebook, you would need page-specific access or use "
                    f'their official website. Searched for: "{keyword}"'
                ),
                link=facebook_search_link(keyword),
                source=self.source,
                date=self.now_iso(),
            )
        ]


class FacebookGraphSearch(BaseSearchAdapter):
    """Facebook adapter querying the Graph API public page search."""

    source = SearchSource.facebook
    provider_name = "Facebook"
    required_credentials = ("facebook_api_key",)

    def __init__(
        self,
        credentials: ProviderCredentials,
        *,
        base_url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(credentials, **kwargs)
        self.base_url = base_url or settings.facebook_pages_search_url

    async def _search(self, keyword: str) -> List[SearchResult]:
        logger.info("Searching Facebook pages for keyword: %s", keyword)
        payload = as_dict(
            await self._get(
                self.base_url,
                params={
                    "q": keyword,
                    "fields": "id,name,description,link",
                    "limit": str(self.max_results),
                    "access_token": self.credentials.facebook_api_key,
                },
            )
        )

        fetched_at = self.now_iso()
        results: List[SearchResult] = []
        for page in payload.get("data") or []:
            link = page.get("link") or f"https://www.facebook.com/{page.get('id', '')}"
            results.append(
                SearchResult(
                    title=page.get("name", ""),
                    snippet=page.get("description") or NO_DESCRIPTION,
                    link=link,
                    source=self.source,
                    date=fetched_at,
                )
            )
        return results
