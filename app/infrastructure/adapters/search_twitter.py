from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from app.core.config import ProviderCredentials, settings
from app.core.pyd_schemas import SearchResult, SearchSource
from app.infrastructure.adapters.search_base import BaseSearchAdapter
from utils.http_utils import as_dict

logger = logging.getLogger(__name__)


class TwitterRecentSearch(BaseSearchAdapter):
    """ISearchProvider over the Twitter API v2 recent search endpoint.

    Authors are resolved through the ``includes.users`` expansion; a tweet
    whose author is missing is attributed to "unknown".
    """

    source = SearchSource.twitter
    provider_name = "Twitter"
    required_credentials = ("twitter_bearer_token",)

    def __init__(
        self,
        credentials: ProviderCredentials,
        *,
        base_url: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(credentials, **kwargs)
        self.base_url = base_url or settings.twitter_search_url

    async def _search(self, keyword: str) -> List[SearchResult]:
        logger.info("Searching Twitter for keyword: %s", keyword)
        payload = as_dict(
            await self._get(
                self.base_url,
                params={
                    "query": keyword,
                    "max_results": str(self.max_results),
                    "tweet.fields": "created_at,author_id,public_metrics",
                    "expansions": "author_id",
                    "user.fields": "username,name",
                },
                headers={
                    "Authorization": f"Bearer {self.credentials.twitter_bearer_token}",
                    "Content-Type": "application/json",
                },
            )
        )

        users: Dict[str, Dict[str, Any]] = {
            u.get("id"): u for u in (payload.get("includes") or {}).get("users") or []
        }
        results: List[SearchResult] = []
        for tweet in payload.get("data") or []:
            author = users.get(tweet.get("author_id"), {})
            username = author.get("username")
            tweet_id = tweet.get("id")
            if username:
                link = f"https://twitter.com/{username}/status/{tweet_id}"
            else:
                link = f"https://twitter.com/i/web/status/{tweet_id}"
            results.append(
                SearchResult(
                    title=f"@{username or 'unknown'}",
                    snippet=tweet.get("text", ""),
                    link=link,
                    source=self.source,
                    date=tweet.get("created_at"),
                    author=author.get("name") or "Unknown",
                )
            )
        return results
