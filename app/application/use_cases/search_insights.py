from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from app.application.interfaces import ISearchGateway
from app.core.exceptions import SearchServiceError
from app.core.pyd_schemas import InsightsResult, ProviderOutcome, SearchResult, SearchSource
from utils.text_utils import (
    NO_KEYWORDS_MESSAGE,
    build_query,
    extract_keywords,
    normalize_keywords,
)

logger = logging.getLogger(__name__)

# Fan-out order; also the bucket order shown to users
PROVIDER_ORDER: tuple[SearchSource, ...] = (
    SearchSource.twitter,
    SearchSource.facebook,
    SearchSource.google_news,
)


class SearchInsightsUseCase:
    """Extract keywords from text and search all providers concurrently.

    Each provider call is isolated: its failure becomes a ProviderOutcome with
    an empty result list and is logged, never raised across the join.
    """

    def __init__(self, gateway: ISearchGateway) -> None:
        self._gateway = gateway

    def extract(self, text: str) -> List[str]:
        return extract_keywords(text)

    async def execute(self, text: str) -> InsightsResult:
        return await self.execute_keywords(self.extract(text))

    async def execute_keywords(self, keywords: Sequence[str]) -> InsightsResult:
        keywords = normalize_keywords(keywords)
        if not keywords:
            logger.info("No keywords to search; skipping providers")
            return InsightsResult(keywords=[], error=NO_KEYWORDS_MESSAGE)

        query = build_query(keywords)
        outcomes = await self.fan_out(query)
        return InsightsResult(
            keywords=list(keywords),
            query=query,
            twitter=outcomes[SearchSource.twitter].results,
            facebook=outcomes[SearchSource.facebook].results,
            google_news=outcomes[SearchSource.google_news].results,
        )

    async def fan_out(self, query: str) -> Dict[SearchSource, ProviderOutcome]:
        """Fire all provider searches, await all, keyed by source."""
        outcomes = await asyncio.gather(
            *(self._fetch_isolated(source, query) for source in PROVIDER_ORDER)
        )
        return {outcome.source: outcome for outcome in outcomes}

    async def _fetch_isolated(self, source: SearchSource, query: str) -> ProviderOutcome:
        try:
            results = await self._gateway.fetch(source, query)
        except SearchServiceError as e:
            status = getattr(e, "status", None) or e.status_code
            logger.error("%s API error: %s %s", source.value, status, e.details or e.message)
            return ProviderOutcome(source=source, error=e.message, status=status)
        except Exception as e:  # noqa: BLE001
            logger.error("%s search failed: %s", source.value, e)
            return ProviderOutcome(source=source, error=str(e) or type(e).__name__)
        return ProviderOutcome(source=source, results=results)


class SearchSession:
    """Working state of one user's search screen.

    Holds the editable keyword set and the three current result buckets.
    Every search empties all buckets before filling them again; concurrent
    searches are not coordinated, the last one to finish wins.
    """

    def __init__(self, use_case: SearchInsightsUseCase) -> None:
        self._use_case = use_case
        self.keywords: List[str] = []
        self.error: Optional[str] = None
        self.buckets: Dict[SearchSource, List[SearchResult]] = self._empty_buckets()

    @staticmethod
    def _empty_buckets() -> Dict[SearchSource, List[SearchResult]]:
        return {source: [] for source in PROVIDER_ORDER}

    def clear(self) -> None:
        self.buckets = self._empty_buckets()

    async def search(self, text: str) -> InsightsResult:
        """Extract keywords from text and replace the working set and buckets."""
        self.keywords = self._use_case.extract(text)
        return await self.search_keywords()

    async def search_keywords(self) -> InsightsResult:
        """Search the current working keyword set without re-extracting."""
        self.error = None
        self.clear()
        result = await self._use_case.execute_keywords(self.keywords)
        self.error = result.error
        self.keywords = list(result.keywords)
        self.buckets = {
            SearchSource.twitter: result.twitter,
            SearchSource.facebook: result.facebook,
            SearchSource.google_news: result.google_news,
        }
        return result

    def remove_keyword(self, keyword: str) -> None:
        self.keywords = [k for k in self.keywords if k != keyword]
