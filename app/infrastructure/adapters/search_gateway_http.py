from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import TypeAdapter

from app.application.interfaces import ISearchGateway
from app.core.exceptions import UpstreamProviderError
from app.core.pyd_schemas import SearchResult, SearchSource
from utils.http_utils import (
    SessionFactory,
    as_dict,
    default_session_factory,
    get_json,
    is_error_status,
)

PROVIDER_PATHS: Dict[SearchSource, str] = {
    SearchSource.twitter: "search/twitter",
    SearchSource.facebook: "search/facebook",
    SearchSource.google_news: "search/google-news",
}

_results_adapter = TypeAdapter(List[SearchResult])


class HttpSearchGateway(ISearchGateway):
    """ISearchGateway reaching the provider endpoints over the network.

    ``base_url`` points at the API prefix, e.g. ``http://localhost:8000/api/v1``.
    A non-OK answer is raised as UpstreamProviderError carrying the status and
    the body returned by the endpoint.
    """

    def __init__(
        self,
        base_url: str,
        *,
        session_factory: Optional[SessionFactory] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._session_factory = session_factory or default_session_factory()

    def url_for(self, source: SearchSource) -> str:
        return f"{self.base_url}/{PROVIDER_PATHS[source]}"

    async def fetch(self, source: SearchSource, keyword: str) -> List[SearchResult]:
        status, payload, text = await get_json(
            self._session_factory,
            self.url_for(source),
            params={"keyword": keyword},
            headers={"Content-Type": "application/json"},
        )
        if is_error_status(status):
            raise UpstreamProviderError(source.value, status, text)
        return _results_adapter.validate_python(as_dict(payload).get("results") or [])
