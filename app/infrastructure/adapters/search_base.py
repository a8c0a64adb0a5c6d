from __future__ import annotations

import datetime as _dt
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, List, Mapping, Optional

from app.application.interfaces import IClock, ISearchProvider
from app.core.config import ProviderCredentials
from app.core.exceptions import (
    KeywordMissingError,
    ProviderConfigurationError,
    ProviderInternalError,
    SearchServiceError,
    UpstreamProviderError,
)
from app.core.pyd_schemas import SearchResult, SearchSource
from utils.http_utils import (
    SessionFactory,
    default_session_factory,
    get_json,
    is_error_status,
)

logger = logging.getLogger(__name__)


class SystemClock(IClock):
    """IClock backed by the wall clock, in UTC."""

    def now(self) -> _dt.datetime:
        return _dt.datetime.now(_dt.timezone.utc)


def isoformat(moment: _dt.datetime) -> str:
    """Format a timestamp the way providers report dates (``...Z``)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=_dt.timezone.utc)
    moment = moment.astimezone(_dt.timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class BaseSearchAdapter(ISearchProvider, ABC):
    """Shared request handling for provider adapters.

    Subclasses declare the credentials they need and implement `_search`.
    `search` validates the keyword and credentials before any outbound call
    and turns unexpected failures into ProviderInternalError.
    """

    source: ClassVar[SearchSource]
    provider_name: ClassVar[str]
    required_credentials: ClassVar[tuple[str, ...]] = ()

    def __init__(
        self,
        credentials: ProviderCredentials,
        *,
        session_factory: Optional[SessionFactory] = None,
        clock: Optional[IClock] = None,
        max_results: int = 10,
    ) -> None:
        self.credentials = credentials
        self._session_factory = session_factory or default_session_factory()
        self._clock = clock or SystemClock()
        self.max_results = max_results

    def missing_credentials(self) -> List[str]:
        return [
            name
            for name in self.required_credentials
            if not getattr(self.credentials, name, "")
        ]

    def is_configured(self) -> bool:
        return not self.missing_credentials()

    def now_iso(self) -> str:
        return isoformat(self._clock.now())

    async def search(self, keyword: str) -> List[SearchResult]:
        if not keyword or not keyword.strip():
            raise KeywordMissingError()

        missing = self.missing_credentials()
        if missing:
            logger.error("%s credentials not configured: %s", self.provider_name, missing)
            raise ProviderConfigurationError(self.provider_name, missing)

        try:
            results = await self._search(keyword)
        except SearchServiceError:
            raise
        except Exception as e:  # noqa: BLE001
            logger.error("Error in %s search: %s", self.provider_name, e)
            raise ProviderInternalError(
                str(e) or type(e).__name__, provider=self.provider_name
            ) from e

        logger.info(
            "%s returned %d result(s) for keyword: %s",
            self.provider_name,
            len(results),
            keyword,
        )
        return results

    async def _get(
        self,
        url: str,
        *,
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        status, payload, text = await get_json(
            self._session_factory, url, params=params, headers=headers
        )
        if is_error_status(status):
            logger.error("%s API error: %d %s", self.provider_name, status, text)
            raise UpstreamProviderError(self.provider_name, status, text)
        return payload

    @abstractmethod
    async def _search(self, keyword: str) -> List[SearchResult]:  # pragma: no cover - abstract
        ...
