from __future__ import annotations

from types import SimpleNamespace
from typing import Optional

from app.application.interfaces import ISearchGateway
from app.core.config import ProviderCredentials, Settings, settings
from app.infrastructure.adapters import (
    FacebookGraphSearch,
    FacebookPlaceholderSearch,
    GoogleNewsSearch,
    HttpSearchGateway,
    LocalSearchGateway,
    TwitterRecentSearch,
)
from utils.http_utils import default_session_factory


def get_facebook_adapter(cfg: Settings, credentials: ProviderCredentials, **kwargs):
    """Pick the Facebook policy named by ``facebook_search_mode``."""
    if cfg.facebook_search_mode == "graph":
        return FacebookGraphSearch(
            credentials, base_url=cfg.facebook_pages_search_url, **kwargs
        )
    if cfg.facebook_search_mode == "placeholder":
        return FacebookPlaceholderSearch(credentials, **kwargs)
    raise ValueError(f"Unknown facebook_search_mode: {cfg.facebook_search_mode}")


def get_search_adapter_bundle(
    cfg: Optional[Settings] = None,
    *,
    credentials: Optional[ProviderCredentials] = None,
) -> SimpleNamespace:
    """Provide the three provider adapters built from settings."""
    cfg = cfg or settings
    credentials = credentials or ProviderCredentials.from_settings(cfg)
    common = {
        "session_factory": default_session_factory(cfg.provider_timeout),
        "max_results": cfg.provider_max_results,
    }
    return SimpleNamespace(
        twitter=TwitterRecentSearch(
            credentials, base_url=cfg.twitter_search_url, **common
        ),
        facebook=get_facebook_adapter(cfg, credentials, **common),
        google_news=GoogleNewsSearch(
            credentials, base_url=cfg.google_search_url, **common
        ),
    )


def get_search_gateway(
    cfg: Optional[Settings] = None, *, base_url: Optional[str] = None
) -> ISearchGateway:
    """HTTP gateway when a base URL is configured, in-process otherwise."""
    cfg = cfg or settings
    base_url = base_url or cfg.search_api_base_url
    if base_url:
        return HttpSearchGateway(
            base_url, session_factory=default_session_factory(cfg.provider_timeout)
        )
    bundle = get_search_adapter_bundle(cfg)
    return LocalSearchGateway([bundle.twitter, bundle.facebook, bundle.google_news])
