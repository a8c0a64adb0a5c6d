from types import SimpleNamespace

from app.application.interfaces import ISearchProvider
from app.application.use_cases.search_insights import SearchInsightsUseCase
from app.infrastructure.adapters.bundles.search import (
    get_search_adapter_bundle,
    get_search_gateway,
)


def get_search_adapters() -> SimpleNamespace:
    """Compose provider adapters at Presentation layer from settings."""
    return get_search_adapter_bundle()


def get_twitter_provider() -> ISearchProvider:
    return get_search_adapters().twitter


def get_facebook_provider() -> ISearchProvider:
    return get_search_adapters().facebook


def get_google_news_provider() -> ISearchProvider:
    return get_search_adapters().google_news


def get_search_insights_use_case() -> SearchInsightsUseCase:
    """Compose the SearchInsightsUseCase with the configured gateway."""
    return SearchInsightsUseCase(get_search_gateway())
