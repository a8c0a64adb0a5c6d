from .search_base import BaseSearchAdapter, SystemClock
from .search_twitter import TwitterRecentSearch
from .search_facebook import FacebookGraphSearch, FacebookPlaceholderSearch
from .search_google_news import GoogleNewsSearch
from .search_gateway_local import LocalSearchGateway
from .search_gateway_http import HttpSearchGateway

__all__ = [
    "BaseSearchAdapter",
    "SystemClock",
    "TwitterRecentSearch",
    "FacebookGraphSearch",
    "FacebookPlaceholderSearch",
    "GoogleNewsSearch",
    "LocalSearchGateway",
    "HttpSearchGateway",
]
