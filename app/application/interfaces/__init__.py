from .utils import IClock
from .search_provider import ISearchProvider
from .search_gateway import ISearchGateway

__all__ = [
    "IClock",
    "ISearchProvider",
    "ISearchGateway",
]
