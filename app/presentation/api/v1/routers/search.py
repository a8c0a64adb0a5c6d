import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query

from app.application.interfaces import ISearchProvider
from app.core.exceptions import KeywordMissingError, ProviderInternalError, SearchServiceError
from app.presentation.api.v1.dependencies.search import (
    get_facebook_provider,
    get_google_news_provider,
    get_twitter_provider,
)
from app.presentation.api.v1.schemas.search import SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


async def run_provider_search(
    provider: ISearchProvider, keyword: Optional[str]
) -> SearchResponse:
    """Validate the keyword, run one provider and wrap unexpected failures."""
    if not keyword or not keyword.strip():
        raise KeywordMissingError()
    try:
        results = await provider.search(keyword)
    except SearchServiceError:
        raise
    except Exception as e:
        logger.exception("Error in %s search", provider.source.value)
        raise ProviderInternalError(str(e) or type(e).__name__) from e
    return SearchResponse(results=results)


@router.get("/twitter", response_model=SearchResponse)
async def search_twitter(
    keyword: Optional[str] = Query(None),
    provider: ISearchProvider = Depends(get_twitter_provider),
):
    """Search recent tweets for the keyword."""
    return await run_provider_search(provider, keyword)


@router.get("/facebook", response_model=SearchResponse)
async def search_facebook(
    keyword: Optional[str] = Query(None),
    provider: ISearchProvider = Depends(get_facebook_provider),
):
    """Search Facebook (or return the placeholder, depending on policy)."""
    return await run_provider_search(provider, keyword)


@router.get("/google-news", response_model=SearchResponse)
async def search_google_news(
    keyword: Optional[str] = Query(None),
    provider: ISearchProvider = Depends(get_google_news_provider),
):
    """Search Google Custom Search for news about the keyword."""
    return await run_provider_search(provider, keyword)
