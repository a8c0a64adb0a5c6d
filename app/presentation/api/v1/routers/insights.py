import logging

from fastapi import APIRouter, Depends

from app.application.use_cases.search_insights import SearchInsightsUseCase
from app.presentation.api.v1.dependencies.search import get_search_insights_use_case
from app.presentation.api.v1.schemas.search import (
    InsightsRequest,
    InsightsResult,
    KeywordsRequest,
    KeywordsResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["insights"])


@router.post("/keywords", response_model=KeywordsResponse)
async def extract_keywords(
    body: KeywordsRequest,
    use_case: SearchInsightsUseCase = Depends(get_search_insights_use_case),
):
    """Extract keywords from free text without searching."""
    return KeywordsResponse(keywords=use_case.extract(body.text))


@router.post("/insights", response_model=InsightsResult)
async def search_insights(
    body: InsightsRequest,
    use_case: SearchInsightsUseCase = Depends(get_search_insights_use_case),
):
    """
    Extract keywords (or take the given ones) and search every provider.

    A provider failure only empties that provider's bucket; the response
    carries an ``error`` only when there is nothing to search for.
    """
    if body.keywords is not None:
        result = await use_case.execute_keywords(body.keywords)
    else:
        result = await use_case.execute(body.text or "")
    if result.error:
        logger.info("Insights search rejected: %s", result.error)
    return result
