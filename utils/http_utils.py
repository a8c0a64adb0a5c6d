"""
HTTP utility functions for provider requests.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import aiohttp

from app.core.config import settings

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], aiohttp.ClientSession]


def default_session_factory(timeout: Optional[float] = None) -> SessionFactory:
    """Return a factory building a fresh ClientSession with a total timeout."""
    total = settings.provider_timeout if timeout is None else timeout

    def factory() -> aiohttp.ClientSession:
        return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=total))

    return factory


def is_error_status(status: int) -> bool:
    return status >= 400


async def get_json(
    session_factory: SessionFactory,
    url: str,
    *,
    params: Optional[Mapping[str, str]] = None,
    headers: Optional[Mapping[str, str]] = None,
) -> Tuple[int, Any, str]:
    """
    Issue one GET request and return the status with the decoded body.

    Args:
        session_factory: Builds the aiohttp session used for this request
        url: Target URL
        params: Query parameters
        headers: Request headers

    Returns:
        (status, json_payload, raw_text): for an error status (>= 400) the
        payload is None and ``raw_text`` holds the body verbatim.
    """
    async with session_factory() as session:
        async with session.get(url, params=params, headers=headers) as response:
            if is_error_status(response.status):
                text = await response.text()
                logger.debug("GET %s -> %d", url, response.status)
                return response.status, None, text

            payload = await response.json(content_type=None)
            logger.debug("GET %s -> %d", url, response.status)
            return response.status, payload, ""


def as_dict(payload: Any) -> Dict[str, Any]:
    """Ensure a decoded JSON payload is an object."""
    if not isinstance(payload, dict):
        raise ValueError(f"Unexpected payload type: {type(payload).__name__}")
    return payload