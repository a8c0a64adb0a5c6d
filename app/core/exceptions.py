"""
Custom exception handlers and error types
"""

from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SearchServiceError(Exception):
    """Base exception for search service errors.

    Every subclass knows the HTTP status it maps to and renders the flat
    ``{"error": ..., "details": ..., "status": ...}`` body returned to clients.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        details: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message
        self.details = details
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.message}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class KeywordMissingError(SearchServiceError):
    """Raised when the required ``keyword`` query parameter is absent"""

    status_code = 400

    def __init__(self, message: str = "Keyword parameter is required"):
        super().__init__(message)


class ProviderConfigurationError(SearchServiceError):
    """Raised when a provider credential is not configured

    Args:
        provider (str): Provider display name, e.g. "Twitter"
        config_keys (list): Names of the missing settings
    Example:
        raise ProviderConfigurationError("Google", ["google_api_key"])
    """

    status_code = 500

    def __init__(self, provider: str, config_keys: Optional[list] = None):
        super().__init__(f"{provider} API not configured")
        self.provider = provider
        self.config_keys = config_keys or []


class UpstreamProviderError(SearchServiceError):
    """Raised when a provider answers with a non-success status.

    The upstream status and body are propagated verbatim.
    """

    def __init__(self, provider: str, status: int, details: str):
        super().__init__(f"{provider} API error", details=details, status_code=status)
        self.provider = provider
        self.status = status

    def to_payload(self) -> Dict[str, Any]:
        payload = super().to_payload()
        payload["status"] = self.status
        return payload


class ProviderInternalError(SearchServiceError):
    """Raised when a provider search fails unexpectedly (network, bad payload)"""

    status_code = 500

    def __init__(self, message: Optional[str] = None, provider: Optional[str] = None):
        super().__init__(message or "An unknown error occurred")
        self.provider = provider


async def search_service_exception_handler(request: Request, exc: SearchServiceError):
    """Render search service errors with their own status and body"""
    if exc.status_code >= 500:
        logger.error("Search error on %s: %s", request.url.path, exc.message)
    else:
        logger.warning("Search error on %s: %s", request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle Pydantic validation errors"""
    logger.warning(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "details": "Invalid request data",
            "errors": jsonable_errors(exc),
        },
    )


def jsonable_errors(exc: RequestValidationError) -> list:
    """Strip non-serializable context (e.g. exception instances) from errors."""
    return [
        {"loc": list(err.get("loc", ())), "msg": err.get("msg"), "type": err.get("type")}
        for err in exc.errors()
    ]
