"""
Shared test configuration and fixtures for the search service.
"""

import datetime as _dt
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import pytest

from app.core.config import ProviderCredentials

logger = logging.getLogger(__name__)

FIXED_NOW = _dt.datetime(2024, 1, 2, 3, 4, 5, tzinfo=_dt.timezone.utc)


def setup_logging():
    """Configure logging for the whole test run."""
    log_dir = Path("test/test_output/logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "test_run.log"

    formatter = logging.Formatter(
        "[%(asctime)s] %(levelname)-8s [%(name)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_handler = logging.FileHandler(filename=log_file, mode="a", encoding="utf-8")
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    # Quiet noisy libraries
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return log_file


def pytest_configure(config):  # pylint: disable=unused-argument
    """Configure pytest for tests."""
    log_file = setup_logging()
    logging.getLogger("pytest").info("Test run started, log file: %s", log_file)


@pytest.fixture(autouse=True)
def log_test_name(request):
    """Log test name when test starts and finishes."""
    test_logger = logging.getLogger(request.node.nodeid)
    test_logger.info("Start: %s", request.node.name)
    start_time = datetime.now()

    def log_test_end():
        duration = (datetime.now() - start_time).total_seconds()
        test_logger.info("Done in %.2fs", duration)

    request.addfinalizer(log_test_end)


# -------------------- Fake aiohttp session --------------------
class FakeResponse:
    """Minimal stand-in for aiohttp.ClientResponse."""

    def __init__(self, status: int = 200, payload: Any = None, text: Optional[str] = None):
        self.status = status
        self._payload = payload
        self._text = text

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    async def text(self) -> str:
        if self._text is not None:
            return self._text
        return json.dumps(self._payload)

    async def json(self, content_type: Optional[str] = "application/json") -> Any:
        if self._payload is None and self._text is not None:
            return json.loads(self._text)
        return self._payload


Responder = Union[FakeResponse, Exception, Callable[[str], Union[FakeResponse, Exception]]]


class FakeSession:
    def __init__(self, responder: Responder, calls: List[Dict[str, Any]]):
        self._responder = responder
        self._calls = calls

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False

    def get(self, url, params=None, headers=None):
        self._calls.append({"url": url, "params": params, "headers": headers})
        response = self._responder(url) if callable(self._responder) else self._responder
        if isinstance(response, Exception):
            raise response
        return response


class StubHttp:
    """Session factory recording every GET issued through it."""

    def __init__(self, responder: Responder):
        self.responder = responder
        self.calls: List[Dict[str, Any]] = []

    def __call__(self) -> FakeSession:
        return FakeSession(self.responder, self.calls)


class FixedClock:
    def now(self) -> _dt.datetime:
        return FIXED_NOW


@pytest.fixture
def credentials() -> ProviderCredentials:
    return ProviderCredentials(
        twitter_bearer_token="twitter-token",
        facebook_api_key="facebook-key",
        google_api_key="google-key",
        google_search_engine_id="engine-id",
    )


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def stub_http() -> Callable[[Responder], StubHttp]:
    """Build a StubHttp for a canned response, exception or URL router."""
    return StubHttp


@pytest.fixture
def fake_response() -> type:
    return FakeResponse
