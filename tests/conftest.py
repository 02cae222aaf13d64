"""Shared test fixtures for the WEX Trade API client."""

from collections.abc import Callable
from urllib.parse import parse_qsl

import httpx
import pytest

from wex.config import AppSettings, WexSettings
from wex.exchange.signing import NonceGenerator
from wex.exchange.trade_api import TradeAPI

TEST_KEY = "test-api-key"
TEST_SECRET = "test-api-secret"
TAPI_URL = "https://wex.test/tapi"


class RecordingExchange:
    """httpx handler that records requests and replies with queued payloads."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, payload: object, status_code: int = 200) -> None:
        self._responses.append(httpx.Response(status_code, json=payload))

    def reply_raw(self, content: bytes, status_code: int = 200) -> None:
        self._responses.append(httpx.Response(status_code, content=content))

    def succeed(self, result: object) -> None:
        self.reply({"success": 1, "return": result})

    def fail(self, message: str) -> None:
        self.reply({"success": 0, "error": message})

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.pop(0)

    @property
    def last_form(self) -> dict[str, str]:
        return dict(parse_qsl(self.requests[-1].content.decode()))


@pytest.fixture
def wex_settings() -> WexSettings:
    return WexSettings(
        api_key=TEST_KEY,  # type: ignore[arg-type]
        api_secret=TEST_SECRET,  # type: ignore[arg-type]
        tapi_url=TAPI_URL,
    )


@pytest.fixture
def mock_settings(wex_settings: WexSettings) -> AppSettings:
    """Return AppSettings with test defaults and dummy API keys."""
    return AppSettings(log_level="DEBUG", wex=wex_settings)


@pytest.fixture
def exchange() -> RecordingExchange:
    return RecordingExchange()


@pytest.fixture
def make_api(
    wex_settings: WexSettings, exchange: RecordingExchange
) -> Callable[..., TradeAPI]:
    """Factory for TradeAPI instances wired to the recording exchange."""

    def _make(settings: WexSettings | None = None) -> TradeAPI:
        client = httpx.AsyncClient(transport=httpx.MockTransport(exchange))
        return TradeAPI(
            settings or wex_settings,
            client=client,
            nonce=NonceGenerator(start=1, clock=lambda: 0),
        )

    return _make


@pytest.fixture
def api(make_api: Callable[..., TradeAPI]) -> TradeAPI:
    return make_api()
