"""Fixtures for live Trade API tests.

These tests talk to the real exchange and are skipped unless both
API_KEY_TEST and API_SECRET_TEST are set. Each test waits a few seconds
first so consecutive calls stay under the exchange's rate limit.
"""

import asyncio
import os
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio

from wex.config import WexSettings
from wex.exchange.trade_api import TradeAPI

LIVE_PAUSE_SECONDS = float(os.environ.get("LIVE_TEST_PAUSE", "5"))


@pytest.fixture
def credentials() -> tuple[str, str]:
    key = os.environ.get("API_KEY_TEST", "")
    secret = os.environ.get("API_SECRET_TEST", "")
    if not key or not secret:
        pytest.skip("API_KEY_TEST and API_SECRET_TEST are not set")
    return key, secret


@pytest_asyncio.fixture
async def live_api(credentials: tuple[str, str]) -> AsyncIterator[TradeAPI]:
    await asyncio.sleep(LIVE_PAUSE_SECONDS)
    async with TradeAPI(WexSettings()) as api:
        yield api
