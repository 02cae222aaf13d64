"""Async client for the WEX private Trade API."""

from wex.config import AppSettings, WexSettings
from wex.exceptions import MissingCredentialsError, TradeError, WexError
from wex.exchange import HistoryFilter, TradeAPI

__all__ = [
    "AppSettings",
    "HistoryFilter",
    "MissingCredentialsError",
    "TradeAPI",
    "TradeError",
    "WexError",
    "WexSettings",
]
