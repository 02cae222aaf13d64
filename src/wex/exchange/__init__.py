"""Exchange client layer -- WEX Trade API over signed HTTP POST."""

from wex.exchange.client import TradeClient
from wex.exchange.signing import NonceGenerator, encode_body, sign_body
from wex.exchange.trade_api import TradeAPI
from wex.exchange.types import (
    AccountInfo,
    CouponResponse,
    HistoryFilter,
    Order,
    OrderResponse,
    OrderStatus,
    RedeemResponse,
    Rights,
    Trade,
    Transaction,
    WithdrawResponse,
)

__all__ = [
    "AccountInfo",
    "CouponResponse",
    "HistoryFilter",
    "NonceGenerator",
    "Order",
    "OrderResponse",
    "OrderStatus",
    "RedeemResponse",
    "Rights",
    "Trade",
    "TradeAPI",
    "TradeClient",
    "Transaction",
    "WithdrawResponse",
    "encode_body",
    "sign_body",
]
