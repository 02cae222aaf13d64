"""Abstract Trade API client interface.

Defines the contract for the authenticated exchange operations. Callers
depend only on this interface, keeping HTTP and signing details isolated
in the concrete implementation.

Every operation raises TradeError when the exchange reports a failure.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from wex.exchange.types import (
    AccountInfo,
    CouponResponse,
    HistoryFilter,
    Order,
    OrderResponse,
    RedeemResponse,
    Trade,
    Transaction,
    WithdrawResponse,
)

Number = Decimal | int | float | str


class TradeClient(ABC):
    """Abstract base class for Trade API clients."""

    @abstractmethod
    async def get_info_auth(self, key: str, secret: str) -> AccountInfo:
        """Fetch balances, key rights and account counters."""
        ...

    @abstractmethod
    async def active_orders_auth(self, key: str, secret: str, pair: str) -> list[Order]:
        """List open orders for a pair.

        The exchange reports an empty book as TradeError("no orders").
        """
        ...

    @abstractmethod
    async def trade_auth(
        self,
        key: str,
        secret: str,
        pair: str,
        direction: str,
        rate: Number,
        amount: Number,
    ) -> OrderResponse:
        """Place a limit order. ``direction`` is "buy" or "sell"."""
        ...

    @abstractmethod
    async def order_info_auth(
        self, key: str, secret: str, order_id: str | int
    ) -> dict[str, Order]:
        """Fetch a single order, keyed by its id."""
        ...

    @abstractmethod
    async def cancel_order_auth(
        self, key: str, secret: str, order_id: str | int
    ) -> OrderResponse:
        """Cancel an open order."""
        ...

    @abstractmethod
    async def trade_history_auth(
        self, key: str, secret: str, history_filter: HistoryFilter, pair: str | None = None
    ) -> list[Trade]:
        """Fetch executed trades, optionally restricted to one pair."""
        ...

    @abstractmethod
    async def transaction_history_auth(
        self, key: str, secret: str, history_filter: HistoryFilter
    ) -> list[Transaction]:
        """Fetch deposits, withdrawals and other balance movements."""
        ...

    @abstractmethod
    async def withdraw_coin_auth(
        self, key: str, secret: str, currency: str, amount: Number, address: str
    ) -> WithdrawResponse:
        """Withdraw coins to an external address (needs withdraw rights)."""
        ...

    @abstractmethod
    async def create_coupon_auth(
        self,
        key: str,
        secret: str,
        currency: str,
        amount: Number,
        receiver: str | None = None,
    ) -> CouponResponse:
        """Create a redeemable coupon (needs coupon rights)."""
        ...

    @abstractmethod
    async def redeem_coupon_auth(
        self, key: str, secret: str, coupon: str
    ) -> RedeemResponse:
        """Redeem a coupon into the account balance."""
        ...
