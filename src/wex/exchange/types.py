"""Response records for the WEX Trade API.

All monetary values use Decimal. Never use float for balances, rates or amounts.
Timestamps are Unix seconds exactly as the exchange sends them.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import IntEnum
from typing import Any, Literal


def to_decimal(value: Any) -> Decimal:
    """Convert a JSON number (or numeric string) to Decimal without float artifacts."""
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_funds(raw: dict | None) -> dict[str, Decimal]:
    """Convert a ``funds`` mapping (currency -> balance) to Decimal balances."""
    return {currency: to_decimal(balance) for currency, balance in (raw or {}).items()}


class OrderStatus(IntEnum):
    """Order status codes reported by ActiveOrders and OrderInfo."""

    ACTIVE = 0
    EXECUTED = 1
    CANCELLED = 2
    CANCELLED_PARTIALLY_EXECUTED = 3


def parse_status(value: Any) -> "OrderStatus | int":
    """Map a status code to OrderStatus, keeping unknown codes as plain ints."""
    code = int(value)
    try:
        return OrderStatus(code)
    except ValueError:
        return code


@dataclass
class Rights:
    """Permissions granted to the API key."""

    info: bool = False
    trade: bool = False
    withdraw: bool = False

    @classmethod
    def from_dict(cls, data: dict | None) -> "Rights":
        data = data or {}
        return cls(
            info=bool(data.get("info", 0)),
            trade=bool(data.get("trade", 0)),
            withdraw=bool(data.get("withdraw", 0)),
        )


@dataclass
class AccountInfo:
    """Balances, key rights and counters returned by getInfo."""

    funds: dict[str, Decimal]
    rights: Rights
    transaction_count: int
    open_orders: int
    server_time: int

    @classmethod
    def from_dict(cls, data: dict) -> "AccountInfo":
        return cls(
            funds=parse_funds(data.get("funds")),
            rights=Rights.from_dict(data.get("rights")),
            transaction_count=int(data.get("transaction_count", 0)),
            open_orders=int(data.get("open_orders", 0)),
            server_time=int(data.get("server_time", 0)),
        )


@dataclass
class Order:
    """An order as reported by ActiveOrders or OrderInfo.

    ``start_amount`` is only sent by OrderInfo. ``status`` is an OrderStatus
    for known codes and the raw int otherwise.
    """

    order_id: str
    pair: str
    type: str
    amount: Decimal
    rate: Decimal
    timestamp_created: int
    status: OrderStatus | int
    start_amount: Decimal | None = None

    @classmethod
    def from_dict(cls, order_id: str, data: dict) -> "Order":
        start_amount = data.get("start_amount")
        return cls(
            order_id=str(order_id),
            pair=data["pair"],
            type=data["type"],
            amount=to_decimal(data.get("amount")),
            rate=to_decimal(data.get("rate")),
            timestamp_created=int(data.get("timestamp_created", 0)),
            status=parse_status(data.get("status", 0)),
            start_amount=None if start_amount is None else to_decimal(start_amount),
        )


@dataclass
class OrderResponse:
    """Result of Trade or CancelOrder.

    CancelOrder only reports ``order_id`` and ``funds``; ``received`` and
    ``remains`` stay at zero for it. A Trade that executes fully returns
    ``order_id`` 0.
    """

    order_id: int
    received: Decimal = Decimal("0")
    remains: Decimal = Decimal("0")
    funds: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "OrderResponse":
        return cls(
            order_id=int(data.get("order_id", 0)),
            received=to_decimal(data.get("received")),
            remains=to_decimal(data.get("remains")),
            funds=parse_funds(data.get("funds")),
        )


@dataclass
class Trade:
    """A single executed trade from TradeHistory."""

    trade_id: str
    pair: str
    type: str
    amount: Decimal
    rate: Decimal
    order_id: int
    is_your_order: bool
    timestamp: int

    @classmethod
    def from_dict(cls, trade_id: str, data: dict) -> "Trade":
        return cls(
            trade_id=str(trade_id),
            pair=data["pair"],
            type=data["type"],
            amount=to_decimal(data.get("amount")),
            rate=to_decimal(data.get("rate")),
            order_id=int(data.get("order_id", 0)),
            is_your_order=bool(data.get("is_your_order", 0)),
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass
class Transaction:
    """A single balance movement from TransHistory.

    ``type`` is the exchange's numeric code (1 deposit, 2 withdrawal,
    4/5 credit/debit) and ``status`` its numeric state (2 completed).
    """

    transaction_id: str
    type: int
    amount: Decimal
    currency: str
    desc: str
    status: int
    timestamp: int

    @classmethod
    def from_dict(cls, transaction_id: str, data: dict) -> "Transaction":
        return cls(
            transaction_id=str(transaction_id),
            type=int(data.get("type", 0)),
            amount=to_decimal(data.get("amount")),
            currency=data.get("currency", ""),
            desc=data.get("desc", ""),
            status=int(data.get("status", 0)),
            timestamp=int(data.get("timestamp", 0)),
        )


@dataclass
class WithdrawResponse:
    """Result of WithdrawCoin."""

    transaction_id: int
    amount_sent: Decimal
    funds: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "WithdrawResponse":
        return cls(
            transaction_id=int(data.get("tId", 0)),
            amount_sent=to_decimal(data.get("amountSent")),
            funds=parse_funds(data.get("funds")),
        )


@dataclass
class CouponResponse:
    """Result of CreateCoupon."""

    coupon: str
    transaction_id: int
    funds: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "CouponResponse":
        return cls(
            coupon=data.get("coupon", ""),
            transaction_id=int(data.get("transID", 0)),
            funds=parse_funds(data.get("funds")),
        )


@dataclass
class RedeemResponse:
    """Result of RedeemCoupon."""

    coupon_amount: Decimal
    coupon_currency: str
    transaction_id: int
    funds: dict[str, Decimal] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict) -> "RedeemResponse":
        return cls(
            coupon_amount=to_decimal(data.get("couponAmount")),
            coupon_currency=data.get("couponCurrency", ""),
            transaction_id=int(data.get("transID", 0)),
            funds=parse_funds(data.get("funds")),
        )


@dataclass
class HistoryFilter:
    """Optional query parameters for TradeHistory and TransHistory.

    Unset options are omitted from the request so the exchange applies
    its own defaults (1000 records, newest first).

    Attributes:
        from_: Number of records to skip (sent as ``from``).
        count: Number of records to return.
        from_id: First record id to include.
        end_id: Last record id to include.
        order: Sort direction, "ASC" or "DESC".
        since: Start time, Unix seconds.
        end: End time, Unix seconds.
    """

    from_: int | None = None
    count: int | None = None
    from_id: int | None = None
    end_id: int | None = None
    order: Literal["ASC", "DESC"] | None = None
    since: int | None = None
    end: int | None = None

    def __post_init__(self) -> None:
        if self.order is not None and self.order not in ("ASC", "DESC"):
            raise ValueError(f"order must be 'ASC' or 'DESC', got {self.order!r}")
        for name in ("from_", "count", "from_id", "end_id", "since", "end"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def to_params(self) -> dict[str, str]:
        """Return the set options keyed by their wire names."""
        wire = {
            "from": self.from_,
            "count": self.count,
            "from_id": self.from_id,
            "end_id": self.end_id,
            "order": self.order,
            "since": self.since,
            "end": self.end,
        }
        return {key: str(value) for key, value in wire.items() if value is not None}
