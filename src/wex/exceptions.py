"""Custom exceptions for the WEX Trade API client.

Exchange-reported failures are all raised as TradeError carrying the
literal error text from the response envelope. Transport failures
(httpx.HTTPError) and JSON decode failures are never wrapped and
propagate from the client unchanged.
"""

import re

# Literal error strings the exchange returns for expected outcomes
NO_ORDERS = "no orders"
NO_TRADES = "no trades"
NO_TRANSACTIONS = "no transactions"
INVALID_ORDER = "invalid order"
BAD_STATUS = "bad status"
NO_WITHDRAW_PERMISSION = "api key dont have withdraw permission"
NO_COUPON_PERMISSION = "api key dont have coupon permission"

_EMPTY_RESULT_MESSAGES = frozenset({NO_ORDERS, NO_TRADES, NO_TRANSACTIONS})
_PERMISSION_MESSAGES = frozenset({NO_WITHDRAW_PERMISSION, NO_COUPON_PERMISSION})
_NOT_ENOUGH_FUNDS = re.compile(r"^It is not enough \w+ for (purchase|sale)$")


def not_enough_funds(currency: str, action: str = "purchase") -> str:
    """Return the exchange's insufficient-funds message for a currency.

    >>> not_enough_funds("usd")
    'It is not enough USD for purchase'
    """
    return f"It is not enough {currency.upper()} for {action}"


class WexError(Exception):
    """Base exception for all client errors."""


class TradeError(WexError):
    """Error reported by the exchange in the ``error`` field of a response.

    Two TradeErrors are equal when their messages are equal, so callers
    can compare against ``TradeError(NO_ORDERS)`` directly.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TradeError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"TradeError({self.message!r})"

    @property
    def is_empty_result(self) -> bool:
        """True for "no orders", "no trades" and "no transactions"."""
        return self.message in _EMPTY_RESULT_MESSAGES

    @property
    def is_permission_denied(self) -> bool:
        return self.message in _PERMISSION_MESSAGES

    @property
    def is_insufficient_funds(self) -> bool:
        return bool(_NOT_ENOUGH_FUNDS.match(self.message))


class MissingCredentialsError(WexError):
    """Raised when a call needs stored credentials but none were configured."""


class NonceExhaustedError(WexError):
    """Raised when the next nonce would exceed the exchange's allowed range."""


class MalformedResponseError(WexError):
    """Raised when a response is valid JSON but not a result envelope."""
