"""WEX Trade API client implementation over httpx.

Signs each call with the key pair passed in (or the stored pair for the
non-``_auth`` variants), posts it to the trading endpoint, and decodes
the ``{success, return, error}`` envelope.

Exchange failures are raised as TradeError with the literal message.
Network errors, non-2xx responses (httpx.HTTPStatusError) and invalid
JSON propagate unchanged. Nothing is retried.
"""

import asyncio
from decimal import Decimal, InvalidOperation
from typing import Any

import httpx

from wex.config import WexSettings
from wex.exceptions import MalformedResponseError, MissingCredentialsError, TradeError
from wex.exchange.client import Number, TradeClient
from wex.exchange.signing import NonceGenerator, encode_body, sign_body
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
from wex.logging import get_logger

logger = get_logger(__name__)

TRADE_DIRECTIONS = ("buy", "sell")


def _positive(name: str, value: Number) -> Decimal:
    """Validate and convert an amount or rate to a positive Decimal."""
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"{name} must be a number, got {value!r}") from None
    if not number.is_finite() or number <= 0:
        raise ValueError(f"{name} must be positive, got {value!r}")
    return number


def _require(name: str, value: str | int | None) -> str:
    if value is None or str(value).strip() == "":
        raise ValueError(f"{name} must not be empty")
    return str(value)


class TradeAPI(TradeClient):
    """Concrete Trade API client using httpx async.

    Args:
        settings: Endpoint, timeout and optional default credentials.
        client: Pre-built httpx.AsyncClient (tests inject one with a
            MockTransport). When omitted the client builds and owns its own.
        nonce: Nonce source; share one between clients using the same key.
    """

    def __init__(
        self,
        settings: WexSettings | None = None,
        client: httpx.AsyncClient | None = None,
        nonce: NonceGenerator | None = None,
    ) -> None:
        self._settings = settings or WexSettings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=self._settings.timeout,
            headers={"User-Agent": self._settings.user_agent},
        )
        self._nonce = nonce or NonceGenerator()
        # Nonce issue and delivery must happen in the same order
        self._request_lock = asyncio.Lock()

        self._key = self._settings.api_key.get_secret_value()
        self._secret = self._settings.api_secret.get_secret_value()

    @property
    def nonce(self) -> NonceGenerator:
        return self._nonce

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "TradeAPI":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    # ------------------------------------------------------------------
    # Request plumbing
    # ------------------------------------------------------------------

    async def _call(
        self, key: str, secret: str, method: str, params: dict[str, Any] | None = None
    ) -> dict:
        """Sign and send one Trade API call, returning the decoded ``return`` object."""
        async with self._request_lock:
            nonce = self._nonce.next()
            body = encode_body(method, nonce, params)
            headers = {
                "Key": key,
                "Sign": sign_body(secret, body),
                "Content-Type": "application/x-www-form-urlencoded",
            }
            logger.debug("tapi_request", method=method, nonce=nonce)
            response = await self._client.post(
                self._settings.tapi_url, content=body, headers=headers
            )

        response.raise_for_status()
        payload = response.json(parse_float=Decimal)
        return self._unwrap(method, payload)

    @staticmethod
    def _unwrap(method: str, payload: Any) -> dict:
        """Extract the ``return`` object from an envelope or raise TradeError."""
        if not isinstance(payload, dict):
            raise MalformedResponseError(
                f"{method}: expected a JSON object, got {type(payload).__name__}"
            )

        if not payload.get("success"):
            message = str(payload.get("error") or "")
            logger.info("tapi_error", method=method, error=message)
            raise TradeError(message)

        result = payload.get("return")
        # An empty PHP array serializes as [] rather than {}
        if result is None or result == []:
            return {}
        if not isinstance(result, dict):
            raise MalformedResponseError(
                f"{method}: expected 'return' to be an object, got {type(result).__name__}"
            )
        return result

    # ------------------------------------------------------------------
    # Authenticated operations
    # ------------------------------------------------------------------

    async def get_info_auth(self, key: str, secret: str) -> AccountInfo:
        result = await self._call(key, secret, "getInfo")
        return AccountInfo.from_dict(result)

    async def active_orders_auth(self, key: str, secret: str, pair: str) -> list[Order]:
        result = await self._call(
            key, secret, "ActiveOrders", {"pair": _require("pair", pair)}
        )
        return [Order.from_dict(order_id, data) for order_id, data in result.items()]

    async def trade_auth(
        self,
        key: str,
        secret: str,
        pair: str,
        direction: str,
        rate: Number,
        amount: Number,
    ) -> OrderResponse:
        if direction not in TRADE_DIRECTIONS:
            raise ValueError(f"direction must be 'buy' or 'sell', got {direction!r}")
        params = {
            "pair": _require("pair", pair),
            "type": direction,
            "rate": _positive("rate", rate),
            "amount": _positive("amount", amount),
        }
        logger.info(
            "placing_order",
            pair=pair,
            direction=direction,
            rate=str(params["rate"]),
            amount=str(params["amount"]),
        )
        result = await self._call(key, secret, "Trade", params)
        return OrderResponse.from_dict(result)

    async def order_info_auth(
        self, key: str, secret: str, order_id: str | int
    ) -> dict[str, Order]:
        result = await self._call(
            key, secret, "OrderInfo", {"order_id": _require("order_id", order_id)}
        )
        return {str(oid): Order.from_dict(oid, data) for oid, data in result.items()}

    async def cancel_order_auth(
        self, key: str, secret: str, order_id: str | int
    ) -> OrderResponse:
        logger.info("cancelling_order", order_id=order_id)
        result = await self._call(
            key, secret, "CancelOrder", {"order_id": _require("order_id", order_id)}
        )
        return OrderResponse.from_dict(result)

    async def trade_history_auth(
        self, key: str, secret: str, history_filter: HistoryFilter, pair: str | None = None
    ) -> list[Trade]:
        params: dict[str, Any] = dict(history_filter.to_params())
        if pair:
            params["pair"] = pair
        result = await self._call(key, secret, "TradeHistory", params)
        return [Trade.from_dict(trade_id, data) for trade_id, data in result.items()]

    async def transaction_history_auth(
        self, key: str, secret: str, history_filter: HistoryFilter
    ) -> list[Transaction]:
        result = await self._call(key, secret, "TransHistory", history_filter.to_params())
        return [
            Transaction.from_dict(transaction_id, data)
            for transaction_id, data in result.items()
        ]

    async def withdraw_coin_auth(
        self, key: str, secret: str, currency: str, amount: Number, address: str
    ) -> WithdrawResponse:
        params = {
            "coinName": _require("currency", currency),
            "amount": _positive("amount", amount),
            "address": _require("address", address),
        }
        logger.info("withdrawing_coin", currency=currency, amount=str(params["amount"]))
        result = await self._call(key, secret, "WithdrawCoin", params)
        return WithdrawResponse.from_dict(result)

    async def create_coupon_auth(
        self,
        key: str,
        secret: str,
        currency: str,
        amount: Number,
        receiver: str | None = None,
    ) -> CouponResponse:
        params = {
            "currency": _require("currency", currency),
            "amount": _positive("amount", amount),
            "receiver": receiver,
        }
        logger.info("creating_coupon", currency=currency, amount=str(params["amount"]))
        result = await self._call(key, secret, "CreateCoupon", params)
        return CouponResponse.from_dict(result)

    async def redeem_coupon_auth(
        self, key: str, secret: str, coupon: str
    ) -> RedeemResponse:
        result = await self._call(
            key, secret, "RedeemCoupon", {"coupon": _require("coupon", coupon)}
        )
        return RedeemResponse.from_dict(result)

    # ------------------------------------------------------------------
    # Stored-credential variants
    # ------------------------------------------------------------------

    def auth(self, key: str, secret: str) -> None:
        """Store a default key pair for the methods without the ``_auth`` suffix."""
        self._key = key
        self._secret = secret

    def _credentials(self) -> tuple[str, str]:
        if not self._key or not self._secret:
            raise MissingCredentialsError(
                "No API key/secret stored; call auth() or set WEX_API_KEY and WEX_API_SECRET"
            )
        return self._key, self._secret

    async def get_info(self) -> AccountInfo:
        return await self.get_info_auth(*self._credentials())

    async def active_orders(self, pair: str) -> list[Order]:
        return await self.active_orders_auth(*self._credentials(), pair)

    async def trade(
        self, pair: str, direction: str, rate: Number, amount: Number
    ) -> OrderResponse:
        return await self.trade_auth(*self._credentials(), pair, direction, rate, amount)

    async def order_info(self, order_id: str | int) -> dict[str, Order]:
        return await self.order_info_auth(*self._credentials(), order_id)

    async def cancel_order(self, order_id: str | int) -> OrderResponse:
        return await self.cancel_order_auth(*self._credentials(), order_id)

    async def trade_history(
        self, history_filter: HistoryFilter | None = None, pair: str | None = None
    ) -> list[Trade]:
        return await self.trade_history_auth(
            *self._credentials(), history_filter or HistoryFilter(), pair
        )

    async def transaction_history(
        self, history_filter: HistoryFilter | None = None
    ) -> list[Transaction]:
        return await self.transaction_history_auth(
            *self._credentials(), history_filter or HistoryFilter()
        )

    async def withdraw_coin(
        self, currency: str, amount: Number, address: str
    ) -> WithdrawResponse:
        return await self.withdraw_coin_auth(*self._credentials(), currency, amount, address)

    async def create_coupon(
        self, currency: str, amount: Number, receiver: str | None = None
    ) -> CouponResponse:
        return await self.create_coupon_auth(*self._credentials(), currency, amount, receiver)

    async def redeem_coupon(self, coupon: str) -> RedeemResponse:
        return await self.redeem_coupon_auth(*self._credentials(), coupon)
