"""Request signing for the WEX Trade API.

Every private call is a form-encoded POST body of the shape
``method=<name>&nonce=<n>&<params...>``, signed with HMAC-SHA512 keyed
by the API secret. The hex digest goes in the ``Sign`` header and the
API key in the ``Key`` header.
"""

import hashlib
import hmac
import threading
import time
from decimal import Decimal
from urllib.parse import urlencode

from wex.exceptions import NonceExhaustedError

# The exchange accepts nonces in 1..4294967294 and rejects any nonce not
# greater than the last one it saw for the key.
MAX_NONCE = 4294967294


class NonceGenerator:
    """Issues strictly increasing nonces, seeded from the wall clock.

    Each nonce is ``max(last + 1, now)`` so restarts keep moving forward
    as long as fewer than one call per second was made on average.

    ``start`` is a lower bound, not the exact first value: with the real
    clock the first nonce is still the current Unix time when that is
    larger. Pass a fixed ``clock`` to get a deterministic sequence.
    """

    def __init__(self, start: int | None = None, clock=time.time) -> None:
        self._clock = clock
        self._last = (start - 1) if start is not None else 0
        self._lock = threading.Lock()

    @property
    def last(self) -> int:
        return self._last

    def next(self) -> int:
        with self._lock:
            nonce = max(self._last + 1, int(self._clock()))
            if nonce > MAX_NONCE:
                raise NonceExhaustedError(
                    f"Nonce {nonce} exceeds the exchange maximum {MAX_NONCE}"
                )
            self._last = nonce
            return nonce


def format_param(value: object) -> str:
    """Render a parameter value for the form body.

    Decimals and floats are written in plain notation (no exponent), so
    ``Decimal("1E-8")`` becomes ``0.00000001``.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, float):
        value = Decimal(str(value))
    if isinstance(value, Decimal):
        text = format(value, "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text or "0"
    return str(value)


def encode_body(method: str, nonce: int, params: dict | None = None) -> str:
    """Form-encode a request body with method and nonce first.

    Parameters whose value is None are dropped.
    """
    fields: list[tuple[str, str]] = [("method", method), ("nonce", str(nonce))]
    for key, value in (params or {}).items():
        if value is None:
            continue
        fields.append((key, format_param(value)))
    return urlencode(fields)


def sign_body(secret: str, body: str) -> str:
    """Return the lower-case hex HMAC-SHA512 of body keyed by secret."""
    return hmac.new(
        secret.encode("utf-8"), body.encode("utf-8"), hashlib.sha512
    ).hexdigest()
