"""Type definitions for the CryptoMkt Python SDK.

This module contains type definitions, enums, and dataclasses used throughout
the SDK, organized into logical sections for clarity.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeAlias, TypeVar

from cryptomkt.errors import ValidationError

# ============================================================================
# TYPE ALIASES
# ============================================================================

# JSON type hierarchy
JsonObject: TypeAlias = dict[str, "JsonValue"]
JsonArray: TypeAlias = list["JsonValue"]
JsonValue: TypeAlias = None | bool | int | float | str | JsonObject | JsonArray

# Request parameters: name -> value, sent as query string (GET) or form body (POST)
Params: TypeAlias = dict[str, str]

# Outgoing request headers, kept in insertion order
Headers: TypeAlias = dict[str, str]

# Market name, e.g. "ETHCLP"
MarketName: TypeAlias = str

# Pagination cursors are observed as numbers, strings (including the literal
# "null") or JSON null
PageCursor: TypeAlias = int | str | None

# Numeric inputs accepted by the facades
NumericInput: TypeAlias = Decimal | str | float | int


# ============================================================================
# NUMERIC CONVERSION UTILITIES
# ============================================================================

DECIMAL_PATTERN = re.compile(r"\d+(\.\d+)?")


def full_precision_string(n: NumericInput) -> str:
    """Convert a numeric input to a full precision string representation."""
    if isinstance(n, bool):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if isinstance(n, str):
        if not DECIMAL_PATTERN.fullmatch(n):
            raise ValidationError(f"Invalid numeric input {n}")
        return n
    if isinstance(n, (int, float)):
        n = Decimal(str(n))
    if not isinstance(n, Decimal):
        raise ValidationError(f"Invalid numeric input type {n} - {type(n)}")
    if not n.is_finite() or n < 0:
        raise ValidationError(f"Invalid numeric input {n}")
    return format(n, "f")


# ============================================================================
# CORE ENUMS
# ============================================================================


class RequestMethod(Enum):
    """HTTP methods supported by the API."""

    GET = "GET"
    POST = "POST"


class OrderType(Enum):
    """Order side."""

    BUY = "buy"
    SELL = "sell"


class OrderState(Enum):
    """Lifecycle stage used to list the user's orders."""

    ACTIVE = "active"
    EXECUTED = "executed"

    @property
    def endpoint(self) -> str:
        return f"orders/{self.value}"


# ============================================================================
# RESPONSE ENVELOPE
# ============================================================================


@dataclass
class Pagination:
    """Pagination block attached to list endpoints.

    ``previous`` and ``next`` are kept exactly as received. The exchange has
    been observed sending the string ``"null"`` instead of JSON null, so a
    string cursor is not necessarily a real page reference.
    """

    limit: int
    page: int
    previous: PageCursor = None
    next: PageCursor = None


T = TypeVar("T")


@dataclass
class Response(Generic[T]):
    """Envelope wrapping every API response.

    ``status`` is informational only: success or failure is decided by the
    HTTP status code and by the body decoding into the expected shape.
    """

    status: str
    data: T
    pagination: Pagination | None = None


# ============================================================================
# MARKET DATA TYPES
# ============================================================================


@dataclass
class Ticker:
    """High level overview of the state of a market."""

    high: str
    low: str
    ask: str
    bid: str
    last_price: str
    volume: str
    timestamp: str
    market: MarketName


@dataclass
class Book:
    """Single entry of the order book."""

    price: str
    amount: str
    timestamp: str


@dataclass
class Trade:
    """Trade executed on the exchange."""

    market_taker: str
    price: str
    amount: str
    timestamp: str
    market: MarketName
    tid: str | None = None


# ============================================================================
# ORDER TYPES
# ============================================================================


@dataclass
class Amount:
    """Order amounts.

    ``remaining`` is only sent while the order is active and ``executed``
    once it is partially or fully filled.
    """

    original: str = ""
    remaining: str | None = None
    executed: str | None = None


@dataclass
class Order:
    """Buy or sell order on the exchange market.

    Only ``type`` and ``amount`` are mandatory. The other identifying fields
    default to an empty string when the exchange leaves them out, and
    ``execution_price`` is passed through as sent (string, number or null).
    """

    type: str
    amount: Amount
    id: str = ""
    status: str = ""
    price: str = ""
    market: MarketName = ""
    execution_price: str | int | float | None = None
    avg_execution_price: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    executed_at: str | None = None


@dataclass
class OrdersInstant:
    """Quote for an Instant Exchange order.

    For a buy, ``obtained`` is the crypto amount received and ``required``
    the local currency spent; for a sell it is the other way around.
    ``required`` may be lower than requested depending on market liquidity.
    """

    obtained: str = ""
    required: str = ""


# ============================================================================
# ACCOUNT TYPES
# ============================================================================


@dataclass
class Balance:
    """State of a single wallet."""

    wallet: str
    available: str
    balance: str


@dataclass
class Payment:
    """Payment order."""

    id: int | str
    status: int | str
    external_id: str | None = None
    to_receive: str | None = None
    to_receive_currency: str | None = None
    expected_amount: str | None = None
    expected_currency: str | None = None
    deposit_address: str | None = None
    refund_email: str | None = None
    qr: str | None = None
    obs: str | None = None
    callback_url: str | None = None
    error_url: str | None = None
    success_url: str | None = None
    payment_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None


@dataclass
class PaymentOrderRequest:
    """Parameters of a new payment order."""

    to_receive: NumericInput
    to_receive_currency: str
    payment_receiver: str
    external_id: str | None = field(default=None)
    callback_url: str | None = field(default=None)
    error_url: str | None = field(default=None)
    success_url: str | None = field(default=None)
    refund_email: str | None = field(default=None)

    def to_params(self) -> Params:
        params = {
            "to_receive": full_precision_string(self.to_receive),
            "to_receive_currency": self.to_receive_currency,
            "payment_receiver": self.payment_receiver,
        }
        optional = {
            "external_id": self.external_id,
            "callback_url": self.callback_url,
            "error_url": self.error_url,
            "success_url": self.success_url,
            "refund_email": self.refund_email,
        }
        params.update({k: v for k, v in optional.items() if v is not None})
        return params
