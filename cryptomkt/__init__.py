"""Python client for the CryptoMkt exchange REST API."""

from importlib.metadata import PackageNotFoundError, version

from cryptomkt.api import CryptoMktApi, raise_response_errors
from cryptomkt.client import CryptoMktClient
from cryptomkt.executors import (
    DEFAULT_HTTP_EXECUTOR,
    HttpExecutor,
    HttpResponse,
    HttpxHttpExecutor,
    RequestsHttpExecutor,
)
from cryptomkt.helpers import print_data
from cryptomkt.market import Market
from cryptomkt.signature import build_signature_payload, sign
from cryptomkt.types import (
    Amount,
    Balance,
    Book,
    Order,
    OrdersInstant,
    OrderState,
    OrderType,
    Pagination,
    Payment,
    RequestMethod,
    Response,
    Ticker,
    Trade,
)


def get_version() -> str:
    """Return the installed version of the package."""
    try:
        return version("cryptomkt")
    except PackageNotFoundError:
        return "0.0.0+unknown"


__version__ = get_version()

__all__ = [
    "Amount",
    "Balance",
    "Book",
    "CryptoMktApi",
    "CryptoMktClient",
    "DEFAULT_HTTP_EXECUTOR",
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "Market",
    "Order",
    "OrderState",
    "OrderType",
    "OrdersInstant",
    "Pagination",
    "Payment",
    "RequestMethod",
    "RequestsHttpExecutor",
    "Response",
    "Ticker",
    "Trade",
    "build_signature_payload",
    "get_version",
    "print_data",
    "raise_response_errors",
    "sign",
]
