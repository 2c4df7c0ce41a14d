"""HTTP executor implementations.

This package provides pluggable HTTP client implementations for the CryptoMkt
SDK, backed by either httpx (default) or requests.
"""

from cryptomkt.executors.defaults import DEFAULT_HTTP_EXECUTOR
from cryptomkt.executors.httpx import HttpxHttpExecutor
from cryptomkt.executors.interface import HttpExecutor, HttpResponse
from cryptomkt.executors.requests import RequestsHttpExecutor

__all__ = [
    "HttpExecutor",
    "HttpResponse",
    "HttpxHttpExecutor",
    "RequestsHttpExecutor",
    "DEFAULT_HTTP_EXECUTOR",
]
