"""HTTP executor implementation using httpx.

This module provides HTTP request handling using the httpx library and is the
default transport of the CryptoMkt SDK.
"""

import logging
from typing import override

import httpx

from cryptomkt.errors import (
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from cryptomkt.executors.interface import HttpExecutor, HttpResponse
from cryptomkt.helpers import DEFAULT_TIMEOUT, get_cryptomkt_client
from cryptomkt.types import Headers, Params

log = logging.getLogger(__name__)


class HttpxHttpExecutor(HttpExecutor):
    """HTTP executor implementation using httpx.

    Provides synchronous HTTP request execution using a pooled httpx.Client.
    """

    def __init__(
        self,
        timeout: float | None = DEFAULT_TIMEOUT,
        client: httpx.Client | None = None,
    ):
        """Initialize the HTTPX HTTP executor.

        Args:
            timeout: Timeout in seconds applied to every request, None to disable.
            client: Optional preconfigured httpx.Client (e.g. with a mock transport).
                When omitted a new client is created and owned by the executor.

        """
        self.timeout = timeout
        self.client = client if client is not None else httpx.Client(timeout=timeout)
        self._owns_client = client is None

    @override
    def get(self, url: str, headers: Headers) -> HttpResponse:
        """Send a GET request.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        return self._send("GET", url, headers)

    @override
    def post(self, url: str, headers: Headers, payload: Params) -> HttpResponse:
        """Send a POST request with ``payload`` as URL-encoded form body.

        Raises:
            TransportTimeoutError: If the request times out.
            HttpConnectionError: If there is a connection or network error.
            TransportError: If any other transport-level error occurs.

        """
        return self._send("POST", url, headers, payload)

    def _send(
        self,
        method: str,
        url: str,
        headers: Headers,
        payload: Params | None = None,
    ) -> HttpResponse:
        request_headers = {"User-Agent": get_cryptomkt_client(), **headers}
        try:
            response = self.client.request(
                method,
                url,
                headers=request_headers,
                data=payload,
                timeout=self.timeout,
            )
        except httpx.TimeoutException as e:
            log.warning("%s %s timed out: %s", method, url, e)
            raise TransportTimeoutError(
                f"{method} request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except httpx.NetworkError as e:
            log.warning("%s %s failed to connect: %s", method, url, e)
            raise HttpConnectionError(
                f"Network error during {method} request", url=url
            ) from e
        except Exception as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )

    def close(self) -> None:
        """Close the underlying httpx client if the executor created it."""
        if self._owns_client:
            self.client.close()

    def __del__(self) -> None:
        """Cleanup the httpx client when the executor is destroyed."""
        if getattr(self, "_owns_client", False):
            self.client.close()
