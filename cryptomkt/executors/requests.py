import logging
from typing import override

import requests

from cryptomkt.errors import (
    HttpConnectionError,
    TransportError,
    TransportTimeoutError,
)
from cryptomkt.executors.interface import HttpExecutor, HttpResponse
from cryptomkt.helpers import DEFAULT_TIMEOUT, get_cryptomkt_client
from cryptomkt.types import Headers, Params

log = logging.getLogger(__name__)


class RequestsHttpExecutor(HttpExecutor):
    def __init__(self, timeout: float | None = DEFAULT_TIMEOUT):
        self.timeout = timeout
        self.session = requests.Session()

    @override
    def get(self, url: str, headers: Headers) -> HttpResponse:
        return self._send("GET", url, headers)

    @override
    def post(self, url: str, headers: Headers, payload: Params) -> HttpResponse:
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
            response = self.session.request(
                method,
                url,
                headers=request_headers,
                data=payload,
                timeout=self.timeout,
            )
        except requests.Timeout as e:
            log.warning("%s %s timed out: %s", method, url, e)
            raise TransportTimeoutError(
                f"{method} request to {url} timed out", timeout_seconds=self.timeout
            ) from e
        except requests.ConnectionError as e:
            log.warning("%s %s failed to connect: %s", method, url, e)
            raise HttpConnectionError(f"Failed to connect to {url}", url=url) from e
        except Exception as e:
            log.warning("%s %s failed: %s", method, url, e)
            raise TransportError(f"{method} request to {url} failed: {e}") from e
        return HttpResponse(
            status=response.status_code,
            body=response.text,
            headers=dict(response.headers),
        )
