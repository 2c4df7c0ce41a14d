"""Request dispatcher for the CryptoMkt REST API.

This module provides the CryptoMktApi class, which owns the credentials,
builds URLs and authentication headers, performs a single HTTP round trip
through an HttpExecutor and decodes the response envelope into the type the
caller asks for.
"""

import logging
from typing import Any, TypeVar
from urllib.parse import urlencode

import orjson

from cryptomkt.errors import (
    BadHttpStatus,
    BadRequest,
    Forbidden,
    Gone,
    InternalServerError,
    MethodNotAllowed,
    MissingCredentialsError,
    NotAcceptable,
    NotFound,
    ServiceUnavailable,
    Teapot,
    TooManyRequests,
    Unauthorized,
    ValidationError,
)
from cryptomkt.executors import DEFAULT_HTTP_EXECUTOR, HttpExecutor
from cryptomkt.executors.interface import HttpResponse
from cryptomkt.helpers import API_VERSION, DEFAULT_DOMAIN, decode_envelope
from cryptomkt.signature import build_signature_payload, signed_headers
from cryptomkt.types import Headers, Params, RequestMethod, Response

log = logging.getLogger(__name__)

T = TypeVar("T")

_STATUS_ERRORS: dict[int, tuple[type[BadHttpStatus], str]] = {
    401: (Unauthorized, "Unauthorized"),
    403: (Forbidden, "Forbidden"),
    404: (NotFound, "Not found"),
    405: (MethodNotAllowed, "Method not allowed"),
    406: (NotAcceptable, "Not acceptable"),
    410: (Gone, "Gone"),
    418: (Teapot, "I'm a teapot"),
    429: (TooManyRequests, "Too many requests"),
    500: (InternalServerError, "Internal server error"),
    503: (ServiceUnavailable, "Service unavailable"),
}


def _error_message(body: str) -> str:
    """Extract a readable message from an error response body."""
    try:
        parsed = orjson.loads(body)
    except orjson.JSONDecodeError:
        return body.strip()[:200] or "<no error message>"

    if isinstance(parsed, dict):
        status = parsed.get("status")
        message = parsed.get("message")
        if message is not None:
            return f"{status}: {message}" if status is not None else str(message)
    return str(parsed)


def raise_response_errors(response: HttpResponse, url: str = "") -> None:
    """Check HTTP response status and raise the matching error.

    2XX statuses return silently. Known statuses map to a dedicated
    BadHttpStatus subclass and every other status to BadRequest.

    Args:
        response: The HTTP response to validate
        url: The requested URL, used for logging

    Raises:
        Unauthorized: For 401 status codes
        Forbidden: For 403 status codes
        NotFound: For 404 status codes
        MethodNotAllowed: For 405 status codes
        NotAcceptable: For 406 status codes
        Gone: For 410 status codes
        Teapot: For 418 status codes
        TooManyRequests: For 429 status codes
        InternalServerError: For 500 status codes
        ServiceUnavailable: For 503 status codes
        BadRequest: For any other non-2XX status code

    """
    status = response.status

    if 200 <= status < 300:
        return

    error_message = _error_message(response.body)
    log.warning("Request to %s failed with status %d: %s", url, status, error_message)

    error_class, label = _STATUS_ERRORS.get(
        status, (BadRequest, f"Request failed ({status})")
    )
    raise error_class(status, f"{label}: {error_message}")


class CryptoMktApi:
    """Low level access to the CryptoMkt API.

    Every call is a single synchronous round trip: no retries, no caching.
    Credentials are fixed at construction, so an instance can be shared as
    long as its executor is reentrant.

    Examples:
        .. code-block:: python

            from cryptomkt import CryptoMktApi, RequestMethod

            api = CryptoMktApi("<API Key>", "<Secret Key>")
            markets = api.call(RequestMethod.GET, "market", {}, list[str], is_public=True)
            print(markets.data)

    """

    def __init__(
        self,
        api_key: str | None = None,
        secret_key: str | None = None,
        executor: HttpExecutor | None = None,
        domain: str = DEFAULT_DOMAIN,
    ):
        """Initialize the API dispatcher.

        Args:
            api_key: API key, sent verbatim in the X-MKT-APIKEY header
            secret_key: Secret used to sign private requests, never sent
            executor: Custom HTTP executor (optional, uses default if not provided)
            domain: Base URL of the API, with trailing slash

        """
        self._api_key = api_key
        self._secret_key = secret_key
        self._domain = domain if domain.endswith("/") else f"{domain}/"
        self._api_version = API_VERSION
        self._http_executor = (
            executor if executor is not None else DEFAULT_HTTP_EXECUTOR()
        )

    def __repr__(self) -> str:
        return (
            f"CryptoMktApi(domain={self._domain!r}, "
            f"api_version={self._api_version!r})"
        )

    @property
    def domain(self) -> str:
        return self._domain

    @property
    def api_version(self) -> str:
        return self._api_version

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def executor(self) -> HttpExecutor:
        return self._http_executor

    def build_url(self, endpoint: str, params: Params) -> str:
        """Build the absolute URL of an endpoint.

        Args:
            endpoint: Relative endpoint, e.g. "orders/active"
            params: Query parameters, encoded sorted by name

        Returns:
            str: ``<domain><version>/<endpoint>[?<query>]``

        Raises:
            ValidationError: If the endpoint starts with a slash or a
                parameter value is not a string

        """
        self.__check_request(endpoint, params)
        url = f"{self._domain}{self._api_version}/{endpoint}"
        if params:
            url += "?" + urlencode(sorted(params.items()))
        return url

    def build_headers(
        self, endpoint: str, payload: Params, is_public: bool, is_get: bool
    ) -> Headers:
        """Build the headers of a request.

        Public requests carry no authentication headers. Private requests
        carry the API key, the signature and the timestamp embedded in the
        signed string.

        Raises:
            MissingCredentialsError: If a private request is built without credentials

        """
        if is_public:
            return {}
        if self._api_key is None:
            raise MissingCredentialsError("API key")
        if self._secret_key is None:
            raise MissingCredentialsError("Secret key")
        signature_payload = build_signature_payload(
            endpoint, payload, is_get, self._api_version
        )
        return signed_headers(signature_payload, self._api_key, self._secret_key)

    def get_edge(
        self,
        endpoint: str,
        params: Params,
        data_type: type[T] | Any,
        is_public: bool = False,
    ) -> Response[T]:
        """Send a GET request and decode the response.

        Args:
            endpoint: Relative endpoint, e.g. "ticker"
            params: Query parameters
            data_type: Expected type of the response ``data`` member
            is_public: Public endpoints are sent without authentication headers

        Returns:
            Response[T]: The decoded envelope

        Raises:
            BadHttpStatus: Subclass matching a non-2XX status or network failure
            MalformedResource: If the body does not decode into ``data_type``
            ValidationError: If the request is invalid

        """
        url = self.build_url(endpoint, params)
        headers = self.build_headers(endpoint, params, is_public, True)
        log.debug("GET %s (%s)", endpoint, "public" if is_public else "private")
        response = self._http_executor.get(url, headers)
        raise_response_errors(response, url)
        return decode_envelope(response.body, data_type, url)

    def post_edge(
        self,
        endpoint: str,
        payload: Params,
        data_type: type[T] | Any,
    ) -> Response[T]:
        """Send a private POST request with ``payload`` as form body and decode the response.

        Raises:
            BadHttpStatus: Subclass matching a non-2XX status or network failure
            MalformedResource: If the body does not decode into ``data_type``
            ValidationError: If the request is invalid

        """
        self.__check_request(endpoint, payload)
        url = self.build_url(endpoint, {})
        headers = self.build_headers(endpoint, payload, False, False)
        log.debug("POST %s (private)", endpoint)
        response = self._http_executor.post(url, headers, payload)
        raise_response_errors(response, url)
        return decode_envelope(response.body, data_type, url)

    def call(
        self,
        method: RequestMethod,
        endpoint: str,
        payload: Params,
        data_type: type[T] | Any,
        *,
        is_public: bool = False,
    ) -> Response[T]:
        """Make a request to the CryptoMkt API.

        Args:
            method: RequestMethod.GET or RequestMethod.POST
            endpoint: Relative endpoint, e.g. "orders/create"
            payload: Request parameters
            data_type: Expected type of the response ``data`` member,
                e.g. ``list[Ticker]``
            is_public: Only meaningful for GET; POST is always private

        Returns:
            Response[T]: The decoded envelope

        Example:
            .. code-block:: python

                resp = api.call(RequestMethod.GET, "balance", {}, list[Balance])
                for balance in resp.data:
                    print(balance.wallet, balance.available)

        """
        if method is RequestMethod.GET:
            return self.get_edge(endpoint, payload, data_type, is_public)
        if method is RequestMethod.POST:
            return self.post_edge(endpoint, payload, data_type)
        raise ValidationError(f"Unexpected request method {method!r}")

    """ Private helpers """

    def __check_request(self, endpoint: str, params: Params) -> None:
        """Validate an endpoint and its parameters before anything is sent.

        Raises:
            ValidationError: If the endpoint is empty or absolute, or a
                parameter name or value is not a string

        """
        if not endpoint or endpoint.startswith("/"):
            raise ValidationError(
                f"Endpoint must be a non-empty relative path, got {endpoint!r}"
            )
        for key, value in params.items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise ValidationError(
                    f"Parameters must be strings, got {key!r}={value!r}"
                )
