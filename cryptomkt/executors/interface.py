"""Abstract interface for HTTP executors.

This module defines the abstract base class that all HTTP executor
implementations must follow, enabling pluggable transport layers.
"""

from abc import ABC, abstractmethod

from cryptomkt.types import Headers, Params


class HttpResponse:
    """Container for HTTP response data.

    Encapsulates the status code, raw body text, and headers from an HTTP response.
    """

    status: int
    body: str
    headers: dict[str, str] | None

    __slots__ = ("status", "body", "headers")

    def __init__(
        self,
        *,
        status: int,
        body: str = "",
        headers: dict[str, str] | None = None,
    ) -> None:
        """Initialize an HTTP response object.

        Args:
            status: The HTTP status code of the response.
            body: The raw response body as text.
            headers: Optional HTTP response headers as key-value pairs.

        """
        self.status = status
        self.body = body
        self.headers = headers

    def __repr__(self) -> str:
        return f"HttpResponse(status={self.status!r}, body={self.body[:200]!r})"


class HttpExecutor(ABC):
    """Abstract base class for HTTP request executors.

    An executor performs exactly one HTTP round trip per call and reports the
    status and raw body of whatever the server answered. It never raises for
    an HTTP status; network level failures are raised as
    cryptomkt.errors.TransportError subclasses.
    """

    @abstractmethod
    def get(self, url: str, headers: Headers) -> HttpResponse:
        """Send a GET request.

        Args:
            url: Absolute URL, query string included.
            headers: Headers to send with the request.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...

    @abstractmethod
    def post(self, url: str, headers: Headers, payload: Params) -> HttpResponse:
        """Send a POST request with a URL-encoded form body.

        Args:
            url: Absolute URL, without query string.
            headers: Headers to send with the request.
            payload: Form fields.

        Returns:
            An HttpResponse object containing the status, body, and headers.

        """
        ...
