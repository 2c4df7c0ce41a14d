"""Exception hierarchy for the CryptoMkt SDK.

This module defines the public exception hierarchy for the entire SDK. All exceptions
raised by this library inherit from BaseError.

Exception Hierarchy
-------------------
BaseError
├── ExchangeError - API server rejected the request (or could not be reached)
│   └── BadHttpStatus - one subclass per known HTTP status
│       └── BadRequest - any other status, plus network level failures
│           └── TransportError - the request never got a response
├── MalformedResource - 2XX response whose body does not have the expected shape
└── ValidationError - Client-side input validation failures
"""


class BaseError(Exception):
    """Base exception for all CryptoMkt SDK errors.

    All exceptions raised by this library inherit from this class, allowing users
    to catch all SDK-related errors with a single except clause.

    This exception should not be raised directly. Use one of the specific subclasses
    instead (ExchangeError, MalformedResource, ValidationError).
    """

    pass


# ============================================================================
# EXCHANGE ERROR
# ============================================================================


class ExchangeError(BaseError):
    """Exception raised when a request did not produce a usable 2XX response.

    Either the server processed the request and answered with a non-2XX status,
    or the request could not be delivered at all (see TransportError).
    """

    pass


class BadHttpStatus(ExchangeError):
    """Raised when response status from exchange is not 2XX."""

    status_code: int | None
    message: str

    def __init__(self, status_code: int | None, message: str):
        """Initialize a BadHttpStatus error.

        Args:
            status_code: The HTTP status code returned by the server, or None
                when no response was received.
            message: Description of the HTTP error.

        """
        super().__init__(message)
        self.status_code = status_code
        self.message = message


## 4xx status errors


class Unauthorized(BadHttpStatus):
    """Raised when the server returns a 401 Unauthorized error (wrong API key)."""

    pass


class Forbidden(BadHttpStatus):
    """Raised when the server returns a 403 Forbidden error."""

    pass


class NotFound(BadHttpStatus):
    """Raised when the server returns a 404 Not Found error."""

    pass


class MethodNotAllowed(BadHttpStatus):
    """Raised when the server returns a 405 Method Not Allowed error."""

    pass


class NotAcceptable(BadHttpStatus):
    """Raised when the server returns a 406 Not Acceptable error."""

    pass


class Gone(BadHttpStatus):
    """Raised when the server returns a 410 Gone error."""

    pass


class Teapot(BadHttpStatus):
    """Raised when the server returns a 418 I'm a teapot error."""

    pass


class TooManyRequests(BadHttpStatus):
    """Raised when the server returns a 429 Too Many Requests error."""

    pass


## 5xx status errors


class InternalServerError(BadHttpStatus):
    """Raised when the server returns a 500 Internal Server Error."""

    pass


class ServiceUnavailable(BadHttpStatus):
    """Raised when the server returns a 503 Service Unavailable error (maintenance)."""

    pass


## everything else


class BadRequest(BadHttpStatus):
    """Raised for any non-2XX status without a dedicated class, including 400.

    Network level failures are also reported as BadRequest through the
    TransportError subclass.
    """

    pass


# ============================================================================
# TRANSPORT ERROR
# ============================================================================


class TransportError(BadRequest):
    """Exception raised when a request could not be carried to or from the API server.

    TransportError indicates that:
    - No HTTP status was received (status_code is always None)
    - The error occurred in the local stack or on the network
    - The error could be transient and may succeed on retry

    Common causes include DNS resolution failures, refused or dropped
    connections, TLS handshake failures and timeouts.
    """

    def __init__(self, message: str):
        """Initialize a TransportError.

        Args:
            message: Description of the transport failure.

        """
        super().__init__(None, message)


class HttpConnectionError(TransportError):
    """Raised when a connection cannot be established or is lost."""

    def __init__(self, message: str, url: str | None = None):
        """Initialize an HttpConnectionError.

        Args:
            message: Description of the connection error.
            url: The URL that failed to connect, if available.

        """
        self.url = url
        if url:
            super().__init__(f"{message} (url: {url})")
        else:
            super().__init__(message)


class TransportTimeoutError(TransportError):
    """Raised when a request or connection times out."""

    def __init__(self, message: str, timeout_seconds: float | None = None):
        """Initialize a TransportTimeoutError.

        Args:
            message: Description of the timeout error.
            timeout_seconds: The timeout duration in seconds, if available.

        """
        self.timeout_seconds = timeout_seconds
        if timeout_seconds:
            super().__init__(f"{message} (timeout: {timeout_seconds}s)")
        else:
            super().__init__(message)


# ============================================================================
# MALFORMED RESOURCE
# ============================================================================


class MalformedResource(BaseError):
    """Raised when a 2XX response body cannot be decoded into the expected shape.

    The server was reachable and accepted the request, but replied with
    something that is not JSON or does not match the expected envelope/data
    type. It is not an ExchangeError: the request itself succeeded.
    """

    def __init__(self, message: str):
        """Initialize a MalformedResource error.

        Args:
            message: Description of the decoding failure.

        """
        self.message = message
        super().__init__(message)


# ============================================================================
# VALIDATION ERROR
# ============================================================================


class ValidationError(BaseError):
    """Exception raised for client-side input validation failures.

    This exception is raised when input parameters fail validation checks before
    any request is sent to the API server.

    ValidationError indicates that:
    - No network request was attempted
    - The error is due to invalid input from the caller
    - The error can be fixed by correcting the input parameters
    """

    pass


class MissingCredentialsError(ValidationError):
    """Raised when required authentication credentials are missing."""

    def __init__(self, credential_type: str = "API key"):
        """Initialize a MissingCredentialsError.

        Args:
            credential_type: The type of credential that is missing (default: "API key").

        """
        self.credential_type = credential_type
        super().__init__(f"{credential_type} is not set")
