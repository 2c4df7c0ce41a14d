"""Helper utilities for the CryptoMkt Python SDK.

This module contains constants and utility functions for object construction,
response deserialization and display formatting.
"""

import inspect
import logging
from dataclasses import asdict, is_dataclass
from enum import Enum
from functools import lru_cache
from types import NoneType, UnionType
from typing import (
    Any,
    Callable,
    Dict,
    TypeVar,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

import orjson
from prettyprinter import cpprint

from cryptomkt.errors import MalformedResource
from cryptomkt.types import JsonValue, Pagination, Response

log = logging.getLogger(__name__)


# ============================================================================
# CONSTANTS
# ============================================================================

DEFAULT_DOMAIN: str = "https://api.cryptomkt.com/"
API_VERSION: str = "v1"
DEFAULT_TIMEOUT: float = 10.0


# ============================================================================
# CLIENT IDENTIFICATION
# ============================================================================


@lru_cache(maxsize=1)
def get_cryptomkt_client() -> str:
    """Get the CryptoMkt client identification string."""
    import cryptomkt

    return f"CryptoMktPythonSDK/{cryptomkt.__version__}"


# ============================================================================
# REFLECTION UTILITIES
# ============================================================================


@lru_cache(maxsize=32)
def _required_fields(signature: inspect.Signature) -> list[str]:
    """Extract list of required parameter names from a function signature.

    Returns parameter names that have no default value and are positional
    or keyword parameters.
    """
    return [
        name
        for name, param in signature.parameters.items()
        if param.default is inspect.Parameter.empty
        and param.kind
        in (
            inspect.Parameter.POSITIONAL_ONLY,
            inspect.Parameter.POSITIONAL_OR_KEYWORD,
            inspect.Parameter.KEYWORD_ONLY,
        )
    ]


@lru_cache(maxsize=32)
def _required_nullable_fields(signature: inspect.Signature) -> list[str]:
    """Return names of parameters that are required and whose annotation allows None."""
    required_nullable: list[str] = []
    for name, param in signature.parameters.items():
        if name not in _required_fields(signature):
            continue

        ann = param.annotation
        if ann is inspect.Parameter.empty:
            continue

        if ann is NoneType or NoneType in get_args(ann):
            required_nullable.append(name)

    return required_nullable


@lru_cache(maxsize=None)
def _field_types(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


# ============================================================================
# OBJECT CONSTRUCTION
# ============================================================================

T = TypeVar("T")


def create_with(
    func: Callable[..., T], data: Dict[str, Any], *, implicit_null: bool = False
) -> T:
    """Create an object from a dictionary, filtering to only valid parameters.

    This allows constructing objects from API responses that may contain
    additional fields beyond what the constructor expects, making the SDK
    more resilient to API changes.

    Args:
        func: Constructor or factory function to call
        data: Dictionary of data to pass as kwargs
        implicit_null: If True, add explicit None values for required nullable fields

    Returns:
        Instance created by calling func with filtered data

    """
    sig = inspect.signature(func)
    valid_keys = sig.parameters.keys()
    filtered_data = {k: v for k, v in data.items() if k in valid_keys}
    if implicit_null:
        missing_fields = (
            field
            for field in _required_nullable_fields(sig)
            if field not in filtered_data
        )
        filtered_data.update({field: None for field in missing_fields})

    return func(**filtered_data)


def build_value(tp: Any, value: JsonValue) -> Any:
    """Convert a decoded JSON value into an instance of ``tp``.

    Supports ``Any``, ``str``, ``int``, ``float``, ``bool``, ``None``,
    ``list[X]``, ``dict[str, X]``, unions, Enum subclasses and dataclasses.
    Dataclasses ignore unknown keys and fall back to their defaults for
    absent ones. Numbers are never accepted where a ``str`` is expected, so
    monetary strings cannot silently go through a float.

    Raises:
        TypeError: If the value does not fit the requested type
        ValueError: If an Enum does not know the value

    """
    if tp is Any:
        return value

    origin, args = get_origin(tp), get_args(tp)

    if origin is Union or origin is UnionType:
        if value is None:
            if NoneType in args:
                return None
            raise TypeError(f"null is not allowed for {tp}")
        for arg in args:
            if arg is NoneType:
                continue
            try:
                return build_value(arg, value)
            except (TypeError, ValueError):
                continue
        raise TypeError(f"{value!r} does not match any of {tp}")

    if origin is list:
        if not isinstance(value, list):
            raise TypeError(f"Expected a list, got {type(value).__name__}")
        (item_type,) = args or (Any,)
        return [build_value(item_type, item) for item in value]

    if origin is dict:
        if not isinstance(value, dict):
            raise TypeError(f"Expected an object, got {type(value).__name__}")
        _, item_type = args or (str, Any)
        return {k: build_value(item_type, v) for k, v in value.items()}

    if is_dataclass(tp) and isinstance(tp, type):
        if not isinstance(value, dict):
            raise TypeError(
                f"Expected an object for {tp.__name__}, got {type(value).__name__}"
            )
        field_types = _field_types(tp)
        converted = {
            k: build_value(field_types[k], v)
            for k, v in value.items()
            if k in field_types
        }
        return create_with(tp, converted, implicit_null=True)

    if isinstance(tp, type) and issubclass(tp, Enum):
        return tp(value)

    if tp is NoneType:
        if value is not None:
            raise TypeError(f"Expected null, got {value!r}")
        return None

    if tp is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)

    if tp in (str, int, float, bool):
        if isinstance(value, bool) and tp is not bool:
            raise TypeError(f"Expected {tp.__name__}, got bool")
        if not isinstance(value, tp):
            raise TypeError(f"Expected {tp.__name__}, got {type(value).__name__}")
        return value

    raise TypeError(f"Unsupported target type {tp!r}")


# ============================================================================
# DESERIALIZATION
# ============================================================================


def deserialize_response(response_body: str | bytes, url: str) -> JsonValue:
    """Deserialize a JSON response body.

    Args:
        response_body: Response text to deserialize
        url: URL that was requested (for error messages)

    Returns:
        Deserialized JSON value

    Raises:
        MalformedResource: If the body is not valid JSON

    """
    try:
        return orjson.loads(response_body)  # type: ignore[no-any-return]
    except orjson.JSONDecodeError as e:
        log.warning("Response from %s is not valid JSON: %s", url, e)
        raise MalformedResource(
            f"Failed to parse JSON response from {url}: {e}"
        ) from e


def decode_envelope(
    response_body: str | bytes, data_type: Any, url: str
) -> Response[Any]:
    """Decode a raw response body into a ``Response`` envelope.

    The envelope must be a JSON object with a string ``status`` and a
    ``data`` member; ``data`` is converted to ``data_type`` with
    build_value. ``pagination`` is optional.

    Args:
        response_body: Raw response text
        data_type: Expected type of the ``data`` member, e.g. ``list[Ticker]``
        url: URL that was requested (for error messages)

    Returns:
        Response with typed data

    Raises:
        MalformedResource: If the body is not JSON or does not have the expected shape

    """
    body = deserialize_response(response_body, url)
    try:
        if not isinstance(body, dict):
            raise TypeError(f"Expected an object, got {type(body).__name__}")
        status = build_value(str, body["status"])
        data = build_value(data_type, body["data"])
        raw_pagination = body.get("pagination")
        pagination = (
            None
            if raw_pagination is None
            else build_value(Pagination, raw_pagination)
        )
    except (TypeError, KeyError, ValueError) as e:
        log.warning(
            "Response from %s does not match %s: %r", url, _type_name(data_type), e
        )
        raise MalformedResource(
            f"Received invalid response from {url} for {_type_name(data_type)}: {e!r}"
        ) from e

    return Response(status=status, data=data, pagination=pagination)


def _type_name(tp: Any) -> str:
    return tp.__name__ if isinstance(tp, type) else str(tp)


# ============================================================================
# DISPLAY UTILITIES
# ============================================================================


def print_data(response: Any) -> None:
    """Pretty-print response data, handling dataclasses specially.

    Dataclass instances are converted to dictionaries before printing
    for better formatting.

    Args:
        response: Data to print

    """
    if is_dataclass(response) and not isinstance(response, type):
        cpprint(asdict(response))
    elif isinstance(response, list):
        cpprint([asdict(item) if is_dataclass(item) else item for item in response])
    else:
        cpprint(response)
