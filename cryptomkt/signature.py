"""Request signing for private CryptoMkt endpoints.

Private requests carry three headers: the API key, a timestamp and an
HMAC-SHA384 signature over ``<timestamp>/<version>/<endpoint>``, followed for
POST requests by the parameter values sorted by parameter name. The server
rebuilds the same string from the timestamp header, so the timestamp is
generated together with the payload and never reused.
"""

import hmac
from hashlib import sha384
from time import time

from cryptomkt.helpers import API_VERSION
from cryptomkt.types import Headers, Params

API_KEY_HEADER = "X-MKT-APIKEY"
SIGNATURE_HEADER = "X-MKT-SIGNATURE"
TIMESTAMP_HEADER = "X-MKT-TIMESTAMP"


def build_signature_payload(
    endpoint: str,
    params: Params,
    is_get: bool,
    api_version: str = API_VERSION,
) -> str:
    """Build the string to sign for a private request.

    Args:
        endpoint: Relative endpoint, e.g. "orders/create"
        params: Request parameters
        is_get: Parameter values are only signed for non-GET requests
        api_version: API version segment

    Returns:
        ``<unix seconds>/<api_version>/<endpoint>[<values sorted by key>]``

    """
    payload = f"{int(time())}/{api_version}/{endpoint}"
    if not is_get:
        payload += "".join(params[key] for key in sorted(params))
    return payload


def sign(message: str, secret_key: str) -> str:
    """Return the lowercase hex HMAC-SHA384 of ``message`` keyed by ``secret_key``."""
    return hmac.new(secret_key.encode(), message.encode(), sha384).hexdigest()


def timestamp_of(payload: str) -> str:
    """Return the timestamp a signature payload was built with."""
    return payload.split("/", 1)[0]


def signed_headers(payload: str, api_key: str, secret_key: str) -> Headers:
    """Build the authentication header triple for a signature payload."""
    return {
        API_KEY_HEADER: api_key,
        SIGNATURE_HEADER: sign(payload, secret_key),
        TIMESTAMP_HEADER: timestamp_of(payload),
    }
