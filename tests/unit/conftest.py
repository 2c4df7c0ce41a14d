import logging
from pathlib import Path
from typing import Generator

import pytest

from cryptomkt import CryptoMktApi, CryptoMktClient
from tests.mock_executors import MockHttpExecutor, MockOutputNotExhausted

DATA_DIR = Path(__file__).parent.joinpath("data")

# Credentials used by the reference signatures published for the API
API_KEY = "FS24FJ7"
SECRET_KEY = "SFT23GSD"

log = logging.getLogger(__name__)


@pytest.fixture
def mock_api() -> Generator[tuple[CryptoMktApi, MockHttpExecutor], None, None]:
    mock_http = MockHttpExecutor()
    api = CryptoMktApi(
        api_key=API_KEY,
        secret_key=SECRET_KEY,
        # replace real network requests with our mock
        executor=mock_http,
    )

    yield (api, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


@pytest.fixture
def mock_client() -> Generator[tuple[CryptoMktClient, MockHttpExecutor], None, None]:
    mock_http = MockHttpExecutor()
    client = CryptoMktClient(
        api_key=API_KEY,
        secret_key=SECRET_KEY,
        executor=mock_http,
    )

    yield (client, mock_http)

    if len(mock_http.staged_outputs) > 0:
        raise MockOutputNotExhausted(mock_http.staged_outputs)


def load_body(name: str) -> str:
    """Load a raw response body exactly as the exchange sent it."""
    return DATA_DIR.joinpath(f"{name}.json").read_text(encoding="utf-8")
