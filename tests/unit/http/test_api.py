"""Tests for the request dispatcher."""

from typing import Any

import pytest

import cryptomkt.signature
from cryptomkt import CryptoMktApi, RequestMethod
from cryptomkt.errors import MissingCredentialsError, ValidationError
from cryptomkt.executors.interface import HttpResponse
from cryptomkt.signature import (
    API_KEY_HEADER,
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    sign,
)
from cryptomkt.types import MarketName
from tests.mock_executors import MockHttpExecutor, MockSuccessfulOutput, ok
from tests.unit.conftest import SECRET_KEY, load_body


def test_default_domain_and_version():
    api = CryptoMktApi(executor=MockHttpExecutor())

    assert api.domain == "https://api.cryptomkt.com/"
    assert api.api_version == "v1"
    assert api.api_key is None


def test_domain_gets_trailing_slash():
    api = CryptoMktApi(executor=MockHttpExecutor(), domain="http://localhost:8080")

    assert api.build_url("market", {}) == "http://localhost:8080/v1/market"


def test_build_url_without_params(mock_api):
    api, _ = mock_api

    assert api.build_url("market", {}) == "https://api.cryptomkt.com/v1/market"


def test_build_url_sorts_query(mock_api):
    api, _ = mock_api

    url = api.build_url("book", {"type": "buy", "market": "ETHCLP", "page": "0"})

    assert url == "https://api.cryptomkt.com/v1/book?market=ETHCLP&page=0&type=buy"


def test_build_url_encodes_values(mock_api):
    api, _ = mock_api

    url = api.build_url("payment/orders", {"start_date": "01/02/2018"})

    assert url.endswith("payment/orders?start_date=01%2F02%2F2018")


@pytest.mark.parametrize("endpoint", ["", "/market"])
def test_build_url_rejects_invalid_endpoint(mock_api, endpoint):
    api, _ = mock_api

    with pytest.raises(ValidationError):
        api.build_url(endpoint, {})


def test_build_url_rejects_non_string_params(mock_api):
    api, _ = mock_api

    with pytest.raises(ValidationError) as exc_info:
        api.build_url("book", {"page": 0})  # type: ignore[dict-item]

    assert "Parameters must be strings" in str(exc_info.value)


def test_public_headers_are_empty(mock_api):
    api, _ = mock_api

    assert api.build_headers("ticker", {"market": "ETHCLP"}, True, True) == {}


def test_private_headers(mock_api, monkeypatch):
    api, _ = mock_api
    monkeypatch.setattr(cryptomkt.signature, "time", lambda: 1525053829)

    headers = api.build_headers("orders/active", {"market": "ETHCLP"}, False, True)

    assert list(headers) == [API_KEY_HEADER, SIGNATURE_HEADER, TIMESTAMP_HEADER]
    assert headers[API_KEY_HEADER] == "FS24FJ7"
    assert headers[TIMESTAMP_HEADER] == "1525053829"
    assert headers[SIGNATURE_HEADER] == (
        "eb2dfb910f14efee5184000c228ba095cd40ff4db24a1dfd9c52977478b9739b"
        "4409b6bc85a2fd6cdfd5c2361092c4b1"
    )


def test_private_headers_without_api_key():
    api = CryptoMktApi(secret_key=SECRET_KEY, executor=MockHttpExecutor())

    with pytest.raises(MissingCredentialsError) as exc_info:
        api.build_headers("balance", {}, False, True)

    assert "API key is not set" in str(exc_info.value)


def test_private_headers_without_secret_key():
    api = CryptoMktApi(api_key="FS24FJ7", executor=MockHttpExecutor())

    with pytest.raises(MissingCredentialsError) as exc_info:
        api.build_headers("balance", {}, False, True)

    assert exc_info.value.credential_type == "Secret key"


def test_private_call_without_credentials_sends_nothing():
    mock_http = MockHttpExecutor()
    api = CryptoMktApi(executor=mock_http)

    with pytest.raises(MissingCredentialsError):
        api.call(RequestMethod.GET, "balance", {}, Any)

    assert mock_http.call_log == []


def test_public_call_without_credentials():
    mock_http = MockHttpExecutor()
    api = CryptoMktApi(executor=mock_http)
    mock_http.stage_output(
        ok(
            load_body("response.market"),
            call_validation=lambda call: call.function_name == "get"
            and call.arg_pack == ("https://api.cryptomkt.com/v1/market", {}),
        )
    )

    response = api.call(
        RequestMethod.GET, "market", {}, list[MarketName], is_public=True
    )

    assert response.status == "success"
    assert response.data == ["ETHARS", "ETHCLP"]
    assert response.pagination is None


def test_get_call_signs_without_params(mock_api, monkeypatch):
    api, mock_http = mock_api
    monkeypatch.setattr(cryptomkt.signature, "time", lambda: 1525053829)
    mock_http.stage_output(
        ok(
            load_body("response.orders_active"),
            call_validation=lambda call: call.function_name == "get"
            and call.arg_pack[0]
            == "https://api.cryptomkt.com/v1/orders/active?limit=20&market=ETHCLP&page=0"
            and call.arg_pack[1][TIMESTAMP_HEADER] == "1525053829",
        )
    )

    api.call(
        RequestMethod.GET,
        "orders/active",
        {"market": "ETHCLP", "page": "0", "limit": "20"},
        Any,
    )

    _, headers = mock_http.call_log[0].arg_pack
    assert headers[SIGNATURE_HEADER] == sign(
        "1525053829/v1/orders/active", SECRET_KEY
    )


def test_post_call_signs_form_values(mock_api, monkeypatch):
    api, mock_http = mock_api
    monkeypatch.setattr(cryptomkt.signature, "time", lambda: 1525055728)
    payload = {"amount": "0.3", "market": "ethclp", "price": "10000", "type": "buy"}
    mock_http.stage_output(
        ok(
            load_body("response.order_create"),
            call_validation=lambda call: call.function_name == "post"
            and call.arg_pack[0] == "https://api.cryptomkt.com/v1/orders/create"
            and call.arg_pack[2] == payload,
        )
    )

    api.call(RequestMethod.POST, "orders/create", payload, Any)

    _, headers, _ = mock_http.call_log[0].arg_pack
    assert headers[SIGNATURE_HEADER] == (
        "08ec7ce100a196d36970a77f7eee46c2e319e03edb953b0c05e5e9605b5c0d95"
        "cc7759f1a074f817f54527f618e90a1e"
    )


def test_post_is_always_private():
    mock_http = MockHttpExecutor()
    api = CryptoMktApi(executor=mock_http)

    with pytest.raises(MissingCredentialsError):
        api.post_edge("orders/cancel", {"id": "M1"}, Any)

    assert mock_http.call_log == []


def test_post_rejects_non_string_payload(mock_api):
    api, mock_http = mock_api

    with pytest.raises(ValidationError):
        api.call(RequestMethod.POST, "orders/cancel", {"id": 1}, Any)  # type: ignore[dict-item]

    assert mock_http.call_log == []


def test_call_dispatches_on_method(mock_api):
    api, mock_http = mock_api
    mock_http.stage_output(
        [
            MockSuccessfulOutput(
                output=HttpResponse(status=200, body='{"status":"success","data":1}'),
                call_validation=lambda call: call.function_name == "get",
            ),
            MockSuccessfulOutput(
                output=HttpResponse(status=200, body='{"status":"success","data":2}'),
                call_validation=lambda call: call.function_name == "post",
            ),
        ]
    )

    assert api.call(RequestMethod.GET, "x", {}, int).data == 1
    assert api.call(RequestMethod.POST, "x", {}, int).data == 2


def test_credentials_are_read_only(mock_api):
    api, _ = mock_api

    with pytest.raises(AttributeError):
        api.api_key = "other"  # type: ignore[misc]
