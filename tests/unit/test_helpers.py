from dataclasses import dataclass
from decimal import Decimal
from typing import Any

import pytest

from cryptomkt import Balance, OrderState, OrderType, print_data
from cryptomkt.errors import ValidationError
from cryptomkt.helpers import build_value, create_with, get_cryptomkt_client
from cryptomkt.types import Amount, full_precision_string


@dataclass
class Sample:
    name: str
    note: str | None
    count: int = 0


def test_create_with_ignores_unknown_keys():
    sample = create_with(Sample, {"name": "a", "note": "b", "extra": 1})

    assert sample == Sample(name="a", note="b")


def test_create_with_implicit_null():
    assert create_with(Sample, {"name": "a"}, implicit_null=True) == Sample(
        name="a", note=None
    )


def test_create_with_missing_required_field():
    with pytest.raises(TypeError):
        create_with(Sample, {"note": "b"}, implicit_null=True)


@pytest.mark.parametrize(
    "tp,value,expected",
    [
        (Any, {"a": [1]}, {"a": [1]}),
        (str, "0.3", "0.3"),
        (int, 3, 3),
        (float, 3, 3.0),
        (bool, True, True),
        (str | None, None, None),
        (int | str, "null", "null"),
        (int | str | None, 0, 0),
        (list[str], ["a", "b"], ["a", "b"]),
        (dict[str, int], {"a": 1}, {"a": 1}),
        (OrderType, "sell", OrderType.SELL),
        (Amount, {"original": "1"}, Amount(original="1")),
    ],
)
def test_build_value(tp, value, expected):
    assert build_value(tp, value) == expected


@pytest.mark.parametrize(
    "tp,value",
    [
        (str, 0.3),
        (str, None),
        (int, True),
        (int, "1"),
        (list[str], "a"),
        (dict[str, str], []),
        (Amount, "1"),
        (int | str, None),
        (type(None), 1),
        (bytes, b"a"),
    ],
)
def test_build_value_type_errors(tp, value):
    with pytest.raises(TypeError):
        build_value(tp, value)


def test_build_value_unknown_enum_value():
    with pytest.raises(ValueError):
        build_value(OrderType, "hold")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("0.3", "0.3"),
        (10000, "10000"),
        (0.1, "0.1"),
        (Decimal("1E-8"), "0.00000001"),
        (Decimal("159"), "159"),
    ],
)
def test_full_precision_string(value, expected):
    assert full_precision_string(value) == expected


@pytest.mark.parametrize(
    "value",
    ["1e5", "", " 1", "-0.1", "10\n", "0.3\n", "1.", -1, False, Decimal("inf"), None],
)
def test_full_precision_string_rejects(value):
    with pytest.raises(ValidationError):
        full_precision_string(value)


def test_order_state_endpoint():
    assert OrderState.ACTIVE.endpoint == "orders/active"
    assert OrderState.EXECUTED.endpoint == "orders/executed"


def test_client_identification():
    assert get_cryptomkt_client().startswith("CryptoMktPythonSDK/")


def test_print_data_dataclass(capsys):
    print_data(Balance(wallet="CLP", available="1", balance="2"))

    out = capsys.readouterr().out
    assert "wallet" in out
    assert "CLP" in out


def test_print_data_list(capsys):
    print_data([Balance(wallet="ETH", available="1", balance="2"), "raw"])

    out = capsys.readouterr().out
    assert "ETH" in out
    assert "raw" in out
