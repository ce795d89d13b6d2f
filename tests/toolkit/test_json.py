import json

import pytest

import balance_schema.toolkit.json as balance_json
from balance_schema.schemas.coin import coin


def test_loads():
    """
    A (simplistic) load test, as a sanity check.
    """

    expected = {"1": {"a": "b", "c": "d"}, "2": ["x", "y", "z"], "3": "world"}
    serialized_json = json.dumps(expected)

    actual = balance_json.loads(serialized_json)
    assert actual == expected


def test_loads_invalid_json():
    s = '{"1": "3"'
    with pytest.raises(balance_json.DecodeError):
        _ = balance_json.loads(s)


def test_reject_nans():
    """
    Test that the implementation rejects NaN as it is not part of the official
    JSON specification.
    """

    serialized_json = '{"1": 1, "2": 2, "3": NaN}'
    with pytest.raises(json.decoder.JSONDecodeError):
        _ = balance_json.loads(serialized_json)


def test_serialized_json_type():
    """
    Check that the output of dumps is of the announced type.
    """

    expected = {"1": "2", "3": {"4": "5"}}

    serialized_json = balance_json.dumps(expected)
    assert isinstance(serialized_json, balance_json.SerializedJson)

    actual = json.loads(serialized_json)
    assert actual == expected


def test_dumps_sorts_keys():
    assert balance_json.dumps({"b": 1, "a": 2}) == b'{"a":2,"b":1}'


def test_dumps_indent():
    serialized_json = balance_json.dumps({"a": {"b": 1}}, indent=True)
    assert serialized_json == b'{\n  "a": {\n    "b": 1\n  }\n}'


def test_dumps_large_ints():
    """
    Check that dumps does not raise TypeError errors caused by ints that do not
    fit in 64 bits with the orjson library.
    """

    expected = {"max": 2**128 - 1, "small": 1}

    serialized_json = balance_json.dumps(expected)
    assert isinstance(serialized_json, balance_json.SerializedJson)

    actual = json.loads(serialized_json)
    assert actual == expected


def test_dumps_pydantic_model_in_fallback():
    # The large int forces the fallback encoder, which must handle models too.
    obj = {"coin": coin(2**100, "uatom"), "total": 2**100}

    actual = json.loads(balance_json.dumps(obj))
    assert actual == {
        "coin": {"denom": "uatom", "amount": str(2**100)},
        "total": 2**100,
    }
