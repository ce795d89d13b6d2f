import pytest

from balance_schema.types.uint128 import (
    UINT128_MAX,
    InvalidUint128,
    Uint128Overflow,
    format_uint128,
    parse_uint128,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("0", 0),
        ("12345", 12345),
        ("007", 7),
        ("340282366920938463463374607431768211455", UINT128_MAX),
    ],
)
def test_parse_uint128(value: str, expected: int):
    assert parse_uint128(value) == expected


@pytest.mark.parametrize(
    "value",
    ["", "-5", "1.5", "abc", "+1", " 1", "1\n", "1e3", "0x10", "١٢٣", 12, None],
)
def test_parse_invalid_uint128(value):
    with pytest.raises(InvalidUint128) as exc_info:
        parse_uint128(value)

    assert not isinstance(exc_info.value, Uint128Overflow)


def test_parse_uint128_overflow():
    with pytest.raises(Uint128Overflow) as exc_info:
        parse_uint128(str(UINT128_MAX + 1))

    assert str(exc_info.value) == f"'{UINT128_MAX + 1}' exceeds uint128 range"


def test_uint128_errors_are_value_errors():
    assert issubclass(InvalidUint128, ValueError)
    assert issubclass(Uint128Overflow, InvalidUint128)


def test_format_uint128():
    assert format_uint128(0) == "0"
    assert format_uint128(UINT128_MAX) == "340282366920938463463374607431768211455"


@pytest.mark.parametrize("value", [-1, UINT128_MAX + 1])
def test_format_uint128_out_of_range(value: int):
    with pytest.raises(Uint128Overflow):
        format_uint128(value)


@pytest.mark.parametrize("value", [True, 1.0, "1"])
def test_format_uint128_not_an_int(value):
    with pytest.raises(InvalidUint128):
        format_uint128(value)


def test_parse_uint128_huge_overflow():
    """
    Strings longer than what int() accepts must still be reported as overflows.
    """
    value = "9" * 5000
    with pytest.raises(Uint128Overflow):
        parse_uint128(value)


def test_parse_uint128_long_zero_padding():
    assert parse_uint128("0" * 5000 + "1") == 1
    assert parse_uint128("0" * 5000) == 0
    assert parse_uint128("0" * 5000 + str(UINT128_MAX)) == UINT128_MAX


def test_parse_uint128_one_digit_too_many():
    with pytest.raises(Uint128Overflow):
        parse_uint128("1" + "0" * 39)
