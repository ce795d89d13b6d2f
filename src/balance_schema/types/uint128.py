"""
128-bit unsigned integers, as exchanged in JSON documents.

JSON numbers cannot safely carry values above 2^53 in most implementations,
so these integers travel as decimal digit strings. In memory they are plain
Python ints.
"""

import re
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema
from pydantic_core import PydanticCustomError

UINT128_MAX = 2**128 - 1

UINT128_PATTERN = re.compile(r"[0-9]+")

# Number of decimal digits of UINT128_MAX.
UINT128_MAX_DIGITS = len(str(UINT128_MAX))


class InvalidUint128(ValueError):
    def __init__(self, value: Any):
        super().__init__(value)
        self.value = value

    def __str__(self):
        return f"'{self.value}' is not a valid uint128"


class Uint128Overflow(InvalidUint128):
    def __str__(self):
        return f"'{self.value}' exceeds uint128 range"


def parse_uint128(value: str) -> int:
    """
    Parses a decimal digit string into an int in [0, 2^128 - 1].
    Leading zeros are accepted, signs, whitespace and non-ASCII digits are not.
    """

    if not isinstance(value, str) or UINT128_PATTERN.fullmatch(value) is None:
        raise InvalidUint128(value)

    # int() refuses strings of more than 4300 digits on recent CPython versions.
    significant_digits = value.lstrip("0") or "0"
    if len(significant_digits) > UINT128_MAX_DIGITS:
        raise Uint128Overflow(value)

    number = int(significant_digits)
    if number > UINT128_MAX:
        raise Uint128Overflow(value)

    return number


def format_uint128(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidUint128(value)
    if value < 0 or value > UINT128_MAX:
        raise Uint128Overflow(value)

    return str(value)


def _validate_uint128(value: Any) -> int:
    # JSON numbers are refused, only the string encoding is part of the format.
    if not isinstance(value, str):
        raise PydanticCustomError(
            "uint128_type", "expected a string-encoded uint128"
        )

    try:
        return parse_uint128(value)
    except Uint128Overflow as e:
        raise PydanticCustomError("uint128_overflow", "exceeds uint128 range") from e
    except InvalidUint128 as e:
        raise PydanticCustomError("uint128_format", "not a valid uint128") from e


Uint128 = Annotated[
    int,
    PlainValidator(_validate_uint128),
    PlainSerializer(format_uint128, return_type=str, when_used="json"),
    WithJsonSchema(
        {
            "type": "string",
            "description": "A 128-bit unsigned integer encoded as a decimal string.",
            "pattern": "^[0-9]+$",
        }
    ),
]
