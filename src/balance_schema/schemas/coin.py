from typing import List

from pydantic import BaseModel, ConfigDict, Field

from balance_schema.types.uint128 import Uint128, format_uint128


class Coin(BaseModel):
    """
    An amount of a fungible asset, identified by its denomination.

    `amount` is only accepted as a decimal string, even from Python. As
    `model_dump()` returns it as an int, round-trips must go through JSON:
    `Coin.model_validate(c.model_dump(mode="json"))`. Use `coin()` to build
    a coin from an int.
    """

    model_config = ConfigDict(frozen=True)

    denom: str
    amount: Uint128 = Field(
        description="The amount of the asset, in the smallest unit of the denomination."
    )

    def __str__(self):
        return f"{self.amount}{self.denom}"


def coin(amount: int, denom: str) -> Coin:
    """
    Builds a coin from a Python int. Raises a ValueError if the amount
    does not fit in a uint128.
    """
    return Coin(denom=denom, amount=format_uint128(amount))


def coins(amount: int, denom: str) -> List[Coin]:
    return [coin(amount, denom)]
