from typing import List

from pydantic import BaseModel, ConfigDict, Field

from balance_schema.schemas.coin import Coin


class BalanceResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: Coin = Field(
        description="Always returns a Coin with the requested denom. "
        "This may be of 0 amount if no such funds."
    )


class AllBalanceResponse(BaseModel):
    model_config = ConfigDict(frozen=True)

    amount: List[Coin] = Field(
        description="Returns all non-zero coins held by this account."
    )
