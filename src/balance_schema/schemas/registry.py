"""
Named schemas, as referenced from the CLI and the configuration.
"""

from typing import Dict, Type

from pydantic import BaseModel

from balance_schema.exceptions import UnknownSchema
from balance_schema.schemas.balances import AllBalanceResponse, BalanceResponse
from balance_schema.schemas.coin import Coin

SCHEMAS: Dict[str, Type[BaseModel]] = {
    "coin": Coin,
    "balance_response": BalanceResponse,
    "all_balance_response": AllBalanceResponse,
}


def get_schema(name: str) -> Type[BaseModel]:
    try:
        return SCHEMAS[name]
    except KeyError:
        raise UnknownSchema(name) from None
