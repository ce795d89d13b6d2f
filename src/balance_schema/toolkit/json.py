"""
An abstraction layer for JSON serialization/deserialization.
Makes swapping between JSON implementations easier.
"""

import json
from typing import Any, Union

import orjson
import pydantic

# The actual type of serialized JSON as returned by the JSON serializer.
SerializedJson = bytes

# All the possible types for serialized JSON. This type is useful to force functions
# to handle all possible cases when using serialized JSON as input in order to make
# serializer changes easier.
SerializedJsonInput = Union[bytes, str]

# Note: JSONDecodeError is a subclass of ValueError. orjson rejects NaN and Infinity
#       as they are not part of the JSON specification.
DecodeError = orjson.JSONDecodeError


def loads(s: SerializedJsonInput) -> Any:
    try:
        return orjson.loads(s)
    except TypeError:
        return json.loads(s)


def extended_json_encoder(obj: Any) -> Any:
    """
    Extended JSON encoder for dumping objects that contain pydantic models.
    """
    if isinstance(obj, pydantic.BaseModel):
        return obj.model_dump(mode="json")
    else:
        raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def dumps(obj: Any, sort_keys: bool = True, indent: bool = False) -> SerializedJson:
    opts = orjson.OPT_SORT_KEYS | orjson.OPT_NON_STR_KEYS if sort_keys else 0
    if indent:
        opts |= orjson.OPT_INDENT_2

    try:
        return orjson.dumps(obj, option=opts)
    except TypeError:
        # orjson refuses integers that do not fit in 64 bits
        return json.dumps(
            obj,
            default=extended_json_encoder,
            sort_keys=sort_keys,
            indent=2 if indent else None,
        ).encode()
