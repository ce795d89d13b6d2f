"""
Generation of the JSON Schema documents describing our response formats.
These files are the published contract for producers and consumers of
balance queries.
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Type, Union

from pydantic import BaseModel

import balance_schema.toolkit.json as balance_json
from balance_schema.schemas.registry import SCHEMAS

logger = logging.getLogger(__name__)


def to_snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def schema_for(model: Type[BaseModel]) -> Dict[str, Any]:
    schema = model.model_json_schema()
    schema["$schema"] = "https://json-schema.org/draft/2020-12/schema"
    return schema


def export_schema(model: Type[BaseModel], out_dir: Union[str, Path]) -> Path:
    schema = schema_for(model)

    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / f"{to_snake_case(schema['title'])}.json"
    path.write_bytes(balance_json.dumps(schema, indent=True) + b"\n")

    logger.info("Created %s", path)
    return path


def export_all(out_dir: Union[str, Path]) -> List[Path]:
    return [export_schema(model, out_dir) for model in SCHEMAS.values()]
