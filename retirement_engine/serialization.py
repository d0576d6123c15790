"""JSON serialization for engine results.

Uses ``model_dump(mode="json")`` for Decimal handling: amounts become strings,
and the infinite payback sentinel becomes "Infinity" so it survives a round
trip instead of collapsing to null.
"""

from __future__ import annotations

from typing import Any, TypeVar

import orjson
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def to_payload(result: BaseModel, by_alias: bool = True) -> dict[str, Any]:
    """Dump a result model to JSON-compatible primitives.

    Args:
        result: Any engine request or result model.
        by_alias: Use camelCase keys (default) rather than snake_case.

    Returns:
        Dict containing only JSON-native types.
    """
    return result.model_dump(mode="json", by_alias=by_alias)


def to_json(result: BaseModel, by_alias: bool = True) -> str:
    """Serialize a result model to a JSON string using orjson."""
    return orjson.dumps(to_payload(result, by_alias=by_alias)).decode("utf-8")


def from_json(model: type[ModelT], json_str: str | bytes) -> ModelT:
    """Deserialize a JSON string back into a model.

    Validates all fields through Pydantic model construction.

    Raises:
        pydantic.ValidationError: If the JSON data fails model validation.
    """
    return model.model_validate(orjson.loads(json_str))
