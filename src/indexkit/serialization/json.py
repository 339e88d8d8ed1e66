"""
JSON serialization utilities for indexkit.

Store state is a plain mapping of collection names to lists of records, so
it serializes directly to JSON. The encoder here additionally copes with the
values test payloads commonly carry (UUIDs, datetimes, decimals, pydantic
models) so that diagnostics never fail to render.

Example:
    >>> from indexkit.serialization import json_dumps, json_loads
    >>>
    >>> state = {"events": [{"blockNumber": 1, "data": {"amount": 100}}]}
    >>> json_loads(json_dumps(state)) == state
    True
"""

import json
from datetime import date, datetime
from decimal import Decimal
from pathlib import Path
from typing import Any
from uuid import UUID

from pydantic import BaseModel


class IndexKitJSONEncoder(json.JSONEncoder):
    """
    Custom JSON encoder for values found in event payloads.

    Conversions:
    - UUID: string representation
    - datetime / date: ISO 8601 string
    - Decimal: string, to avoid float rounding
    - pydantic BaseModel: ``model_dump(mode="json")``
    - set / frozenset / tuple: list
    """

    def default(self, obj: Any) -> Any:
        """
        Convert non-serializable objects to JSON-serializable formats.

        Raises:
            TypeError: If object type is not supported
        """
        if isinstance(obj, UUID):
            return str(obj)
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Decimal):
            return str(obj)
        if isinstance(obj, BaseModel):
            return obj.model_dump(mode="json")
        if isinstance(obj, (set, frozenset)):
            return list(obj)
        return super().default(obj)


def json_dumps(obj: Any, *, indent: int | None = None) -> str:
    """
    Serialize object to a JSON string using IndexKitJSONEncoder.

    Key order is preserved so that rendered state reads in collection
    creation order.

    Args:
        obj: Object to serialize
        indent: Optional indentation for pretty printing

    Returns:
        JSON string representation
    """
    return json.dumps(obj, cls=IndexKitJSONEncoder, indent=indent)


def json_loads(s: str) -> Any:
    """
    Deserialize JSON string to Python object.

    UUID and datetime strings are NOT converted back to their original
    types.
    """
    return json.loads(s)


def dump_state(state: dict[str, list[Any]], path: str | Path) -> None:
    """
    Write store state to a JSON fixture file.

    Args:
        state: State as returned by ``get_state()``
        path: Destination file path
    """
    Path(path).write_text(json_dumps(state, indent=2) + "\n", encoding="utf-8")


def load_state(path: str | Path) -> dict[str, Any]:
    """
    Read store state from a JSON fixture file.

    The result is suitable for ``set_state()`` or ``assert_state()``.

    Raises:
        TypeError: If the file does not hold a JSON object
    """
    state = json_loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(state, dict):
        raise TypeError(f"State fixture {path} must contain a JSON object, got {type(state).__name__}")
    return state


__all__ = [
    "IndexKitJSONEncoder",
    "json_dumps",
    "json_loads",
    "dump_state",
    "load_state",
]
