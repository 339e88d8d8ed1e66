"""
Serialization utilities for indexkit.

JSON rendering of store state for diagnostics and state fixture files.

Example:
    >>> from indexkit.serialization import json_dumps, load_state
    >>> print(json_dumps({"events": []}))
    {"events": []}
"""

from indexkit.serialization.json import (
    IndexKitJSONEncoder,
    dump_state,
    json_dumps,
    json_loads,
    load_state,
)

__all__ = [
    "IndexKitJSONEncoder",
    "json_dumps",
    "json_loads",
    "dump_state",
    "load_state",
]
