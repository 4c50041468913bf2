from __future__ import annotations

import dataclasses
import json
from datetime import datetime
from typing import Any

from resource_id.kernel.ids import ResourceID
from resource_id.kernel.time import isoformat_z
from resource_id.kernel.ulid import Ulid


def to_jsonable(value: Any) -> Any:
    """Coerce identifier-bearing payloads into JSON-compatible primitives.

    Identifiers are emitted as their bare canonical text, never wrapped.
    This is intentionally explicit (and limited). If you need to serialize
    a new type, add a branch and tests.
    """
    if value is None:
        return None

    if isinstance(value, (str, int, float, bool)):
        return value

    if isinstance(value, (ResourceID, Ulid)):
        return str(value)

    if isinstance(value, datetime):
        return isoformat_z(value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)
        }

    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for (k, v) in value.items()}

    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]

    model_dump = getattr(value, "model_dump", None)
    if callable(model_dump):
        return to_jsonable(model_dump(mode="json"))

    raise TypeError(f"Unsupported type for JSON serialization: {type(value)!r}")


def json_dumps_canonical(value: Any) -> str:
    """Stable JSON encoding for hashing, caching keys, and logs."""
    return json.dumps(
        to_jsonable(value),
        ensure_ascii=False,
        sort_keys=True,
        separators=(",", ":"),
    )


def json_loads(value: str) -> Any:
    return json.loads(value)
