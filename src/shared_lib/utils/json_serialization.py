"""Shared JSON serialization helpers.

Session exports and the ``/json`` command write parse payloads that may
contain Python objects not supported by the stdlib `json` module (pydantic
models, `datetime` timestamps, non-finite floats).

This module provides:
- `sanitize_for_json`: recursively converts objects into JSON-serializable types
- `json_default`: a `json.dumps(default=...)` compatible hook
- `json_dumps`: convenience wrapper around `json.dumps` using the default hook
"""

from __future__ import annotations

import json
import math
from datetime import date, datetime, timedelta
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel


def sanitize_for_json(obj: Any) -> Any:
    """Recursively convert *obj* to JSON-serializable primitives.

    Converts:
    - pydantic models -> their camelCase (alias) dump
    - datetime/date -> ISO-8601 strings
    - timedelta -> total seconds (float)
    - Path -> str
    - Enum -> value
    - NaN / infinity -> None

    Falls back to `str(obj)` for unknown objects.
    """

    if obj is None or isinstance(obj, (str, int, bool)):
        return obj

    if isinstance(obj, float):
        return obj if math.isfinite(obj) else None

    if isinstance(obj, BaseModel):
        return sanitize_for_json(obj.model_dump(by_alias=True))

    if isinstance(obj, (datetime, date)):
        return obj.isoformat()

    if isinstance(obj, timedelta):
        return obj.total_seconds()

    if isinstance(obj, Path):
        return str(obj)

    if isinstance(obj, Enum):
        return sanitize_for_json(obj.value)

    if isinstance(obj, (list, tuple, set)):
        return [sanitize_for_json(v) for v in obj]

    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items()}

    # Best-effort fallback
    return str(obj)


def json_default(obj: Any) -> Any:
    """Hook for `json.dumps(default=...)`.

    This function is called only for objects `json` doesn't know how to encode.
    """

    return sanitize_for_json(obj)


def json_dumps(data: Any, **kwargs: Any) -> str:
    """`json.dumps` wrapper that sanitizes *data* first."""

    if "default" not in kwargs:
        kwargs["default"] = json_default
    return json.dumps(sanitize_for_json(data), **kwargs)


__all__ = [
    "sanitize_for_json",
    "json_default",
    "json_dumps",
]
