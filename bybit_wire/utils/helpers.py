"""
Common utility functions used across the wire layer.

These helpers handle edge cases from exchange API payloads.
"""

import time
from decimal import Decimal
from typing import Any


def now_ms() -> int:
    """Local wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


def blank_to_none(value: Any) -> Any:
    """
    Treat empty or whitespace-only strings as absent.

    Bybit sends "" instead of null for many optional numbers and enums
    (avgPrice on a flat position, side on an empty slot, ...).
    """
    if isinstance(value, str) and not value.strip():
        return None
    return value


def json_kind(value: Any) -> str:
    """Name the JSON shape of a decoded value: object, array, string, ..."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float, Decimal)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def preview(value: Any, limit: int = 200) -> str:
    """Shorten a payload's repr for log lines."""
    text = repr(value)
    if limit > 0 and len(text) > limit:
        return text[:limit] + "..."
    return text
