"""
Deterministic JSON encoding for verification payloads.

Result payloads are encoded with sorted keys and no insignificant whitespace,
so the same verdict always produces the same bytes.
"""

import json
import math
from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel


class CanonicalizationError(ValueError):
    """Raised when a value cannot be encoded as canonical JSON."""

    pass


def _canonicalize_value(value: Any) -> str:
    """Recursively convert a Python value to its canonical JSON string representation."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _canonicalize_value(value.value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise CanonicalizationError(f"Non-finite number: {value}")
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonicalize_value(item) for item in value) + "]"
    if isinstance(value, dict):
        return _canonicalize_object(value)
    if isinstance(value, BaseModel):
        return _canonicalize_object(value.model_dump(mode="json"))

    raise CanonicalizationError(f"Unsupported type for canonicalization: {type(value)}")


def _canonicalize_object(obj: Dict[str, Any]) -> str:
    """Convert a dictionary to a canonical JSON object string."""
    items = []
    for key in sorted(obj):
        if not isinstance(key, str):
            raise CanonicalizationError(f"Dictionary keys must be strings, got {type(key).__name__}")
        items.append(f"{json.dumps(key, ensure_ascii=False)}:{_canonicalize_value(obj[key])}")
    return "{" + ",".join(items) + "}"


def canonicalize(data: Any) -> bytes:
    """
    Convert a Python object to canonical JSON bytes.

    Args:
        data: The object to encode (dict, list, primitive or pydantic model)

    Returns:
        bytes: The canonical JSON representation as UTF-8 bytes

    Raises:
        CanonicalizationError: If the input cannot be canonicalized
    """
    try:
        return _canonicalize_value(data).encode("utf-8")
    except CanonicalizationError:
        raise
    except (TypeError, ValueError) as e:
        raise CanonicalizationError(f"Failed to canonicalize data: {e}") from e


def canonical_json_dumps(data: Any) -> str:
    """Convert a Python object to a canonical JSON string."""
    return canonicalize(data).decode("utf-8")


__all__ = ["CanonicalizationError", "canonicalize", "canonical_json_dumps"]
