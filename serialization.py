"""
Serialization utility module for standardized JSON conversion.

This module turns arbitrary configuration objects into the structured
value representation the registry stores: None, bool, int, float, str,
lists and string-keyed dicts. It handles common types and supports
objects with a custom to_dict() method, pydantic models and dataclasses.

Simplified datetime handling:
- Datetimes and dates are converted to ISO format strings
"""

import dataclasses
import datetime
import enum
import json
import uuid
from pathlib import PurePath
from typing import Any

from pydantic import BaseModel

from errors import SerializationError


def to_json(obj: Any, indent: int = 2, **kwargs) -> str:
    """
    Serialize an object to JSON.

    Handles objects with to_dict() methods and common Python types like
    datetime.

    Args:
        obj: Object to serialize
        indent: Number of spaces for indentation (default: 2)
        **kwargs: Additional arguments to pass to json.dumps()

    Returns:
        JSON string representation of the object
    """
    return json.dumps(obj, indent=indent, default=_json_serializer, **kwargs)


def to_structured(obj: Any) -> Any:
    """
    Convert an object to its structured (JSON data model) form.

    The result shares nothing with the input, so later mutation of the
    input cannot reach a value stored from it.

    Args:
        obj: Object to convert

    Returns:
        The structured value

    Raises:
        SerializationError: If the object holds non-finite floats, cycles,
            unsupported types or keys that cannot become strings
    """
    try:
        return json.loads(to_json(obj, indent=None, allow_nan=False))
    except (TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Value of type {type(obj).__name__} cannot be converted to a structured value: {e}",
            details={"value_type": type(obj).__name__, "original_error": str(e)}
        ) from e


def _json_serializer(obj: Any) -> Any:
    """
    Custom JSON serializer for handling non-JSON-serializable objects.

    Args:
        obj: Object to serialize

    Returns:
        JSON-serializable representation of the object
    """
    # Pydantic models carry their own JSON rendering
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")

    # Handle objects with to_dict() method
    if hasattr(obj, 'to_dict'):
        return obj.to_dict()

    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)

    if isinstance(obj, enum.Enum):
        return obj.value

    # Handle datetime objects
    if isinstance(obj, datetime.datetime):
        # Convert to ISO format string
        return obj.isoformat()

    # Handle date objects
    if isinstance(obj, datetime.date):
        return obj.isoformat()

    # Handle UUID objects
    if isinstance(obj, uuid.UUID):
        return str(obj)

    if isinstance(obj, PurePath):
        return str(obj)

    if isinstance(obj, (set, frozenset)):
        return list(obj)

    # Raise TypeError for unhandled types
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")
