"""
Request body serialization.

Encodes a typed request value into the JSON payload sent on the wire. Values
that are the zero value of their type produce no payload at all, so bodyless
calls (GET-style endpoints) can pass an empty placeholder and still send no
body.
"""

import dataclasses
import json
from collections.abc import Mapping
from collections.abc import Set as AbstractSet
from typing import Any, Optional, Set

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError, to_jsonable_python

from darkthrone.exceptions import SerializationError


def is_zero_value(value: Any, _active: Optional[Set[int]] = None) -> bool:
    """
    Check whether ``value`` is the zero value for its type.

    ``None``, ``False``, ``0``, ``""`` and empty containers are zero. Objects
    with a callable ``is_empty()`` decide for themselves. Pydantic models and
    dataclass instances are zero only when every field is zero. A model or
    dataclass that refers back to itself is never zero.

    Args:
        value: Any request value

    Returns:
        True if no request body should be sent for ``value``
    """
    if value is None:
        return True

    is_empty = getattr(value, "is_empty", None)
    if callable(is_empty):
        return bool(is_empty())

    if isinstance(value, BaseModel):
        names = list(type(value).model_fields)
    elif dataclasses.is_dataclass(value) and not isinstance(value, type):
        names = [f.name for f in dataclasses.fields(value)]
    else:
        names = None

    if names is not None:
        if _active is None:
            _active = set()
        if id(value) in _active:
            return False
        _active.add(id(value))
        try:
            return all(is_zero_value(getattr(value, name), _active) for name in names)
        finally:
            _active.discard(id(value))

    if isinstance(value, (bool, int, float, complex, str, bytes, bytearray)):
        return not value

    if isinstance(value, (Mapping, list, tuple, AbstractSet)):
        return len(value) == 0

    return False


def encode_body(body: Any) -> Optional[bytes]:
    """
    Encode a request body to compact JSON.

    Args:
        body: Request value (pydantic model, dataclass, mapping, scalar, ...)

    Returns:
        UTF-8 JSON bytes, or None when ``body`` is a zero value

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    try:
        if is_zero_value(body):
            return None
        jsonable = to_jsonable_python(body, by_alias=True)
        return json.dumps(jsonable, separators=(",", ":"), allow_nan=False).encode("utf-8")
    except (PydanticSerializationError, TypeError, ValueError, RecursionError) as e:
        raise SerializationError(
            f"Failed to encode request body of type {type(body).__name__}: {e}"
        ) from e
