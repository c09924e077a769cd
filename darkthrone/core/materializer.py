"""
Response materialization.

Turns a raw response payload into a value of the caller's declared response
type. The declared type is captured as a ``ResponseShape``:

- ``PLAIN``: any model, list or scalar type, decoded with a pydantic
  ``TypeAdapter``.
- ``MAPPING``: a mapping type; a fresh empty container is allocated and the
  decoded JSON object is copied into it.
- ``MAPPING_REF``: an optional reference to a mapping. Handled like
  ``MAPPING`` and never yields ``None``.

Callers either build a shape at the call site (``plain``, ``mapping``,
``mapping_ref``) or let ``prepare`` derive one from a type hint.
"""

import collections.abc
import enum
import json
import types
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Callable, Dict, MutableMapping, Optional, Union, get_args, get_origin

from pydantic import TypeAdapter, ValidationError

from darkthrone.exceptions import DecodeError


class ShapeKind(str, enum.Enum):
    PLAIN = "plain"
    MAPPING = "mapping"
    MAPPING_REF = "mapping_ref"


@dataclass(frozen=True)
class ResponseShape:
    """Declared response type plus the allocator for its container."""
    kind: ShapeKind
    type: Any
    factory: Callable[[], MutableMapping] = field(default=dict)

    def allocate(self) -> Optional[MutableMapping]:
        """Allocate an empty container for mapping shapes, ``None`` otherwise."""
        if self.kind is ShapeKind.PLAIN:
            return None
        return self.factory()


def plain(tp: Any) -> ResponseShape:
    """Shape for a model, list or scalar response."""
    return ResponseShape(ShapeKind.PLAIN, tp)


def mapping(
    value_type: Any = Any,
    factory: Callable[[], MutableMapping] = dict,
    key_type: Any = str,
) -> ResponseShape:
    """Shape for a JSON object response decoded into a mapping.

    Keys arrive as JSON strings and are validated into ``key_type``.
    """
    return ResponseShape(ShapeKind.MAPPING, Dict[key_type, value_type], factory)


def mapping_ref(
    value_type: Any = Any,
    factory: Callable[[], MutableMapping] = dict,
    key_type: Any = str,
) -> ResponseShape:
    """Shape for an optional mapping response; the result is never ``None``."""
    return ResponseShape(ShapeKind.MAPPING_REF, Dict[key_type, value_type], factory)


_MAPPING_ORIGINS = (
    dict,
    collections.abc.Mapping,
    collections.abc.MutableMapping,
    collections.OrderedDict,
    collections.defaultdict,
)

_UNION_TYPES: tuple = (Union,)
if hasattr(types, "UnionType"):
    _UNION_TYPES = (Union, types.UnionType)


def _mapping_parts(tp: Any):
    """Return ``(key_type, value_type, factory)`` for a mapping type, else None.

    TypedDicts are not mappings here: their fields need validating, so they
    decode as plain types.
    """
    origin = get_origin(tp) or tp
    if not isinstance(origin, type) or not issubclass(origin, _MAPPING_ORIGINS):
        return None
    if getattr(origin, "__required_keys__", None) is not None:
        return None
    args = get_args(tp)
    key_type, value_type = args if len(args) == 2 else (str, Any)
    if origin in (collections.abc.Mapping, collections.abc.MutableMapping):
        factory = dict
    elif origin is collections.defaultdict:
        # defaultdict needs a default factory; decoded values replace it anyway
        factory = dict
    else:
        factory = origin
    return key_type, value_type, factory


def prepare(response_type: Any) -> Optional[ResponseShape]:
    """
    Derive the response shape from a declared type.

    Args:
        response_type: A ``ResponseShape``, a type hint, or None when no
            response body is expected

    Returns:
        ResponseShape, or None for ``response_type=None``
    """
    if response_type is None or response_type is type(None):
        return None
    if isinstance(response_type, ResponseShape):
        return response_type

    parts = _mapping_parts(response_type)
    if parts is not None:
        key_type, value_type, factory = parts
        return mapping(value_type, factory, key_type)

    if get_origin(response_type) in _UNION_TYPES:
        args = [a for a in get_args(response_type) if a is not type(None)]
        if len(args) == 1 and len(args) < len(get_args(response_type)):
            parts = _mapping_parts(args[0])
            if parts is not None:
                key_type, value_type, factory = parts
                return mapping_ref(value_type, factory, key_type)

    return plain(response_type)


@lru_cache(maxsize=256)
def _adapter_for(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def decode(payload: bytes, shape: Optional[ResponseShape]) -> Any:
    """
    Decode ``payload`` into the shape's declared type.

    Args:
        payload: Raw response body
        shape: Shape from ``prepare``; None skips decoding entirely

    Returns:
        The materialized response value

    Raises:
        DecodeError: If the payload is malformed or does not match the type
    """
    if shape is None:
        return None

    try:
        if shape.kind is ShapeKind.PLAIN:
            return _adapter_for(shape.type).validate_json(payload)

        target = shape.allocate()
        data = json.loads(payload)
        if data is None:
            return target
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object for {shape.kind.value} response, "
                f"got {type(data).__name__}",
                payload=payload,
            )
        target.update(_adapter_for(shape.type).validate_python(data))
        return target
    except (ValidationError, ValueError) as e:
        raise DecodeError(
            f"Failed to decode response into {shape.type!r}: {e}", payload=payload
        ) from e
