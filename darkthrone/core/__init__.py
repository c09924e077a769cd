"""
Core request engine for the DarkThrone API client.

Provides body serialization, response materialization, the generic request
executor and session state.
"""

from darkthrone.core.materializer import (
    ResponseShape,
    ShapeKind,
    decode,
    mapping,
    mapping_ref,
    plain,
    prepare,
)
from darkthrone.core.request import ApiRequest, execute
from darkthrone.core.serialization import encode_body, is_zero_value
from darkthrone.core.session import Session

__all__ = [
    "ApiRequest",
    "ResponseShape",
    "Session",
    "ShapeKind",
    "decode",
    "encode_body",
    "execute",
    "is_zero_value",
    "mapping",
    "mapping_ref",
    "plain",
    "prepare",
]
