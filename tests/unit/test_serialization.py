"""
Unit tests for request body serialization.
"""

import json
from dataclasses import dataclass
from typing import List, Optional

import pytest
from pydantic import BaseModel

from darkthrone.api.models import BankDepositRequest, LoginRequest, TrainUnitsRequest, UnitRequest
from darkthrone.core.serialization import encode_body, is_zero_value
from darkthrone.exceptions import SerializationError


@dataclass
class Foo:
    a: int = 0
    b: str = ""


class Empty(BaseModel):
    pass


class Nested(BaseModel):
    inner: Optional[Empty] = None
    tags: List[str] = []


@dataclass
class Node:
    value: int = 0
    next: Optional["Node"] = None


@dataclass
class Pair:
    left: Optional[Foo] = None
    right: Optional[Foo] = None


class Link(BaseModel):
    value: int = 0
    next: Optional["Link"] = None


class AlwaysEmpty:
    def is_empty(self) -> bool:
        return True


class TestIsZeroValue:
    """Test generic zero-value detection."""

    @pytest.mark.parametrize("value", [None, 0, 0.0, False, "", b"", {}, [], (), set()])
    def test_zero_scalars_and_containers(self, value):
        assert is_zero_value(value) is True

    @pytest.mark.parametrize("value", [1, -1, 0.5, True, "x", b"x", {"a": 1}, [0], (0,)])
    def test_non_zero_scalars_and_containers(self, value):
        assert is_zero_value(value) is False

    def test_zero_dataclass(self):
        assert is_zero_value(Foo()) is True

    def test_dataclass_with_one_field_set(self):
        assert is_zero_value(Foo(a=1)) is False
        assert is_zero_value(Foo(b="x")) is False

    def test_empty_placeholder_model(self):
        assert is_zero_value(Empty()) is True

    def test_model_with_all_default_fields(self):
        assert is_zero_value(BankDepositRequest()) is True
        assert is_zero_value(Nested()) is True

    def test_model_with_non_zero_field(self):
        assert is_zero_value(BankDepositRequest(player_id="", amount=5)) is False
        assert is_zero_value(Nested(tags=["a"])) is False

    def test_nested_model_non_zero(self):
        request = TrainUnitsRequest(units=[UnitRequest(unit_type="worker", quantity=0)])
        assert is_zero_value(request) is False

    def test_is_empty_capability(self):
        assert is_zero_value(AlwaysEmpty()) is True

    def test_unknown_object_is_not_zero(self):
        assert is_zero_value(object()) is False


class TestEncodeBody:
    """Test JSON encoding of request bodies."""

    def test_zero_value_has_no_payload(self):
        assert encode_body(None) is None
        assert encode_body(Empty()) is None
        assert encode_body({}) is None
        assert encode_body("") is None
        assert encode_body(0) is None

    def test_model_uses_wire_aliases(self):
        payload = encode_body(BankDepositRequest(player_id="pid", amount=100))
        assert payload == b'{"playerId":"pid","amount":100}'

    def test_mapping_is_compact_json(self):
        payload = encode_body({"playerID": "p1"})
        assert payload == b'{"playerID":"p1"}'

    def test_dataclass(self):
        assert json.loads(encode_body(Foo(a=2, b="y"))) == {"a": 2, "b": "y"}

    def test_partially_empty_model_sends_all_fields(self):
        payload = encode_body(LoginRequest(email="a@b.c"))
        assert json.loads(payload) == {"email": "a@b.c", "password": ""}

    def test_unsupported_type_raises(self):
        with pytest.raises(SerializationError):
            encode_body({"value": object()})

    def test_cyclic_structure_raises(self):
        data = {"a": 1}
        data["self"] = data
        with pytest.raises(SerializationError):
            encode_body(data)

    def test_self_referencing_dataclass_raises(self):
        node = Node()
        node.next = node
        assert is_zero_value(node) is False
        with pytest.raises(SerializationError):
            encode_body(node)

    def test_self_referencing_model_raises(self):
        link = Link()
        link.next = link
        with pytest.raises(SerializationError):
            encode_body(link)

    def test_shared_zero_child_is_not_a_cycle(self):
        child = Foo()
        assert is_zero_value(Pair(left=child, right=child)) is True
