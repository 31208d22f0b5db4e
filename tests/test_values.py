from __future__ import annotations

import pytest

from jsv.domain import (
    NULL,
    ArrayValue,
    BoolValue,
    IntegerValue,
    JSONPointer,
    NumberValue,
    ObjectValue,
    StringValue,
    from_json,
    values_equal,
)
from jsv.domain.pointer import ROOT
from jsv.domain.values import to_pretty_json


def test_from_json_keeps_bool_distinct_from_integer() -> None:
    assert from_json(True) == BoolValue(True)
    assert from_json(1) == IntegerValue(1)
    assert from_json(1.5) == NumberValue(1.5)
    assert from_json(None) == NULL


def test_from_json_preserves_object_order() -> None:
    value = from_json({"b": 1, "a": [1, "x"]})

    assert isinstance(value, ObjectValue)
    assert list(value.keys()) == ["b", "a"]
    assert value.get("a") == ArrayValue((IntegerValue(1), StringValue("x")))
    assert value.to_json() == {"b": 1, "a": [1, "x"]}


def test_integer_beyond_i64_is_number() -> None:
    assert isinstance(from_json(2**64), NumberValue)


def test_object_rejects_duplicate_keys() -> None:
    with pytest.raises(ValueError):
        ObjectValue((("a", NULL), ("a", NULL)))


def test_values_equal_is_structural() -> None:
    assert values_equal(IntegerValue(2), NumberValue(2.0))
    assert not values_equal(StringValue("2"), IntegerValue(2))
    assert not values_equal(BoolValue(True), IntegerValue(1))
    assert values_equal(from_json({"a": 1, "b": 2}), from_json({"b": 2, "a": 1}))
    assert not values_equal(from_json([1, 2]), from_json([2, 1]))


def test_pretty_json_sorts_keys_on_request() -> None:
    value = from_json({"type": "integer", "description": "x"})

    assert to_pretty_json(value, sort_keys=True) == '{\n  "description": "x",\n  "type": "integer"\n}'


def test_pointer_escapes_reserved_characters() -> None:
    pointer = ROOT.join("properties", "a/b", "m~n")

    assert str(pointer) == "/properties/a~1b/m~0n"
    assert JSONPointer.parse(str(pointer)) == pointer
    assert str(ROOT) == ""
    assert JSONPointer.parse("") == ROOT
    assert pointer.parent == ROOT.join("properties", "a/b")


def test_pointer_parse_requires_leading_slash() -> None:
    with pytest.raises(ValueError):
        JSONPointer.parse("properties/id")
