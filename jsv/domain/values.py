"""
jsv/domain/values.py

JSON-like value model shared by schema documents and coerced CSV records.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Iterator, Union

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


@dataclass(frozen=True)
class NullValue:
    kind = "null"

    def to_json(self) -> Any:
        return None


@dataclass(frozen=True)
class BoolValue:
    value: bool
    kind = "boolean"

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class IntegerValue:
    value: int
    kind = "integer"

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class NumberValue:
    value: float
    kind = "number"

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class StringValue:
    value: str
    kind = "string"

    def to_json(self) -> Any:
        return self.value


@dataclass(frozen=True)
class ArrayValue:
    items: tuple[Value, ...] = ()
    kind = "array"

    def to_json(self) -> Any:
        return [item.to_json() for item in self.items]


@dataclass(frozen=True)
class ObjectValue:
    """
    Ordered object. Entries keep insertion order; names are unique.
    """

    entries: tuple[tuple[str, Value], ...] = ()
    kind = "object"

    def __post_init__(self) -> None:
        names = [name for name, _ in self.entries]
        if len(names) != len(set(names)):
            raise ValueError("Object keys must be unique.")

    def get(self, name: str) -> Value | None:
        for key, value in self.entries:
            if key == name:
                return value
        return None

    def __contains__(self, name: object) -> bool:
        return any(key == name for key, _ in self.entries)

    def keys(self) -> Iterator[str]:
        return (key for key, _ in self.entries)

    def to_json(self) -> Any:
        return {key: value.to_json() for key, value in self.entries}


Value = Union[NullValue, BoolValue, IntegerValue, NumberValue, StringValue, ArrayValue, ObjectValue]

NULL = NullValue()


def from_json(obj: Any) -> Value:
    """
    Convert a `json.load` result into a Value tree.

    Booleans are checked before integers since `bool` subclasses `int`.
    """

    if obj is None:
        return NULL
    if isinstance(obj, bool):
        return BoolValue(obj)
    if isinstance(obj, int):
        if I64_MIN <= obj <= I64_MAX:
            return IntegerValue(obj)
        return NumberValue(float(obj))
    if isinstance(obj, float):
        return NumberValue(obj)
    if isinstance(obj, str):
        return StringValue(obj)
    if isinstance(obj, (list, tuple)):
        return ArrayValue(tuple(from_json(item) for item in obj))
    if isinstance(obj, dict):
        return ObjectValue(tuple((str(key), from_json(value)) for key, value in obj.items()))
    raise TypeError(f"Unsupported JSON value of type {type(obj).__name__}.")


def is_numeric(value: Value) -> bool:
    return isinstance(value, (IntegerValue, NumberValue))


def values_equal(left: Value, right: Value) -> bool:
    """
    Structural equality; Integer and Number compare by numeric quantity.
    """

    if is_numeric(left) and is_numeric(right):
        return left.value == right.value  # type: ignore[union-attr]
    if type(left) is not type(right):
        return False
    if isinstance(left, ArrayValue):
        return len(left.items) == len(right.items) and all(  # type: ignore[union-attr]
            values_equal(a, b) for a, b in zip(left.items, right.items)  # type: ignore[union-attr]
        )
    if isinstance(left, ObjectValue):
        if set(left.keys()) != set(right.keys()):  # type: ignore[union-attr]
            return False
        return all(values_equal(value, right.get(key)) for key, value in left.entries)  # type: ignore[union-attr,arg-type]
    return left == right


def to_compact_json(value: Value) -> str:
    """
    Render a Value as single-line JSON for violation messages.
    """

    return json.dumps(value.to_json(), ensure_ascii=False, separators=(",", ":"), default=_json_default)


def to_pretty_json(value: Value, *, sort_keys: bool = False) -> str:
    """
    Render a Value as indented JSON for report blocks.
    """

    return json.dumps(value.to_json(), ensure_ascii=False, indent=2, sort_keys=sort_keys, default=_json_default)


def _json_default(obj: Any) -> str:
    return str(obj)
