"""
jsv/domain/schema_node.py

Parsed view of the JSON Schema keywords this tool understands.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping

from jsv.domain.errors import MalformedInputError
from jsv.domain.values import (
    ArrayValue,
    BoolValue,
    IntegerValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
    from_json,
)

logger = logging.getLogger(__name__)

TYPE_NAMES: tuple[str, ...] = ("null", "boolean", "integer", "number", "string", "object", "array")

RECOGNIZED_KEYWORDS = frozenset(
    {
        "type",
        "properties",
        "required",
        "enum",
        "minimum",
        "maximum",
        "pattern",
        "title",
        "description",
    }
)


@dataclass(frozen=True)
class SchemaNode:
    """
    One schema object with its recognized keywords pulled out.

    Keyword values that are malformed are left as None so the matching check
    is skipped. Unrecognized keywords are kept in `extras` untouched.
    """

    source: ObjectValue
    types: tuple[str, ...] | None = None
    properties: tuple[tuple[str, SchemaNode], ...] | None = None
    required: tuple[str, ...] | None = None
    enum: tuple[Value, ...] | None = None
    minimum: float | None = None
    maximum: float | None = None
    pattern: re.Pattern[str] | None = field(default=None, compare=False)
    title: str | None = None
    description: str | None = None
    extras: tuple[tuple[str, Value], ...] = ()

    @classmethod
    def from_value(cls, value: Value) -> SchemaNode:
        """
        Parse a schema root. Raises MalformedInputError if it is not an object.
        """

        if not isinstance(value, ObjectValue):
            raise MalformedInputError(f"Schema root must be a JSON object, got {value.kind}.")
        return _parse_node(value)

    @classmethod
    def from_json(cls, obj: Any) -> SchemaNode:
        return cls.from_value(from_json(obj))

    def get_property(self, name: str) -> SchemaNode | None:
        for key, node in self.properties or ():
            if key == name:
                return node
        return None

    @property
    def property_names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.properties or ())

    @property
    def declares_object_checks(self) -> bool:
        return self.properties is not None or self.required is not None


def _parse_node(value: ObjectValue) -> SchemaNode:
    keywords: dict[str, Any] = {}
    extras: list[tuple[str, Value]] = []

    for key, item in value.entries:
        if key not in RECOGNIZED_KEYWORDS:
            extras.append((key, item))
            continue
        parser = _KEYWORD_PARSERS[key]
        parsed = parser(item)
        if parsed is None:
            logger.debug("Ignoring malformed schema keyword %r: %r", key, item.to_json())
            continue
        keywords[key] = parsed

    pattern = keywords.pop("pattern", None)
    return SchemaNode(
        source=value,
        types=keywords.get("type"),
        properties=keywords.get("properties"),
        required=keywords.get("required"),
        enum=keywords.get("enum"),
        minimum=keywords.get("minimum"),
        maximum=keywords.get("maximum"),
        pattern=pattern,
        title=keywords.get("title"),
        description=keywords.get("description"),
        extras=tuple(extras),
    )


def _parse_type(item: Value) -> tuple[str, ...] | None:
    if isinstance(item, StringValue):
        return (item.value,) if item.value in TYPE_NAMES else None
    if isinstance(item, ArrayValue):
        names = [entry.value for entry in item.items if isinstance(entry, StringValue)]
        if len(names) != len(item.items) or not names:
            return None
        if any(name not in TYPE_NAMES for name in names):
            return None
        return tuple(dict.fromkeys(names))
    return None


def _parse_properties(item: Value) -> tuple[tuple[str, SchemaNode], ...] | None:
    if not isinstance(item, ObjectValue):
        return None
    return tuple(
        (name, _parse_node(child))
        for name, child in item.entries
        if isinstance(child, ObjectValue)
    )


def _parse_required(item: Value) -> tuple[str, ...] | None:
    if not isinstance(item, ArrayValue):
        return None
    names = [entry.value for entry in item.items if isinstance(entry, StringValue)]
    return tuple(dict.fromkeys(names))


def _parse_enum(item: Value) -> tuple[Value, ...] | None:
    if not isinstance(item, ArrayValue):
        return None
    return item.items


def _parse_bound(item: Value) -> float | None:
    if isinstance(item, BoolValue):
        return None
    if isinstance(item, (IntegerValue, NumberValue)):
        return item.value
    return None


def _parse_pattern(item: Value) -> re.Pattern[str] | None:
    if not isinstance(item, StringValue):
        return None
    try:
        return re.compile(item.value)
    except re.error as exc:
        logger.warning("Schema pattern %r does not compile and will be ignored: %s", item.value, exc)
        return None


def _parse_text(item: Value) -> str | None:
    return item.value if isinstance(item, StringValue) else None


_KEYWORD_PARSERS: Mapping[str, Any] = {
    "type": _parse_type,
    "properties": _parse_properties,
    "required": _parse_required,
    "enum": _parse_enum,
    "minimum": _parse_bound,
    "maximum": _parse_bound,
    "pattern": _parse_pattern,
    "title": _parse_text,
    "description": _parse_text,
}
