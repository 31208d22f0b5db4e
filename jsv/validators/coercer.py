"""
jsv/validators/coercer.py

Type-directed parsing of raw CSV cells into Values.
"""

from __future__ import annotations

import math
import re
from typing import Sequence

from jsv.domain.errors import MalformedInputError
from jsv.domain.schema_node import SchemaNode
from jsv.domain.values import (
    I64_MAX,
    I64_MIN,
    NULL,
    BoolValue,
    IntegerValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

# Order in which candidates are tried when `type` lists several names.
_COERCION_ORDER: tuple[str, ...] = ("null", "integer", "number", "boolean")


def coerce(node: SchemaNode | None, text: str) -> Value:
    """
    Parse one cell according to the node's declared type.

    Never raises: anything that does not parse stays a String so the validator
    reports the mismatch.
    """

    if node is None or node.types is None:
        return StringValue(text)

    for type_name in _COERCION_ORDER:
        if type_name not in node.types:
            continue
        parsed = _COERCERS[type_name](text)
        if parsed is not None:
            return parsed

    return StringValue(text)


def coerce_record(schema: SchemaNode, header: Sequence[str], cells: Sequence[str]) -> ObjectValue:
    """
    Build an Object Value for one row, keyed in header order.

    Columns without a schema property are kept as plain strings.
    """

    if len(cells) != len(header):
        raise MalformedInputError(
            f"Record has {len(cells)} fields but the header has {len(header)}."
        )
    if len(set(header)) != len(header):
        duplicates = sorted({name for name in header if list(header).count(name) > 1})
        raise MalformedInputError(f"Header has duplicate column names: {', '.join(duplicates)}.")

    return ObjectValue(
        tuple((name, coerce(schema.get_property(name), cell)) for name, cell in zip(header, cells))
    )


def _coerce_null(text: str) -> Value | None:
    return NULL if text == "" else None


def _coerce_integer(text: str) -> Value | None:
    if not _INTEGER_RE.fullmatch(text):
        return None
    number = int(text)
    if I64_MIN <= number <= I64_MAX:
        return IntegerValue(number)
    return NumberValue(float(number))


def _coerce_number(text: str) -> Value | None:
    integer = _coerce_integer(text)
    if integer is not None:
        return integer
    if not _NUMBER_RE.fullmatch(text):
        return None
    number = float(text)
    if not math.isfinite(number):
        return None
    return NumberValue(number)


def _coerce_boolean(text: str) -> Value | None:
    if text == "true":
        return BoolValue(True)
    if text == "false":
        return BoolValue(False)
    return None


_COERCERS = {
    "null": _coerce_null,
    "integer": _coerce_integer,
    "number": _coerce_number,
    "boolean": _coerce_boolean,
}
