"""
jsv/domain package marker.
"""

from jsv.domain.errors import MalformedInputError
from jsv.domain.pointer import ROOT, JSONPointer
from jsv.domain.schema_node import SchemaNode
from jsv.domain.validation import (
    Documentation,
    RecordOutcome,
    RecordReport,
    RunTally,
    ValidationSummary,
    Violation,
    ViolationBlock,
    ViolationKind,
)
from jsv.domain.values import (
    NULL,
    ArrayValue,
    BoolValue,
    IntegerValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
    from_json,
    values_equal,
)

__all__ = [
    "NULL",
    "ROOT",
    "ArrayValue",
    "BoolValue",
    "Documentation",
    "IntegerValue",
    "JSONPointer",
    "MalformedInputError",
    "NullValue",
    "NumberValue",
    "ObjectValue",
    "RecordOutcome",
    "RecordReport",
    "RunTally",
    "SchemaNode",
    "StringValue",
    "ValidationSummary",
    "Value",
    "Violation",
    "ViolationBlock",
    "ViolationKind",
    "from_json",
    "values_equal",
]
