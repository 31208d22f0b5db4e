"""
jsv/validators/schema_validator.py

Recursive validation of a Value tree against a parsed schema.
"""

from __future__ import annotations

from jsv.domain.pointer import ROOT, JSONPointer
from jsv.domain.schema_node import SchemaNode
from jsv.domain.validation import Violation, ViolationKind
from jsv.domain.values import (
    ArrayValue,
    BoolValue,
    IntegerValue,
    NullValue,
    NumberValue,
    ObjectValue,
    StringValue,
    Value,
    to_compact_json,
    values_equal,
)


class SchemaValidator:
    """
    Checks instances against one schema root.

    Stateless between calls: the same instance always yields the same ordered
    violation list. Violations are collected depth-first in property
    declaration order.
    """

    def __init__(self, schema: SchemaNode) -> None:
        self._schema = schema

    @property
    def schema(self) -> SchemaNode:
        return self._schema

    def validate(self, instance: Value) -> list[Violation]:
        violations: list[Violation] = []
        self._validate_node(
            instance=instance,
            node=self._schema,
            instance_path=ROOT,
            schema_path=ROOT,
            violations=violations,
        )
        return violations

    def _validate_node(
        self,
        *,
        instance: Value,
        node: SchemaNode,
        instance_path: JSONPointer,
        schema_path: JSONPointer,
        violations: list[Violation],
    ) -> None:
        if node.types is not None and not _matches_any_type(instance, node.types):
            violations.append(
                Violation(
                    instance_path=instance_path,
                    schema_path=schema_path.join("type"),
                    kind=ViolationKind.TYPE,
                    message=_type_message(instance, node.types),
                    instance=instance,
                    schema=node,
                )
            )
            return

        if isinstance(instance, ObjectValue) and node.declares_object_checks:
            self._check_object(
                instance=instance,
                node=node,
                instance_path=instance_path,
                schema_path=schema_path,
                violations=violations,
            )

        if node.enum is not None and not any(values_equal(instance, option) for option in node.enum):
            options = ",".join(to_compact_json(option) for option in node.enum)
            violations.append(
                Violation(
                    instance_path=instance_path,
                    schema_path=schema_path.join("enum"),
                    kind=ViolationKind.ENUM,
                    message=f"{to_compact_json(instance)} is not one of [{options}]",
                    instance=instance,
                    schema=node,
                )
            )

        if node.pattern is not None and isinstance(instance, StringValue):
            if node.pattern.search(instance.value) is None:
                violations.append(
                    Violation(
                        instance_path=instance_path,
                        schema_path=schema_path.join("pattern"),
                        kind=ViolationKind.PATTERN,
                        message=f"{to_compact_json(instance)} does not match {to_compact_json(StringValue(node.pattern.pattern))}",
                        instance=instance,
                        schema=node,
                    )
                )

        if isinstance(instance, (IntegerValue, NumberValue)):
            self._check_range(
                instance=instance,
                node=node,
                instance_path=instance_path,
                schema_path=schema_path,
                violations=violations,
            )

    def _check_object(
        self,
        *,
        instance: ObjectValue,
        node: SchemaNode,
        instance_path: JSONPointer,
        schema_path: JSONPointer,
        violations: list[Violation],
    ) -> None:
        for name in node.required or ():
            if name in instance:
                continue
            violations.append(
                Violation(
                    instance_path=instance_path.join(name),
                    schema_path=schema_path.join("required"),
                    kind=ViolationKind.REQUIRED,
                    message=f"{to_compact_json(StringValue(name))} is a required property",
                    instance=instance,
                    schema=node,
                )
            )

        for name, child in node.properties or ():
            value = instance.get(name)
            if value is None:
                continue
            self._validate_node(
                instance=value,
                node=child,
                instance_path=instance_path.join(name),
                schema_path=schema_path.join("properties", name),
                violations=violations,
            )

    def _check_range(
        self,
        *,
        instance: IntegerValue | NumberValue,
        node: SchemaNode,
        instance_path: JSONPointer,
        schema_path: JSONPointer,
        violations: list[Violation],
    ) -> None:
        if node.minimum is not None and instance.value < node.minimum:
            violations.append(
                Violation(
                    instance_path=instance_path,
                    schema_path=schema_path.join("minimum"),
                    kind=ViolationKind.RANGE,
                    message=f"{to_compact_json(instance)} is less than the minimum of {_bound_text(node, 'minimum')}",
                    instance=instance,
                    schema=node,
                )
            )
        if node.maximum is not None and instance.value > node.maximum:
            violations.append(
                Violation(
                    instance_path=instance_path,
                    schema_path=schema_path.join("maximum"),
                    kind=ViolationKind.RANGE,
                    message=f"{to_compact_json(instance)} is greater than the maximum of {_bound_text(node, 'maximum')}",
                    instance=instance,
                    schema=node,
                )
            )


def validate(instance: Value, schema: SchemaNode) -> list[Violation]:
    """
    Validate `instance` against `schema` from the root paths.
    """

    return SchemaValidator(schema).validate(instance)


def _matches_type(instance: Value, type_name: str) -> bool:
    if type_name == "null":
        return isinstance(instance, NullValue)
    if type_name == "boolean":
        return isinstance(instance, BoolValue)
    if type_name == "integer":
        return isinstance(instance, IntegerValue)
    if type_name == "number":
        return isinstance(instance, (IntegerValue, NumberValue))
    if type_name == "string":
        return isinstance(instance, StringValue)
    if type_name == "object":
        return isinstance(instance, ObjectValue)
    if type_name == "array":
        return isinstance(instance, ArrayValue)
    return False


def _matches_any_type(instance: Value, types: tuple[str, ...]) -> bool:
    return any(_matches_type(instance, type_name) for type_name in types)


def _type_message(instance: Value, types: tuple[str, ...]) -> str:
    rendered = ", ".join(to_compact_json(StringValue(name)) for name in types)
    noun = "type" if len(types) == 1 else "types"
    return f"{to_compact_json(instance)} is not of {noun} {rendered}"


def _bound_text(node: SchemaNode, keyword: str) -> str:
    # Bounds render from the schema's own value so they read like the instance.
    bound = node.source.get(keyword)
    return to_compact_json(bound) if bound is not None else str(getattr(node, keyword))
