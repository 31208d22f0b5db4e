"""
jsv/services/report_builder.py

Turns a record's violations into a documented, printable report.

Layout of one failing record:

    Validation error on record <n>:
    <message>
    At instance path <path>:
        <offending value as indented JSON>
    At schema path <path>:
        <schema node as indented JSON, keys sorted>
    Documentation for this node:
        <description or title>

Violation blocks are separated by a blank line.
"""

from __future__ import annotations

import textwrap
from typing import Sequence

from jsv.domain.schema_node import SchemaNode
from jsv.domain.validation import Documentation, RecordReport, Violation, ViolationBlock
from jsv.domain.values import Value, to_pretty_json
from jsv.services.documentation import resolve_docs

INDENT = "    "


def build_report(
    record_number: int,
    violations: Sequence[Violation],
    schema_root: SchemaNode | Value,
) -> RecordReport:
    """
    Build the report for one record. `record_number` counts data rows from 1.
    """

    if record_number < 1:
        raise ValueError("record_number must be 1-based.")

    root_value = schema_root.source if isinstance(schema_root, SchemaNode) else schema_root
    blocks = tuple(_build_block(violation, root_value) for violation in violations)
    if not blocks:
        return RecordReport(record_number=record_number)

    text = f"Validation error on record {record_number}:\n" + "\n\n".join(block.text for block in blocks)
    return RecordReport(record_number=record_number, blocks=blocks, text=text)


def _build_block(violation: Violation, schema_root: Value) -> ViolationBlock:
    documentation = resolve_docs(schema_root, violation.schema_path)
    return ViolationBlock(
        violation=violation,
        documentation=documentation,
        text=_format_block(violation, documentation),
    )


def _format_block(violation: Violation, documentation: Documentation | None) -> str:
    lines = [
        violation.message,
        f"At instance path {violation.instance_path}:",
        _indent(to_pretty_json(violation.instance)),
        f"At schema path {violation.schema_path}:",
        _indent(to_pretty_json(violation.schema.source, sort_keys=True)),
    ]
    if documentation is not None and documentation.text:
        lines.append("Documentation for this node:")
        lines.append(_indent(documentation.text))
    return "\n".join(lines)


def _indent(text: str) -> str:
    return textwrap.indent(text, INDENT, lambda line: True)
