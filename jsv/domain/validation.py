"""
jsv/domain/validation.py

Domain models produced by record validation and reporting.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from jsv.domain.pointer import JSONPointer
from jsv.domain.schema_node import SchemaNode
from jsv.domain.values import Value


class ViolationKind(str, Enum):
    TYPE = "type"
    REQUIRED = "required"
    ENUM = "enum"
    PATTERN = "pattern"
    RANGE = "range"


@dataclass(frozen=True)
class Violation:
    """
    One failed constraint linking an instance location to the schema keyword
    that rejected it. `schema` is the node that owns the keyword.
    """

    instance_path: JSONPointer
    schema_path: JSONPointer
    kind: ViolationKind
    message: str
    instance: Value
    schema: SchemaNode


@dataclass(frozen=True)
class Documentation:
    """
    Human-authored text attached to a schema node.
    """

    title: str | None = None
    description: str | None = None

    @property
    def text(self) -> str:
        return self.description or self.title or ""


@dataclass(frozen=True)
class ViolationBlock:
    violation: Violation
    documentation: Documentation | None
    text: str


@dataclass(frozen=True)
class RecordReport:
    """
    Validation report for one data row. Record numbers start at 1.
    """

    record_number: int
    blocks: tuple[ViolationBlock, ...] = ()
    text: str = ""

    @property
    def passed(self) -> bool:
        return not self.blocks

    @property
    def violation_count(self) -> int:
        return len(self.blocks)


@dataclass(frozen=True)
class RecordOutcome:
    """
    Result of processing one record: a report, or a malformed-input reason.
    """

    record_number: int
    report: RecordReport | None = None
    error: str | None = None

    @property
    def passed(self) -> bool:
        return self.error is None and self.report is not None and self.report.passed

    @property
    def text(self) -> str:
        if self.error is not None:
            return f"Malformed record {self.record_number}: {self.error}"
        return self.report.text if self.report is not None else ""


@dataclass(frozen=True)
class RunTally:
    """
    Running totals for a validation run. `add` returns a new tally.
    """

    records_processed: int = 0
    records_failed: int = 0
    total_violations: int = 0
    malformed_records: int = 0

    def add(self, outcome: RecordOutcome) -> RunTally:
        violations = outcome.report.violation_count if outcome.report is not None else 0
        return replace(
            self,
            records_processed=self.records_processed + 1,
            records_failed=self.records_failed + (0 if outcome.passed else 1),
            total_violations=self.total_violations + violations,
            malformed_records=self.malformed_records + (1 if outcome.error is not None else 0),
        )

    @property
    def error_count(self) -> int:
        return self.total_violations + self.malformed_records

    @property
    def success(self) -> bool:
        return self.records_failed == 0

    def summary_line(self) -> str:
        if self.success:
            return f"Successfully validated {self.records_processed} records"
        return f"Validation failed with {self.error_count} errors"


@dataclass(frozen=True)
class ValidationSummary:
    """
    End-of-run validation summary.
    """

    tally: RunTally
    outcomes: list[RecordOutcome] = field(default_factory=list)

    @property
    def failed_outcomes(self) -> list[RecordOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]

    def render(self) -> str:
        sections = [outcome.text for outcome in self.failed_outcomes]
        sections.append(self.tally.summary_line())
        return "\n\n".join(sections) + "\n"
