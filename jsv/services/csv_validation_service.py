"""
jsv/services/csv_validation_service.py

Service layer driving record-by-record CSV validation.

For every data row the service coerces the raw cells into a typed Object
Value, validates it against the schema, and builds the documented report.
Totals are carried in an immutable RunTally, one step per record, so each
record's outcome depends only on that record.
"""

from __future__ import annotations

import csv
import json
import logging
from functools import lru_cache
from typing import IO, Any, Iterable, Iterator, Sequence

from jsv.config import get_validation_settings
from jsv.domain.errors import MalformedInputError
from jsv.domain.schema_node import SchemaNode
from jsv.domain.validation import RecordOutcome, RunTally, ValidationSummary
from jsv.domain.values import from_json
from jsv.logging_utils import log_event
from jsv.services.report_builder import build_report
from jsv.validators.coercer import coerce_record
from jsv.validators.schema_validator import SchemaValidator

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class CSVFormatError(ValueError):
    """
    Raised when the CSV input cannot be tokenized or has no header row.
    """


class SchemaLoadError(ValueError):
    """
    Raised when the schema document is not valid JSON.
    """


# ---------------------------------------------------------------------------
# Schema loading
# ---------------------------------------------------------------------------


def load_schema(source: IO[str] | IO[bytes] | str | bytes) -> SchemaNode:
    """
    Parse a schema document and return its root node.

    Raises SchemaLoadError for invalid JSON and MalformedInputError when the
    document root is not an object.
    """

    try:
        if isinstance(source, (str, bytes, bytearray)):
            document: Any = json.loads(source)
        else:
            document = json.load(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise SchemaLoadError(f"failed to parse schema as JSON: {exc}") from exc

    return SchemaNode.from_value(from_json(document))


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class CSVValidationService:
    """
    Coordinates coercion, validation, and reporting for CSV records.
    """

    def __init__(
        self,
        *,
        log_violations: bool,
        abort_on_malformed: bool,
    ) -> None:
        self._log_violations = log_violations
        self._abort_on_malformed = abort_on_malformed

    def validate_stream(self, *, text_stream: IO[str], schema: SchemaNode) -> ValidationSummary:
        """
        Tokenize a CSV text stream and validate every data row.

        The first non-empty row is the header. Blank lines are skipped and
        never numbered. A row the CSV reader rejects fails only that record.
        """

        try:
            reader = csv.reader(text_stream)
            header = next((row for row in reader if row), None)
            if not header:
                raise CSVFormatError("CSV header row is missing.")

            tally = RunTally()
            outcomes: list[RecordOutcome] = []
            for outcome in self.validate_rows(schema=schema, header=header, rows=reader):
                tally = tally.add(outcome)
                outcomes.append(outcome)

        except UnicodeDecodeError as exc:
            raise CSVFormatError("CSV must be UTF-8 encoded.") from exc
        except csv.Error as exc:
            raise CSVFormatError(f"Invalid CSV format: {exc}") from exc

        log_event(
            logger,
            logging.INFO,
            "validation_run_completed",
            records_processed=tally.records_processed,
            records_failed=tally.records_failed,
            total_violations=tally.total_violations,
            malformed_records=tally.malformed_records,
        )
        return ValidationSummary(tally=tally, outcomes=outcomes)

    def validate_rows(
        self,
        *,
        schema: SchemaNode,
        header: Sequence[str],
        rows: Iterable[Sequence[str]],
    ) -> Iterator[RecordOutcome]:
        """
        Yield one outcome per non-empty row, in input order, numbered from 1.

        `csv.Error` raised while reading a row counts as a malformed record.
        """

        self._inspect_header(schema=schema, header=header)
        validator = SchemaValidator(schema)

        row_iterator = iter(rows)
        record_number = 0
        while True:
            try:
                cells = next(row_iterator)
            except StopIteration:
                return
            except csv.Error as exc:
                record_number += 1
                yield self._malformed_outcome(
                    MalformedInputError(f"Invalid CSV format: {exc}"),
                    record_number=record_number,
                )
                continue

            if not cells:
                continue
            record_number += 1
            yield self.validate_record(
                validator=validator,
                header=header,
                cells=cells,
                record_number=record_number,
            )

    def validate_record(
        self,
        *,
        validator: SchemaValidator,
        header: Sequence[str],
        cells: Sequence[str],
        record_number: int,
    ) -> RecordOutcome:
        """
        Validate one record.

        MalformedInputError is re-raised when the service is configured to
        abort; otherwise it becomes a failed outcome for this record only.
        """

        try:
            instance = coerce_record(validator.schema, header, cells)
        except MalformedInputError as exc:
            return self._malformed_outcome(exc, record_number=record_number)

        violations = validator.validate(instance)
        report = build_report(record_number, violations, validator.schema)
        if self._log_violations:
            for violation in violations:
                logger.warning(
                    "CSV validation error record=%s kind=%s instance_path=%s schema_path=%s message=%s",
                    record_number,
                    violation.kind.value,
                    violation.instance_path,
                    violation.schema_path,
                    violation.message,
                )
        return RecordOutcome(record_number=record_number, report=report)

    def _malformed_outcome(self, exc: MalformedInputError, *, record_number: int) -> RecordOutcome:
        exc.record_number = record_number
        if self._abort_on_malformed:
            raise exc
        logger.warning("Malformed record record=%s message=%s", record_number, exc.message)
        return RecordOutcome(record_number=record_number, error=exc.message)

    def _inspect_header(self, *, schema: SchemaNode, header: Sequence[str]) -> None:
        property_names = schema.property_names
        if len(header) != len(property_names):
            logger.warning(
                "There are %d columns but %d properties in the schema",
                len(header),
                len(property_names),
            )

        if logger.isEnabledFor(logging.DEBUG):
            column_types: dict[int, tuple[str, ...] | None] = {}
            for index, name in enumerate(header):
                node = schema.get_property(name)
                column_types[index] = node.types if node is not None else None
            logger.debug("Column types: %r", column_types)


# ---------------------------------------------------------------------------
# Factory
# ---------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_csv_validation_service() -> CSVValidationService:
    """
    Build and cache the validation service with env-driven settings.
    """
    settings = get_validation_settings()
    return CSVValidationService(
        log_violations=settings.log_violations,
        abort_on_malformed=settings.abort_on_malformed,
    )
