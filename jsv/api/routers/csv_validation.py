"""
jsv/api/routers/csv_validation.py

CSV validation HTTP endpoints.
"""

from __future__ import annotations

import io

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from jsv.api.dependencies import get_csv_upload, get_schema_upload
from jsv.config import ValidationSettings, get_validation_settings
from jsv.domain.errors import MalformedInputError
from jsv.domain.validation import RecordOutcome
from jsv.schemas.csv_validation import (
    CSVValidationSummaryResponse,
    RecordReportResponse,
    ViolationResponse,
)
from jsv.services.csv_validation_service import (
    CSVFormatError,
    CSVValidationService,
    SchemaLoadError,
    get_csv_validation_service,
    load_schema,
)

router = APIRouter(tags=["validation"])


@router.post("/validate-csv", response_model=CSVValidationSummaryResponse)
def validate_csv(
    file: UploadFile = Depends(get_csv_upload),
    schema: UploadFile = Depends(get_schema_upload),
    validation_service: CSVValidationService = Depends(get_csv_validation_service),
    settings: ValidationSettings = Depends(get_validation_settings),
) -> CSVValidationSummaryResponse:
    """
    Validate one CSV file against one JSON schema document.
    """

    text_stream: io.TextIOWrapper | None = None
    try:
        schema_node = load_schema(schema.file)
        file.file.seek(0)
        text_stream = io.TextIOWrapper(file.file, encoding="utf-8-sig", newline="")
        summary = validation_service.validate_stream(text_stream=text_stream, schema=schema_node)
    except (SchemaLoadError, MalformedInputError, CSVFormatError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(exc),
        ) from exc
    finally:
        if text_stream is not None:
            try:
                text_stream.detach()
            except ValueError:
                pass
        file.file.close()
        schema.file.close()

    failed = summary.failed_outcomes
    reported = failed[: settings.max_reported_records]
    return CSVValidationSummaryResponse(
        success=summary.tally.success,
        records_processed=summary.tally.records_processed,
        records_failed=summary.tally.records_failed,
        total_violations=summary.tally.total_violations,
        failed_records=[_to_record_response(outcome) for outcome in reported],
        truncated=len(reported) < len(failed),
        report=summary.render(),
    )


def _to_record_response(outcome: RecordOutcome) -> RecordReportResponse:
    blocks = outcome.report.blocks if outcome.report is not None else ()
    return RecordReportResponse(
        record_number=outcome.record_number,
        error=outcome.error,
        text=outcome.text,
        violations=[
            ViolationResponse(
                kind=block.violation.kind.value,
                message=block.violation.message,
                instance_path=str(block.violation.instance_path),
                schema_path=str(block.violation.schema_path),
                instance=block.violation.instance.to_json(),
                schema_node=block.violation.schema.source.to_json(),
                title=block.documentation.title if block.documentation else None,
                description=block.documentation.description if block.documentation else None,
            )
            for block in blocks
        ],
    )
