"""
jsv/schemas/csv_validation.py

Response schemas for CSV validation endpoints.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ViolationResponse(BaseModel):
    """
    API response model for one schema violation.
    """

    kind: str
    message: str
    instance_path: str
    schema_path: str
    instance: Any = None
    schema_node: dict[str, Any] = Field(default_factory=dict)
    title: str | None = None
    description: str | None = None


class RecordReportResponse(BaseModel):
    """
    API response model for one failing record.
    """

    record_number: int = Field(..., ge=1)
    violations: list[ViolationResponse] = Field(default_factory=list)
    error: str | None = None
    text: str


class CSVValidationSummaryResponse(BaseModel):
    """
    API response model for a CSV validation run.
    """

    success: bool
    records_processed: int = Field(..., ge=0)
    records_failed: int = Field(..., ge=0)
    total_violations: int = Field(..., ge=0)
    failed_records: list[RecordReportResponse] = Field(default_factory=list)
    truncated: bool = False
    report: str
