"""
jsv/schemas package marker.
"""

from jsv.schemas.csv_validation import (
    CSVValidationSummaryResponse,
    RecordReportResponse,
    ViolationResponse,
)

__all__ = [
    "CSVValidationSummaryResponse",
    "RecordReportResponse",
    "ViolationResponse",
]
