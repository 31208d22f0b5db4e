"""
jsv/services package marker.
"""

from jsv.services.csv_validation_service import (
    CSVFormatError,
    CSVValidationService,
    SchemaLoadError,
    get_csv_validation_service,
    load_schema,
)
from jsv.services.documentation import resolve_docs
from jsv.services.report_builder import build_report

__all__ = [
    "CSVFormatError",
    "CSVValidationService",
    "SchemaLoadError",
    "build_report",
    "get_csv_validation_service",
    "load_schema",
    "resolve_docs",
]
