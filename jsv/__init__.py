"""
jsv: validate CSV records against a JSON Schema.
"""

from jsv.domain import MalformedInputError, RunTally, SchemaNode
from jsv.services.documentation import resolve_docs
from jsv.services.report_builder import build_report
from jsv.validators import coerce, coerce_record, validate

__all__ = [
    "MalformedInputError",
    "RunTally",
    "SchemaNode",
    "build_report",
    "coerce",
    "coerce_record",
    "resolve_docs",
    "validate",
]

__version__ = "0.1.0"
