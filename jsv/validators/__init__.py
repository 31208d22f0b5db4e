"""
jsv/validators package marker.
"""

from jsv.validators.coercer import coerce, coerce_record
from jsv.validators.schema_validator import SchemaValidator, validate

__all__ = [
    "SchemaValidator",
    "coerce",
    "coerce_record",
    "validate",
]
