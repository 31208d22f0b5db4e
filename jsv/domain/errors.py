"""
jsv/domain/errors.py

Invocation-level failures. Data violations are never raised.
"""

from __future__ import annotations


class MalformedInputError(ValueError):
    """
    Raised when the engine is invoked with input it cannot interpret.

    Covers a schema root that is not an object and a record whose cells do not
    line up with the header. The record (or run) is aborted; the caller decides
    whether to continue.
    """

    def __init__(self, message: str, *, record_number: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.record_number = record_number
