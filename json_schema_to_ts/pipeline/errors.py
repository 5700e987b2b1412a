"""
Exceptions raised by the type generation pipeline.
"""

from __future__ import annotations


class TypeGenError(Exception):
    """Base class for errors raised by json_schema_to_ts."""

    pass


class AcquisitionError(TypeGenError):
    """Raised when the API documentation platform reports a failure.

    The message is the platform's own and is meant to be shown as is.
    """

    pass


class OutputValidationError(TypeGenError):
    """Raised when generated declarations fail the pre-write sanity checks."""

    pass
