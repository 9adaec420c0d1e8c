"""
Error taxonomy for vector operations.

Each exception carries an ErrorKind so callers can branch on the kind
instead of the message text. All of them are ValueErrors.
"""

from enum import Enum


class ErrorKind(Enum):
    DIMENSION_MISMATCH = "dimension_mismatch"
    DIMENSION_ERROR = "dimension_error"
    ZERO_VECTOR = "zero_vector"


class VectorError(ValueError):
    """Base class for all vector operation failures."""

    kind: ErrorKind = None


class DimensionMismatch(VectorError):
    """Operands of an elementwise operation have different dimensions."""

    kind = ErrorKind.DIMENSION_MISMATCH


class DimensionError(VectorError):
    """Operation requires 3-dimensional operands."""

    kind = ErrorKind.DIMENSION_ERROR


class ZeroVectorError(VectorError):
    """Normalization of a vector whose magnitude is exactly zero."""

    kind = ErrorKind.ZERO_VECTOR


_BY_KIND = {
    ErrorKind.DIMENSION_MISMATCH: DimensionMismatch,
    ErrorKind.DIMENSION_ERROR: DimensionError,
    ErrorKind.ZERO_VECTOR: ZeroVectorError,
}


def error_for(kind: ErrorKind) -> type:
    """Return the exception class raised for an error kind."""
    return _BY_KIND[kind]
