"""
vectors — Euclidean vector arithmetic.

    from vectors import Vector

    a = Vector([1, 0, 0])
    b = Vector([0, 1, 0])
    a.cross_product(b)      # Vector: (0.0,0.0,1.0)
    a.dot_angle(b)          # 90.0
    a.triangle_area(b)      # 0.5
"""

__version__ = '0.1.0'

from vectors.config import TOLERANCE
from vectors.errors import (
    ErrorKind, VectorError, DimensionMismatch, DimensionError, ZeroVectorError,
)
from vectors.vector import Vector
from vectors.outcome import Outcome, attempt

__all__ = [
    "TOLERANCE",
    "ErrorKind", "VectorError", "DimensionMismatch", "DimensionError", "ZeroVectorError",
    "Vector",
    "Outcome", "attempt",
]
