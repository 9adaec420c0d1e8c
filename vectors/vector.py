"""
Immutable Euclidean vector of arbitrary dimension.

A Vector holds an ordered tuple of floats. Its dimension is always the
length of that tuple. Every algebraic operation returns a new Vector.

Equality is exact (no tolerance). The zero and orthogonality tests use
TOLERANCE instead; normalize() only refuses a magnitude of exactly 0.
"""

from __future__ import annotations

import math
import numbers
import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from vectors import math_utils
from vectors.config import TOLERANCE
from vectors.errors import ZeroVectorError


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False, init=False)
class Vector:
    """
    A point (or direction) in n-dimensional Euclidean space.

    Attributes:
        coordinates: Ordered coordinates, stored as a tuple of floats.
    """

    coordinates: Tuple[float, ...]

    # numpy scalars and arrays defer to Vector operators instead of broadcasting.
    __array_ufunc__ = None

    def __init__(self, coordinates: Iterable[float]):
        object.__setattr__(self, "coordinates", tuple(float(x) for x in coordinates))

    @property
    def dimension(self) -> int:
        """Number of coordinates."""
        return len(self.coordinates)

    # ── Display ───────────────────────────────────────────────────

    def __str__(self) -> str:
        return "Vector: (" + ",".join(str(x) for x in self.coordinates) + ")"

    def __repr__(self) -> str:
        return f"Vector({self.coordinates!r})"

    # ── Sequence protocol ─────────────────────────────────────────

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self) -> Iterator[float]:
        return iter(self.coordinates)

    def __getitem__(self, index: int) -> float:
        return self.coordinates[index]

    # ── Equality ──────────────────────────────────────────────────

    def equals(self, other: Optional[Vector]) -> bool:
        """Exact element-wise equality. None and non-vectors are never equal."""
        return isinstance(other, Vector) and self.coordinates == other.coordinates

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash(self.coordinates)

    # ── Algebra ───────────────────────────────────────────────────

    def add(self, v: Vector) -> Vector:
        """Element-wise sum. Raises DimensionMismatch."""
        return Vector(math_utils.vector_add(self.coordinates, v.coordinates))

    def minus(self, v: Vector) -> Vector:
        """Element-wise difference. Raises DimensionMismatch."""
        return Vector(math_utils.vector_subtract(self.coordinates, v.coordinates))

    def dot(self, v: Vector) -> float:
        """Dot product. Raises DimensionMismatch."""
        return math_utils.dot_product(self.coordinates, v.coordinates)

    def multiply_scalar(self, scalar: float) -> Vector:
        return Vector(math_utils.scale(self.coordinates, scalar))

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.minus(other)

    def __mul__(self, scalar: float) -> Vector:
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.multiply_scalar(scalar)

    def __rmul__(self, scalar: float) -> Vector:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector:
        return self.multiply_scalar(-1)

    # ── Length and direction ──────────────────────────────────────

    def magnitude(self) -> float:
        return math_utils.magnitude(self.coordinates)

    def normalize(self) -> Vector:
        """
        Unit vector in the same direction.

        Only a magnitude of exactly 0 raises ZeroVectorError. A vector whose
        magnitude is positive but at or below TOLERANCE (is_zero() is True)
        still normalizes.
        """
        try:
            scalar = 1 / self.magnitude()
        except ZeroDivisionError:
            logger.debug(f"Normalize rejected zero vector of dimension {self.dimension}")
            raise ZeroVectorError("Can't normalize the zero vector") from None
        return self.multiply_scalar(scalar)

    def is_zero(self) -> bool:
        return self.magnitude() <= TOLERANCE

    # ── Angles and relations ──────────────────────────────────────

    def dot_angle(self, v: Vector, as_degrees: bool = True) -> float:
        """
        Angle between this vector and v.

        The cosine is truncated to 5 decimals before acos, so float noise
        like -1.0000000002 stays in range. Raises ZeroVectorError if either
        vector is exactly zero, DimensionMismatch if dimensions differ.

        Args:
            v: The other vector.
            as_degrees: Return degrees (default) instead of radians.
        """
        v1_normalized = self.normalize()
        v2_normalized = v.normalize()
        cosine = v1_normalized.dot(v2_normalized)
        angle = math.acos(math_utils.truncate(cosine))
        return angle * 180 / math.pi if as_degrees else angle

    def is_parallel_to(self, v: Vector) -> bool:
        """
        True if either vector is zero or the angle between them is exactly
        0 or 180 degrees.
        """
        return (
            self.is_zero()
            or v.is_zero()
            or self.dot_angle(v) == 0
            or self.dot_angle(v) == 180
        )

    def is_orthogonal_to(self, v: Vector) -> bool:
        return abs(self.dot(v)) <= TOLERANCE

    is_orthoganal_to = is_orthogonal_to

    # ── Decomposition ─────────────────────────────────────────────

    def projection(self, b: Vector) -> Vector:
        """
        Part of this vector along b: (self . unit(b)) * unit(b).

        b is normalized first, so a zero b raises ZeroVectorError even when
        the dimensions also differ.
        """
        unit = b.normalize()
        scalar = self.dot(unit)
        return unit.multiply_scalar(scalar)

    def component(self, b: Vector) -> Vector:
        """Part of this vector orthogonal to b."""
        return self.minus(self.projection(b))

    # ── 3-D only ──────────────────────────────────────────────────

    def cross_product(self, v: Vector) -> Vector:
        """Cross product. Raises DimensionError unless both are 3-dimensional."""
        return Vector(math_utils.cross_product(self.coordinates, v.coordinates))

    def parallelogram_area(self, v: Vector) -> float:
        return self.cross_product(v).magnitude()

    def triangle_area(self, v: Vector) -> float:
        return 0.5 * self.parallelogram_area(v)
