"""
Geometric math primitives over plain coordinate sequences.

Everything in vectors.vector is built on these helpers. They accept any
sequence of floats and return new lists; inputs are never modified.
"""

import math
import logging
import operator
from typing import Callable, List, Sequence

from vectors.config import ANGLE_TRUNCATION_FACTOR, CROSS_PRODUCT_DIMENSION
from vectors.errors import DimensionError, DimensionMismatch


logger = logging.getLogger(__name__)

Coordinates = Sequence[float]


def apply(func: Callable[[float, float], float], v1: Coordinates, v2: Coordinates) -> List[float]:
    """
    Combine two vectors element by element.

    result[i] = func(v1[i], v2[i])

    Raises DimensionMismatch if the lengths differ.
    """
    if len(v1) != len(v2):
        logger.debug(f"Elementwise {getattr(func, '__name__', func)} rejected: {len(v1)} vs {len(v2)}")
        raise DimensionMismatch(f"Dimensions of vectors must be equal: {len(v1)} vs {len(v2)}")
    return [func(a, b) for a, b in zip(v1, v2)]


def vector_add(v1: Coordinates, v2: Coordinates) -> List[float]:
    """Compute v1 + v2 element-wise."""
    return apply(operator.add, v1, v2)


def vector_subtract(v1: Coordinates, v2: Coordinates) -> List[float]:
    """Compute v1 - v2 element-wise."""
    return apply(operator.sub, v1, v2)


def dot_product(v1: Coordinates, v2: Coordinates) -> float:
    """Compute the dot product: sum of the element-wise products."""
    return sum(apply(operator.mul, v1, v2))


def scale(v: Coordinates, scalar: float) -> List[float]:
    """Multiply every coordinate by scalar."""
    return [x * scalar for x in v]


def magnitude(v: Coordinates) -> float:
    """Compute the magnitude (L2 norm) of a vector. Empty vectors have magnitude 0."""
    return math.sqrt(sum(x * x for x in v))


def cross_product(v1: Coordinates, v2: Coordinates) -> List[float]:
    """
    Cross product of two 3-dimensional vectors.

        ( y1*z2 - z1*y2,  -(x1*z2 - z1*x2),  x1*y2 - y1*x2 )

    Raises DimensionError unless both vectors have exactly 3 coordinates.
    """
    if len(v1) != CROSS_PRODUCT_DIMENSION or len(v2) != CROSS_PRODUCT_DIMENSION:
        logger.debug(f"Cross product rejected: dimensions {len(v1)} and {len(v2)}")
        raise DimensionError("Cross product only works on 3-dimensional vectors")
    x1, y1, z1 = v1
    x2, y2, z2 = v2
    return [
        y1 * z2 - z1 * y2,
        -1 * (x1 * z2 - z1 * x2),
        x1 * y2 - y1 * x2,
    ]


def truncate(value: float, factor: int = ANGLE_TRUNCATION_FACTOR) -> float:
    """
    Truncate toward zero to the precision given by factor (10**decimals).

    Keeps values such as -1.0000000002 inside the domain of acos.
    """
    return math.trunc(value * factor) / factor
