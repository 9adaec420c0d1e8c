"""
═══════════════════════════════════════════════════════════════════════
  PROPERTY VALIDATION
  Randomized algebraic properties + literal reference cases.
═══════════════════════════════════════════════════════════════════════

Each check prints PASS/FAIL. Random vectors come from a seeded numpy
generator, and numpy's own dot/cross serve as the reference values.
"""

import math
import logging
from typing import Callable, List, Tuple

import numpy as np

from vectors.config import SAMPLES, SEED
from vectors.errors import DimensionMismatch, ZeroVectorError
from vectors.vector import Vector


logger = logging.getLogger(__name__)

_results: List[Tuple[str, bool, str]] = []


def run_test(name: str, test_fn: Callable[[], None]) -> bool:
    """Run a check and record PASS/FAIL."""
    try:
        test_fn()
        print(f"  [PASS] {name}")
        _results.append((name, True, ""))
        return True
    except (AssertionError, ArithmeticError, ValueError) as e:
        print(f"  [FAIL] {name}")
        print(f"         Error: {e}")
        logger.warning(f"Property check failed: {name}: {e}")
        _results.append((name, False, str(e)))
        return False


def random_vectors(rng: np.random.Generator, count: int, dimension: int) -> List[Vector]:
    """Draw count vectors with standard-normal coordinates."""
    return [Vector(row) for row in rng.standard_normal((count, dimension))]


def _pairs(rng: np.random.Generator, samples: int, dimension: int):
    left = random_vectors(rng, samples, dimension)
    right = random_vectors(rng, samples, dimension)
    return zip(left, right)


# ═══════════════════════════════════════════════════════════════════
#  RANDOMIZED PROPERTIES
# ═══════════════════════════════════════════════════════════════════

def check_add_minus_round_trip(rng, samples):
    for dim in (1, 2, 3, 7):
        for a, b in _pairs(rng, samples, dim):
            back = a.add(b).minus(b)
            assert np.allclose(back.coordinates, a.coordinates, rtol=1e-12, atol=1e-12), \
                f"{a} + {b} - {b} gave {back}"


def check_dot_is_squared_magnitude(rng, samples):
    for a in random_vectors(rng, samples, 5):
        assert math.isclose(a.dot(a), a.magnitude() ** 2, rel_tol=1e-9), \
            f"dot(a, a)={a.dot(a)} vs |a|^2={a.magnitude() ** 2}"


def check_normalized_is_unit(rng, samples):
    for a in random_vectors(rng, samples, 4):
        mag = a.normalize().magnitude()
        assert abs(mag - 1.0) < 1e-9, f"|normalize({a})| = {mag}"


def check_cross_anticommutative(rng, samples):
    for a, b in _pairs(rng, samples, 3):
        assert a.cross_product(b).equals(b.cross_product(a).multiply_scalar(-1)), \
            f"a x b != -(b x a) for {a}, {b}"


def check_cross_matches_numpy(rng, samples):
    for a, b in _pairs(rng, samples, 3):
        expected = np.cross(a.coordinates, b.coordinates)
        assert np.allclose(a.cross_product(b).coordinates, expected), \
            f"cross {a}, {b}: {a.cross_product(b)} vs {expected}"


def check_dot_matches_numpy(rng, samples):
    for a, b in _pairs(rng, samples, 6):
        expected = float(np.dot(a.coordinates, b.coordinates))
        assert math.isclose(a.dot(b), expected, rel_tol=1e-9, abs_tol=1e-12), \
            f"dot {a}, {b}: {a.dot(b)} vs {expected}"


def check_component_is_orthogonal(rng, samples):
    for a, b in _pairs(rng, samples, 3):
        rest = a.component(b)
        assert abs(rest.dot(b)) < 1e-9, f"component of {a} along {b} not orthogonal"
        assert np.allclose(rest.add(a.projection(b)).coordinates, a.coordinates)


# ═══════════════════════════════════════════════════════════════════
#  LITERAL CASES
# ═══════════════════════════════════════════════════════════════════

def check_dimension_mismatch():
    try:
        Vector([1, 2]).add(Vector([1, 2, 3]))
    except DimensionMismatch:
        return
    raise AssertionError("adding 2-D and 3-D vectors did not raise DimensionMismatch")


def check_zero_normalization():
    try:
        Vector([0, 0]).normalize()
    except ZeroVectorError:
        return
    raise AssertionError("normalizing the zero vector did not raise ZeroVectorError")


def check_orthogonal_axes():
    x, y = Vector([1, 0, 0]), Vector([0, 1, 0])
    assert x.is_orthogonal_to(y)
    assert x.dot(y) == 0


def check_cross_literal():
    assert Vector([1, 0, 0]).cross_product(Vector([0, 1, 0])).equals(Vector([0, 0, 1]))


def check_right_angle():
    angle = Vector([1, 0]).dot_angle(Vector([0, 1]))
    assert abs(angle - 90.0) < 1e-9, f"angle = {angle}"


def check_triangle_area():
    area = Vector([1, 0, 0]).triangle_area(Vector([0, 1, 0]))
    assert area == 0.5, f"area = {area}"


def run_all_properties(seed: int = SEED, samples: int = SAMPLES) -> bool:
    """Run every check. Returns True if all pass."""
    _results.clear()
    rng = np.random.default_rng(seed)
    logger.info(f"Running property checks: seed={seed}, samples={samples}")

    print("\n  ── Randomized Properties ──")
    run_test("a + b - b == a", lambda: check_add_minus_round_trip(rng, samples))
    run_test("a . a == |a|^2", lambda: check_dot_is_squared_magnitude(rng, samples))
    run_test("|normalize(a)| == 1", lambda: check_normalized_is_unit(rng, samples))
    run_test("a x b == -(b x a)", lambda: check_cross_anticommutative(rng, samples))
    run_test("cross matches numpy.cross", lambda: check_cross_matches_numpy(rng, samples))
    run_test("dot matches numpy.dot", lambda: check_dot_matches_numpy(rng, samples))
    run_test("component is orthogonal to b", lambda: check_component_is_orthogonal(rng, samples))

    print("\n  ── Literal Cases ──")
    run_test("2-D + 3-D raises DimensionMismatch", check_dimension_mismatch)
    run_test("zero vector normalize raises ZeroVectorError", check_zero_normalization)
    run_test("x axis orthogonal to y axis", check_orthogonal_axes)
    run_test("x cross y == z", check_cross_literal)
    run_test("angle(x, y) == 90 degrees", check_right_angle)
    run_test("triangle area of unit axes == 0.5", check_triangle_area)

    passed = sum(1 for _, ok, _ in _results if ok)
    print(f"\n  {passed}/{len(_results)} checks passed")
    return passed == len(_results)
