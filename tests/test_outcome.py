"""
Unit tests for error kinds, tagged results, configuration and the
property runner.
"""

import sys
import os
import importlib
import subprocess
import unittest
from unittest import mock

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vectors import (
    DimensionError,
    DimensionMismatch,
    ErrorKind,
    Outcome,
    Vector,
    VectorError,
    ZeroVectorError,
    attempt,
)
from vectors import config
from vectors.errors import error_for
from vectors.properties import run_all_properties, run_test


# ═══════════════════════════════════════════════════════════════════
#  ERROR KIND TESTS
# ═══════════════════════════════════════════════════════════════════

class TestErrors(unittest.TestCase):
    """Each failure has its own class and kind."""

    def test_hierarchy(self):
        for cls in (DimensionMismatch, DimensionError, ZeroVectorError):
            self.assertTrue(issubclass(cls, VectorError))
            self.assertTrue(issubclass(cls, ValueError))

    def test_kinds(self):
        self.assertIs(DimensionMismatch.kind, ErrorKind.DIMENSION_MISMATCH)
        self.assertIs(DimensionError.kind, ErrorKind.DIMENSION_ERROR)
        self.assertIs(ZeroVectorError.kind, ErrorKind.ZERO_VECTOR)

    def test_error_for_round_trips(self):
        for kind in ErrorKind:
            self.assertIs(error_for(kind).kind, kind)

    def test_kinds_are_distinguishable(self):
        """Catching one kind does not swallow another."""
        with self.assertRaises(ZeroVectorError):
            try:
                Vector([0, 0]).normalize()
            except DimensionMismatch:
                self.fail("zero vector reported as a dimension mismatch")


# ═══════════════════════════════════════════════════════════════════
#  OUTCOME TESTS
# ═══════════════════════════════════════════════════════════════════

class TestOutcome(unittest.TestCase):
    """attempt() turns vector failures into tagged results."""

    def test_success(self):
        result = attempt(Vector([1, 2]).add, Vector([3, 4]))
        self.assertTrue(result.ok)
        self.assertIsNone(result.error)
        self.assertEqual(result.value, Vector([4, 6]))
        self.assertEqual(result.unwrap(), Vector([4, 6]))

    def test_keyword_arguments(self):
        result = attempt(Vector([1, 0]).dot_angle, Vector([0, 1]), as_degrees=False)
        self.assertTrue(result.ok)
        self.assertAlmostEqual(result.value, 1.5707963267948966, places=12)

    def test_dimension_mismatch(self):
        result = attempt(Vector([1, 2]).add, Vector([1, 2, 3]))
        self.assertFalse(result.ok)
        self.assertIs(result.error, ErrorKind.DIMENSION_MISMATCH)
        self.assertIsNone(result.value)
        self.assertIn("2 vs 3", result.message)

    def test_dimension_error(self):
        result = attempt(Vector([1, 2]).cross_product, Vector([3, 4]))
        self.assertIs(result.error, ErrorKind.DIMENSION_ERROR)
        self.assertEqual(result.message, "Cross product only works on 3-dimensional vectors")

    def test_zero_vector(self):
        result = attempt(Vector([0, 0]).normalize)
        self.assertIs(result.error, ErrorKind.ZERO_VECTOR)
        self.assertEqual(result.message, "Can't normalize the zero vector")

    def test_zero_vector_through_projection(self):
        result = attempt(Vector([1, 2]).component, Vector([0, 0]))
        self.assertIs(result.error, ErrorKind.ZERO_VECTOR)

    def test_unwrap_raises_matching_exception(self):
        result = attempt(Vector([0, 0]).normalize)
        with self.assertRaises(ZeroVectorError) as ctx:
            result.unwrap()
        self.assertEqual(str(ctx.exception), "Can't normalize the zero vector")

    def test_other_exceptions_propagate(self):
        with self.assertRaises(AttributeError):
            attempt(Vector([1, 2]).add, None)

    def test_outcome_is_immutable(self):
        result = Outcome(value=1)
        with self.assertRaises(AttributeError):
            result.value = 2


# ═══════════════════════════════════════════════════════════════════
#  CONFIGURATION TESTS
# ═══════════════════════════════════════════════════════════════════

class TestConfig(unittest.TestCase):
    """Fixed constants and environment settings."""

    def tearDown(self):
        importlib.reload(config)

    def test_constants(self):
        self.assertEqual(config.TOLERANCE, 1e-10)
        self.assertEqual(config.ANGLE_DECIMALS, 5)
        self.assertEqual(config.ANGLE_TRUNCATION_FACTOR, 100000)
        self.assertEqual(config.CROSS_PRODUCT_DIMENSION, 3)

    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            importlib.reload(config)
            self.assertEqual(config.LOG_LEVEL, "WARNING")
            self.assertEqual(config.SEED, 42)
            self.assertEqual(config.SAMPLES, 200)

    def test_environment_overrides(self):
        env = {"VECTORS_LOG_LEVEL": "debug", "VECTORS_SEED": "7", "VECTORS_SAMPLES": "15"}
        with mock.patch.dict(os.environ, env):
            importlib.reload(config)
            self.assertEqual(config.LOG_LEVEL, "DEBUG")
            self.assertEqual(config.SEED, 7)
            self.assertEqual(config.SAMPLES, 15)

    def test_malformed_integers_fall_back_to_defaults(self):
        env = {"VECTORS_SEED": "abc", "VECTORS_SAMPLES": "lots"}
        with mock.patch.dict(os.environ, env):
            with self.assertLogs("vectors.config", level="WARNING") as logs:
                importlib.reload(config)
            self.assertEqual(config.SEED, 42)
            self.assertEqual(config.SAMPLES, 200)
        self.assertEqual(len(logs.records), 2)
        self.assertIn("VECTORS_SEED", logs.output[0])

    def test_malformed_seed_does_not_break_import(self):
        """A bad VECTORS_SEED must not stop the library from loading."""
        root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        env = dict(os.environ, VECTORS_SEED="abc", PYTHONPATH=root)
        code = "import vectors; print(vectors.Vector([3, 4]).magnitude())"
        result = subprocess.run(
            [sys.executable, "-c", code], env=env, capture_output=True, text=True,
        )
        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(result.stdout.strip(), "5.0")

    def test_tolerance_not_read_from_environment(self):
        with mock.patch.dict(os.environ, {"VECTORS_TOLERANCE": "0.5"}):
            importlib.reload(config)
            self.assertEqual(config.TOLERANCE, 1e-10)


# ═══════════════════════════════════════════════════════════════════
#  PROPERTY RUNNER TESTS
# ═══════════════════════════════════════════════════════════════════

class TestProperties(unittest.TestCase):
    """The randomized checks behind main.py."""

    def test_all_properties_hold(self):
        self.assertTrue(run_all_properties(seed=7, samples=25))

    def test_other_seed(self):
        self.assertTrue(run_all_properties(seed=2024, samples=10))

    def test_run_test_reports_failure(self):
        def broken():
            raise AssertionError("expected failure")
        self.assertFalse(run_test("always fails", broken))
        self.assertTrue(run_test("always passes", lambda: None))


if __name__ == "__main__":
    unittest.main(verbosity=2)
