"""
Configuration for the vectors package.

Numeric constants are fixed for the whole process. The environment-driven
settings only affect the demonstration runner and the property checks.
"""

import os
import logging


# Magnitudes and dot products at or below this are treated as zero.
TOLERANCE = 1e-10

# dot_angle truncates the cosine to this many decimals before acos.
ANGLE_DECIMALS = 5
ANGLE_TRUNCATION_FACTOR = 10 ** ANGLE_DECIMALS

CROSS_PRODUCT_DIMENSION = 3

logger = logging.getLogger(__name__)


def _int_setting(name: str, default: int) -> int:
    """Read an integer from the environment, falling back to default if malformed."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring {name}={raw!r}: not an integer, using {default}")
        return default


LOG_LEVEL = os.environ.get("VECTORS_LOG_LEVEL", "WARNING").upper()
SEED = _int_setting("VECTORS_SEED", 42)
SAMPLES = _int_setting("VECTORS_SAMPLES", 200)
