"""
═══════════════════════════════════════════════════════════════════════
  EUCLIDEAN VECTOR ARITHMETIC
  Main Entry Point — Demonstration & Property Validation
═══════════════════════════════════════════════════════════════════════

Environment:
    VECTORS_LOG_LEVEL   logging level (default WARNING)
    VECTORS_SEED        seed for the random property checks (default 42)
    VECTORS_SAMPLES     random samples per property (default 200)
"""

import sys
import logging

from vectors import Vector, attempt
from vectors.config import LOG_LEVEL, SAMPLES, SEED
from vectors.properties import run_all_properties


def header(title: str) -> None:
    """Print a formatted section header."""
    print("\n")
    print("╔" + "═" * 68 + "╗")
    print(f"║  {title:<66}║")
    print("╚" + "═" * 68 + "╝")


def demo_algebra():
    """Addition, subtraction, scaling, dot product."""
    header("ALGEBRA")
    a = Vector([8.218, -9.341])
    b = Vector([-1.129, 2.111])
    print(f"  a         = {a}")
    print(f"  b         = {b}")
    print(f"  a + b     = {a.add(b)}")
    print(f"  a - b     = {a.minus(b)}")
    print(f"  a * 7.41  = {a.multiply_scalar(7.41)}")
    print(f"  a . b     = {a.dot(b):.6f}")


def demo_geometry():
    """Magnitude, normalization, angles, parallel/orthogonal tests."""
    header("MAGNITUDE, DIRECTION & ANGLES")
    v = Vector([-0.221, 7.437])
    w = Vector([8.813, -1.331, -6.247])
    print(f"  |{v}| = {v.magnitude():.6f}")
    print(f"  |{w}| = {w.magnitude():.6f}")
    print(f"  unit({v}) = {v.normalize()}")

    a = Vector([3.183, -7.627])
    b = Vector([-2.668, 5.319])
    print(f"  angle(a, b) = {a.dot_angle(b, as_degrees=False):.6f} rad")
    c = Vector([7.35, 0.221, 5.188])
    d = Vector([2.751, 8.259, 3.985])
    print(f"  angle(c, d) = {c.dot_angle(d):.6f} deg")

    pairs = [
        (Vector([-7.579, -7.88]), Vector([22.737, 23.64])),
        (Vector([-2.029, 9.97, 4.172]), Vector([-9.231, -6.639, -7.245])),
        (Vector([-2.328, -7.284, -1.214]), Vector([-1.821, 1.072, -2.94])),
        (Vector([2.118, 4.827]), Vector([0, 0])),
    ]
    for p, q in pairs:
        print(f"  {p} vs {q}: parallel={p.is_parallel_to(q)} orthogonal={p.is_orthogonal_to(q)}")


def demo_decomposition():
    """Projection onto a direction and the orthogonal remainder."""
    header("PROJECTION & COMPONENT")
    v = Vector([3.039, 1.879])
    b = Vector([0.825, 2.036])
    print(f"  proj_b(v)      = {v.projection(b)}")
    v = Vector([-9.88, -3.264, -8.159])
    b = Vector([-2.155, -9.353, -9.473])
    print(f"  v - proj_b(v)  = {v.component(b)}")


def demo_cross_product():
    """Cross product and the areas it spans."""
    header("CROSS PRODUCT & AREAS")
    v = Vector([8.462, 7.893, -8.187])
    w = Vector([6.984, -5.975, 4.778])
    print(f"  v x w               = {v.cross_product(w)}")
    v = Vector([-8.987, -9.838, 5.031])
    w = Vector([-4.268, -1.861, -8.866])
    print(f"  parallelogram(v, w) = {v.parallelogram_area(w):.6f}")
    v = Vector([1.5, 9.547, 3.691])
    w = Vector([-6.007, 0.124, 5.772])
    print(f"  triangle(v, w)      = {v.triangle_area(w):.6f}")


def demo_errors():
    """Each error kind, reported through attempt()."""
    header("ERROR KINDS")
    cases = [
        ("[1,2] + [1,2,3]", Vector([1, 2]).add, Vector([1, 2, 3])),
        ("[1,2] x [3,4]", Vector([1, 2]).cross_product, Vector([3, 4])),
        ("normalize [0,0]", Vector([0, 0]).normalize),
    ]
    for label, operation, *args in cases:
        result = attempt(operation, *args)
        status = "✓" if result.ok else "✗"
        detail = result.value if result.ok else f"{result.error.name}: {result.message}"
        print(f"    {status} {label:<18} {detail}")


def main():
    """Run the demonstrations and the property checks."""
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print("╔" + "═" * 68 + "╗")
    for line in ("EUCLIDEAN VECTOR ARITHMETIC", "Add · Dot · Cross · Angle · Projection · Area"):
        print(f"║  {line:<66}║")
    print("╚" + "═" * 68 + "╝")

    demo_algebra()
    demo_geometry()
    demo_decomposition()
    demo_cross_product()
    demo_errors()

    header(f"PROPERTY VALIDATION (seed={SEED}, samples={SAMPLES})")
    all_pass = run_all_properties()

    print("\n")
    print("╔" + "═" * 68 + "╗")
    if all_pass:
        print(f"║  {'✓ ALL PROPERTIES HOLD':<66}║")
    else:
        print(f"║  {'✗ SOME PROPERTIES FAILED — SEE ABOVE FOR DETAILS':<66}║")
    print("╚" + "═" * 68 + "╝")

    return all_pass


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
