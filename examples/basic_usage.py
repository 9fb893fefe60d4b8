"""Basic lerpkit usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import numpy as np
from boundednumbers import BoundType

from lerpkit import Vec2, Vec3, IVec2, lerp, smerp, serp, serp4
from lerpkit.interp.sampling import sample_serp, to_vectors
from lerpkit.vectors import random_in_sphere, random_ivec2, seed


def demonstrate_vectors() -> None:
    # Mixed int/float arithmetic promotes to the float type.
    step = IVec2(3, 4) * 0.5
    print("IVec2 * 0.5:", step)
    print("length:", IVec2(3, 4).length())
    print("normalized:", Vec3(0, 3, 4).normalized())
    print("truncated:", Vec2(2.9, -2.9).truncate_to_ivec2())


def demonstrate_curves() -> None:
    a, b = Vec2(0, 0), Vec2(10, 0)
    print("lerp:", lerp(a, b, 0.25))
    print("smerp (k=0.5):", smerp(a, b, 0.5, 0.25))

    # Cubic arch, closed form and general evaluator agree.
    points = [Vec2(0, 0), Vec2(0, 10), Vec2(10, 10), Vec2(10, 0)]
    print("serp4:", serp4(*points, 0.5), "serp:", serp(points, 0.5))

    samples = sample_serp(points, np.linspace(-0.5, 1.5, 5), BoundType.CLAMP)
    print("clamped samples:", to_vectors(samples, Vec2))


def demonstrate_random() -> None:
    seed(42)
    print("random IVec2 in [-5, 5]:", random_ivec2(5))
    print("random point in unit ball:", random_in_sphere())


if __name__ == "__main__":
    demonstrate_vectors()
    demonstrate_curves()
    demonstrate_random()
