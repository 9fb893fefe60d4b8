# ===================== core.py =====================
"""
Curve evaluation over anything that supports ``+``, ``-`` and scalar ``*``.

The same formulas serve Python and numpy scalars, numpy arrays and the
vector types. Every function is pure; ``serp`` keeps its reduction buffer
local to the call.
"""

from collections.abc import Sequence
from typing import Iterable, Union

import numpy as np

from ..types.element_type import ElementType
from ..types.vector_types import T
from ..vectors.vector_base import VectorBase
from ..vectors.registry import vector_class
from ..vectors.conversion import convert

ControlPoints = Union[Sequence, np.ndarray]


def widen(value: T) -> T:
    """Integer vectors become their float counterpart, so spans wider than int32 don't wrap."""
    if isinstance(value, VectorBase) and value.is_integer:
        return convert(value, vector_class(value.num_components, ElementType.FLOAT))
    return value


# =============================================================================
# Two-point curves
# =============================================================================
def lerp(a: T, b: T, t: float) -> T:
    """
    Linear interpolation ``a + (b - a) * t``.

    ``t`` is not clamped; values outside [0, 1] extrapolate along the line.
    """
    a, b = widen(a), widen(b)
    return a + (b - a) * t


def smerp(a: T, b: T, k: float, t: float) -> T:
    """
    Smooth interpolation along a cubic ease curve with smoothness ``k``.

    k = 0.5: symmetric S-curve (slow start, fast middle, slow end)
    k = 0:   exactly ``lerp``
    k = -1:  decelerates to a stop at the midpoint, then accelerates to ``b``
    Values of ``k`` outside [-1, 0.5] overshoot the [a, b] range.
    """
    a, b = widen(a), widen(b)
    return a + (b - a) * (t * (1 - 2 * k * (1 - 3 * t + 2 * t * t)))


# =============================================================================
# Closed-form Bezier (Bernstein basis, no intermediate buffer)
# =============================================================================
def serp3(a: T, b: T, c: T, t: float) -> T:
    """Quadratic Bezier through ``a``, ``b``, ``c`` in expanded Bernstein form."""
    a, b, c = widen(a), widen(b), widen(c)
    return a + ((b - a) * 2 + (a - b * 2 + c) * t) * t


def serp4(a: T, b: T, c: T, d: T, t: float) -> T:
    """Cubic Bezier through ``a``, ``b``, ``c``, ``d`` in expanded Bernstein form."""
    a, b, c, d = widen(a), widen(b), widen(c), widen(d)
    return a + ((b - a) * 3 + ((a - b * 2 + c) * 3 + (b * 3 - a - c * 3 + d) * t) * t) * t


# =============================================================================
# General N-point Bezier (de Casteljau reduction)
# =============================================================================
def check_control_points(points: Iterable) -> ControlPoints:
    """
    Validate a control-point sequence and return it as an indexable sequence.

    Raises:
        ValueError: fewer than 2 points
        TypeError: points mix vector types, or vectors with scalars
    """
    if not isinstance(points, (Sequence, np.ndarray)):
        points = tuple(points)

    n = len(points)
    if n < 2:
        raise ValueError(f"serp needs at least 2 control points, got {n}")

    first = type(points[0]) if isinstance(points[0], VectorBase) else None
    for i in range(1, n):
        kind = type(points[i]) if isinstance(points[i], VectorBase) else None
        if kind is not first:
            raise TypeError(
                f"control points must share one type; point 0 is "
                f"{type(points[0]).__name__}, point {i} is {type(points[i]).__name__}"
            )
    return points


def serp(points: Iterable[T], t: float) -> T:
    """
    Evaluate the Bezier curve defined by ``points`` at ``t``.

    Adjacent pairs of a working buffer are lerped left to right, one full
    pass per level, until a single value remains. Uses N-1 scratch slots and
    no recursion.

    Args:
        points: N >= 2 control points of one type
        t: Curve parameter, not clamped
    Returns:
        The point on the curve at ``t``
    Raises:
        ValueError: fewer than 2 control points
    """
    points = check_control_points(points)
    n = len(points)

    if n == 2:
        return lerp(points[0], points[1], t)

    buffer = [lerp(points[i], points[i + 1], t) for i in range(n - 1)]

    for level in range(n - 1, 1, -1):
        for i in range(level - 1):
            buffer[i] = lerp(buffer[i], buffer[i + 1], t)

    return buffer[0]


__all__ = [
    "lerp",
    "smerp",
    "serp3",
    "serp4",
    "serp",
    "check_control_points",
    "widen",
    "ControlPoints",
]
