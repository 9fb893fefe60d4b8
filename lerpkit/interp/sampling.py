"""
Vectorized curve sampling.

Evaluates the curves of :mod:`lerpkit.interp.core` at many parameters at
once. Control points are stacked into an array, the parameters are bounded
with a ``boundednumbers.BoundType`` policy, and the reduction runs over
whole arrays. Each arithmetic step rounds like the scalar path does, so
results agree with ``serp``/``lerp``/``smerp`` called point by point.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np
from numpy import ndarray
from boundednumbers import BoundType, bound_type_to_np_function

from ..types.element_type import ElementType, element_dtypes
from ..vectors.vector_base import VectorBase
from ..vectors.registry import vector_class
from .core import check_control_points


# =============================================================================
# Parameter bounding
# =============================================================================
def bound_params(ts, bound_type: BoundType = BoundType.IGNORE) -> ndarray:
    """
    Coerce parameters to a 1D float64 array and bound them to [0, 1].

    Args:
        ts: Scalar or 1D array-like of curve parameters
        bound_type: IGNORE keeps values as-is (extrapolation), CLAMP, BOUNCE
            and CYCLIC fold them back into [0, 1]
    Returns:
        1D float64 array
    """
    ts = np.atleast_1d(np.asarray(ts, dtype=np.float64))
    if ts.ndim != 1:
        raise ValueError(f"parameters must be a scalar or 1D array, got shape {ts.shape}")
    if bound_type is BoundType.IGNORE:
        return ts
    fn = bound_type_to_np_function[bound_type]
    return np.asarray(fn(ts, 0.0, 1.0), dtype=np.float64)


# =============================================================================
# Control points <-> arrays
# =============================================================================
def as_point_array(points: Iterable) -> Tuple[ndarray, Optional[type[VectorBase]]]:
    """
    Stack control points into an array.

    Scalars become an ``(N,)`` float64 array. Vectors become an ``(N, D)``
    float32 array; integer vectors are widened since any curve through them
    is float-valued.

    Returns:
        ``(array, cls)`` where ``cls`` is the float vector type of the
        result, or None for scalar points
    """
    points = check_control_points(points)
    first = points[0]

    if isinstance(first, VectorBase):
        cls = vector_class(first.num_components, ElementType.FLOAT)
        arr = np.stack([p.to_array() for p in points]).astype(element_dtypes[ElementType.FLOAT])
        return arr, cls

    arr = np.asarray(points, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"scalar control points must form a 1D sequence, got shape {arr.shape}")
    return arr, None


def to_vectors(array: ndarray, cls: type[VectorBase]) -> List[VectorBase]:
    """Turn an ``(M, D)`` array of samples into a list of ``cls`` instances."""
    array = np.asarray(array)
    if array.ndim != 2 or array.shape[1] != cls.num_components:
        raise ValueError(
            f"expected shape (M, {cls.num_components}) for {cls.__name__}, got {array.shape}"
        )
    return [cls.from_array(row) for row in array]


# =============================================================================
# Array kernels
# =============================================================================
def _broadcast_params(ts: ndarray, arr: ndarray) -> ndarray:
    # (M,) -> (M,) for scalar points, (M, 1) for vector points
    return ts.reshape((-1,) + (1,) * (arr.ndim - 1))


def _lerp_arrays(a: ndarray, b: ndarray, t: ndarray) -> ndarray:
    # The step is formed in float64 then rounded, as the scalar path rounds
    # a vector scaled by a Python float.
    dtype = a.dtype
    step = ((b - a) * t).astype(dtype)
    return a + step


def _reduce(arr: ndarray, t: ndarray) -> ndarray:
    """Level-by-level de Casteljau reduction of ``arr`` (N, ...) at every ``t``."""
    n = arr.shape[0]
    P = arr[:, np.newaxis, ...]  # (N, 1, ...)

    if n == 2:
        return _lerp_arrays(P[0], P[1], t)

    buffer = _lerp_arrays(P[:-1], P[1:], t[np.newaxis, ...])  # (N-1, M, ...)

    for level in range(n - 1, 1, -1):
        # RHS reads slot i + 1 before it is overwritten, matching the
        # in-place left-to-right pass
        buffer[:level - 1] = _lerp_arrays(buffer[:level - 1], buffer[1:level], t[np.newaxis, ...])

    return buffer[0]


# =============================================================================
# Public sampling API
# =============================================================================
def sample_serp(points: Iterable, ts, bound_type: BoundType = BoundType.IGNORE) -> ndarray:
    """
    Sample the Bezier curve through ``points`` at every parameter in ``ts``.

    Returns:
        Array of shape ``(M,)`` for scalar points or ``(M, D)`` for vectors
    """
    arr, _ = as_point_array(points)
    t = _broadcast_params(bound_params(ts, bound_type), arr)
    return _reduce(arr, t)


def sample_lerp(a, b, ts, bound_type: BoundType = BoundType.IGNORE) -> ndarray:
    """Sample ``lerp(a, b, t)`` at every parameter in ``ts``."""
    return sample_serp((a, b), ts, bound_type)


def sample_smerp(a, b, k: float, ts, bound_type: BoundType = BoundType.IGNORE) -> ndarray:
    """Sample ``smerp(a, b, k, t)`` at every parameter in ``ts``."""
    arr, _ = as_point_array((a, b))
    t = bound_params(ts, bound_type)
    factor = t * (1 - 2 * k * (1 - 3 * t + 2 * t * t))
    return _lerp_arrays(arr[0], arr[1], _broadcast_params(factor, arr))


__all__ = [
    "bound_params",
    "as_point_array",
    "to_vectors",
    "sample_serp",
    "sample_lerp",
    "sample_smerp",
]
