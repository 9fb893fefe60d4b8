"""
Uniform random vector construction.

Each thread owns its own ``numpy.random.Generator`` (kept in a
``threading.local``), so concurrent callers never share generator state.
:func:`seed` reseeds the calling thread only. Every function also takes an
explicit ``rng`` that wins over the thread generator.
"""

from __future__ import annotations
from collections.abc import Sequence
from typing import List, Optional, Tuple
import threading
import numpy as np
from ..types.element_type import ElementType
from ..types.vector_types import RangeSpec, Scalar, is_scalar
from ..utils import value_or_default
from .vector_base import VectorBase
from .vec2 import Vec2, IVec2
from .vec3 import Vec3, IVec3

_local = threading.local()


def get_generator() -> np.random.Generator:
    """Return the calling thread's generator, creating it on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = np.random.default_rng()
        _local.rng = rng
    return rng


def seed(value: Optional[int] = None) -> None:
    """Reseed the calling thread's generator."""
    _local.rng = np.random.default_rng(value)


def _is_integral(value: Scalar) -> bool:
    return isinstance(value, (int, np.integer))


def resolve_ranges(spec: RangeSpec, num_components: int, *, integral: bool = False) -> List[Tuple[Scalar, Scalar]]:
    """
    Expand a range spec into one inclusive ``(min, max)`` pair per axis.

    Args:
        spec: Half-range ``h`` (meaning ``[-h, h]``), a single ``(min, max)``
            pair for every axis, or a sequence of one pair per axis
        num_components: Number of axes of the target vector
        integral: Require integer bounds (for the integer vector types)
    Returns:
        List of ``num_components`` pairs
    """
    if is_scalar(spec):
        if spec < 0:
            raise ValueError(f"half-range must be non-negative, got {spec}")
        pairs = [(-spec, spec)] * num_components
    elif isinstance(spec, (Sequence, np.ndarray)) and not isinstance(spec, str):
        if len(spec) == 2 and all(is_scalar(v) for v in spec):
            pairs = [(spec[0], spec[1])] * num_components
        else:
            if len(spec) != num_components:
                raise ValueError(
                    f"expected {num_components} per-axis ranges, got {len(spec)}"
                )
            pairs = []
            for axis, axis_range in enumerate(spec):
                if not (
                    isinstance(axis_range, (Sequence, np.ndarray))
                    and len(axis_range) == 2
                    and all(is_scalar(v) for v in axis_range)
                ):
                    raise ValueError(f"range for axis {axis} must be a (min, max) pair, got {axis_range!r}")
                pairs.append((axis_range[0], axis_range[1]))
    else:
        raise ValueError(f"invalid range spec {spec!r}")

    for lo, hi in pairs:
        if lo > hi:
            raise ValueError(f"range minimum {lo} exceeds maximum {hi}")
        if integral and not (_is_integral(lo) and _is_integral(hi)):
            raise ValueError(f"integer vectors need integer range bounds, got ({lo}, {hi})")
    return pairs


def _float32_bounds(lows: np.ndarray, highs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """Innermost float32 values that still lie inside each ``[lo, hi]``."""
    lo32 = lows.astype(np.float32)
    hi32 = highs.astype(np.float32)
    lo32 = np.where(lo32 < lows, np.nextafter(lo32, np.float32(np.inf)), lo32)
    hi32 = np.where(hi32 > highs, np.nextafter(hi32, np.float32(-np.inf)), hi32)
    return lo32, hi32


def random_vector(cls: type[VectorBase], spec: RangeSpec, *, rng: Optional[np.random.Generator] = None) -> VectorBase:
    """Draw each component of a ``cls`` instance independently and uniformly from its range."""
    rng = value_or_default(rng, get_generator())
    integral = cls.element_type is ElementType.INT
    pairs = resolve_ranges(spec, cls.num_components, integral=integral)
    lows = np.array([lo for lo, _ in pairs])
    highs = np.array([hi for _, hi in pairs])

    if integral:
        values = rng.integers(lows, highs, endpoint=True, dtype=np.int64)
    else:
        lows, highs = lows.astype(np.float64), highs.astype(np.float64)
        values = np.asarray(rng.uniform(lows, highs)).astype(np.float32)
        # rounding to float32 may step past a bound float32 cannot represent;
        # a range holding no float32 at all keeps the nearest value
        lo32, hi32 = _float32_bounds(lows, highs)
        values = np.where(lo32 <= hi32, np.clip(values, lo32, hi32), values)
    return cls(*values.tolist())


def random_vec2(spec: RangeSpec = 1.0, *, rng: Optional[np.random.Generator] = None) -> Vec2:
    return random_vector(Vec2, spec, rng=rng)  # type: ignore[return-value]


def random_vec3(spec: RangeSpec = 1.0, *, rng: Optional[np.random.Generator] = None) -> Vec3:
    return random_vector(Vec3, spec, rng=rng)  # type: ignore[return-value]


def random_ivec2(spec: RangeSpec = 1, *, rng: Optional[np.random.Generator] = None) -> IVec2:
    return random_vector(IVec2, spec, rng=rng)  # type: ignore[return-value]


def random_ivec3(spec: RangeSpec = 1, *, rng: Optional[np.random.Generator] = None) -> IVec3:
    return random_vector(IVec3, spec, rng=rng)  # type: ignore[return-value]


def random_in_circle(max_radius: float = 1.0, *, rng: Optional[np.random.Generator] = None) -> Vec2:
    """
    Uniform random point inside a disk.

    The radius is scaled by ``sqrt(u)``; a linear scale would crowd the
    points toward the center.
    """
    if max_radius < 0:
        raise ValueError(f"max_radius must be non-negative, got {max_radius}")
    rng = value_or_default(rng, get_generator())
    angle = rng.uniform(0.0, 2.0 * np.pi)
    radius = max_radius * np.sqrt(rng.uniform())
    return Vec2(radius * np.cos(angle), radius * np.sin(angle))


def random_in_sphere(max_radius: float = 1.0, *, rng: Optional[np.random.Generator] = None) -> Vec3:
    """
    Uniform random point inside a solid ball.

    The direction comes from a normalized Gaussian triple and the radius is
    scaled by ``cbrt(u)`` so the density is uniform over the volume.
    """
    if max_radius < 0:
        raise ValueError(f"max_radius must be non-negative, got {max_radius}")
    rng = value_or_default(rng, get_generator())
    direction = rng.standard_normal(3)
    norm = np.linalg.norm(direction)
    while norm == 0:
        direction = rng.standard_normal(3)
        norm = np.linalg.norm(direction)
    radius = max_radius * np.cbrt(rng.uniform())
    return Vec3(*(direction / norm * radius).tolist())
