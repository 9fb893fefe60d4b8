"""
Conversions between the four vector types.

Lossless conversions (integer to float, 2D to 3D with ``z = 0``) are exposed
as ``to_*`` methods. Conversions that drop information (float to integer
truncation, 3D to 2D) are exposed as ``truncate_to_*`` methods, and the
generic :func:`convert` refuses them unless ``allow_lossy=True``.
"""

from __future__ import annotations
from typing import TypeVar
import numpy as np
from ..types.element_type import ElementType, INT32_MIN, INT32_MAX
from .vector_base import VectorBase
from .vec2 import Vec2, IVec2
from .vec3 import Vec3, IVec3

V = TypeVar("V", bound=VectorBase)


def is_lossless(source: type[VectorBase], target: type[VectorBase]) -> bool:
    """
    Whether converting ``source`` into ``target`` keeps every component.

    Integer to float counts as lossless. That holds exactly for integers up
    to 2**24 in magnitude, the range float32 represents without rounding.
    """
    widens = target.num_components >= source.num_components
    keeps_precision = (
        source.element_type is ElementType.INT
        or target.element_type is ElementType.FLOAT
    )
    return widens and keeps_precision


def truncate_component(value: float) -> int:
    """Drop the fractional part toward zero (C-style cast, not floor)."""
    if not np.isfinite(value):
        raise ValueError(f"cannot truncate non-finite component {value!r} to an integer")
    truncated = int(np.trunc(value))
    if not INT32_MIN <= truncated <= INT32_MAX:
        raise OverflowError(f"component {value!r} is outside the int32 range")
    return truncated


def convert(vector: VectorBase, target: type[V], *, allow_lossy: bool = False) -> V:
    """
    Convert a vector to another vector type.

    Args:
        vector: Vector to convert
        target: Destination vector class
        allow_lossy: Permit truncating conversions (float to int, 3D to 2D)
    Returns:
        New instance of ``target``
    Raises:
        TypeError: if the conversion would lose information and
            ``allow_lossy`` is False
    """
    if not isinstance(vector, VectorBase):
        raise TypeError(f"expected a vector, got {type(vector).__name__}")

    source = type(vector)
    if source is target:
        return vector  # type: ignore[return-value]

    if not allow_lossy and not is_lossless(source, target):
        raise TypeError(
            f"{source.__name__} -> {target.__name__} loses information; "
            f"pass allow_lossy=True or use a truncate_to_* method"
        )

    values = vector.value[:target.num_components]
    values = values + (0,) * (target.num_components - len(values))

    if source.element_type is ElementType.FLOAT and target.element_type is ElementType.INT:
        values = tuple(truncate_component(v) for v in values)

    return target(*values)


def _conversion_method(target: type[VectorBase], lossy: bool):
    def method(self: VectorBase) -> VectorBase:
        return convert(self, target, allow_lossy=lossy)
    method.__name__ = f"{'truncate_to' if lossy else 'to'}_{target.__name__.lower()}"
    method.__doc__ = (
        f"Convert to {target.__name__}"
        + (", truncating toward zero / dropping trailing axes." if lossy else " without loss.")
    )
    return method


_METHODS: dict[type[VectorBase], tuple[type[VectorBase], ...]] = {
    Vec2: (Vec3, IVec2, IVec3),
    Vec3: (Vec2, IVec3),
    IVec2: (Vec2, Vec3, IVec3),
    IVec3: (Vec3, IVec2),
}

# Install to_* / truncate_to_* methods on the vector classes
for _source, _targets in _METHODS.items():
    for _target in _targets:
        _method = _conversion_method(_target, lossy=not is_lossless(_source, _target))
        setattr(_source, _method.__name__, _method)
del _source, _targets, _target, _method
