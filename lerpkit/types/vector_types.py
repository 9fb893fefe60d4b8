from __future__ import annotations
from typing import Protocol, Sequence, Tuple, TypeVar, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
IntComponents = Tuple[int, ...]
FloatComponents = Tuple[float, ...]
Components = Union[IntComponents, FloatComponents]
ScalarPair = Tuple[Scalar, Scalar]
# Half-range, one (min, max) pair for every axis, or one pair per axis
RangeSpec = Union[Scalar, ScalarPair, Sequence[ScalarPair]]


class Interpolable(Protocol):
    """Anything closed under addition, subtraction and scalar scaling."""

    def __add__(self, other, /): ...
    def __sub__(self, other, /): ...
    def __mul__(self, scalar, /): ...


T = TypeVar("T", bound=Interpolable)


def is_scalar(value: object) -> bool:
    """
    Check whether a value is a real scalar (Python or numpy), excluding bool.

    Args:
        value: Object to test
    Returns:
        True for ints and floats, False otherwise
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


def components_to_array(components: Components, dtype=np.float64) -> ndarray:
    """
    Convert a component tuple to a 1D numpy array.

    Args:
        components: Tuple of component values
        dtype: Target numpy dtype
    Returns:
        numpy array representation
    """
    return np.asarray(components, dtype=dtype)
