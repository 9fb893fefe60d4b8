from __future__ import annotations
from typing import Any, ClassVar, Iterable, Iterator, Tuple, Self
import warnings
import numpy as np
from numpy import ndarray
from ..types.element_type import (
    ElementType,
    element_classes,
    element_dtypes,
    element_valid_types,
    INT32_MIN,
    INT32_MAX,
)
from ..types.vector_types import Components, Scalar, components_to_array
from ..utils import get_dimension


class DegenerateVectorWarning(RuntimeWarning):
    """Emitted when a zero-length vector is normalized or used as a direction."""


def coerce_component(value: Any, element_type: ElementType) -> Scalar:
    """
    Validate a single component and bring it into the element domain.

    Float components are rounded to float32. Integer components must be
    integral and inside the int32 range; floats are rejected rather than
    silently truncated.

    Args:
        value: Raw component value
        element_type: Target element type
    Returns:
        The component as a Python int or float
    """
    if not isinstance(value, element_valid_types[element_type]):
        if element_type is ElementType.INT and isinstance(value, (float, np.floating)):
            raise TypeError(
                f"integer vectors take integral components, got {value!r}; "
                f"use a truncate_to_* conversion to drop the fraction"
            )
        raise TypeError(
            f"expected a {element_type.value} component, got {type(value).__name__}"
        )

    if element_type is ElementType.INT:
        value = int(value)
        if not INT32_MIN <= value <= INT32_MAX:
            raise OverflowError(f"component {value} is outside the int32 range")
        return value
    return float(np.float32(value))


def component_property(index: int, name: str) -> property:
    def getter(self: VectorBase) -> Scalar:
        return self._value[index]
    getter.__doc__ = f"The {name} component."
    return property(getter)


class VectorBase:
    __slots__ = ('_value', '_is_frozen')  # no __dict__, so no stray attributes

    num_components: ClassVar[int]
    element_type: ClassVar[ElementType]
    component_names: ClassVar[Tuple[str, ...]]

    # numpy must defer to our reflected operators instead of broadcasting
    __array_ufunc__ = None

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, *components: Scalar) -> None:
        count = get_dimension(components)
        if count != self.num_components:
            raise TypeError(
                f"{self.__class__.__name__} expects {self.num_components} components, got {count}"
            )

        self._value = tuple(coerce_component(c, self.element_type) for c in components)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    @classmethod
    def _from_array(cls, arr: ndarray) -> Self:
        """Build an instance from an array already computed in the element dtype."""
        dtype = element_dtypes[cls.element_type]
        arr = np.asarray(arr)
        if cls.element_type is ElementType.INT and arr.dtype.kind not in 'iu':
            raise TypeError(f"{cls.__name__} cannot be built from a {arr.dtype} array")
        to_python = element_classes[cls.element_type]

        obj = cls.__new__(cls)
        obj._value = tuple(to_python(c) for c in arr.astype(dtype).ravel())
        super(VectorBase, obj).__setattr__('_is_frozen', True)
        return obj

    @classmethod
    def from_iterable(cls, values: Iterable[Scalar]) -> Self:
        return cls(*values)

    @classmethod
    def from_array(cls, arr: ndarray) -> Self:
        """
        Build an instance from a 1D array of components.

        Values go through the same validation as the constructor, so a float
        array is rejected by the integer vector types.
        """
        arr = np.asarray(arr)
        if arr.ndim != 1:
            raise ValueError(f"{cls.__name__} expects a 1D array, got shape {arr.shape}")
        return cls(*arr.tolist())

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Components:
        return self._value

    @property
    def is_integer(self) -> bool:
        return self.element_type is ElementType.INT

    def to_array(self) -> ndarray:
        """Return the components as a numpy array in the element dtype."""
        return components_to_array(self._value, dtype=element_dtypes[self.element_type])

    def _with_component(self, index: int, value: Scalar) -> Self:
        values = list(self._value)
        values[index] = value
        return self.__class__(*values)

    def __iter__(self) -> Iterator[Scalar]:
        return iter(self._value)

    def __len__(self) -> int:
        return self.num_components

    # ------------------ VALUE SEMANTICS ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorBase):
            return NotImplemented
        return type(self) is type(other) and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.__class__.__name__, self._value))

    def __repr__(self) -> str:
        fields = ", ".join(f"{n}={v!r}" for n, v in zip(self.component_names, self._value))
        return f"{self.__class__.__name__}({fields})"

    def __reduce__(self):
        return (self.__class__, self._value)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo) -> Self:
        return self

    # ------------------ GEOMETRY ------------------
    def _geometry_array(self) -> ndarray:
        # float64 holds every int32 exactly and squares of any float32 without overflow
        return np.asarray(self._value, dtype=np.float64)

    def _difference_to(self, other: VectorBase) -> Tuple[ndarray, int]:
        """Return ``other - self`` as a geometry array, widened to the larger dimension."""
        if not isinstance(other, VectorBase):
            raise TypeError(f"expected a vector, got {type(other).__name__}")
        dims = max(self.num_components, other.num_components)
        a = np.zeros(dims, dtype=np.float64)
        b = np.zeros(dims, dtype=np.float64)
        a[:self.num_components] = self._value
        b[:other.num_components] = other._value
        return b - a, dims

    def length_squared(self) -> float:
        arr = self._geometry_array()
        return float(np.dot(arr, arr))

    def length(self) -> float:
        arr = self._geometry_array()
        return float(np.sqrt(np.dot(arr, arr)))

    def distance_squared_to(self, other: VectorBase) -> float:
        """
        Squared Euclidean distance to ``other``.

        Skips the square root, so prefer it over ``distance_to`` when only
        comparing distances.
        """
        diff, _ = self._difference_to(other)
        return float(np.dot(diff, diff))

    def distance_to(self, other: VectorBase) -> float:
        diff, _ = self._difference_to(other)
        return float(np.sqrt(np.dot(diff, diff)))

    def normalized(self) -> VectorBase:
        """
        Return the unit vector pointing the same way.

        Integer vectors normalize into their float counterpart. A zero-length
        vector yields the float zero vector and a DegenerateVectorWarning.
        """
        return _normalize(self._geometry_array(), self.num_components, subject=self)

    def direction_to(self, other: VectorBase) -> VectorBase:
        """
        Unit vector pointing from this vector towards ``other``.

        Returns the float zero vector (with a DegenerateVectorWarning) when
        both points coincide.
        """
        diff, dims = self._difference_to(other)
        return _normalize(diff, dims, subject=self)


def _normalize(arr: ndarray, num_components: int, subject: VectorBase) -> VectorBase:
    from .registry import vector_class  # local import to avoid cycles

    target = vector_class(num_components, ElementType.FLOAT)
    length = np.sqrt(np.dot(arr, arr))
    if length == 0:
        warnings.warn(
            f"cannot normalize a zero-length vector ({subject!r}); returning {target.__name__}.ZERO",
            DegenerateVectorWarning,
            stacklevel=3,
        )
        return target.ZERO
    return target._from_array((arr / length).astype(np.float32))


class Planar(VectorBase):
    """Accessors shared by the 2D vector types."""
    __slots__ = ()

    x = component_property(0, "x")
    y = component_property(1, "y")

    def with_x(self, x: Scalar) -> Self:
        return self._with_component(0, x)

    def with_y(self, y: Scalar) -> Self:
        return self._with_component(1, y)


class Spatial(VectorBase):
    """Accessors shared by the 3D vector types."""
    __slots__ = ()

    x = component_property(0, "x")
    y = component_property(1, "y")
    z = component_property(2, "z")

    def with_x(self, x: Scalar) -> Self:
        return self._with_component(0, x)

    def with_y(self, y: Scalar) -> Self:
        return self._with_component(1, y)

    def with_z(self, z: Scalar) -> Self:
        return self._with_component(2, z)


def build_registry(*classes: type[VectorBase]):
    return {
        (cls.num_components, cls.element_type): cls
        for cls in classes
    }
