from __future__ import annotations
from typing import TYPE_CHECKING, Callable, ClassVar, Tuple
from ..types.element_type import ElementType
from .vector_base import Spatial, build_registry

if TYPE_CHECKING:
    from .vec2 import Vec2, IVec2


class Vec3(Spatial):
    """3D vector with float32 components."""
    __slots__ = ()

    num_components: ClassVar[int] = 3
    element_type: ClassVar[ElementType] = ElementType.FLOAT
    component_names: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    UP: ClassVar[Vec3]
    DOWN: ClassVar[Vec3]
    RIGHT: ClassVar[Vec3]
    LEFT: ClassVar[Vec3]
    FORWARD: ClassVar[Vec3]
    BACK: ClassVar[Vec3]

    # installed by .conversion
    truncate_to_vec2: Callable[[Vec3], Vec2]
    truncate_to_ivec3: Callable[[Vec3], IVec3]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)


class IVec3(Spatial):
    """3D vector with int32 components, for grid and lattice coordinates."""
    __slots__ = ()

    num_components: ClassVar[int] = 3
    element_type: ClassVar[ElementType] = ElementType.INT
    component_names: ClassVar[Tuple[str, ...]] = ("x", "y", "z")

    ZERO: ClassVar[IVec3]
    ONE: ClassVar[IVec3]
    UP: ClassVar[IVec3]
    DOWN: ClassVar[IVec3]
    RIGHT: ClassVar[IVec3]
    LEFT: ClassVar[IVec3]
    FORWARD: ClassVar[IVec3]
    BACK: ClassVar[IVec3]

    # installed by .conversion
    to_vec3: Callable[[IVec3], Vec3]
    truncate_to_ivec2: Callable[[IVec3], IVec2]

    def __init__(self, x: int = 0, y: int = 0, z: int = 0) -> None:
        super().__init__(x, y, z)


for _cls in (Vec3, IVec3):
    _cls.ZERO = _cls(0, 0, 0)
    _cls.ONE = _cls(1, 1, 1)
    _cls.UP = _cls(0, 1, 0)
    _cls.DOWN = _cls(0, -1, 0)
    _cls.RIGHT = _cls(1, 0, 0)
    _cls.LEFT = _cls(-1, 0, 0)
    _cls.FORWARD = _cls(0, 0, 1)
    _cls.BACK = _cls(0, 0, -1)
del _cls


vec3_registry = build_registry(Vec3, IVec3)
