from __future__ import annotations
from typing import TYPE_CHECKING, Callable, ClassVar, Tuple
from ..types.element_type import ElementType
from .vector_base import Planar, build_registry

if TYPE_CHECKING:
    from .vec3 import Vec3, IVec3


class Vec2(Planar):
    """2D vector with float32 components."""
    __slots__ = ()

    num_components: ClassVar[int] = 2
    element_type: ClassVar[ElementType] = ElementType.FLOAT
    component_names: ClassVar[Tuple[str, ...]] = ("x", "y")

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]
    UP: ClassVar[Vec2]
    DOWN: ClassVar[Vec2]
    RIGHT: ClassVar[Vec2]
    LEFT: ClassVar[Vec2]

    # installed by .conversion
    to_vec3: Callable[[Vec2], Vec3]
    truncate_to_ivec2: Callable[[Vec2], IVec2]
    truncate_to_ivec3: Callable[[Vec2], IVec3]

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)


class IVec2(Planar):
    """2D vector with int32 components, for grid and lattice coordinates."""
    __slots__ = ()

    num_components: ClassVar[int] = 2
    element_type: ClassVar[ElementType] = ElementType.INT
    component_names: ClassVar[Tuple[str, ...]] = ("x", "y")

    ZERO: ClassVar[IVec2]
    ONE: ClassVar[IVec2]
    UP: ClassVar[IVec2]
    DOWN: ClassVar[IVec2]
    RIGHT: ClassVar[IVec2]
    LEFT: ClassVar[IVec2]

    # installed by .conversion
    to_vec2: Callable[[IVec2], Vec2]
    to_vec3: Callable[[IVec2], Vec3]
    to_ivec3: Callable[[IVec2], IVec3]

    def __init__(self, x: int = 0, y: int = 0) -> None:
        super().__init__(x, y)


for _cls in (Vec2, IVec2):
    _cls.ZERO = _cls(0, 0)
    _cls.ONE = _cls(1, 1)
    _cls.UP = _cls(0, 1)
    _cls.DOWN = _cls(0, -1)
    _cls.RIGHT = _cls(1, 0)
    _cls.LEFT = _cls(-1, 0)
del _cls


vec2_registry = build_registry(Vec2, IVec2)
