"""
lerpkit Vector Types
====================

Immutable fixed-size vectors over float32 (``Vec2``, ``Vec3``) and int32
(``IVec2``, ``IVec3``) components.

Features
--------
- Immutable instances with structural equality and hashing
- Componentwise arithmetic, scalar scaling, Hadamard product and division
- Length, distance and normalization queries
- Named lossless (``to_*``) and lossy (``truncate_to_*``) conversions
- Uniform random construction with per-thread generators

Usage
-----
>>> from lerpkit.vectors import Vec2, IVec2
>>>
>>> a = Vec2(1.5, -2.0)
>>> b = IVec2(3, 4)
>>> a + b              # IVec2 promotes to Vec2
Vec2(x=4.5, y=2.0)
>>> b.length()
5.0
>>> Vec2(-1.7, 2.9).truncate_to_ivec2()
IVec2(x=-1, y=2)
"""

from .vector_base import VectorBase, DegenerateVectorWarning
from .arithmetic import add, sub, neg, scale, hadamard, divide
from .vec2 import Vec2, IVec2
from .vec3 import Vec3, IVec3
from .registry import vector_class
from .conversion import convert, is_lossless, truncate_component
from .random_vectors import (
    seed,
    get_generator,
    random_vec2,
    random_vec3,
    random_ivec2,
    random_ivec3,
    random_in_circle,
    random_in_sphere,
)

__all__ = [
    "VectorBase",
    "DegenerateVectorWarning",
    "Vec2",
    "Vec3",
    "IVec2",
    "IVec3",
    "vector_class",
    # arithmetic
    "add",
    "sub",
    "neg",
    "scale",
    "hadamard",
    "divide",
    # conversions
    "convert",
    "is_lossless",
    "truncate_component",
    # random
    "seed",
    "get_generator",
    "random_vec2",
    "random_vec3",
    "random_ivec2",
    "random_ivec3",
    "random_in_circle",
    "random_in_sphere",
]
