"""lerpkit: small 2D/3D vector algebra and curve interpolation toolkit."""

from .types.element_type import ElementType
from .vectors import (
    VectorBase,
    DegenerateVectorWarning,
    Vec2,
    Vec3,
    IVec2,
    IVec3,
    vector_class,
    add,
    sub,
    neg,
    scale,
    hadamard,
    divide,
    convert,
    is_lossless,
    seed,
    random_vec2,
    random_vec3,
    random_ivec2,
    random_ivec3,
    random_in_circle,
    random_in_sphere,
)
from .interp import (
    lerp,
    smerp,
    serp3,
    serp4,
    serp,
    bound_params,
    to_vectors,
    sample_lerp,
    sample_smerp,
    sample_serp,
)

__version__ = "1.0.0"

__all__ = [
    # vector types
    "ElementType",
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
    # random
    "seed",
    "random_vec2",
    "random_vec3",
    "random_ivec2",
    "random_ivec3",
    "random_in_circle",
    "random_in_sphere",
    # interpolation
    "lerp",
    "smerp",
    "serp3",
    "serp4",
    "serp",
    "bound_params",
    "to_vectors",
    "sample_lerp",
    "sample_smerp",
    "sample_serp",
    # Version
    "__version__",
]
