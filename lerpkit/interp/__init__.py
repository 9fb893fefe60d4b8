"""
Interpolation engine.

Pure curve-evaluation functions shared by scalars and vectors, plus
numpy-vectorized samplers for evaluating a curve at many parameters.
"""

from .core import (
    lerp,
    smerp,
    serp3,
    serp4,
    serp,
    check_control_points,
)
from .sampling import (
    bound_params,
    as_point_array,
    to_vectors,
    sample_lerp,
    sample_smerp,
    sample_serp,
)

__all__ = [
    "lerp",
    "smerp",
    "serp3",
    "serp4",
    "serp",
    "check_control_points",
    "bound_params",
    "as_point_array",
    "to_vectors",
    "sample_lerp",
    "sample_smerp",
    "sample_serp",
]
