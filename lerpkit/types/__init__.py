from .element_type import (
    ElementType,
    element_classes,
    element_dtypes,
    element_valid_types,
    INT32_MIN,
    INT32_MAX,
    DEFAULT_REL_TOL,
)
from .vector_types import (
    Scalar,
    Components,
    RangeSpec,
    Interpolable,
    is_scalar,
    components_to_array,
)

__all__ = [
    "ElementType",
    "element_classes",
    "element_dtypes",
    "element_valid_types",
    "INT32_MIN",
    "INT32_MAX",
    "DEFAULT_REL_TOL",
    "Scalar",
    "Components",
    "RangeSpec",
    "Interpolable",
    "is_scalar",
    "components_to_array",
]
