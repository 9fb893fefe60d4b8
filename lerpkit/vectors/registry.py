from ..types.element_type import ElementType
from .vector_base import VectorBase
from .vec2 import vec2_registry
from .vec3 import vec3_registry

unified_registry: dict[tuple[int, ElementType], type[VectorBase]] = {**vec2_registry, **vec3_registry}


def vector_class(num_components: int, element_type: ElementType | str) -> type[VectorBase]:
    """Look up the vector type for a dimension and element type."""
    try:
        return unified_registry[(num_components, ElementType(element_type))]
    except (KeyError, ValueError):
        raise ValueError(
            f"no vector type with {num_components} {element_type} components"
        ) from None
