# No dependencies
from enum import Enum
import numpy as np
class ElementType(str, Enum):
    INT = "int"
    FLOAT = "float"

element_classes = {
    ElementType.INT: int,
    ElementType.FLOAT: float,
}

element_dtypes = {
    ElementType.INT: np.int32,
    ElementType.FLOAT: np.float32,
}

element_valid_types = {
    ElementType.INT: (int, np.integer),
    ElementType.FLOAT: (int, float, np.integer, np.floating),
}

INT32_MIN = int(np.iinfo(np.int32).min)
INT32_MAX = int(np.iinfo(np.int32).max)

# Default tolerance used when comparing curve evaluations
DEFAULT_REL_TOL = 1e-5
