import numpy as np
from numpy import ndarray
from typing import Callable
from ..types.element_type import ElementType, element_dtypes
from ..types.vector_types import Scalar, is_scalar
from .vector_base import VectorBase

ArrayOp = Callable[[ndarray, ndarray, ElementType], ndarray]


def joint_class(a: type[VectorBase], b: type[VectorBase]) -> type[VectorBase]:
    """
    Smallest vector type both operands convert into without loss.

    Integer promotes to float and 2D promotes to 3D, following the
    lossless edges of the conversion table.
    """
    from .registry import vector_class  # local import to avoid cycles

    dims = max(a.num_components, b.num_components)
    if ElementType.FLOAT in (a.element_type, b.element_type):
        return vector_class(dims, ElementType.FLOAT)
    return vector_class(dims, ElementType.INT)


def promote(vector: VectorBase, target: type[VectorBase]) -> ndarray:
    """Components of ``vector`` widened to ``target`` (missing axes are zero)."""
    padding = (0,) * (target.num_components - vector.num_components)
    return np.asarray(vector.value + padding, dtype=element_dtypes[target.element_type])


# -----------------------
# Array kernels
# -----------------------
def _add(a: ndarray, b: ndarray, element_type: ElementType) -> ndarray:
    return np.add(a, b)


def _subtract(a: ndarray, b: ndarray, element_type: ElementType) -> ndarray:
    return np.subtract(a, b)


def _multiply(a: ndarray, b: ndarray, element_type: ElementType) -> ndarray:
    return np.multiply(a, b)


def _divide(a: ndarray, b: ndarray, element_type: ElementType) -> ndarray:
    if element_type is ElementType.FLOAT:
        # IEEE semantics: x/0 gives inf or nan
        with np.errstate(divide='ignore', invalid='ignore'):
            return np.divide(a, b)

    if np.any(b == 0):
        raise ZeroDivisionError("integer vector division by zero")
    # C-style division truncates toward zero; int64 keeps INT32_MIN / -1 representable
    a64 = a.astype(np.int64)
    b64 = np.broadcast_to(b, a.shape).astype(np.int64)
    quotient = np.abs(a64) // np.abs(b64) * np.sign(a64) * np.sign(b64)
    return quotient.astype(np.int32)


# -----------------------
# Core arithmetic engine
# -----------------------
def _integer_scalar(value, op: ArrayOp) -> ndarray:
    value = int(value)
    if op is _divide:
        # any |divisor| >= 2**32 yields the same int32 quotients as 2**32
        return np.asarray(max(-2**32, min(2**32, value)), dtype=np.int64)
    # two's complement wrap, so the product wraps like int32 arithmetic
    return np.asarray((value + 2**31) % 2**32 - 2**31, dtype=np.int32)


def _operate(left: VectorBase, right, op: ArrayOp, *, scalar_ok: bool, reflected: bool = False):
    from .registry import vector_class  # local import to avoid cycles

    if isinstance(right, VectorBase):
        cls = joint_class(type(left), type(right))
        a = promote(left, cls)
        b = promote(right, cls)
    elif scalar_ok and is_scalar(right):
        cls = type(left)
        if cls.element_type is ElementType.INT and isinstance(right, (float, np.floating)):
            # int vector scaled by a float lands in the float counterpart
            cls = vector_class(cls.num_components, ElementType.FLOAT)
        if cls.element_type is ElementType.FLOAT:
            # scalar factors keep double precision, the result is rounded once to float32
            a = np.asarray(left.value, dtype=np.float64)
            b = np.asarray(right, dtype=np.float64)
        else:
            a = promote(left, cls)
            b = _integer_scalar(right, op)
    else:
        return NotImplemented

    if reflected:
        a, b = b, a

    with np.errstate(over='ignore'):
        return cls._from_array(op(a, b, cls.element_type))


def _binary_operator(op: ArrayOp, *, scalar_ok: bool, reflected: bool = False):
    def operation(self, other):
        return _operate(self, other, op, scalar_ok=scalar_ok, reflected=reflected)
    return operation


def _negate(self: VectorBase) -> VectorBase:
    arr = self.to_array()
    with np.errstate(over='ignore'):
        return self.__class__._from_array(np.negative(arr))


def _require(result, symbol: str, a, b):
    if result is NotImplemented:
        raise TypeError(
            f"unsupported operand types for {symbol}: "
            f"{type(a).__name__!r} and {type(b).__name__!r}"
        )
    return result


# -----------------------
# Free-function forms
# -----------------------
def add(a: VectorBase, b: VectorBase) -> VectorBase:
    """Componentwise sum of two vectors."""
    return _require(_operate(a, b, _add, scalar_ok=False), "+", a, b)


def sub(a: VectorBase, b: VectorBase) -> VectorBase:
    """Componentwise difference ``a - b``."""
    return _require(_operate(a, b, _subtract, scalar_ok=False), "-", a, b)


def neg(a: VectorBase) -> VectorBase:
    return _negate(a)


def scale(a: VectorBase, scalar: Scalar) -> VectorBase:
    """Multiply every component by ``scalar``."""
    if isinstance(scalar, VectorBase):
        raise TypeError("scale expects a scalar factor; use hadamard for vectors")
    return _require(_operate(a, scalar, _multiply, scalar_ok=True), "*", a, scalar)


def hadamard(a: VectorBase, b: VectorBase) -> VectorBase:
    """Componentwise (Hadamard) product."""
    return _require(_operate(a, b, _multiply, scalar_ok=False), "*", a, b)


def divide(a: VectorBase, b: VectorBase | Scalar) -> VectorBase:
    """
    Divide by a scalar or componentwise by a vector.

    Integer vectors divided by integers truncate toward zero and raise
    ZeroDivisionError on a zero divisor. Float division follows IEEE-754.
    """
    return _require(_operate(a, b, _divide, scalar_ok=True), "/", a, b)


# Inject arithmetic operators into VectorBase
VectorBase.__add__ = _binary_operator(_add, scalar_ok=False)
VectorBase.__sub__ = _binary_operator(_subtract, scalar_ok=False)
VectorBase.__mul__ = _binary_operator(_multiply, scalar_ok=True)
VectorBase.__rmul__ = _binary_operator(_multiply, scalar_ok=True, reflected=True)
VectorBase.__truediv__ = _binary_operator(_divide, scalar_ok=True)
VectorBase.__neg__ = _negate
