import warnings

import numpy as np
import pytest

from lerpkit.types.element_type import INT32_MAX
from lerpkit.vectors import Vec2, Vec3, IVec2, IVec3, DegenerateVectorWarning


def test_length_and_length_squared():
    assert IVec2(3, 4).length() == 5.0
    assert IVec2(3, 4).length_squared() == 25.0
    assert Vec3(2, 3, 6).length() == 7.0
    assert isinstance(IVec3(1, 2, 2).length(), float)

def test_int_length_keeps_precision():
    assert IVec2(INT32_MAX, 0).length() == float(INT32_MAX)

def test_distance_to():
    assert Vec2(0, 0).distance_to(Vec2(3, 4)) == 5.0
    assert Vec2(0, 0).distance_squared_to(Vec2(3, 4)) == 25.0
    assert IVec3(1, 1, 1).distance_to(IVec3(1, 1, 4)) == 3.0

def test_distance_across_types():
    assert IVec2(0, 0).distance_to(Vec2(0.5, 0)) == 0.5
    assert Vec2(0, 0).distance_to(Vec3(0, 0, 2)) == 2.0

def test_distance_is_symmetric():
    rng = np.random.default_rng(42)
    for _ in range(200):
        a = Vec3(*rng.uniform(-100, 100, 3).tolist())
        b = Vec3(*rng.uniform(-100, 100, 3).tolist())
        assert a.distance_to(b) == b.distance_to(a)
        assert a.distance_squared_to(b) == b.distance_squared_to(a)

def test_distance_rejects_non_vectors():
    with pytest.raises(TypeError):
        Vec2(0, 0).distance_to((1, 1))

def test_normalized():
    n = Vec2(3, 4).normalized()
    assert isinstance(n, Vec2)
    assert np.allclose(tuple(n), (0.6, 0.8), atol=1e-6)
    assert np.isclose(n.length(), 1.0, atol=1e-6)

def test_int_normalized_is_float():
    n = IVec2(0, 5).normalized()
    assert isinstance(n, Vec2)
    assert n == Vec2(0, 1)
    assert IVec3(0, 0, -2).normalized() == Vec3(0, 0, -1)

def test_direction_to():
    assert Vec2(1, 1).direction_to(Vec2(1, 5)) == Vec2(0, 1)
    assert IVec3(0, 0, 0).direction_to(IVec3(3, 0, 0)) == Vec3(1, 0, 0)
    assert Vec2(0, 0).direction_to(Vec3(0, 0, 2)) == Vec3(0, 0, 1)

def test_zero_length_normalized_warns_and_returns_zero():
    with pytest.warns(DegenerateVectorWarning):
        assert Vec2.ZERO.normalized() == Vec2.ZERO
    with pytest.warns(DegenerateVectorWarning):
        assert IVec3.ZERO.normalized() == Vec3.ZERO

def test_direction_to_self_warns_and_returns_zero():
    p = IVec3(1, 2, 3)
    with pytest.warns(DegenerateVectorWarning, match="zero-length"):
        assert p.direction_to(p) == Vec3.ZERO

def test_degenerate_warning_can_be_escalated():
    with warnings.catch_warnings():
        warnings.simplefilter("error", DegenerateVectorWarning)
        with pytest.raises(DegenerateVectorWarning):
            Vec3.ZERO.normalized()

def test_non_degenerate_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        Vec2(1e-3, 0).normalized()


class TestExtremeMagnitudes:
    """Lengths of very large and very small float vectors stay finite and non-zero."""

    def test_large_length_does_not_overflow(self):
        assert Vec2(1e20, 0).length() == pytest.approx(1e20, rel=1e-7)
        assert Vec2(0, 0).distance_squared_to(Vec2(1e20, 0)) == pytest.approx(1e40, rel=1e-6)

    def test_large_vectors_normalize(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Vec2(1e20, 0).normalized() == Vec2(1, 0)
            assert Vec3(0, 0, 0).direction_to(Vec3(0, 3e19, 0)) == Vec3(0, 1, 0)

    def test_tiny_length_is_not_zero(self):
        assert Vec3(3e-30, 4e-30, 0).length() == pytest.approx(5e-30, rel=1e-6)

    def test_tiny_vectors_normalize(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert Vec2(1e-23, 0).normalized() == Vec2(1, 0)
            assert Vec2(0, 0).direction_to(Vec2(0, -1e-30)) == Vec2(0, -1)
