from concurrent.futures import ThreadPoolExecutor
from math import comb

import numpy as np
import pytest

from lerpkit.interp import lerp, serp, serp3, serp4
from lerpkit.types.element_type import INT32_MAX, INT32_MIN
from lerpkit.vectors import Vec2, Vec3, IVec2
from ..samples import all_triples, all_quads, components, params


def bernstein(points, t):
    """Reference Bezier evaluation in float64 from the explicit Bernstein sum."""
    n = len(points) - 1
    return sum(comb(n, i) * (1 - t) ** (n - i) * t ** i * p for i, p in enumerate(points))


class TestConcreteScenarios:

    def test_quadratic_peak(self):
        assert serp([0.0, 10.0, 0.0], 0.5) == 5.0

    def test_cubic_endpoints(self):
        points = [Vec2(0, 0), Vec2(0, 10), Vec2(10, 10), Vec2(10, 0)]
        assert serp(points, 0.0) == Vec2(0, 0)
        assert serp(points, 1.0) == Vec2(10, 0)

    def test_cubic_midpoint(self):
        points = [Vec2(0, 0), Vec2(0, 10), Vec2(10, 10), Vec2(10, 0)]
        assert serp(points, 0.5) == Vec2(5, 7.5)
        assert serp4(*points, 0.5) == Vec2(5, 7.5)

    def test_int_points_promote(self):
        result = serp([IVec2(0, 0), IVec2(4, 0), IVec2(4, 4)], 0.5)
        assert isinstance(result, Vec2)
        assert result == Vec2(3, 1)

    def test_int_points_spanning_int32(self):
        points = [IVec2(INT32_MIN, 0), IVec2(0, 0), IVec2(INT32_MAX, 0)]
        assert serp(points, 0.0) == Vec2(INT32_MIN, 0)
        assert serp(points, 1.0) == Vec2(INT32_MAX, 0)
        assert serp3(*points, 1.0) == Vec2(INT32_MAX, 0)
        assert np.allclose(components(serp(points, 0.5)), (0.0, 0.0), atol=1.0)


class TestClosedFormsMatchReduction:
    """serp3 / serp4 agree with the general evaluator."""

    def test_serp3(self):
        for points in all_triples:
            for t in params:
                assert np.allclose(
                    components(serp3(*points, t)),
                    components(serp(points, t)),
                    rtol=1e-5, atol=1e-4,
                )

    def test_serp4(self):
        for points in all_quads:
            for t in params:
                assert np.allclose(
                    components(serp4(*points, t)),
                    components(serp(points, t)),
                    rtol=1e-5, atol=1e-4,
                )

    def test_scalar_closed_forms_are_bernstein(self):
        for points in ((1.0, -2.0, 5.0), (0.5, 3.0, -1.0, 2.0)):
            for t in params:
                closed = serp3(*points, t) if len(points) == 3 else serp4(*points, t)
                assert closed == pytest.approx(bernstein(points, t), abs=1e-12)


class TestGeneralEvaluator:

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 8, 13])
    def test_endpoints(self, n):
        rng = np.random.default_rng(n)
        points = [float(v) for v in rng.integers(-50, 50, n)]
        assert serp(points, 0.0) == points[0]
        assert serp(points, 1.0) == points[-1]

    @pytest.mark.parametrize("n", [2, 3, 5, 7])
    def test_vector_endpoints(self, n):
        rng = np.random.default_rng(100 + n)
        points = [Vec3(*rng.integers(-20, 20, 3).tolist()) for _ in range(n)]
        assert serp(points, 0.0) == points[0]
        assert serp(points, 1.0) == points[-1]

    def test_matches_bernstein_sum(self):
        points = [0.0, 4.0, -3.0, 8.0, 1.5]
        for t in params:
            assert serp(points, t) == pytest.approx(bernstein(points, t), abs=1e-12)

    def test_two_points_is_lerp(self):
        for t in params:
            assert serp([Vec2(1, 2), Vec2(-3, 4)], t) == lerp(Vec2(1, 2), Vec2(-3, 4), t)

    def test_evenly_spaced_points_are_linear(self):
        for t in params:
            assert serp([0.0, 1.0, 2.0, 3.0], t) == pytest.approx(3.0 * t)

    def test_accepts_iterables_and_arrays(self):
        points = [1.0, 5.0, 2.0]
        expected = serp(points, 0.3)
        assert serp(iter(points), 0.3) == expected
        assert serp(np.array(points), 0.3) == pytest.approx(expected)

    def test_input_is_not_modified(self):
        points = [Vec3(0, 0, 0), Vec3(1, 1, 1), Vec3(2, 0, 2)]
        snapshot = list(points)
        serp(points, 0.7)
        assert points == snapshot

    def test_concurrent_calls(self):
        points = [Vec2(0, 0), Vec2(3, 9), Vec2(7, -2), Vec2(10, 5), Vec2(12, 12)]
        ts = list(np.linspace(0, 1, 200))
        expected = [serp(points, t) for t in ts]
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda t: serp(points, t), ts))
        assert results == expected


class TestInvalidControlPoints:

    def test_too_few_points(self):
        with pytest.raises(ValueError, match="at least 2"):
            serp([], 0.5)
        with pytest.raises(ValueError, match="at least 2"):
            serp([Vec2(1, 1)], 0.5)

    def test_mixed_vector_types(self):
        with pytest.raises(TypeError):
            serp([Vec2(0, 0), Vec3(0, 0, 0)], 0.5)
        with pytest.raises(TypeError):
            serp([Vec2(0, 0), 1.0, Vec2(1, 1)], 0.5)
