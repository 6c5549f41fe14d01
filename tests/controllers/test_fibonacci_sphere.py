import math
from itertools import combinations

import numpy as np
import pytest

from sphere_lattice.controllers.fibonacci_sphere import FibonacciSphere, generate_points, golden_angle
from sphere_lattice.models.points import CoordinateConvention, SphericalPoint
from sphere_lattice.utils.coordinates import distance


def _angle_gap(a: float, b: float) -> float:
    gap = (a - b) % (2 * math.pi)
    return min(gap, 2 * math.pi - gap)


class TestPointCount:
    def test_count_minus_one_points(self):
        sphere = FibonacciSphere(100, 0.0, 123)
        assert len(sphere) == 99
        assert len(sphere.points) == 99

    @pytest.mark.parametrize("count", [0, 1])
    def test_degenerate_counts_yield_empty_set(self, count):
        assert FibonacciSphere(count).points == ()

    def test_two_points_requested(self):
        """One point at z = 0.5 on the prime meridian."""
        (point,) = FibonacciSphere(2).points
        assert point.r == pytest.approx(1.0)
        assert point.theta == pytest.approx(math.pi / 3)
        assert point.phi == 0.0

    def test_negative_count_raises(self):
        with pytest.raises(ValueError):
            FibonacciSphere(-1)


class TestSpiral:
    def test_points_on_unit_sphere(self):
        for point in FibonacciSphere(100):
            assert point.r == pytest.approx(1.0, abs=1e-9)

    def test_first_point(self):
        first = FibonacciSphere(100)[0]
        assert first.theta == pytest.approx(math.acos(0.99))
        assert first.phi == 0.0

    def test_azimuth_advances_by_golden_angle(self):
        points = FibonacciSphere(100).points
        for previous, current in zip(points, points[1:]):
            assert _angle_gap(current.phi - previous.phi, golden_angle()) < 1e-9

    def test_z_evenly_spaced(self):
        points = FibonacciSphere(50).points
        dz = 2 / 50
        for k, point in enumerate(points):
            assert math.cos(point.theta) == pytest.approx(1 - dz / 2 - k * dz, abs=1e-9)

    def test_golden_angle(self):
        assert math.degrees(golden_angle()) == pytest.approx(137.50776, abs=1e-5)

    def test_standard_cartesian_points_are_well_spread(self):
        sphere = FibonacciSphere(200, convention=CoordinateConvention.STANDARD)
        cartesian = sphere.cartesian_points()
        assert cartesian[0].z == pytest.approx(0.995)
        assert cartesian[0].x == pytest.approx(math.sqrt(1 - 0.995 ** 2))
        closest = min(distance(a, b) for a, b in combinations(cartesian, 2))
        assert closest > 0.1

    def test_ordering_is_stable(self):
        assert FibonacciSphere(64).points == FibonacciSphere(64).points


class TestJitter:
    def test_zero_jitter_matches_unjittered(self):
        assert FibonacciSphere(50, jitter=0.0, seed="planet").points == FibonacciSphere(50).points

    def test_same_seed_is_reproducible(self):
        first = FibonacciSphere(80, jitter=0.05, seed="planet")
        second = FibonacciSphere(80, jitter=0.05, seed="planet")
        assert first.points == second.points

    def test_jitter_moves_points(self):
        jittered = FibonacciSphere(80, jitter=0.05, seed="planet").points
        plain = FibonacciSphere(80).points
        assert jittered != plain

    def test_different_seed_differs(self):
        first = FibonacciSphere(80, jitter=0.05, seed=1).points
        second = FibonacciSphere(80, jitter=0.05, seed=2).points
        assert first != second

    def test_jittered_points_stay_on_unit_sphere(self):
        for point in FibonacciSphere(80, jitter=0.2, seed=7):
            assert point.r == pytest.approx(1.0, abs=1e-9)

    @pytest.mark.parametrize("jitter", [-0.1, math.nan, math.inf])
    def test_invalid_jitter_raises(self, jitter):
        with pytest.raises(ValueError):
            FibonacciSphere(10, jitter=jitter)


class TestAccessors:
    def test_parameters_are_kept(self):
        sphere = FibonacciSphere(10, jitter=0.1, seed="moon", convention=CoordinateConvention.STANDARD)
        assert sphere.number_of_points == 10
        assert sphere.jitter == 0.1
        assert sphere.seed == "moon"
        assert sphere.convention is CoordinateConvention.STANDARD

    def test_points_are_read_only(self):
        sphere = FibonacciSphere(10)
        assert isinstance(sphere.points, tuple)
        assert all(isinstance(point, SphericalPoint) for point in sphere)

    def test_generate_points_matches_sphere(self):
        assert tuple(generate_points(30)) == FibonacciSphere(30).points

    def test_to_numpy(self):
        sphere = FibonacciSphere(10)
        array = sphere.to_numpy()
        assert array.shape == (9, 3)
        assert np.allclose(array[:, 0], 1.0)
        assert array[3, 2] == sphere[3].phi

    def test_to_numpy_empty(self):
        assert FibonacciSphere(1).to_numpy().shape == (0, 3)

    def test_slicing(self):
        sphere = FibonacciSphere(10)
        assert sphere[2:4] == sphere.points[2:4]
