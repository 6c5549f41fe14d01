"""Fibonacci Sphere Module

Creates an evenly-ish distanced set of points on the unit sphere using the
golden section spiral:
http://web.archive.org/web/20120421191837/http://www.cgafaq.info/wiki/Evenly_distributed_points_on_sphere

The z coordinates are evenly spaced in [-1, 1], half a step away from the
poles, while the longitude advances by the golden angle every step. This
avoids the banding of a naive latitude/longitude grid.
"""

import logging
import math
from typing import Hashable, Iterator, Optional

import numpy as np

from sphere_lattice.models.points import CartesianPoint, CoordinateConvention, SphericalPoint
from sphere_lattice.utils.coordinates import to_cartesian, to_spherical
from sphere_lattice.utils.seeded_random import SeededStream

logger = logging.getLogger(__name__)


def golden_angle() -> float:
    """Longitude increment between consecutive points, about 137.5 degrees."""
    return math.pi * (3 - math.sqrt(5))


def _jittered(point: CartesianPoint, jitter: float, stream: SeededStream) -> CartesianPoint:
    """Offset a point by a random vector in [-jitter, jitter)^3 and project it back onto the unit sphere."""
    x = point.x + jitter * (2 * stream.next_unit() - 1)
    y = point.y + jitter * (2 * stream.next_unit() - 1)
    z = point.z + jitter * (2 * stream.next_unit() - 1)
    norm = math.hypot(x, y, z)
    if norm == 0:
        return point
    return CartesianPoint(x / norm, y / norm, z / norm)


def generate_points(
    number_of_points: int,
    jitter: float = 0.0,
    seed: Hashable = 0,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
) -> list[SphericalPoint]:
    """Generate the spiral points.

    The loop stops one step short of ``number_of_points``, so a request for N
    points yields N-1 of them and N <= 1 yields none.

    Args:
        number_of_points: Requested number of points
        jitter: Magnitude of the random offset, 0 disables it
        seed: Seed of the jitter stream
        convention: Coordinate convention used for the spherical conversion

    Returns:
        Points in spiral order, from the north pole down
    """
    points: list[SphericalPoint] = []
    if number_of_points <= 1:
        return points

    stream: Optional[SeededStream] = SeededStream(seed) if jitter > 0 else None
    dlong = golden_angle()
    dz = 2.0 / number_of_points
    long = 0.0
    z = 1.0 - dz / 2.0
    for _ in range(number_of_points - 1):
        r = math.sqrt(1.0 - z * z)
        cart = CartesianPoint(math.cos(long) * r, math.sin(long) * r, z)
        if stream is not None:
            cart = _jittered(cart, jitter, stream)
        points.append(to_spherical(cart, convention))
        z -= dz
        long += dlong
    return points


class FibonacciSphere:
    """Set of points on the unit sphere.

    The point sequence is fixed at construction and exposed read-only, its
    order is the spiral traversal order.
    """

    def __init__(
        self,
        number_of_points: int,
        jitter: float = 0.0,
        seed: Hashable = 0,
        convention: CoordinateConvention = CoordinateConvention.LEGACY,
    ):
        if number_of_points < 0:
            raise ValueError(f"number_of_points must be non-negative, got {number_of_points}")
        if not math.isfinite(jitter) or jitter < 0:
            raise ValueError(f"jitter must be a non-negative finite number, got {jitter}")

        self._number_of_points = number_of_points
        self._jitter = jitter
        self._seed = seed
        self._convention = convention
        self._points = tuple(generate_points(number_of_points, jitter, seed, convention))
        logger.debug(
            "Generated %d points (requested %d, jitter %s, seed %r, convention %s)",
            len(self._points),
            number_of_points,
            jitter,
            seed,
            convention.value,
        )

    @property
    def points(self) -> tuple[SphericalPoint, ...]:
        return self._points

    @property
    def number_of_points(self) -> int:
        return self._number_of_points

    @property
    def jitter(self) -> float:
        return self._jitter

    @property
    def seed(self) -> Hashable:
        return self._seed

    @property
    def convention(self) -> CoordinateConvention:
        return self._convention

    def cartesian_points(self) -> list[CartesianPoint]:
        """Points converted back to cartesian coordinates with the same convention.

        Only the STANDARD convention gives back the spiral positions, the
        LEGACY y formula uses cos(theta).
        """
        return [to_cartesian(point, self._convention) for point in self._points]

    def to_numpy(self) -> np.ndarray:
        """Points as an (n, 3) array of (r, theta, phi) rows."""
        if not self._points:
            return np.empty((0, 3), dtype=float)
        return np.array([(p.r, p.theta, p.phi) for p in self._points], dtype=float)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[SphericalPoint]:
        return iter(self._points)

    def __getitem__(self, index):
        return self._points[index]

    def __repr__(self) -> str:
        return (
            f"FibonacciSphere(number_of_points={self._number_of_points}, "
            f"jitter={self._jitter}, seed={self._seed!r})"
        )
