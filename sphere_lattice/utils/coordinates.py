"""
Cartesian <-> spherical coordinate conversion.

Two conventions are supported:

- LEGACY reproduces the formulas the lattice generator has always used.
  The azimuth is a two-branch arctangent (``atan(y/x)``, shifted by pi for
  negative x, pi/2 on the yz-plane) and the y component is rebuilt with
  ``cos(theta)``. The pair is only mutually inverse for points with y == 0
  and x > 0, or with theta == pi/4 and x > 0.
- STANDARD is the textbook transform with ``atan2`` and ``sin(theta)`` for
  both x and y. It round-trips every point with r > 0.

Degenerate input is not an error: the origin yields a NaN polar angle and
NaN inputs propagate.
"""

import math

from sphere_lattice.models.points import CartesianPoint, CoordinateConvention, SphericalPoint


Vector3 = tuple[float, float, float]


def _polar_angle(z: float, r: float) -> float:
    if r == 0 or math.isnan(r) or math.isnan(z):
        return math.nan
    # r is rounded, |z / r| may exceed 1 by an ulp
    return math.acos(max(-1.0, min(1.0, z / r)))


def _legacy_azimuth(x: float, y: float) -> float:
    if x > 0:
        return math.atan(y / x)
    if x < 0:
        return math.atan(y / x) + math.pi
    return math.pi / 2


def cartesian_to_spherical(
    x: float,
    y: float,
    z: float,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
) -> Vector3:
    """Convert cartesian coordinates to spherical ones.

    Args:
        x: The x coordinate
        y: The y coordinate
        z: The z coordinate
        convention: Azimuth convention, see module docstring

    Returns:
        Tuple of (r, theta, phi), angles in radians
    """
    r = math.hypot(x, y, z)
    theta = _polar_angle(z, r)
    if convention is CoordinateConvention.STANDARD:
        phi = math.atan2(y, x)
    else:
        phi = _legacy_azimuth(x, y)
    return r, theta, phi


def spherical_to_cartesian(
    r: float,
    theta: float,
    phi: float,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
) -> Vector3:
    """Convert spherical coordinates to cartesian ones.

    More info on https://en.wikipedia.org/wiki/Spherical_coordinate_system#Cartesian_coordinates

    Args:
        r: Radial distance, may be negative
        theta: Polar angle in radians
        phi: Azimuthal angle in radians
        convention: Which y formula to use, see module docstring

    Returns:
        Tuple of (x, y, z)
    """
    x = r * math.cos(phi) * math.sin(theta)
    if convention is CoordinateConvention.STANDARD:
        y = r * math.sin(phi) * math.sin(theta)
    else:
        y = r * math.sin(phi) * math.cos(theta)
    z = r * math.cos(theta)
    return x, y, z


def euclidean_distance(a: Vector3, b: Vector3) -> float:
    """Euclidean norm of the componentwise difference of two 3-tuples."""
    return math.hypot(a[0] - b[0], a[1] - b[1], a[2] - b[2])


def to_spherical(
    point: CartesianPoint,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
) -> SphericalPoint:
    return SphericalPoint(*cartesian_to_spherical(point.x, point.y, point.z, convention))


def to_cartesian(
    point: SphericalPoint,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
) -> CartesianPoint:
    return CartesianPoint(*spherical_to_cartesian(point.r, point.theta, point.phi, convention))


def distance(a: CartesianPoint, b: CartesianPoint) -> float:
    """Euclidean distance between two cartesian points.

    Example:
        >>> distance(CartesianPoint(0, 0, 0), CartesianPoint(2, 2, 2))
        3.4641016151377544
    """
    return euclidean_distance((a.x, a.y, a.z), (b.x, b.y, b.z))
