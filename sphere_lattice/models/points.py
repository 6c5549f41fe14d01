from dataclasses import dataclass
from enum import Enum


class CoordinateConvention(Enum):
    LEGACY = "legacy"
    # atan2 azimuth and sin(theta) for both x and y
    STANDARD = "standard"


@dataclass(frozen=True)
class CartesianPoint:
    x: float
    y: float
    z: float

    def to_spherical(self, convention: CoordinateConvention = CoordinateConvention.LEGACY) -> "SphericalPoint":
        """Convert this point to spherical coordinates."""
        from sphere_lattice.utils.coordinates import to_spherical
        return to_spherical(self, convention)

    def distance_to(self, other: "CartesianPoint") -> float:
        """Euclidean distance between this point and another one."""
        from sphere_lattice.utils.coordinates import distance
        return distance(self, other)


@dataclass(frozen=True)
class SphericalPoint:
    """
    SphericalPoint represents a point in spherical coordinates, all angles in radians
    r: radial distance, 1 for points on the unit sphere
    theta: polar angle, where:
        - 0 is the North Pole
        - pi/2 is the Equator
        - pi is the South Pole
    phi: azimuthal angle, rotation around z-axis

    Values are not clamped, a negative r or a theta outside [0, pi] is
    carried through the conversion as is.
    """
    r: float
    theta: float
    phi: float

    def to_cartesian(self, convention: CoordinateConvention = CoordinateConvention.LEGACY) -> CartesianPoint:
        """Convert this point to cartesian coordinates."""
        from sphere_lattice.utils.coordinates import to_cartesian
        return to_cartesian(self, convention)
