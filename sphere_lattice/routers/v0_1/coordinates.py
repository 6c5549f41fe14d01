import math

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from sphere_lattice.models.points import CartesianPoint, CoordinateConvention, SphericalPoint
from sphere_lattice.utils import coordinates

router = APIRouter(
    prefix="/coordinates",
    tags=["coordinates"],
    responses={404: {"description": "Not found"}},
)


class CartesianPayload(BaseModel):
    x: float
    y: float
    z: float


class SphericalPayload(BaseModel):
    r: float
    theta: float
    phi: float


class DistanceRequest(BaseModel):
    a: CartesianPayload
    b: CartesianPayload


class DistanceResponse(BaseModel):
    distance: float


def _ensure_finite(values: tuple[float, ...], detail: str) -> None:
    # NaN and infinity have no JSON representation
    if not all(math.isfinite(value) for value in values):
        raise HTTPException(status_code=400, detail=detail)


@router.post("/spherical", response_model=SphericalPayload)
async def convert_to_spherical(
    point: CartesianPayload,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
):
    """Convert a cartesian point to spherical coordinates

    Args:
        point: The cartesian point, must not be the origin
        convention: Coordinate convention of the conversion

    Returns:
        SphericalPayload: r, theta and phi in radians
    """
    result = coordinates.to_spherical(CartesianPoint(point.x, point.y, point.z), convention)
    _ensure_finite(
        (result.r, result.theta, result.phi),
        "Point has no finite spherical coordinates, the origin has no direction.",
    )
    return SphericalPayload(r=result.r, theta=result.theta, phi=result.phi)


@router.post("/cartesian", response_model=CartesianPayload)
async def convert_to_cartesian(
    point: SphericalPayload,
    convention: CoordinateConvention = CoordinateConvention.LEGACY,
):
    """Convert a spherical point to cartesian coordinates"""
    result = coordinates.to_cartesian(SphericalPoint(point.r, point.theta, point.phi), convention)
    _ensure_finite((result.x, result.y, result.z), "Point has no finite cartesian coordinates.")
    return CartesianPayload(x=result.x, y=result.y, z=result.z)


@router.post("/distance", response_model=DistanceResponse)
async def get_distance(request: DistanceRequest):
    """Euclidean distance between two cartesian points"""
    a = CartesianPoint(request.a.x, request.a.y, request.a.z)
    b = CartesianPoint(request.b.x, request.b.y, request.b.z)
    result = coordinates.distance(a, b)
    _ensure_finite((result,), "Distance is not a finite number.")
    return DistanceResponse(distance=result)
