import logging
from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from sphere_lattice.config.lattice import MAX_POINT_COUNT, load_lattice_settings_from_env, parse_seed
from sphere_lattice.controllers.fibonacci_sphere import FibonacciSphere
from sphere_lattice.models.points import CoordinateConvention

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/lattice",
    tags=["lattice"],
    responses={404: {"description": "Not found"}},
)


class SphericalPointResponse(BaseModel):
    r: float
    theta: float
    phi: float


class LatticeResponse(BaseModel):
    count: int
    jitter: float
    seed: Union[int, str]
    convention: CoordinateConvention
    points: list[SphericalPointResponse]


@router.get("/", response_model=LatticeResponse)
async def get_lattice(
    count: Optional[int] = Query(default=None, ge=0, le=MAX_POINT_COUNT),
    jitter: Optional[float] = Query(default=None, ge=0),
    seed: Optional[str] = None,
    convention: Optional[CoordinateConvention] = None,
):
    """Generate a Fibonacci sphere

    Parameters that are left out fall back to the configured lattice settings.

    Args:
        count: Requested number of points, the response holds count - 1
        jitter: Magnitude of the random offset
        seed: Seed of the jitter stream
        convention: Coordinate convention of the spherical conversion

    Returns:
        LatticeResponse: The generation parameters and the points in spiral order
    """
    lattice_seed = None if seed is None else parse_seed(seed)
    if None in (count, jitter, lattice_seed, convention):
        settings = load_lattice_settings_from_env()
        count = settings.point_count if count is None else count
        jitter = settings.jitter if jitter is None else jitter
        lattice_seed = settings.seed if lattice_seed is None else lattice_seed
        convention = settings.convention if convention is None else convention

    try:
        sphere = FibonacciSphere(count, jitter=jitter, seed=lattice_seed, convention=convention)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info("Serving lattice with %d points (seed %r)", len(sphere), lattice_seed)
    return LatticeResponse(
        count=count,
        jitter=jitter,
        seed=lattice_seed,
        convention=convention,
        points=[SphericalPointResponse(r=p.r, theta=p.theta, phi=p.phi) for p in sphere],
    )
