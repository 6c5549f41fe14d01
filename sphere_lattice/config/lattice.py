"""
Lattice generation settings.

Defaults for the point count, jitter and seed used when a caller does not
specify them. Values can be overridden through environment variables or a
``.env`` file:

- SPHERE_LATTICE_POINT_COUNT
- SPHERE_LATTICE_JITTER
- SPHERE_LATTICE_SEED
- SPHERE_LATTICE_CONVENTION ("legacy" or "standard")
"""

import logging
import os
import re
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from sphere_lattice.models.points import CoordinateConvention

logger = logging.getLogger(__name__)

POINT_COUNT_ENV = "SPHERE_LATTICE_POINT_COUNT"
JITTER_ENV = "SPHERE_LATTICE_JITTER"
SEED_ENV = "SPHERE_LATTICE_SEED"
CONVENTION_ENV = "SPHERE_LATTICE_CONVENTION"

# 16 bit range of the original point count
MAX_POINT_COUNT = 65535

_INTEGER_SEED = re.compile(r"-?[0-9]+")


class LatticeSettings(BaseModel):
    """Parameters of a Fibonacci sphere."""

    point_count: int = Field(
        default=100,
        ge=0,
        le=MAX_POINT_COUNT,
        description="Requested number of points, the lattice holds one less",
    )
    jitter: float = Field(default=0.0, ge=0.0, allow_inf_nan=False, description="Magnitude of the random offset")
    seed: Union[int, str] = Field(default=0, description="Seed of the jitter stream")
    convention: CoordinateConvention = Field(
        default=CoordinateConvention.LEGACY,
        description="Coordinate convention of the spherical conversion",
    )


def _get_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_seed(value: str) -> Union[int, str]:
    """Plain decimal seeds such as "123" or "-4" are used as integers, anything else as a string."""
    if _INTEGER_SEED.fullmatch(value):
        return int(value)
    return value


def load_lattice_settings_from_env(env_file: Optional[Path] = None) -> LatticeSettings:
    """Build lattice settings from environment variables.

    Variables from the .env file are only used when they are not already set
    in the environment. Unset variables keep their defaults. If any value is
    invalid, the error is logged and the defaults are returned.

    Args:
        env_file: Path to the .env file, located by python-dotenv if None

    Returns:
        LatticeSettings
    """
    load_dotenv(env_file)

    values: dict = {}
    point_count = _get_env(POINT_COUNT_ENV)
    if point_count is not None:
        values["point_count"] = point_count
    jitter = _get_env(JITTER_ENV)
    if jitter is not None:
        values["jitter"] = jitter
    seed = _get_env(SEED_ENV)
    if seed is not None:
        values["seed"] = parse_seed(seed)
    convention = _get_env(CONVENTION_ENV)
    if convention is not None:
        values["convention"] = convention.lower()

    try:
        settings = LatticeSettings(**values)
    except ValidationError as e:
        logger.error("Invalid lattice settings in environment, using defaults: %s", e)
        return LatticeSettings()

    logger.debug(f"Loaded lattice settings: {settings.model_dump(mode='json')}")
    return settings
