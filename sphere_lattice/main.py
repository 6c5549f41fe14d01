"""FastAPI application serving lattices and coordinate conversions."""

from fastapi import FastAPI

from sphere_lattice import __version__
from sphere_lattice.routers.v0_1 import coordinates, lattice

app = FastAPI(title="sphere_lattice", version=__version__)

app.include_router(lattice.router, prefix="/v0.1")
app.include_router(coordinates.router, prefix="/v0.1")
