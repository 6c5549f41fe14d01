import importlib
import os
import pkgutil

import pytest

import sphere_lattice.routers as routers_package
from sphere_lattice.config.lattice import CONVENTION_ENV, JITTER_ENV, POINT_COUNT_ENV, SEED_ENV


def _version_key(name: str) -> tuple[int, ...]:
    return tuple(int(part) for part in name.lstrip("v").split("_"))


@pytest.fixture
def latest_router_loader():
    """Import a router module from the newest versioned router package."""
    versions = [
        module.name
        for module in pkgutil.iter_modules(routers_package.__path__)
        if module.ispkg and module.name.startswith("v")
    ]
    latest = max(versions, key=_version_key)

    def _load(name: str):
        return importlib.import_module(f"sphere_lattice.routers.{latest}.{name}")

    return _load


@pytest.fixture(autouse=True)
def clean_lattice_env(request, monkeypatch):
    """Keep lattice settings from the host environment out of the tests.

    Tests marked with @pytest.mark.dotenv keep the real load_dotenv and run
    against a copy of os.environ, so variables it loads do not leak.
    """
    if request.node.get_closest_marker("dotenv"):
        monkeypatch.setattr(os, "environ", os.environ.copy())
    else:
        monkeypatch.setattr("sphere_lattice.config.lattice.load_dotenv", lambda *args, **kwargs: False)
    for name in (POINT_COUNT_ENV, JITTER_ENV, SEED_ENV, CONVENTION_ENV):
        monkeypatch.delenv(name, raising=False)
