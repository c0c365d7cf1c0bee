# tests/conftest.py

import pytest

from polycal.bootstrap import build_registry


@pytest.fixture(scope="session")
def registry():
    """One registry for the whole run; the astronomical converters keep their caches warm."""
    return build_registry()


@pytest.fixture(scope="session")
def conv(registry):
    return registry.get
