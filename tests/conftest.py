"""
Shared test fixtures: catalogs, engines, API test client.
"""

import os
import pytest
from fastapi.testclient import TestClient

# Built-in tables only; ignore any catalog override files on the machine
os.environ["MATERIAL_CATALOG_PATH"] = ""
os.environ["PROFILE_CATALOG_PATH"] = ""

from metalcalc.catalog import Catalog
from metalcalc.dependencies import get_catalog
from metalcalc.engine import WeightEngine
from metalcalc.main import app


@pytest.fixture
def catalog():
    """The built-in material and profile tables."""
    return Catalog()


@pytest.fixture
def warnings():
    """Collects errors passed to on_warning."""
    return []


@pytest.fixture
def engine(catalog, warnings):
    return WeightEngine(catalog, on_warning=warnings.append)


@pytest.fixture
def client(catalog):
    """FastAPI test client bound to the built-in catalog."""
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()
