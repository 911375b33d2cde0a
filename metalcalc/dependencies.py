from .catalog import Catalog
from .engine import default_catalog


def get_catalog() -> Catalog:
    """FastAPI dependency: the shared read-only catalog. Override in tests."""
    return default_catalog()
