"""Shared fixtures for warehouse tests."""

import pytest

from warehouse import catalog as catalog_module
from warehouse.category import default_registry


@pytest.fixture(autouse=True)
def clean_registries(monkeypatch):
    """Give every test an empty category registry and catalog registry."""
    for var in ("WAREHOUSE_RESET_ON_OPEN", "WAREHOUSE_LOG_LEVEL", "WAREHOUSE_LOG_FORMAT"):
        monkeypatch.delenv(var, raising=False)
    default_registry.clear()
    monkeypatch.setattr(catalog_module, "_default_registry", None)
    yield
    default_registry.clear()
