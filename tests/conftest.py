"""
==============================================================================
Pytest Configuration and Fixtures
==============================================================================

Provides sample catalogs, a catalog store and an API test client.

==============================================================================
"""

import pytest
from typing import Generator, List
from fastapi.testclient import TestClient

from app.main import app
from app.catalog import CatalogStore, Product, init_catalog, reset_catalog, sample_products
from app.core.dependencies import get_catalog_store


# ============================================================================
# CATALOG FIXTURES
# ============================================================================

@pytest.fixture
def products() -> List[Product]:
    """The four sample products in catalog order."""
    return sample_products()


@pytest.fixture
def store(products: List[Product]) -> CatalogStore:
    """Store built from the sample products."""
    return CatalogStore(products)


@pytest.fixture
def large_store() -> CatalogStore:
    """Store with repeated names, categories and brands."""
    rows = [
        ("Laptop", "Eletrônicos", "MarcaA"),
        ("Laptop Pro", "Eletrônicos", "MarcaA"),
        ("Smartphone", "Eletrônicos", "MarcaB"),
        ("Cadeira", "Mobília", "MarcaC"),
        ("Mesa", "Mobília", "MarcaC"),
        ("Mesa Lateral", "Mobília", "MarcaA"),
        ("Laptop", "Eletrônicos", "MarcaB"),
        ("Cadeira Gamer", "Mobília", "MarcaB"),
        ("Mesa", "Mobília", "MarcaC"),
        ("laptop", "eletrônicos", "marcaa"),
    ]
    return CatalogStore(
        Product(name=name, category=category, brand=brand)
        for name, category, brand in rows
    )


# ============================================================================
# API FIXTURES
# ============================================================================

@pytest.fixture(scope="function")
def client(store: CatalogStore) -> Generator[TestClient, None, None]:
    """Create test client serving the sample catalog."""
    app.dependency_overrides[get_catalog_store] = lambda: store

    with TestClient(app) as test_client:
        # Startup loads the configured products file; replace it with the fixture store
        init_catalog(store.products)
        yield test_client

    app.dependency_overrides.clear()
    reset_catalog()
