"""
==============================================================================
FastAPI Dependencies Module
==============================================================================

Dependency injection for catalog endpoints.

Usage Examples:
--------------
    @router.get("/products")
    async def list_products(store: CatalogStore = Depends(get_catalog_store)):
        return store.products

Tests replace ``get_catalog_store`` through ``app.dependency_overrides`` to
serve a fixed catalog.

==============================================================================
"""

from __future__ import annotations

import logging

from app.catalog import CatalogStore, SearchStrategy, get_catalog
from app.config import get_settings
from app.core import exceptions


# Module logger
logger = logging.getLogger(__name__)


def get_catalog_store() -> CatalogStore:
    """
    Get the loaded catalog store.

    Raises:
        AppException: CATALOG_NOT_LOADED if startup did not load a catalog
    """
    store = get_catalog()
    if store is None:
        logger.warning("Catalog requested before it was loaded")
        raise exceptions.catalog_not_loaded()
    return store


def get_default_strategy() -> SearchStrategy:
    """Get the configured default search strategy."""
    return SearchStrategy(get_settings().default_search_strategy)
