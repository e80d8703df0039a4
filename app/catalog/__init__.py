"""
==============================================================================
Catalog Package - Product Lookup
==============================================================================

In-memory product catalog with name, category and brand indexes.

Classes:
--------
- Product: Immutable pydantic model for products
- CatalogStore: Product store with lookup indexes and search
- SearchFilters: Filter triple for a search
- SearchStrategy: linear (substring on name) or indexed (exact match)

==============================================================================
"""

from .models import Product, ProductResponse
from .query import (
    SearchFilters,
    SearchStrategy,
    indexed_positions,
    linear_positions,
    run_search,
    search_positions,
)
from .store import CatalogStore
from .loader import get_catalog, init_catalog, load_catalog, load_products, reset_catalog
from .sample import sample_products

__all__ = [
    "Product",
    "ProductResponse",
    "CatalogStore",
    "SearchFilters",
    "SearchStrategy",
    "linear_positions",
    "indexed_positions",
    "run_search",
    "search_positions",
    "get_catalog",
    "init_catalog",
    "load_catalog",
    "load_products",
    "reset_catalog",
    "sample_products",
]
