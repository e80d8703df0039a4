"""
==============================================================================
Catalog Store Module
==============================================================================

In-memory product store with exact-match lookup indexes.

Features:
---------
- Ordered product sequence as the single source of truth
- Name, category and brand indexes mapping a value to product positions
- Linear (substring on name) and index-assisted (exact) search

The store is immutable after construction. Indexes are built once from the
product sequence and only ever handed out as copies, so a store can be
shared between threads without locking.

Example:
--------
    >>> store = CatalogStore(sample_products())
    >>> [p.name for p in store.search(brand="MarcaC")]
    ['Cadeira', 'Mesa']

==============================================================================
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .models import Product
from .query import SearchFilters, SearchStrategy, run_search


# Module logger
logger = logging.getLogger(__name__)

Positions = Tuple[int, ...]


class CatalogStore:
    """
    Product store with name, category and brand indexes.

    Attributes:
        products: All products in catalog order
        name_index: Product name -> positions
        category_index: Category -> positions
        brand_index: Brand -> positions

    Example:
        >>> store = CatalogStore(products)
        >>> store.positions_by_category("Mobília")
        (2, 3)
        >>> store.search("Lap")
        [Product(name='Laptop', category='Eletrônicos', brand='MarcaA')]
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """
        Initialize the store and build its indexes.

        Args:
            products: Products in catalog order (copied into the store)
        """
        self._products: Tuple[Product, ...] = tuple(products)
        self._name_index: Dict[str, Positions] = {}
        self._category_index: Dict[str, Positions] = {}
        self._brand_index: Dict[str, Positions] = {}

        self._build_indexes()

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def products(self) -> List[Product]:
        """Get all products."""
        return list(self._products)

    @property
    def name_index(self) -> Dict[str, Positions]:
        """Get a copy of the name index."""
        return dict(self._name_index)

    @property
    def category_index(self) -> Dict[str, Positions]:
        """Get a copy of the category index."""
        return dict(self._category_index)

    @property
    def brand_index(self) -> Dict[str, Positions]:
        """Get a copy of the brand index."""
        return dict(self._brand_index)

    def __len__(self) -> int:
        return len(self._products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __repr__(self) -> str:
        return f"CatalogStore(products={len(self._products)})"

    # =========================================================================
    # INDEXING
    # =========================================================================

    def _build_indexes(self) -> None:
        """Build lookup indexes in a single pass over the products."""
        by_name: Dict[str, List[int]] = {}
        by_category: Dict[str, List[int]] = {}
        by_brand: Dict[str, List[int]] = {}

        for position, product in enumerate(self._products):
            by_name.setdefault(product.name, []).append(position)
            by_category.setdefault(product.category, []).append(position)
            by_brand.setdefault(product.brand, []).append(position)

        # Positions are appended in scan order, so every tuple is ascending
        self._name_index = {key: tuple(value) for key, value in by_name.items()}
        self._category_index = {key: tuple(value) for key, value in by_category.items()}
        self._brand_index = {key: tuple(value) for key, value in by_brand.items()}

        logger.debug(
            f"Indexed {len(self._products)} products: "
            f"{len(self._name_index)} names, "
            f"{len(self._category_index)} categories, "
            f"{len(self._brand_index)} brands"
        )

    # =========================================================================
    # LOOKUP METHODS
    # =========================================================================

    def positions_by_name(self, name: str) -> Positions:
        """Positions of products with exactly this name."""
        return self._name_index.get(name, ())

    def positions_by_category(self, category: str) -> Positions:
        """Positions of products in exactly this category."""
        return self._category_index.get(category, ())

    def positions_by_brand(self, brand: str) -> Positions:
        """Positions of products of exactly this brand."""
        return self._brand_index.get(brand, ())

    def product_at(self, position: int) -> Optional[Product]:
        """
        Get the product stored at a position.

        Args:
            position: Zero-based catalog position

        Returns:
            Product or None when the position is out of range
        """
        if 0 <= position < len(self._products):
            return self._products[position]
        return None

    # =========================================================================
    # SEARCH METHODS
    # =========================================================================

    def search(
        self,
        name: Optional[str] = "",
        category: Optional[str] = "",
        brand: Optional[str] = "",
        strategy: SearchStrategy = SearchStrategy.LINEAR
    ) -> List[Product]:
        """
        Search products matching all non-empty filters.

        With the default linear strategy the name filter is a substring
        match; category and brand must match exactly. Empty filters are
        ignored and an all-empty query returns the whole catalog.

        Args:
            name: Substring of the product name
            category: Exact category
            brand: Exact brand
            strategy: Search strategy (linear by default)

        Returns:
            Matching products in catalog order
        """
        filters = SearchFilters(name=name, category=category, brand=brand)
        return run_search(self, filters, strategy)

    def search_indexed(
        self,
        name: Optional[str] = "",
        category: Optional[str] = "",
        brand: Optional[str] = ""
    ) -> List[Product]:
        """
        Exact-match search through the indexes.

        Unlike ``search`` the name filter must equal a full product name.

        Returns:
            Matching products in catalog order
        """
        filters = SearchFilters(name=name, category=category, brand=brand)
        return run_search(self, filters, SearchStrategy.INDEXED)

    # =========================================================================
    # UTILITY METHODS
    # =========================================================================

    def categories(self) -> List[str]:
        """Distinct categories in order of first appearance."""
        return list(self._category_index)

    def brands(self) -> List[str]:
        """Distinct brands in order of first appearance."""
        return list(self._brand_index)

    def get_stats(self) -> Dict:
        """Get catalog statistics."""
        return {
            "total_products": len(self._products),
            "distinct_names": len(self._name_index),
            "distinct_categories": len(self._category_index),
            "distinct_brands": len(self._brand_index),
            "categories": dict(Counter(p.category for p in self._products)),
            "brands": dict(Counter(p.brand for p in self._products)),
        }
