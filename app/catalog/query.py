"""
==============================================================================
Catalog Query Module
==============================================================================

Combined product search over a CatalogStore.

Strategies:
-----------
- linear: scans every product in catalog order. The name filter is a
  case-sensitive substring match, category and brand are exact matches.
  This is the default behaviour of ``CatalogStore.search``.
- indexed: narrows candidates through the exact-match index maps and
  intersects them. Every filter, name included, is an exact match.

Both strategies combine filters with AND. An empty filter ("" or None)
places no constraint on its field, and a query with every filter empty
returns the whole catalog.

The strategies agree only while the name filter is empty or equal to a full
product name. The indexed strategy is never substituted for the linear one
behind the caller's back; callers opt into it explicitly.

==============================================================================
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, FrozenSet, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import Product

if TYPE_CHECKING:
    from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)


class SearchStrategy(str, Enum):
    """Available search strategies."""
    LINEAR = "linear"
    INDEXED = "indexed"


class SearchFilters(BaseModel):
    """
    Filter triple for a catalog search.

    ``None`` is accepted for any field and normalised to an empty string.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(default="", description="Substring of the product name")
    category: str = Field(default="", description="Exact product category")
    brand: str = Field(default="", description="Exact product brand")

    @field_validator("name", "category", "brand", mode="before")
    @classmethod
    def none_to_empty(cls, value: Optional[str]) -> str:
        return "" if value is None else value

    @property
    def is_vacuous(self) -> bool:
        """True when no filter constrains the search."""
        return not (self.name or self.category or self.brand)

    def matches(self, product: Product) -> bool:
        """Check a product against every non-empty filter."""
        if self.name and self.name not in product.name:
            return False
        if self.category and product.category != self.category:
            return False
        if self.brand and product.brand != self.brand:
            return False
        return True


def linear_positions(products: Sequence[Product], filters: SearchFilters) -> List[int]:
    """
    Scan products in order and keep the positions matching all filters.

    Args:
        products: Products in catalog order
        filters: Search filters

    Returns:
        Matching positions in ascending order
    """
    if filters.is_vacuous:
        return list(range(len(products)))

    return [
        position
        for position, product in enumerate(products)
        if filters.matches(product)
    ]


def indexed_positions(store: CatalogStore, filters: SearchFilters) -> List[int]:
    """
    Exact-match search through the store's index maps.

    Each non-empty filter contributes the positions stored under its value;
    the contributions are intersected starting from the smallest one. A
    value missing from its index ends the search with no results.

    Args:
        store: Catalog store to query
        filters: Search filters (name compared for equality)

    Returns:
        Matching positions in ascending order
    """
    if filters.is_vacuous:
        return list(range(len(store)))

    lookups = (
        (filters.name, store.positions_by_name),
        (filters.category, store.positions_by_category),
        (filters.brand, store.positions_by_brand),
    )

    candidates = []
    for value, lookup in lookups:
        if not value:
            continue
        positions = lookup(value)
        if not positions:
            return []
        candidates.append(positions)

    candidates.sort(key=len)
    smallest = candidates[0]
    others: List[FrozenSet[int]] = [frozenset(positions) for positions in candidates[1:]]

    return [
        position
        for position in smallest
        if all(position in other for other in others)
    ]


def search_positions(
    store: CatalogStore,
    filters: SearchFilters,
    strategy: SearchStrategy = SearchStrategy.LINEAR
) -> List[int]:
    """Dispatch a search to the requested strategy and return positions."""
    strategy = SearchStrategy(strategy)

    if strategy is SearchStrategy.INDEXED:
        positions = indexed_positions(store, filters)
    else:
        positions = linear_positions(store.products, filters)

    logger.debug(
        f"Search {strategy.value} name={filters.name!r} category={filters.category!r} "
        f"brand={filters.brand!r} -> {len(positions)} result(s)"
    )
    return positions


def run_search(
    store: CatalogStore,
    filters: SearchFilters,
    strategy: SearchStrategy = SearchStrategy.LINEAR
) -> List[Product]:
    """Dispatch a search to the requested strategy."""
    return [store.product_at(position) for position in search_positions(store, filters, strategy)]
