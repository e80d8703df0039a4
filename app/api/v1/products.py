"""
==============================================================================
Product Catalog Endpoints
==============================================================================

Endpoints for browsing and searching the product catalog.

==============================================================================
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query

from app.catalog import CatalogStore, ProductResponse, SearchFilters, SearchStrategy, search_positions
from app.core.dependencies import get_catalog_store, get_default_strategy
from app.core import exceptions
from app.schemas import (
    ErrorResponse,
    ProductDetailResponse,
    ProductListResponse,
    SearchResponse,
    StatsResponse,
    ValuesResponse,
)


router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={500: {"model": ErrorResponse}},
)


class ProductController:
    """Controller for product catalog operations."""

    def __init__(self, store: CatalogStore):
        self._store = store

    def list_products(self) -> ProductListResponse:
        """List the whole catalog."""
        products = self._store.products
        return ProductListResponse(
            total=len(products),
            products=[
                ProductResponse.from_product(p, position)
                for position, p in enumerate(products)
            ]
        )

    def search(
        self,
        name: Optional[str],
        category: Optional[str],
        brand: Optional[str],
        strategy: SearchStrategy
    ) -> SearchResponse:
        """Search products with combined filters."""
        filters = SearchFilters(name=name, category=category, brand=brand)
        positions = search_positions(self._store, filters, strategy)

        return SearchResponse(
            name=filters.name,
            category=filters.category,
            brand=filters.brand,
            strategy=strategy,
            total=len(positions),
            products=[
                ProductResponse.from_product(self._store.product_at(position), position)
                for position in positions
            ]
        )

    def get_by_position(self, position: int) -> ProductDetailResponse:
        """Get product by catalog position."""
        product = self._store.product_at(position)

        if product is None:
            raise exceptions.product_not_found(position)

        return ProductDetailResponse(
            product=ProductResponse.from_product(product, position)
        )

    def get_categories(self) -> ValuesResponse:
        """Get all categories."""
        return ValuesResponse(values=self._store.categories())

    def get_brands(self) -> ValuesResponse:
        """Get all brands."""
        return ValuesResponse(values=self._store.brands())

    def get_stats(self) -> StatsResponse:
        """Get catalog statistics."""
        return StatsResponse(stats=self._store.get_stats())


@router.get("", response_model=ProductListResponse)
async def list_products(store: CatalogStore = Depends(get_catalog_store)):
    """List every product in catalog order."""
    controller = ProductController(store)
    return controller.list_products()


@router.get("/search", response_model=SearchResponse)
async def search_products(
    name: Optional[str] = Query(None, description="Substring of the product name"),
    category: Optional[str] = Query(None, description="Exact category"),
    brand: Optional[str] = Query(None, description="Exact brand"),
    strategy: Optional[SearchStrategy] = Query(None, description="linear or indexed"),
    store: CatalogStore = Depends(get_catalog_store),
    default_strategy: SearchStrategy = Depends(get_default_strategy)
):
    """
    Search products by name, category and brand.

    All supplied filters must match. With no filters the whole catalog is
    returned. The indexed strategy matches the name exactly.
    """
    controller = ProductController(store)
    return controller.search(name, category, brand, strategy or default_strategy)


@router.get("/categories", response_model=ValuesResponse)
async def get_categories(store: CatalogStore = Depends(get_catalog_store)):
    """Get all available categories."""
    controller = ProductController(store)
    return controller.get_categories()


@router.get("/brands", response_model=ValuesResponse)
async def get_brands(store: CatalogStore = Depends(get_catalog_store)):
    """Get all available brands."""
    controller = ProductController(store)
    return controller.get_brands()


@router.get("/stats", response_model=StatsResponse)
async def get_catalog_stats(store: CatalogStore = Depends(get_catalog_store)):
    """Get catalog statistics."""
    controller = ProductController(store)
    return controller.get_stats()


@router.get(
    "/{position}",
    response_model=ProductDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_product(position: int, store: CatalogStore = Depends(get_catalog_store)):
    """Get product by catalog position."""
    controller = ProductController(store)
    return controller.get_by_position(position)
