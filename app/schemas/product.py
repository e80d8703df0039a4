"""
==============================================================================
Product Schemas Module
==============================================================================

Response schemas for product catalog endpoints.

==============================================================================
"""

from typing import Dict, List

from pydantic import BaseModel, Field

from app.catalog import ProductResponse, SearchStrategy
from .common import SuccessResponse


class ProductListResponse(SuccessResponse):
    """List of products response."""
    total: int = Field(ge=0)
    products: List[ProductResponse]


class ProductDetailResponse(SuccessResponse):
    """Single product response."""
    product: ProductResponse


class SearchResponse(SuccessResponse):
    """Search results with the filters that produced them."""
    name: str = ""
    category: str = ""
    brand: str = ""
    strategy: SearchStrategy
    total: int = Field(ge=0)
    products: List[ProductResponse]


class ValuesResponse(SuccessResponse):
    """Distinct field values (categories or brands)."""
    values: List[str]


class CatalogStats(BaseModel):
    """Catalog statistics."""
    total_products: int
    distinct_names: int
    distinct_categories: int
    distinct_brands: int
    categories: Dict[str, int]
    brands: Dict[str, int]


class StatsResponse(SuccessResponse):
    """Catalog statistics response."""
    stats: CatalogStats
