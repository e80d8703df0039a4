"""
==============================================================================
Schemas Package - Pydantic Models
==============================================================================

Response schemas using Pydantic for validation.

This package provides:
- Common: Shared response schemas
- Product: Catalog listing, search and statistics schemas

==============================================================================
"""

from .common import SuccessResponse, ErrorDetail, ErrorResponse
from .product import (
    CatalogStats,
    ProductDetailResponse,
    ProductListResponse,
    SearchResponse,
    StatsResponse,
    ValuesResponse,
)

__all__ = [
    # Common
    "SuccessResponse",
    "ErrorDetail",
    "ErrorResponse",
    # Product
    "CatalogStats",
    "ProductDetailResponse",
    "ProductListResponse",
    "SearchResponse",
    "StatsResponse",
    "ValuesResponse",
]
