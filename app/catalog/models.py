"""
==============================================================================
Product Models Module
==============================================================================

Pydantic models for product catalog items.

==============================================================================
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict


class Product(BaseModel):
    """
    Product model for catalog items.

    Immutable value object: instances are frozen and hashable, so the
    catalog can hand them out without copying.

    Attributes:
        name: Product display name (matched by substring)
        category: Product category (matched exactly)
        brand: Product brand (matched exactly)
    """

    model_config = ConfigDict(
        frozen=True,
        from_attributes=True,
        extra="forbid",
    )

    name: str = Field(..., description="Product name")
    category: str = Field(..., description="Product category")
    brand: str = Field(..., description="Product brand")

    def __str__(self) -> str:
        return f"{self.name} ({self.category}, {self.brand})"


class ProductResponse(BaseModel):
    """Product response schema for API endpoints."""

    name: str
    category: str
    brand: str
    position: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_product(cls, product: Product, position: Optional[int] = None) -> "ProductResponse":
        """Create response from Product model."""
        return cls(
            name=product.name,
            category=product.category,
            brand=product.brand,
            position=position
        )
