"""
==============================================================================
Catalog Loader Module
==============================================================================

Loads products from JSON and manages the global CatalogStore instance.

JSON Structure:
--------------
Either a flat list of records:

[
  {"name": "Laptop", "category": "Eletrônicos", "brand": "MarcaA"},
  ...
]

or records grouped by category:

{
  "Eletrônicos": [
    {"name": "Laptop", "brand": "MarcaA"},
    ...
  ],
  "Mobília": [...]
}

==============================================================================
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from .models import Product
from .store import CatalogStore


# Module logger
logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "category", "brand")


def _parse_record(item: Any) -> Optional[Product]:
    """Build a Product from a raw record, or None when it is incomplete."""
    if not isinstance(item, dict):
        logger.warning(f"Skipping invalid product record: {item!r}")
        return None

    missing = [field for field in REQUIRED_FIELDS if not isinstance(item.get(field), str)]
    if missing:
        logger.warning(f"Skipping product record missing {', '.join(missing)}: {item!r}")
        return None

    return Product(name=item["name"], category=item["category"], brand=item["brand"])


def _iter_records(data: Any) -> Iterable[Any]:
    """Flatten either supported JSON layout into raw records."""
    if isinstance(data, list):
        yield from data
        return

    if isinstance(data, dict):
        for category, records in data.items():
            if not isinstance(records, list):
                logger.warning(f"Skipping invalid category: {category}")
                continue
            for item in records:
                if isinstance(item, dict):
                    own_category = item.get("category")
                    if own_category is not None and own_category != category:
                        logger.warning(
                            f"Record category {own_category!r} replaced by group {category!r}: {item!r}"
                        )
                    yield {**item, "category": category}
                else:
                    yield item
        return

    raise ValueError(f"Unsupported catalog layout: {type(data).__name__}")


def parse_products(data: Any) -> List[Product]:
    """
    Convert decoded JSON into products.

    Args:
        data: Decoded JSON (list of records or category mapping)

    Returns:
        Products in file order; incomplete records are skipped
    """
    products = []
    for item in _iter_records(data):
        product = _parse_record(item)
        if product is not None:
            products.append(product)
    return products


def load_products(products_file: Path) -> List[Product]:
    """
    Load products from a JSON file.

    Args:
        products_file: Path to products JSON

    Returns:
        List of products

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
        UnicodeDecodeError: If the file is not valid UTF-8
        ValueError: If the JSON layout is not a list or a category mapping
    """
    try:
        with Path(products_file).open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.error(f"Products file not found: {products_file}")
        raise
    except UnicodeDecodeError as e:
        logger.error(f"Products file is not valid UTF-8: {products_file}: {e}")
        raise
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON: {e}")
        raise

    try:
        products = parse_products(data)
    except ValueError as e:
        logger.error(f"Invalid catalog in {products_file}: {e}")
        raise

    logger.info(f"Loaded {len(products)} products from {products_file}")
    return products


# =============================================================================
# SINGLETON INSTANCE MANAGEMENT
# =============================================================================

_catalog_instance: Optional[CatalogStore] = None


def get_catalog() -> Optional[CatalogStore]:
    """Get the global catalog instance."""
    return _catalog_instance


def init_catalog(products: Iterable[Product]) -> CatalogStore:
    """
    Initialize the global catalog instance.

    Args:
        products: Products in catalog order

    Returns:
        CatalogStore instance
    """
    global _catalog_instance
    _catalog_instance = CatalogStore(products)
    return _catalog_instance


def load_catalog(products_file: Path) -> CatalogStore:
    """Load products from JSON and install them as the global catalog."""
    return init_catalog(load_products(products_file))


def reset_catalog() -> None:
    """Drop the global catalog instance."""
    global _catalog_instance
    _catalog_instance = None


def catalog_summary(store: CatalogStore) -> Dict[str, int]:
    """Short summary used in startup logs."""
    stats = store.get_stats()
    return {
        "products": stats["total_products"],
        "categories": stats["distinct_categories"],
        "brands": stats["distinct_brands"],
    }
