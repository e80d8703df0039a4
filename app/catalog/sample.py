"""
Built-in sample dataset used by the demo and the test suite.
"""

from typing import List

from .models import Product


SAMPLE_PRODUCTS = (
    ("Laptop", "Eletrônicos", "MarcaA"),
    ("Smartphone", "Eletrônicos", "MarcaB"),
    ("Cadeira", "Mobília", "MarcaC"),
    ("Mesa", "Mobília", "MarcaC"),
)


def sample_products() -> List[Product]:
    """Get a fresh list of the sample products."""
    return [
        Product(name=name, category=category, brand=brand)
        for name, category, brand in SAMPLE_PRODUCTS
    ]
