#!/usr/bin/env python3
"""
==============================================================================
Catalog Search Demo
==============================================================================

Prints example searches over the product catalog.

Usage:
------
    # Walkthrough over the built-in sample products
    python -m app.demo

    # Single query against a JSON catalog
    python -m app.demo --products-file data/products.json --category Mobília
    python -m app.demo --name Laptop --strategy indexed

==============================================================================
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from app.catalog import CatalogStore, Product, SearchStrategy, load_products, sample_products


logger = logging.getLogger(__name__)


EXAMPLES = (
    ("Search by name 'Laptop'", "Laptop", "", ""),
    ("Search by category 'Eletrônicos'", "", "Eletrônicos", ""),
    ("Search by brand 'MarcaC'", "", "", "MarcaC"),
    ("Combined search (Laptop + Eletrônicos + MarcaA)", "Laptop", "Eletrônicos", "MarcaA"),
    ("Search with no match (missing product)", "Tablet", "", ""),
)


def print_results(results: List[Product]) -> None:
    """Print search results followed by their count."""
    for product in results:
        print(f"   {product!r}")
    print(f"   Found: {len(results)} product(s)")
    print()


def run_walkthrough(store: CatalogStore) -> None:
    """Run the example searches and compare both strategies."""
    print("=" * 60)
    print("SEARCH EXAMPLES")
    print("=" * 60)
    print()

    for number, (title, name, category, brand) in enumerate(EXAMPLES, start=1):
        print(f"{number}. {title}:")
        print_results(store.search(name, category, brand))

    print("=" * 60)
    print("COMPARISON: LINEAR vs INDEXED SEARCH")
    print("=" * 60)
    print()

    print("Linear search by category 'Mobília':")
    linear = store.search("", "Mobília", "")
    print(f"   Found: {len(linear)} product(s)")

    print("Indexed search by category 'Mobília':")
    indexed = store.search_indexed("", "Mobília", "")
    print(f"   Found: {len(indexed)} product(s)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m app.demo",
        description="Search the product catalog by name, category and brand."
    )
    parser.add_argument("--products-file", type=Path, help="JSON catalog (defaults to sample products)")
    parser.add_argument("--name", default="", help="Substring of the product name")
    parser.add_argument("--category", default="", help="Exact category")
    parser.add_argument("--brand", default="", help="Exact brand")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in SearchStrategy],
        default=None,
        help="Search strategy, linear by default (indexed matches the name exactly)"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    if args.products_file:
        try:
            products = load_products(args.products_file)
        except (OSError, ValueError) as e:
            print(f"ERROR: could not load {args.products_file}: {e}", file=sys.stderr)
            return 1
    else:
        products = sample_products()

    store = CatalogStore(products)
    logger.debug(f"Catalog built: {store!r}")

    if not (args.name or args.category or args.brand or args.strategy or args.products_file):
        run_walkthrough(store)
        return 0

    strategy = SearchStrategy(args.strategy or SearchStrategy.LINEAR.value)
    results = store.search(args.name, args.category, args.brand, strategy=strategy)
    print(f"Search name={args.name!r} category={args.category!r} brand={args.brand!r} ({strategy.value}):")
    print_results(results)
    return 0


if __name__ == "__main__":
    sys.exit(main())
