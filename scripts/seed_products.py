#!/usr/bin/env python3
# =============================================================================
# scripts/seed_products.py - Sample Catalog Writer
# =============================================================================
# Writes a small sample catalog to the backing JSON file.
#
# Usage:
#   # Seed the file configured by DATA_FILE (or the default data/products.json)
#   python scripts/seed_products.py
#
#   # Seed a specific file, replacing it if it exists
#   python scripts/seed_products.py --path /tmp/products.json --force
# =============================================================================

import argparse
import logging
import os
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import settings
from lib.json_store import JsonProductStore, JsonStoreError

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")
logger = logging.getLogger("seed_products")

SAMPLE_PRODUCTS = [
    {"id": 1, "name": "Notebook", "price": 4.5},
    {"id": 2, "name": "Desk Lamp", "price": 29.99},
    {"id": 3, "name": "Coffee Mug", "price": 8.0},
]


def main() -> int:
    """Write the sample catalog. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Write a sample product catalog")
    parser.add_argument(
        "--path",
        type=Path,
        default=settings.DATA_FILE,
        help=f"Backing file to write (default: {settings.DATA_FILE})",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite the file if it already exists",
    )
    args = parser.parse_args()

    store = JsonProductStore(args.path)
    if store.exists() and not args.force:
        logger.error(f"{args.path} already exists; use --force to overwrite it")
        return 1

    args.path.parent.mkdir(parents=True, exist_ok=True)
    try:
        store.write_all(SAMPLE_PRODUCTS)
    except JsonStoreError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Wrote {len(SAMPLE_PRODUCTS)} products to {args.path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
