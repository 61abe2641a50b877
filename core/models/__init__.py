# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - product.py: Product, ProductCreate and ProductList schemas
#
# These models define the "contract" between API and clients.
# =============================================================================

from .product import (
    Product,
    ProductCreate,
    ProductList,
)

__all__ = [
    "Product",
    "ProductCreate",
    "ProductList",
]
