# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .product_service import ProductService, next_product_id, parse_product_id

__all__ = [
    "ProductService",
    "next_product_id",
    "parse_product_id",
]
