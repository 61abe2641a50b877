# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from app.config import settings
from core.services.product_service import ProductService
from lib.json_store import JsonProductStore


@lru_cache
def get_product_store() -> JsonProductStore:
    """
    Get the store for the configured backing file.

    Cached so every request shares the same in-process lock.
    """
    return JsonProductStore(settings.DATA_FILE)


def get_product_service(
    store: Annotated[JsonProductStore, Depends(get_product_store)],
) -> ProductService:
    """Build a ProductService bound to the current store."""
    return ProductService(store)


# Type aliases for dependency injection
ProductServiceDep = Annotated[ProductService, Depends(get_product_service)]
