# =============================================================================
# app/routers/products.py - Product Catalog Endpoints
# =============================================================================
# Handles listing, fetching and creating products.
# Errors are raised as CatalogException subclasses and rendered by the
# handlers registered in main.py.
# =============================================================================

from typing import Annotated, Any

from fastapi import APIRouter, Body, Path

from app.dependencies import ProductServiceDep
from core.models.product import Product, ProductList

router = APIRouter()


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=ProductList)
def list_products(service: ProductServiceDep):
    """
    List all products.

    Returns every product in the catalog, in the order they are stored.
    """
    return ProductList(products=service.list_products())


@router.get("/{product_id}", response_model=Product)
def get_product(
    product_id: Annotated[str, Path(description="Product ID")],
    service: ProductServiceDep,
):
    """
    Get a single product.

    Returns 404 with {"error": "Product not found"} for unknown IDs.
    """
    return service.get_product(product_id)


@router.post("", response_model=Product, status_code=201)
def create_product(
    service: ProductServiceDep,
    payload: Annotated[
        Any,
        Body(
            description="Product to create",
            examples=[{"name": "Pen", "price": 10}],
        ),
    ] = None,
):
    """
    Create a product.

    The ID is assigned automatically (one more than the current maximum).
    Returns 400 with {"error": "Invalid product data"} when name is missing
    or empty, or price is not a positive number.
    """
    return service.create_product(payload)
