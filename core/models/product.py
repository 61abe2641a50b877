# =============================================================================
# core/models/product.py - Product Schemas
# =============================================================================
# These models define the API contract for product operations:
# - Product: a stored catalog entry (also the response shape)
# - ProductCreate: validated input for creating a product
# - ProductList: envelope returned when listing the catalog
#
# Products live in the backing JSON file as an ordered array.
# =============================================================================

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictStr

# Integers stay integers so stored prices keep the number format they were
# written with (10 is not rewritten as 10.0)
Price = Annotated[int, Field(gt=0)] | Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Product(BaseModel):
    """
    Schema for a stored product.

    Returned by:
    - GET /products (inside the "products" list)
    - GET /products/{id}
    - POST /products (the newly created entry)

    Example:
        {
            "id": 1,
            "name": "Notebook",
            "price": 4.5
        }
    """

    # Auto-incremented identifier, unique within the catalog
    id: int = Field(
        ...,
        gt=0,
        description="Unique product identifier"
    )

    name: str = Field(
        ...,
        min_length=1,
        description="Product name"
    )

    price: Price = Field(
        ...,
        description="Unit price (positive)"
    )


class ProductCreate(BaseModel):
    """
    Schema for creating a new product.

    The id is assigned by the service, never by the client. Values are not
    coerced: "10" is not a price and 10 is not a name.

    Example:
        {
            "name": "Pen",
            "price": 10
        }
    """

    model_config = ConfigDict(strict=True, str_strip_whitespace=True)

    name: StrictStr = Field(
        ...,
        min_length=1,
        description="Product name (surrounding whitespace is trimmed)"
    )

    price: Price = Field(
        ...,
        description="Unit price (positive)"
    )


class ProductList(BaseModel):
    """
    Envelope for listing the catalog.

    Products appear in backing file order.
    """

    products: list[Product] = Field(
        default_factory=list,
        description="All products in the catalog"
    )
