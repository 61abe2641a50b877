# =============================================================================
# core/services/product_service.py - Product Business Logic
# =============================================================================
# Handles catalog reads and product creation against the backing file.
# Separates HTTP concerns from storage and validation logic.
# =============================================================================

import logging
from typing import Any

from pydantic import ValidationError

from app.exceptions import DataStoreError, InvalidProductError, ProductNotFoundError
from core.models.product import Product, ProductCreate
from lib.json_store import JsonProductStore, JsonStoreError

logger = logging.getLogger(__name__)


def parse_product_id(product_id: str | int) -> int | None:
    """
    Parse a path identifier into an integer.

    Returns None when the text is not a base-10 integer; such an identifier
    can never match a stored product.
    """
    if isinstance(product_id, int):
        return product_id
    text = product_id.strip()
    if not text.isascii() or not text.isdigit():
        return None
    return int(text)


def next_product_id(products: list[Product]) -> int:
    """One more than the highest existing id, or 1 for an empty catalog."""
    return max((p.id for p in products), default=0) + 1


class ProductService:
    """
    Service for product catalog operations.

    Provides a clean interface between API routes and the backing file.
    """

    def __init__(self, store: JsonProductStore):
        self.store = store

    def _load(self) -> list[Product]:
        """
        Read and validate every stored product.

        Raises:
            DataStoreError: If the file cannot be read or holds bad records
        """
        return self._read_records()[1]

    def _read_records(self) -> tuple[list[dict[str, Any]], list[Product]]:
        """
        Read the raw records and their validated counterparts.

        The raw records are what gets written back, so keys and number
        formats of existing entries survive a rewrite.
        """
        try:
            records = self.store.read_all()
        except JsonStoreError as e:
            logger.error(f"Failed to load catalog: {e}")
            raise DataStoreError(e.message, code=e.code, details=e.details)

        try:
            return records, [Product.model_validate(record) for record in records]
        except ValidationError as e:
            logger.error(f"Catalog contains invalid records: {e}")
            raise DataStoreError(
                "Data file contains invalid product records",
                code="INVALID_RECORDS",
                details={"path": str(self.store.path), "error_count": e.error_count()},
            )

    def list_products(self) -> list[Product]:
        """
        List every product in the catalog.

        Returns:
            Products in backing file order

        Raises:
            DataStoreError: If the backing file is missing or corrupt
        """
        return self._load()

    def get_product(self, product_id: str | int) -> Product:
        """
        Get a product by ID.

        Args:
            product_id: Identifier as received in the request path

        Returns:
            The matching product

        Raises:
            ProductNotFoundError: If no product has this ID
            DataStoreError: If the backing file is missing or corrupt
        """
        products = self._load()
        wanted = parse_product_id(product_id)

        if wanted is not None:
            for product in products:
                if product.id == wanted:
                    return product

        raise ProductNotFoundError(product_id)

    def create_product(self, payload: Any) -> Product:
        """
        Validate a payload and append it to the catalog.

        Args:
            payload: Decoded request body, expected {"name": str, "price": number}

        Returns:
            The newly created product, with its assigned ID

        Raises:
            InvalidProductError: If the payload is missing fields or has bad values
            DataStoreError: If the backing file cannot be read or written
        """
        try:
            data = ProductCreate.model_validate(payload)
        except ValidationError as e:
            raise InvalidProductError(
                errors=[{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
            )

        with self.store.lock:
            records, products = self._read_records()
            product = Product(
                id=next_product_id(products),
                name=data.name,
                price=data.price,
            )

            try:
                self.store.write_all(records + [product.model_dump()])
            except JsonStoreError as e:
                logger.error(f"Failed to save catalog: {e}")
                raise DataStoreError(e.message, code=e.code, details=e.details)

        logger.info(f"Created product {product.id}: {product.name!r}")
        return product
