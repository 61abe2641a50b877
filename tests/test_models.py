# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the product models to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Input values are not coerced across types
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Product, ProductCreate, ProductList


class TestProduct:
    """Tests for Product model."""

    def test_valid_product(self):
        product = Product(id=1, name="Notebook", price=4.5)

        assert product.id == 1
        assert product.name == "Notebook"
        assert product.price == 4.5

    def test_integer_price_is_accepted(self):
        assert Product(id=1, name="Pen", price=10).price == 10.0

    @pytest.mark.parametrize(
        "data",
        [
            {"id": 0, "name": "Pen", "price": 1},
            {"id": 1, "name": "", "price": 1},
            {"id": 1, "name": "Pen", "price": 0},
            {"id": 1, "name": "Pen"},
        ],
    )
    def test_invalid_product(self, data):
        with pytest.raises(ValidationError):
            Product(**data)


class TestProductCreate:
    """Tests for ProductCreate model."""

    def test_valid_input(self):
        data = ProductCreate.model_validate({"name": "Pen", "price": 10})

        assert data.name == "Pen"
        assert data.price == 10

    def test_strips_whitespace(self):
        data = ProductCreate.model_validate({"name": "  Pen ", "price": 2.5})

        assert data.name == "Pen"

    def test_extra_fields_are_ignored(self):
        data = ProductCreate.model_validate({"name": "Pen", "price": 1, "color": "blue"})

        assert not hasattr(data, "color")

    @pytest.mark.parametrize(
        "data",
        [
            {"price": 10},
            {"name": "Pen"},
            {"name": "Pen", "price": -5},
            {"name": "Pen", "price": 0},
            {"name": "Pen", "price": "10"},
            {"name": 10, "price": 10},
            {"name": "  ", "price": 10},
            {"name": "Pen", "price": float("inf")},
            {"name": "Pen", "price": float("nan")},
        ],
    )
    def test_rejects_invalid_input(self, data):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate(data)


class TestProductList:
    """Tests for ProductList model."""

    def test_defaults_to_empty(self):
        assert ProductList().model_dump() == {"products": []}

    def test_serializes_envelope(self):
        listing = ProductList(products=[Product(id=1, name="Pen", price=10)])

        assert listing.model_dump() == {"products": [{"id": 1, "name": "Pen", "price": 10.0}]}
