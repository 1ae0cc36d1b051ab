from decimal import Decimal

import pytest
from pydantic import ValidationError

from common.models import ErrorResponse, HealthResponse, Product, ProductBase


def test_product_base_fields_are_optional():
    payload = ProductBase()
    assert payload.sku is None
    assert payload.description is None
    assert payload.price is None


def test_product_base_ignores_id():
    payload = ProductBase.model_validate({"id": 42, "sku": "PROD-001", "price": 10})
    assert not hasattr(payload, "id")
    assert payload.price == Decimal("10")


def test_product_model():
    product = Product(
        id=1,
        sku="PROD-001",
        price=Decimal("9.99"),
        description="A fine widget",
    )
    assert product.price == Decimal("9.99")
    assert product.model_dump(mode="json") == {
        "sku": "PROD-001",
        "description": "A fine widget",
        "price": 9.99,
        "id": 1,
    }


@pytest.mark.parametrize("price", ["1e-400", "1e400", "0.10000000000000000001"])
def test_price_rejects_values_lost_as_float(price):
    with pytest.raises(ValidationError):
        ProductBase(sku="PROD-001", price=price)


def test_price_accepts_trailing_zeros():
    assert ProductBase(price="15.50").model_dump(mode="json")["price"] == 15.5


def test_health_response():
    health = HealthResponse(status="ok", service="test")
    assert health.status == "ok"


def test_error_response():
    assert ErrorResponse(message="nope").model_dump() == {"message": "nope"}
