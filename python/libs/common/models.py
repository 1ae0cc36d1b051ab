"""Shared Pydantic models used across Python services."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import AfterValidator, BaseModel, PlainSerializer


def _check_float_exact(value: Decimal) -> Decimal:
    if Decimal(str(float(value))) != value:
        raise ValueError("price must be representable exactly as a JSON number")
    return value


# Prices are kept as Decimal in memory but go over the wire as JSON numbers,
# so only values that survive the float conversion are accepted.
Price = Annotated[
    Decimal,
    AfterValidator(_check_float_exact),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductBase(BaseModel):
    # All optional so missing fields reach the handler's own checks.
    sku: str | None = None
    description: str | None = None
    price: Price | None = None


class Product(ProductBase):
    id: int
    sku: str
    price: Price


class HealthResponse(BaseModel):
    status: str
    service: str


class ErrorResponse(BaseModel):
    message: str
