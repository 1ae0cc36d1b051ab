"""In-memory product store backing the Product Service."""

from __future__ import annotations

import logging

from common.models import Product, ProductBase

from product_service.errors import InvalidProductError, ProductNotFoundError

logger = logging.getLogger(__name__)


def _validate(product: ProductBase | None) -> None:
    if product is None:
        raise InvalidProductError("Product data is required.")
    if not product.sku or not product.sku.strip():
        raise InvalidProductError("SKU cannot be null or empty.")
    if product.price is None or product.price <= 0:
        raise InvalidProductError("Price must be greater than 0.")


class ProductStore:
    """Holds products for the lifetime of the process.

    Ids are handed out from a counter starting at 1 and are never reused,
    even after the product holding one is deleted.  Products are kept in
    insertion order.
    """

    def __init__(self) -> None:
        self._products: list[Product] = []
        self._next_id = 1

    def create(self, product: ProductBase | None) -> Product:
        _validate(product)
        stored = Product(
            id=self._next_id,
            sku=product.sku,
            description=product.description,
            price=product.price,
        )
        self._next_id += 1
        self._products.append(stored)
        logger.info("Created product %s (sku=%s)", stored.id, stored.sku)
        return stored

    def get_by_id(self, product_id: int) -> Product | None:
        return next((p for p in self._products if p.id == product_id), None)

    def get_all(self) -> list[Product]:
        return list(self._products)

    def update(self, product: Product | None) -> None:
        """Overwrite sku, description and price of the stored product with the same id."""
        _validate(product)
        existing = self.get_by_id(product.id)
        if existing is None:
            raise ProductNotFoundError(product.id)

        existing.description = product.description
        existing.sku = product.sku
        existing.price = product.price
        logger.info("Updated product %s", existing.id)

    def delete(self, product: Product | None) -> None:
        """Remove the product with the same id; absent products are ignored."""
        if product is None:
            raise InvalidProductError("Product data is required.")

        existing = self.get_by_id(product.id)
        if existing is not None:
            self._products.remove(existing)
            logger.info("Deleted product %s", existing.id)
