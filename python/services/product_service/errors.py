"""Errors raised by the product store."""


class ProductStoreError(Exception):
    """Base class for product store failures."""


class InvalidProductError(ProductStoreError, ValueError):
    """Product data is missing or fails validation."""


class ProductNotFoundError(ProductStoreError, LookupError):
    def __init__(self, product_id: int):
        super().__init__(f"Product with ID {product_id} not found.")
        self.product_id = product_id
