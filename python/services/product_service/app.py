"""Product Service — FastAPI application for managing products."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Body, Depends, FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from common.logging_config import setup_logging
from common.models import ErrorResponse, HealthResponse, Product, ProductBase

from product_service.config import Settings, settings
from product_service.errors import InvalidProductError, ProductNotFoundError
from product_service.store import ProductStore

logger = logging.getLogger(__name__)

# In-memory store, shared for the lifetime of the process
_store = ProductStore()


def get_store() -> ProductStore:
    return _store


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(message=message).model_dump(),
    )


def _check_payload(payload: ProductBase | None) -> str | None:
    """Return the reason a request body is unusable, or None if it passes."""
    if payload is None:
        return "Product data is required."
    if not payload.sku or not payload.sku.strip():
        return "SKU is required."
    if payload.price is None or payload.price <= 0:
        return "Price must be greater than 0."
    return None


_error_responses = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}

router = APIRouter(prefix="/api/products", tags=["products"], responses=_error_responses)


@router.get("", response_model=list[Product])
def list_products(store: ProductStore = Depends(get_store)):
    try:
        return store.get_all()
    except Exception as exc:
        logger.exception("Failed to list products")
        return _error(500, f"An error occurred while retrieving products: {exc}")


@router.get("/{product_id}", response_model=Product)
def get_product(product_id: int, store: ProductStore = Depends(get_store)):
    try:
        product = store.get_by_id(product_id)
    except Exception as exc:
        logger.exception("Failed to get product %s", product_id)
        return _error(500, f"An error occurred while retrieving the product: {exc}")

    if product is None:
        return _error(404, f"Product with ID {product_id} not found.")
    return product


@router.post("", response_model=Product, status_code=status.HTTP_201_CREATED)
def create_product(
    request: Request,
    response: Response,
    payload: ProductBase | None = Body(default=None),
    store: ProductStore = Depends(get_store),
):
    reason = _check_payload(payload)
    if reason:
        return _error(400, reason)

    try:
        product = store.create(payload)
    except InvalidProductError as exc:
        return _error(400, str(exc))
    except Exception as exc:
        logger.exception("Failed to create product")
        return _error(500, f"An error occurred while creating the product: {exc}")

    response.headers["Location"] = str(request.url_for("get_product", product_id=product.id))
    return product


@router.put("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_product(
    product_id: int,
    payload: ProductBase | None = Body(default=None),
    store: ProductStore = Depends(get_store),
):
    reason = _check_payload(payload)
    if reason:
        return _error(400, reason)

    try:
        store.update(
            Product(
                id=product_id,
                sku=payload.sku,
                description=payload.description,
                price=payload.price,
            )
        )
    except ProductNotFoundError as exc:
        return _error(404, str(exc))
    except InvalidProductError as exc:
        return _error(400, str(exc))
    except Exception as exc:
        logger.exception("Failed to update product %s", product_id)
        return _error(500, f"An error occurred while updating the product: {exc}")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(product_id: int, store: ProductStore = Depends(get_store)):
    try:
        product = store.get_by_id(product_id)
        if product is None:
            return _error(404, f"Product with ID {product_id} not found.")
        store.delete(product)
    except Exception as exc:
        logger.exception("Failed to delete product %s", product_id)
        return _error(500, f"An error occurred while deleting the product: {exc}")

    return Response(status_code=status.HTTP_204_NO_CONTENT)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in exc.errors()
    )
    return _error(400, f"Invalid request: {details}")


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, f"An unexpected error occurred: {exc}")


def create_app(config: Settings = settings) -> FastAPI:
    setup_logging(config.log_level, config.log_file)

    app = FastAPI(title=config.title, version=config.version)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(status="ok", service=config.service_name)

    app.include_router(router)
    return app


app = create_app()
