"""Run the Product Service with uvicorn: ``python -m product_service``."""

import uvicorn

from product_service.config import settings


def main() -> None:
    uvicorn.run(
        "product_service.app:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
