"""
Settings for the Product Service.

Values come from environment variables, read when ``Settings`` is
instantiated.  The module-level ``settings`` instance is created at
import time, so the environment should be prepared before importing
this module.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    service_name: str = field(default_factory=lambda: os.getenv("SERVICE_NAME", "product-service"))
    title: str = field(default_factory=lambda: os.getenv("APP_TITLE", "Product Service"))
    version: str = field(default_factory=lambda: os.getenv("APP_VERSION", "0.3.0"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    # Optional path of a log file in addition to the console.
    log_file: str | None = field(default_factory=lambda: os.getenv("LOG_FILE") or None)

    # uvicorn bind options used by ``python -m product_service``.
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    reload: bool = field(default_factory=lambda: _env_bool("RELOAD"))


settings = Settings()
