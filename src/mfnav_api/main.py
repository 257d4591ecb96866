# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""
Application Entry (Adapters Bootstrap)

Synopsis:
    FastAPI bootstrap that wires logging, middleware, exception handlers and
    routers. Provides an application factory (`create_app`) and a module-level
    eager app (`app`) used by uvicorn and the Lambda handler.

Design:
    • Bootstrap only (no business logic).
    • Root JSON logging configured once at app creation.
    • Every error path returns a JSON ``{"error": ...}`` body.
"""

from __future__ import annotations

import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.requests import Request
from starlette.responses import Response

from mfnav_api.adapters.routers import health_router, metrics_router, nav_router
from mfnav_api.config.settings import Settings, get_settings
from mfnav_api.domain.exceptions.fund_data import FundDataError
from mfnav_api.infrastructure.http.errors import (
    handle_fund_data_error,
    handle_http_exception,
    handle_unhandled_exception,
    handle_validation_error,
)
from mfnav_api.infrastructure.logging.logger import configure_root_logging, get_json_logger
from mfnav_api.infrastructure.middleware.request_id import RequestIdMiddleware

logger = get_json_logger(__name__)


def _patch_exception_handlers(app: FastAPI) -> None:
    """Register structured equivalents of the default exception handlers.

    Args:
        app: FastAPI application.
    """

    async def _fund_data_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, FundDataError):
            raise exc
        return await handle_fund_data_error(request, exc)

    async def _http_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, HTTPException):
            raise exc
        return await handle_http_exception(request, exc)

    async def _validation_error_handler(request: Request, exc: Exception) -> Response:
        if not isinstance(exc, RequestValidationError):
            raise exc
        return await handle_validation_error(request, exc)

    async def _unhandled_error_handler(request: Request, exc: Exception) -> Response:
        return await handle_unhandled_exception(request, exc)

    app.add_exception_handler(FundDataError, _fund_data_error_handler)
    app.add_exception_handler(HTTPException, _http_error_handler)
    app.add_exception_handler(RequestValidationError, _validation_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        settings: Optional explicit settings; defaults to :func:`get_settings`.

    Returns:
        FastAPI: Fully configured application instance.
    """
    settings = settings or get_settings()
    configure_root_logging(settings.log_level)

    service_version = settings.service_version or "0.0.0"
    app = FastAPI(
        title="MFNav API",
        version=service_version,
        description="Mutual fund NAV history, filtered by an optional date window.",
        docs_url=settings.docs_url or None,
        redoc_url=None,
        openapi_url=settings.openapi_url or None,
    )

    _patch_exception_handlers(app)
    app.add_middleware(RequestIdMiddleware)

    app.include_router(nav_router)
    app.include_router(health_router)
    app.include_router(metrics_router)

    logger.info(
        "service_startup",
        extra={
            "extra": {
                "service": settings.service_name,
                "env": settings.environment.value,
                "version": service_version,
            }
        },
    )
    return app


# Eager app for uvicorn and the Lambda handler.
app: FastAPI = create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run(
        "mfnav_api.main:create_app",
        factory=True,
        host="127.0.0.1",
        port=int(os.getenv("PORT", "8080")),
        reload=True,
    )
