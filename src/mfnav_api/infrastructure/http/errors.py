# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Application-wide exception handlers.

Every error leaving the service is a JSON ``{"error": "<message>"}`` body;
clients never receive a stack trace or an empty body.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from starlette.responses import Response

from mfnav_api.adapters.presenters.nav_presenter import NavPresenter
from mfnav_api.domain.exceptions.fund_data import FundDataError
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)

_presenter = NavPresenter()


def _request_id(request: Request) -> str | None:
    return getattr(getattr(request, "state", None), "request_id", None)


async def handle_fund_data_error(request: Request, exc: FundDataError) -> Response:
    return _presenter.present_error(exc, request_id=_request_id(request)).to_response()


async def handle_validation_error(request: Request, exc: RequestValidationError) -> Response:
    logger.info("request_validation_failed", extra={"extra": {"errors": len(exc.errors())}})
    return _presenter.present_message(
        400, "invalid request parameters", request_id=_request_id(request)
    ).to_response()


async def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    message = exc.detail if isinstance(exc.detail, str) else "HTTP error"
    result = _presenter.present_message(exc.status_code, message, request_id=_request_id(request))
    response = result.to_response()
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def handle_unhandled_exception(request: Request, exc: Exception) -> Response:
    logger.error(
        "unhandled_exception",
        exc_info=exc,
        extra={"extra": {"path": request.url.path}},
    )
    return _presenter.present_message(
        500, "internal server error", request_id=_request_id(request)
    ).to_response()
