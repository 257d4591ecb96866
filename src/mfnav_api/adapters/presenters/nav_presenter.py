# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV history presenter.

Purpose:
    Shapes use-case results and pipeline failures into JSON HTTP responses.

Responsibilities:
    * Render the success body, omitting ``period`` when no window was given.
    * Render ``{"error": message}`` with the status carried by the failure.
    * Convert serialization failures into ``ResponseSerializationError``.
    * Echo ``X-Request-ID`` when provided.

Layer:
    adapters/presenters
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Final

from fastapi import Response
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from mfnav_api.adapters.schemas.http.nav import ErrorResponse, NavHistoryResponse
from mfnav_api.application.schemas.dto.nav import FundNavHistoryDTO
from mfnav_api.domain.exceptions.fund_data import FundDataError, ResponseSerializationError
from mfnav_api.infrastructure.logging.logger import get_json_logger

_LOGGER = get_json_logger(__name__)

JSON_MEDIA_TYPE: Final[str] = "application/json"


@dataclass(slots=True)
class PresentResult:
    """Presentation result.

    Attributes:
        body: Encoded JSON body.
        status_code: HTTP status code.
        headers: Extra HTTP headers to apply.
    """

    body: bytes
    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)

    def to_response(self) -> Response:
        """Return a framework response carrying this result."""
        return Response(
            content=self.body,
            status_code=self.status_code,
            headers=dict(self.headers),
            media_type=JSON_MEDIA_TYPE,
        )


def _headers(request_id: str | None) -> dict[str, str]:
    return {"X-Request-ID": request_id} if request_id else {}


class NavPresenter:
    """Presenter for the NAV history endpoint."""

    def present_success(
        self,
        result: FundNavHistoryDTO,
        *,
        request_id: str | None = None,
    ) -> PresentResult:
        """Render a 200 body.

        Raises:
            ResponseSerializationError: If the result cannot be encoded as JSON.
        """
        try:
            body = NavHistoryResponse.from_dto(result).model_dump_json(exclude_none=True)
        except (PydanticSerializationError, ValidationError, TypeError, ValueError) as exc:
            _LOGGER.exception("nav_history_serialization_failed")
            raise ResponseSerializationError() from exc
        return PresentResult(body=body.encode("utf-8"), status_code=200, headers=_headers(request_id))

    def present_error(
        self,
        exc: FundDataError,
        *,
        request_id: str | None = None,
    ) -> PresentResult:
        """Render ``{"error": message}`` with the failure's HTTP status."""
        return self.present_message(exc.http_status, exc.message, request_id=request_id)

    def present_message(
        self,
        http_status: int,
        message: str,
        *,
        request_id: str | None = None,
    ) -> PresentResult:
        """Render ``{"error": message}`` with an explicit HTTP status."""
        body = ErrorResponse(error=message).model_dump_json()
        return PresentResult(
            body=body.encode("utf-8"),
            status_code=int(http_status),
            headers=_headers(request_id),
        )
