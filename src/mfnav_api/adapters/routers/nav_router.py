# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV History Router.

Synopsis:
    HTTP surface for a fund's NAV history. Reads the three query parameters
    as raw strings, invokes :class:`GetFundNavHistoryUseCase`, and renders the
    result or the failure through :class:`NavPresenter`.

Design:
    * Presentation-only: builds the query DTO, delegates to the UC, shapes the response.
    * Parameters default to ``""`` so absence is reported by the pipeline
      (``MissingParameter`` / ``IncompleteDateRange``) rather than as a 422.
    * ``/nav`` is canonical; ``/`` is an alias (``include_in_schema=False``)
      for the API Gateway root resource.

Layer:
    adapters/routers
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from fastapi import APIRouter, Depends, Query, Request, Response

from mfnav_api.adapters.presenters.nav_presenter import NavPresenter
from mfnav_api.adapters.schemas.http.nav import ErrorResponse, NavHistoryResponse
from mfnav_api.application.schemas.dto.nav import NavQueryDTO
from mfnav_api.application.use_cases.nav.get_fund_nav_history import GetFundNavHistoryUseCase
from mfnav_api.dependencies.fund_data import get_fund_nav_history_use_case
from mfnav_api.domain.exceptions.fund_data import FundDataError
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)
router = APIRouter(tags=["NAV"])
_presenter = NavPresenter()

_RESPONSES = cast(
    "dict[int | str, dict[str, Any]]",
    {
        200: {"model": NavHistoryResponse, "description": "Fund metadata and NAV points."},
        400: {"model": ErrorResponse, "description": "Invalid parameters or unknown fund."},
        500: {"model": ErrorResponse, "description": "Upstream or serialization failure."},
    },
)


@router.get(
    "/nav",
    response_model=None,
    responses=_RESPONSES,
    summary="Get a mutual fund's NAV history",
    description=(
        "Returns the fund's metadata and its NAV series, optionally restricted to the "
        "inclusive window [start, end]. Dates use dd-mm-yyyy; start and end must be "
        "supplied together."
    ),
)
@router.get("/", response_model=None, include_in_schema=False)
async def get_nav_history(
    request: Request,
    uc: Annotated[GetFundNavHistoryUseCase, Depends(get_fund_nav_history_use_case)],
    mutual_fund_id: Annotated[
        str, Query(alias="mutualFundID", description="Scheme code (integer).")
    ] = "",
    start: Annotated[str, Query(description="Window start (dd-mm-yyyy).")] = "",
    end: Annotated[str, Query(description="Window end (dd-mm-yyyy).")] = "",
) -> Response:
    """Return NAV history for ``mutualFundID`` within the optional window."""
    request_id = getattr(request.state, "request_id", None)
    logger.info(
        "nav_history_request",
        extra={"extra": {"fund_id": mutual_fund_id, "start": start, "end": end}},
    )

    q = NavQueryDTO(mutual_fund_id=mutual_fund_id, start=start, end=end)
    try:
        result = await uc.execute(q)
        return _presenter.present_success(result, request_id=request_id).to_response()
    except FundDataError as exc:
        logger.info(
            "nav_history_failed",
            extra={"extra": {"code": exc.code, "http_status": exc.http_status}},
        )
        return _presenter.present_error(exc, request_id=request_id).to_response()
