# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV history HTTP schemas.

Purpose:
    Wire shapes of the NAV history endpoint:

      - ``NavHistoryResponse``: ``{"meta": {...}, "period"?: "...", "data": [...]}``
      - ``ErrorResponse``: ``{"error": "<message>"}``

Layer: adapters/schemas/http
"""

from __future__ import annotations

from pydantic import ConfigDict, Field

from mfnav_api.adapters.schemas.http.base import BaseHTTPSchema
from mfnav_api.application.schemas.dto.nav import FundNavHistoryDTO

__all__ = ["ErrorResponse", "FundMetaSchema", "NavHistoryResponse", "NavPointSchema"]


class FundMetaSchema(BaseHTTPSchema):
    """Fund metadata block."""

    fund_house: str = Field(..., examples=["HDFC Mutual Fund"])
    scheme_type: str = Field(..., examples=["Open Ended Schemes"])
    scheme_category: str = Field(..., examples=["Equity Scheme - Large Cap Fund"])
    scheme_code: int = Field(..., examples=[119598])
    scheme_name: str = Field(..., examples=["HDFC Top 100 Fund - Direct Plan - Growth Option"])


class NavPointSchema(BaseHTTPSchema):
    """Single NAV observation."""

    date: str = Field(..., description="Observation date (dd-mm-yyyy).", examples=["15-01-2023"])
    nav: str = Field(..., description="Net asset value as a decimal string.", examples=["812.34500"])


class NavHistoryResponse(BaseHTTPSchema):
    """Successful NAV history body.

    ``period`` is omitted from the JSON body (not null) when no window was
    requested; render with ``exclude_none=True``.
    """

    model_config = ConfigDict(
        title="NavHistoryResponse",
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "meta": {
                        "fund_house": "HDFC Mutual Fund",
                        "scheme_type": "Open Ended Schemes",
                        "scheme_category": "Equity Scheme - Large Cap Fund",
                        "scheme_code": 119598,
                        "scheme_name": "HDFC Top 100 Fund - Direct Plan - Growth Option",
                    },
                    "period": "01-01-2023 to 31-01-2023",
                    "data": [{"date": "15-01-2023", "nav": "812.34500"}],
                }
            ]
        },
    )

    meta: FundMetaSchema
    period: str | None = Field(
        default=None,
        description="Requested window as 'dd-mm-yyyy to dd-mm-yyyy'; absent when unfiltered.",
    )
    data: list[NavPointSchema] = Field(default_factory=list)

    @classmethod
    def from_dto(cls, dto: FundNavHistoryDTO) -> NavHistoryResponse:
        """Build the wire body from the use-case result."""
        return cls(
            meta=FundMetaSchema(**dto.meta.model_dump()),
            period=dto.period,
            data=[NavPointSchema(date=p.date, nav=p.nav) for p in dto.data],
        )


class ErrorResponse(BaseHTTPSchema):
    """Error body: a single human-readable message."""

    model_config = ConfigDict(
        title="ErrorResponse",
        extra="forbid",
        json_schema_extra={"examples": [{"error": "mutualFundID must be an integer"}]},
    )

    error: str = Field(..., description="Human-readable error description.")
