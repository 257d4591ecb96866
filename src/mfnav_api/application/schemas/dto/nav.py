# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV history DTOs (Application Layer).

Layer: application/schemas/dto
"""

from __future__ import annotations

from pydantic import Field

from mfnav_api.application.schemas.dto.base import BaseDTO
from mfnav_api.domain.entities.fund import FundMetadata, NavPoint


class NavQueryDTO(BaseDTO):
    """Raw NAV history query; every value is the unparsed query string.

    Attributes:
        mutual_fund_id: Scheme code as supplied (``""`` when absent).
        start: Inclusive window start, ``dd-mm-yyyy`` (``""`` when absent).
        end: Inclusive window end, ``dd-mm-yyyy`` (``""`` when absent).
    """

    mutual_fund_id: str = ""
    start: str = ""
    end: str = ""


class FundMetaDTO(BaseDTO):
    """Fund metadata as returned to clients."""

    fund_house: str
    scheme_type: str
    scheme_category: str
    scheme_code: int
    scheme_name: str

    @classmethod
    def from_entity(cls, meta: FundMetadata) -> FundMetaDTO:
        return cls(
            fund_house=meta.fund_house,
            scheme_type=meta.scheme_type,
            scheme_category=meta.scheme_category,
            scheme_code=meta.scheme_code,
            scheme_name=meta.scheme_name,
        )


class NavPointDTO(BaseDTO):
    """One NAV observation, provider strings kept verbatim."""

    date: str
    nav: str

    @classmethod
    def from_entity(cls, point: NavPoint) -> NavPointDTO:
        return cls(date=point.date, nav=point.nav)


class FundNavHistoryDTO(BaseDTO):
    """Successful NAV history result.

    Attributes:
        meta: Fund metadata (never the empty sentinel).
        period: ``"dd-mm-yyyy to dd-mm-yyyy"`` when a window was requested.
        data: Kept NAV points in upstream order; may be empty.
    """

    meta: FundMetaDTO
    period: str | None = None
    data: list[NavPointDTO] = Field(default_factory=list)
