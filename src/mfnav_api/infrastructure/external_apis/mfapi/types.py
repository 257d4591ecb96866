# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""mfapi.in Types.

Summary:
    Typed response structures for the ``/mf/<scheme_code>`` endpoint.

Notes:
    Missing or null fields decode to their zero values and unknown fields
    (``status``, ``isin_growth``, ...) are ignored. Unknown scheme codes come
    back with an empty ``meta``; that is not a decode error.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _MfApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class MfApiMeta(_MfApiModel):
    fund_house: str = ""
    scheme_type: str = ""
    scheme_category: str = ""
    scheme_code: int = 0
    scheme_name: str = ""

    @field_validator("fund_house", "scheme_type", "scheme_category", "scheme_name", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("scheme_code", mode="before")
    @classmethod
    def _null_code(cls, value: Any) -> Any:
        return 0 if value is None else value


class MfApiNavItem(_MfApiModel):
    date: str = ""
    nav: str = ""

    @field_validator("date", "nav", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class MfApiSchemeResponse(_MfApiModel):
    meta: MfApiMeta = Field(default_factory=MfApiMeta)
    data: list[MfApiNavItem] = Field(default_factory=list)

    @field_validator("meta", mode="before")
    @classmethod
    def _null_meta(cls, value: Any) -> Any:
        return {} if value is None else value

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            return [{} if item is None else item for item in value]
        return value
