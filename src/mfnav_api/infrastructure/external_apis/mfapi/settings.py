# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Pydantic settings for the mfapi.in transport client."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MfApiSettings(BaseSettings):
    """Configuration for the mfapi.in client.

    Environment variables (with ``model_config.env_prefix``):

    * ``MFAPI_BASE_URL``
    * ``MFAPI_TIMEOUT_S`` (unset: the httpx default timeout applies)
    """

    base_url: str = Field(
        "https://api.mfapi.in/mf",
        description="Base URL; the scheme code is appended as the last path segment.",
    )
    timeout_s: float | None = Field(
        None,
        gt=0,
        description="Optional per-request timeout in seconds.",
    )

    model_config: SettingsConfigDict = SettingsConfigDict(
        env_prefix="MFAPI_",
        extra="ignore",
    )

    def scheme_url(self, fund_id: str) -> str:
        """Return the upstream URL for one scheme code."""
        return f"{self.base_url.rstrip('/')}/{fund_id}"
