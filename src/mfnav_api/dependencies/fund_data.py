# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Dependency wiring for fund data (settings, gateway, use case).

Overview:
    FastAPI dependency providers for the NAV history router.

Design:
    * Settings are read per request so tests can change ``MFAPI_*`` env vars
      with ``monkeypatch`` without clearing caches.
    * The HTTP client is created for one request and closed when the request
      finishes, on every exit path.
    * Tests override :func:`get_fund_data_gateway` (or
      :func:`get_fund_nav_history_use_case`) via ``app.dependency_overrides``.

Layer:
    dependencies
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends

from mfnav_api.adapters.gateways.mfapi_gateway import MfApiGateway
from mfnav_api.application.interfaces.fund_data_gateway import FundDataGateway
from mfnav_api.application.use_cases.nav.get_fund_nav_history import GetFundNavHistoryUseCase
from mfnav_api.infrastructure.external_apis.mfapi.client import MfApiClient
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfApiSettings


def get_mfapi_settings() -> MfApiSettings:
    """Load provider settings from the environment."""
    return MfApiSettings()


async def get_fund_data_gateway(
    settings: Annotated[MfApiSettings, Depends(get_mfapi_settings)],
) -> AsyncGenerator[FundDataGateway, None]:
    """Yield a gateway backed by a request-scoped HTTP client."""
    async with MfApiClient(settings) as client:
        yield MfApiGateway(client)


def get_fund_nav_history_use_case(
    gateway: Annotated[FundDataGateway, Depends(get_fund_data_gateway)],
) -> GetFundNavHistoryUseCase:
    """Build the NAV history use case."""
    return GetFundNavHistoryUseCase(gateway=gateway)
