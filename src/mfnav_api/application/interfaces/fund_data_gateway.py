# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Fund Data Gateway Port (Application Layer).

Purpose:
    Protocol the NAV history use case depends on. Adapters implement it on
    top of a concrete provider; tests substitute in-memory fakes.

Layer:
    application/interfaces
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from mfnav_api.domain.entities.fund import FundSeries


@runtime_checkable
class FundDataGateway(Protocol):
    """Read port for a fund's metadata and full NAV history."""

    async def fetch_fund(self, fund_id: str) -> FundSeries:
        """Return the decoded fund document for ``fund_id``.

        Raises:
            UpstreamUnavailable: If the provider cannot be reached.
            UpstreamDecodeError: If the provider payload is malformed.
        """
        ...
