# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Use case: Get fund NAV history.

Synopsis:
    Validates the raw query, fetches the fund document from the gateway, and
    returns the metadata plus the NAV points inside the requested window.

Responsibilities:
    * Validate the fund identifier and the optional date window. This happens
      before the upstream call so malformed input never reaches the provider.
    * Fetch the fund document (one attempt, no cache).
    * Reject empty metadata as an unknown fund.
    * Filter the NAV series and attach the period label.

Any failure is raised as a ``FundDataError`` subclass; there is no partial
result.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

from mfnav_api.application.interfaces.fund_data_gateway import FundDataGateway
from mfnav_api.application.schemas.dto.nav import (
    FundMetaDTO,
    FundNavHistoryDTO,
    NavPointDTO,
    NavQueryDTO,
)
from mfnav_api.domain.exceptions.fund_data import InvalidFundId
from mfnav_api.domain.services.nav_filter import ensure_known_fund, filter_nav_points
from mfnav_api.domain.services.nav_query import parse_fund_id, resolve_date_range
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


class GetFundNavHistoryUseCase:
    """Fetch a fund's NAV history, optionally restricted to a date window."""

    def __init__(
        self,
        *,
        gateway: FundDataGateway,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the use case.

        Args:
            gateway: Provider port returning the fund document.
            clock: Returns the current moment; only its date is used.
        """
        self._gateway = gateway
        self._clock = clock

    async def execute(self, q: NavQueryDTO) -> FundNavHistoryDTO:
        """Execute the use case.

        Args:
            q: Raw query values.

        Returns:
            The fund metadata, optional period label and filtered NAV points.

        Raises:
            MissingParameter, InvalidParameter: Bad fund identifier.
            IncompleteDateRange, InvalidDateFormat, FutureEndDate, InvertedRange:
                Bad date window.
            UpstreamUnavailable, UpstreamDecodeError: Provider failures.
            InvalidFundId: Provider returned empty metadata.
        """
        fund_id = parse_fund_id(q.mutual_fund_id)
        date_range = resolve_date_range(q.start, q.end, today=self._clock().date())

        series = await self._gateway.fetch_fund(fund_id)

        try:
            meta = ensure_known_fund(series.metadata, fund_id=fund_id)
        except InvalidFundId:
            logger.info("invalid_fund_id", extra={"extra": {"fund_id": fund_id}})
            raise

        points = filter_nav_points(series.points, date_range)
        logger.info(
            "nav_history_served",
            extra={
                "extra": {
                    "fund_id": fund_id,
                    "upstream_points": len(series.points),
                    "returned_points": len(points),
                    "ranged": date_range is not None,
                }
            },
        )
        return FundNavHistoryDTO(
            meta=FundMetaDTO.from_entity(meta),
            period=date_range.label() if date_range is not None else None,
            data=[NavPointDTO.from_entity(p) for p in points],
        )
