# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV Series Filtering (Domain Service).

Synopsis:
    Applies an optional inclusive date window to an upstream NAV sequence and
    rejects funds whose metadata came back empty.

Notes:
    Points whose date does not parse as ``dd-mm-yyyy`` are dropped without an
    error; upstream occasionally publishes such rows and they are treated as
    noise rather than as a pipeline failure.

Layer:
    domain/services
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from mfnav_api.domain.entities.fund import DateRange, FundMetadata, NavPoint
from mfnav_api.domain.exceptions.fund_data import InvalidFundId
from mfnav_api.domain.services.nav_query import parse_nav_date

logger = logging.getLogger(__name__)


def ensure_known_fund(metadata: FundMetadata, *, fund_id: str | None = None) -> FundMetadata:
    """Return ``metadata`` unchanged, or raise if it is the empty sentinel.

    Raises:
        InvalidFundId: If every metadata field holds its default value.
    """
    if metadata.is_empty():
        raise InvalidFundId(details={"mutualFundID": fund_id} if fund_id is not None else None)
    return metadata


def filter_nav_points(
    points: Iterable[NavPoint],
    date_range: DateRange | None,
) -> list[NavPoint]:
    """Keep the points whose date parses and falls inside ``date_range``.

    Args:
        points: Upstream NAV points in upstream order.
        date_range: Inclusive window, or ``None`` to keep every parseable point.

    Returns:
        The kept points, preserving their relative order.
    """
    kept: list[NavPoint] = []
    for point in points:
        day = parse_nav_date(point.date)
        if day is None:
            logger.debug("nav_point_dropped", extra={"extra": {"date": point.date}})
            continue
        if date_range is None or date_range.contains(day):
            kept.append(point)
    return kept
