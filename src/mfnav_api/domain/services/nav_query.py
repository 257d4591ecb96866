# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""NAV Query Validation (Domain Service).

Synopsis:
    Pure validation of the three raw query values accepted by the NAV history
    endpoint: the fund identifier and the optional ``start``/``end`` window.

Rules:
    * The fund identifier is required and must be an integer string (optional
      sign, ASCII digits). No range constraint is applied.
    * ``start`` and ``end`` are both given or both omitted.
    * Bounds are strict ``dd-mm-yyyy`` calendar dates; ``start`` is checked
      before ``end``.
    * ``end`` may not be after ``today``; ``start`` may not be after ``end``.

Layer:
    domain/services
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Final

from mfnav_api.domain.entities.fund import NAV_DATE_FORMAT, DateRange
from mfnav_api.domain.exceptions.fund_data import (
    FutureEndDate,
    IncompleteDateRange,
    InvalidDateFormat,
    InvalidParameter,
    InvertedRange,
    MissingParameter,
)

_FUND_ID_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?[0-9]+")
# strptime alone accepts "1-1-2023"; the shape check keeps padding mandatory.
_NAV_DATE_RE: Final[re.Pattern[str]] = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")


def parse_fund_id(raw: str | None) -> str:
    """Validate the fund identifier and return it unchanged.

    Args:
        raw: Query value for ``mutualFundID``; ``None`` is treated as empty.

    Returns:
        The identifier exactly as supplied, ready to be used in the upstream path.

    Raises:
        MissingParameter: If the value is empty.
        InvalidParameter: If the value is not an integer string.
    """
    value = raw or ""
    if value == "":
        raise MissingParameter()
    if not _FUND_ID_RE.fullmatch(value):
        raise InvalidParameter(details={"mutualFundID": value})
    return value


def parse_nav_date(value: str) -> date | None:
    """Parse a ``dd-mm-yyyy`` string, returning ``None`` when it is malformed."""
    if not isinstance(value, str) or not _NAV_DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, NAV_DATE_FORMAT).date()
    except ValueError:
        return None


def _parse_bound(value: str, *, side: str) -> date:
    parsed = parse_nav_date(value)
    if parsed is None:
        raise InvalidDateFormat.for_side(side)
    return parsed


def resolve_date_range(start: str | None, end: str | None, *, today: date) -> DateRange | None:
    """Turn the raw ``start``/``end`` query values into an optional window.

    Args:
        start: Raw ``start`` value (``""``/``None`` when absent).
        end: Raw ``end`` value (``""``/``None`` when absent).
        today: Current calendar date, evaluated once per request.

    Returns:
        ``None`` when neither bound is supplied, otherwise the accepted window.

    Raises:
        IncompleteDateRange: If exactly one bound is supplied.
        InvalidDateFormat: If a bound is not a strict ``dd-mm-yyyy`` date.
        FutureEndDate: If ``end`` is after ``today``.
        InvertedRange: If ``start`` is after ``end``.
    """
    start = start or ""
    end = end or ""

    if start == "" and end == "":
        return None
    if start == "" or end == "":
        raise IncompleteDateRange()

    start_day = _parse_bound(start, side="start")
    end_day = _parse_bound(end, side="end")

    if end_day > today:
        raise FutureEndDate(details={"end": end, "today": today.strftime(NAV_DATE_FORMAT)})
    if start_day > end_day:
        raise InvertedRange(details={"start": start, "end": end})

    return DateRange(start=start_day, end=end_day)
