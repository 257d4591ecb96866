"""Unit tests for query validation: fund id and the optional date window."""

from __future__ import annotations

from datetime import date

import pytest

from mfnav_api.domain.exceptions.fund_data import (
    FundDataClientError,
    FutureEndDate,
    IncompleteDateRange,
    InvalidDateFormat,
    InvalidParameter,
    InvertedRange,
    MissingParameter,
)
from mfnav_api.domain.services.nav_query import (
    parse_fund_id,
    parse_nav_date,
    resolve_date_range,
)

TODAY = date(2024, 6, 30)


@pytest.mark.parametrize("raw", ["", None])
def test_missing_fund_id(raw: str | None) -> None:
    with pytest.raises(MissingParameter) as ei:
        parse_fund_id(raw)
    assert ei.value.message == "mutualFundID query parameter is required"
    assert ei.value.http_status == 400


@pytest.mark.parametrize(
    "raw", ["abc", "12a", "1.5", " 12", "12 ", "1e3", "--1", "+", "119598\n", "\n"]
)
def test_non_integer_fund_id(raw: str) -> None:
    with pytest.raises(InvalidParameter) as ei:
        parse_fund_id(raw)
    assert ei.value.message == "mutualFundID must be an integer"


@pytest.mark.parametrize("raw", ["119598", "0", "-5", "+7", "007", "99999999999999999999"])
def test_integer_fund_id_is_returned_verbatim(raw: str) -> None:
    assert parse_fund_id(raw) == raw


def test_no_bounds_means_no_window() -> None:
    assert resolve_date_range("", "", today=TODAY) is None
    assert resolve_date_range(None, None, today=TODAY) is None


@pytest.mark.parametrize("start, end", [("01-01-2023", ""), ("", "31-01-2023")])
def test_one_sided_window_is_rejected(start: str, end: str) -> None:
    with pytest.raises(IncompleteDateRange) as ei:
        resolve_date_range(start, end, today=TODAY)
    assert ei.value.message == "both start and end dates are required in the format dd-mm-yyyy"


@pytest.mark.parametrize(
    "start, end, side",
    [
        ("2023-01-01", "31-01-2023", "start"),
        ("1-1-2023", "31-01-2023", "start"),
        ("31-02-2023", "31-03-2023", "start"),
        ("01-01-2023", "32-01-2023", "end"),
        ("01-01-2023", "31/01/2023", "end"),
        ("01-01-2023", "31-01-23", "end"),
        ("01-01-2023\n", "31-01-2023", "start"),
        ("01-01-2023", "31-01-2023\n", "end"),
    ],
)
def test_malformed_bound_names_the_side(start: str, end: str, side: str) -> None:
    with pytest.raises(InvalidDateFormat) as ei:
        resolve_date_range(start, end, today=TODAY)
    assert ei.value.message == f"invalid {side} date format. use dd-mm-yyyy"


def test_start_is_checked_before_end() -> None:
    with pytest.raises(InvalidDateFormat) as ei:
        resolve_date_range("bad", "also-bad", today=TODAY)
    assert "start" in ei.value.message


def test_future_end_is_rejected() -> None:
    with pytest.raises(FutureEndDate) as ei:
        resolve_date_range("01-06-2024", "01-07-2024", today=TODAY)
    assert ei.value.message == "end date cannot be in the future"


def test_end_equal_to_today_is_accepted() -> None:
    rng = resolve_date_range("01-06-2024", "30-06-2024", today=TODAY)
    assert rng is not None
    assert rng.end == TODAY


def test_inverted_window_is_rejected() -> None:
    with pytest.raises(InvertedRange) as ei:
        resolve_date_range("31-01-2023", "01-01-2023", today=TODAY)
    assert ei.value.message == "start date cannot be after end date"


def test_future_end_wins_over_inverted_window() -> None:
    with pytest.raises(FutureEndDate):
        resolve_date_range("01-01-2030", "01-08-2024", today=TODAY)


def test_all_window_errors_are_client_errors() -> None:
    for start, end in [("x", ""), ("x", "y"), ("01-01-2023", "01-01-2099")]:
        with pytest.raises(FundDataClientError):
            resolve_date_range(start, end, today=TODAY)


def test_valid_window() -> None:
    rng = resolve_date_range("01-01-2023", "31-01-2023", today=TODAY)
    assert rng is not None
    assert (rng.start, rng.end) == (date(2023, 1, 1), date(2023, 1, 31))


def test_parse_nav_date() -> None:
    assert parse_nav_date("29-02-2024") == date(2024, 2, 29)
    assert parse_nav_date("29-02-2023") is None
    assert parse_nav_date("") is None
    assert parse_nav_date("15-1-2023") is None
    assert parse_nav_date("15-01-2023\n") is None
