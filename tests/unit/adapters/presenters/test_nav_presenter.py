from __future__ import annotations

import json

import pytest

from mfnav_api.adapters.presenters.nav_presenter import NavPresenter
from mfnav_api.application.schemas.dto.nav import FundMetaDTO, FundNavHistoryDTO, NavPointDTO
from mfnav_api.domain.exceptions.fund_data import (
    InvalidDateFormat,
    ResponseSerializationError,
    UpstreamUnavailable,
)

META = FundMetaDTO(
    fund_house="HDFC Mutual Fund",
    scheme_type="Open Ended Schemes",
    scheme_category="Equity Scheme - Large Cap Fund",
    scheme_code=119598,
    scheme_name="HDFC Top 100 Fund - Direct Plan - Growth Option",
)


def test_success_without_period_omits_the_key() -> None:
    dto = FundNavHistoryDTO(meta=META, data=[NavPointDTO(date="15-01-2023", nav="812.34500")])
    result = NavPresenter().present_success(dto)
    body = json.loads(result.body)
    assert result.status_code == 200
    assert "period" not in body
    assert body["meta"]["scheme_code"] == 119598
    assert body["data"] == [{"date": "15-01-2023", "nav": "812.34500"}]


def test_success_with_period_and_empty_data() -> None:
    dto = FundNavHistoryDTO(meta=META, period="01-01-2022 to 31-12-2022")
    body = json.loads(NavPresenter().present_success(dto).body)
    assert body["period"] == "01-01-2022 to 31-12-2022"
    assert body["data"] == []


def test_error_uses_status_and_message_of_the_failure() -> None:
    result = NavPresenter().present_error(InvalidDateFormat.for_side("end"), request_id="r-1")
    assert result.status_code == 400
    assert json.loads(result.body) == {"error": "invalid end date format. use dd-mm-yyyy"}
    assert result.headers == {"X-Request-ID": "r-1"}


def test_server_error_response() -> None:
    exc = UpstreamUnavailable.from_cause(OSError("no route to host"))
    response = NavPresenter().present_error(exc).to_response()
    assert response.status_code == 500
    assert response.media_type == "application/json"
    assert json.loads(response.body) == {"error": "error fetching data from API: no route to host"}


def test_unserializable_result_raises_serialization_error(monkeypatch: pytest.MonkeyPatch) -> None:
    from mfnav_api.adapters.schemas.http import nav as http_nav

    def _boom(cls, dto):  # type: ignore[no-untyped-def]
        raise ValueError("cannot encode")

    monkeypatch.setattr(http_nav.NavHistoryResponse, "from_dto", classmethod(_boom))
    with pytest.raises(ResponseSerializationError) as ei:
        NavPresenter().present_success(FundNavHistoryDTO(meta=META))
    assert ei.value.message == "error creating JSON response"
    assert ei.value.http_status == 500
