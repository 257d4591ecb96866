from __future__ import annotations

import pytest
from prometheus_client import REGISTRY

from mfnav_api.infrastructure.observability import metrics_fund_data as m


def _errors(reason: str) -> float:
    return REGISTRY.get_sample_value(
        "mfnav_upstream_errors_total", {"provider": "unit", "reason": reason}
    ) or 0.0


def _latency_count(outcome: str) -> float:
    return REGISTRY.get_sample_value(
        "mfnav_upstream_latency_seconds_count", {"provider": "unit", "outcome": outcome}
    ) or 0.0


def test_success_records_latency_only() -> None:
    before = _latency_count("success")
    with m.observe_upstream_request(provider="unit"):
        pass
    assert _latency_count("success") == before + 1


def test_marked_error_increments_counter_with_reason() -> None:
    before = _errors("non_json")
    with m.observe_upstream_request(provider="unit") as obs:
        obs.mark_error("non_json")
    assert _errors("non_json") == before + 1
    assert _latency_count("error") >= 1


def test_unmarked_exception_uses_class_name_and_propagates() -> None:
    before = _errors("RuntimeError")
    with pytest.raises(RuntimeError):
        with m.observe_upstream_request(provider="unit"):
            raise RuntimeError("x")
    assert _errors("RuntimeError") == before + 1


def test_collectors_are_reused_on_repeat_creation() -> None:
    again = m._get_or_create_histogram(
        "mfnav_upstream_latency_seconds", "dup", labelnames=("provider", "outcome")
    )
    assert again is m.upstream_latency_seconds
    counter = m._get_or_create_counter(
        "mfnav_upstream_errors_total", "dup", labelnames=("provider", "reason")
    )
    assert counter is m.upstream_errors_total
