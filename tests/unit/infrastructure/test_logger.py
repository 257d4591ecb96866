# tests/unit/infrastructure/test_logger.py
from __future__ import annotations

import json
import logging
import sys

import pytest

from mfnav_api.infrastructure.logging.logger import (
    _JsonFormatter,  # internal but importable
    configure_root_logging,
    get_request_id,
    set_request_context,
)


def _render(record_msg: str, level: int = logging.INFO, **attrs: object) -> dict:
    """Format a hand-built record and return the parsed JSON payload."""
    logger = logging.getLogger("test.logger")
    record = logger.makeRecord(
        name=logger.name,
        level=level,
        fn="test_logger",
        lno=1,
        msg=record_msg,
        args=(),
        exc_info=None,
    )
    for k, v in attrs.items():
        setattr(record, k, v)
    return json.loads(_JsonFormatter().format(record))


@pytest.fixture
def _isolated_root() -> object:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_configure_root_logging_installs_json_handler(
    monkeypatch: pytest.MonkeyPatch, _isolated_root: logging.Logger
) -> None:
    monkeypatch.setenv("LOG_LEVEL", "debug")
    _isolated_root.handlers.clear()

    configure_root_logging()
    assert _isolated_root.level == logging.DEBUG
    assert len(_isolated_root.handlers) == 1
    assert isinstance(_isolated_root.handlers[0].formatter, _JsonFormatter)


def test_configure_root_logging_reuses_existing_handlers(_isolated_root: logging.Logger) -> None:
    existing = logging.StreamHandler()
    _isolated_root.handlers[:] = [existing]

    configure_root_logging("WARNING")
    assert _isolated_root.handlers == [existing]
    assert isinstance(existing.formatter, _JsonFormatter)
    assert _isolated_root.level == logging.WARNING


def test_json_formatter_basic_fields() -> None:
    payload = _render("hello-world")
    assert payload["message"] == "hello-world"
    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert "ts" in payload


def test_json_formatter_merges_extra_dict() -> None:
    payload = _render("nav_history_served", extra={"fund_id": "119598", "returned_points": 2})
    assert payload["fund_id"] == "119598"
    assert payload["returned_points"] == 2


def test_request_id_from_context_then_record(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REQUEST_ID", raising=False)
    set_request_context(request_id="ctx-1")
    try:
        assert get_request_id() == "ctx-1"
        assert _render("m")["request_id"] == "ctx-1"
        assert _render("m", request_id="rec-1")["request_id"] == "rec-1"
    finally:
        set_request_context(request_id=None)
    assert "request_id" not in _render("m")


def test_json_formatter_includes_exception_info() -> None:
    logger = logging.getLogger("test.logger.exc")
    try:
        raise ValueError("boom")
    except ValueError:
        record = logger.makeRecord(
            logger.name, logging.ERROR, "f", 1, "failure", (), sys.exc_info()
        )
    payload = json.loads(_JsonFormatter().format(record))
    assert payload["level"] == "ERROR"
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"
