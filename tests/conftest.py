# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from fund_data_testkit import MFAPI_BASE_URL, FakeGateway

from mfnav_api.config.settings import get_settings
from mfnav_api.dependencies.fund_data import get_fund_data_gateway
from mfnav_api.main import create_app


@pytest.fixture(autouse=True)
def _test_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Point the service at a fake upstream host and reset cached settings."""
    monkeypatch.setenv("ENVIRONMENT", "test")
    monkeypatch.setenv("MFAPI_BASE_URL", MFAPI_BASE_URL)
    monkeypatch.delenv("MFAPI_TIMEOUT_S", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def fake_gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def client_with_gateway(app: FastAPI) -> Callable[[Any], TestClient]:
    """Return a factory that wires ``gateway`` in place of the mfapi gateway."""

    def _factory(gateway: Any) -> TestClient:
        app.dependency_overrides[get_fund_data_gateway] = lambda: gateway
        return TestClient(app)

    return _factory
