# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""mfapi.in Transport Client: async, instrumented, single attempt.

This transport is framework-agnostic and provides:

* Async HTTP (httpx) GET of ``<base_url>/<scheme_code>``.
* Deterministic mapping of transport failures to domain errors.
* JSON decoding of the body regardless of the HTTP status code.
* Prometheus latency/error samples and ``X-Request-ID`` propagation.

There is deliberately no retry, cache or circuit breaker: one request to this
service produces exactly one upstream attempt.
"""

from __future__ import annotations

from types import TracebackType
from typing import Any, Final

import httpx

from mfnav_api.domain.exceptions.fund_data import UpstreamDecodeError, UpstreamUnavailable
from mfnav_api.infrastructure.external_apis.mfapi.settings import MfApiSettings
from mfnav_api.infrastructure.logging.logger import get_json_logger, get_request_id
from mfnav_api.infrastructure.observability.metrics_fund_data import observe_upstream_request

logger = get_json_logger(__name__)

_PROVIDER: Final[str] = "mfapi"

_DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Accept": "application/json",
    "User-Agent": "mfnav-api/1.0",
}


class MfApiClient:
    """Transport client for the mfapi.in scheme endpoint."""

    def __init__(
        self,
        settings: MfApiSettings,
        *,
        http: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport client.

        Args:
            settings: Provider settings (base URL, optional timeout).
            http: Optional shared ``httpx.AsyncClient``. If omitted, a client
                is created and owned (and closed) by this instance.
        """
        self._settings = settings
        self._owns_client = http is None
        if http is None:
            http = (
                httpx.AsyncClient(headers=_DEFAULT_HEADERS.copy(), timeout=settings.timeout_s)
                if settings.timeout_s is not None
                else httpx.AsyncClient(headers=_DEFAULT_HEADERS.copy())
            )
        else:
            for key, value in _DEFAULT_HEADERS.items():
                http.headers.setdefault(key, value)
        self._client = http

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance owns it."""
        if self._owns_client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> MfApiClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def scheme(self, fund_id: str) -> Any:
        """GET the scheme document for ``fund_id`` and return the decoded JSON.

        Args:
            fund_id: Validated scheme code, used verbatim as the last path segment.

        Returns:
            The parsed JSON body (shape is validated by the gateway).

        Raises:
            UpstreamUnavailable: On any transport failure (DNS, connect, timeout).
            UpstreamDecodeError: If the body is not valid JSON.
        """
        url = self._settings.scheme_url(fund_id)
        headers: dict[str, str] = {}
        request_id = get_request_id()
        if request_id:
            headers["X-Request-ID"] = request_id

        request_kwargs: dict[str, Any] = {"headers": headers}
        if self._settings.timeout_s is not None:
            request_kwargs["timeout"] = self._settings.timeout_s

        with observe_upstream_request(provider=_PROVIDER) as obs:
            try:
                response = await self._client.get(url, **request_kwargs)
            except (httpx.RequestError, httpx.InvalidURL) as exc:
                obs.mark_error("unavailable")
                logger.warning(
                    "upstream_fetch_failed",
                    extra={"extra": {"url": url, "error": type(exc).__name__}},
                )
                raise UpstreamUnavailable.from_cause(exc) from exc

            try:
                return response.json()
            except ValueError as exc:
                obs.mark_error("non_json")
                logger.warning(
                    "upstream_decode_failed",
                    extra={
                        "extra": {
                            "url": url,
                            "status": response.status_code,
                            "reason": "non_json",
                        }
                    },
                )
                raise UpstreamDecodeError.from_cause(exc) from exc
