# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Adapter Gateway: mfapi.in → fund domain entities.

This gateway sits on top of the transport client and maps the provider
payload into :class:`FundSeries`.

Design principles:
    * Validate provider payloads deterministically with Pydantic; any schema
      mismatch becomes ``UpstreamDecodeError``.
    * Keep provider values verbatim: NAV strings and dates are not reformatted
      and the upstream order is preserved.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from mfnav_api.application.interfaces.fund_data_gateway import FundDataGateway
from mfnav_api.domain.entities.fund import FundMetadata, FundSeries, NavPoint
from mfnav_api.domain.exceptions.fund_data import UpstreamDecodeError
from mfnav_api.infrastructure.external_apis.mfapi.client import MfApiClient
from mfnav_api.infrastructure.external_apis.mfapi.types import MfApiSchemeResponse
from mfnav_api.infrastructure.logging.logger import get_json_logger

logger = get_json_logger(__name__)


def _summarize(exc: ValidationError) -> str:
    """Return a compact, client-safe description of a payload validation error."""
    errors = exc.errors(include_url=False, include_input=False)
    if not errors:
        return "invalid payload"
    first = errors[0]
    loc = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    suffix = f" (+{len(errors) - 1} more)" if len(errors) > 1 else ""
    return f"{loc}: {first.get('msg', 'invalid value')}{suffix}"


def to_fund_series(payload: Any) -> FundSeries:
    """Map a decoded mfapi.in body into a :class:`FundSeries`.

    Raises:
        UpstreamDecodeError: If the payload does not match the scheme schema.
    """
    if payload is None:
        # A JSON `null` body is an empty document, not a malformed one.
        payload = {}
    try:
        doc = MfApiSchemeResponse.model_validate(payload)
    except ValidationError as exc:
        raise UpstreamDecodeError.from_cause(_summarize(exc)) from exc

    meta = doc.meta
    return FundSeries(
        metadata=FundMetadata(
            fund_house=meta.fund_house,
            scheme_type=meta.scheme_type,
            scheme_category=meta.scheme_category,
            scheme_code=meta.scheme_code,
            scheme_name=meta.scheme_name,
        ),
        points=tuple(NavPoint(date=item.date, nav=item.nav) for item in doc.data),
    )


class MfApiGateway(FundDataGateway):
    """mfapi.in adapter implementing :class:`FundDataGateway`."""

    def __init__(self, client: MfApiClient) -> None:
        """Initialize the gateway.

        Args:
            client: Transport client for the scheme endpoint.
        """
        self._client = client

    async def fetch_fund(self, fund_id: str) -> FundSeries:
        """Fetch and decode the scheme document for ``fund_id``."""
        payload = await self._client.scheme(fund_id)
        try:
            return to_fund_series(payload)
        except UpstreamDecodeError as exc:
            logger.warning(
                "upstream_decode_failed",
                extra={"extra": {"fund_id": fund_id, "reason": str(exc)}},
            )
            raise
