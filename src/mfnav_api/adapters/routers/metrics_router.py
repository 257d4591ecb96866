# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Prometheus scrape endpoint (`/metrics`).

Layer:
    adapters/routers
"""

from __future__ import annotations

from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

# Imported for its side effect: collectors exist before the first scrape.
from mfnav_api.infrastructure.observability import metrics_fund_data  # noqa: F401

router = APIRouter()


@router.get("/metrics", include_in_schema=False)
async def metrics_probe() -> Response:
    """Expose Prometheus metrics in text format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
