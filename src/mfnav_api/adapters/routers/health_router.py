# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""Health endpoint (Adapters Layer).

Purpose:
    Liveness signal for load balancers and deploy checks. The service has no
    owned dependencies, so readiness equals liveness; the upstream provider is
    deliberately not probed.
"""

from __future__ import annotations

from typing import Literal

from fastapi import APIRouter

from mfnav_api.adapters.schemas.http.base import BaseHTTPSchema

router = APIRouter(tags=["Health"])


class HealthResponse(BaseHTTPSchema):
    """Liveness body."""

    status: Literal["ok"] = "ok"


@router.get("/healthz", response_model=HealthResponse, summary="Liveness probe")
async def healthz() -> HealthResponse:
    """Return ``{"status": "ok"}``."""
    return HealthResponse()
