# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""HTTP routers (adapters layer)."""

from __future__ import annotations

from .health_router import router as health_router
from .metrics_router import router as metrics_router
from .nav_router import router as nav_router

__all__ = ["health_router", "metrics_router", "nav_router"]
