# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""mfapi.in integration: transport client, settings and payload types."""

from __future__ import annotations

from .client import MfApiClient
from .settings import MfApiSettings

__all__ = ["MfApiClient", "MfApiSettings"]
