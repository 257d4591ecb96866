# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""HTTP schemas (adapters layer)."""

from __future__ import annotations

from .base import BaseHTTPSchema
from .nav import ErrorResponse, FundMetaSchema, NavHistoryResponse, NavPointSchema

__all__ = [
    "BaseHTTPSchema",
    "ErrorResponse",
    "FundMetaSchema",
    "NavHistoryResponse",
    "NavPointSchema",
]
