# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""MFNav API: mutual fund NAV history service."""

__version__ = "0.1.0"
