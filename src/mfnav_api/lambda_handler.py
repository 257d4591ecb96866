# Copyright (c) MFNav.
# SPDX-License-Identifier: MIT
"""AWS Lambda entry point.

API Gateway (REST or HTTP API) events are translated to ASGI by Mangum and
served by the same FastAPI app used under uvicorn. Configure the function
handler as ``mfnav_api.lambda_handler.handler``.
"""

from __future__ import annotations

from mangum import Mangum

from mfnav_api.main import app

# No startup/shutdown work: the HTTP client is request-scoped.
handler = Mangum(app, lifespan="off")
