"""Lambda entry point: API Gateway events are served by the FastAPI app."""

from __future__ import annotations

import json
from typing import Any

import httpx
import respx
from fund_data_testkit import HDFC_TOP_100_BODY, MFAPI_BASE_URL


def _api_gateway_event(path: str, query: dict[str, str]) -> dict[str, Any]:
    return {
        "resource": "/",
        "path": path,
        "httpMethod": "GET",
        "headers": {"Host": "example.execute-api.us-east-1.amazonaws.com"},
        "multiValueHeaders": {"Host": ["example.execute-api.us-east-1.amazonaws.com"]},
        "queryStringParameters": query,
        "multiValueQueryStringParameters": {k: [v] for k, v in query.items()},
        "pathParameters": None,
        "stageVariables": None,
        "requestContext": {
            "resourcePath": "/",
            "httpMethod": "GET",
            "path": f"/prod{path}",
            "stage": "prod",
            "identity": {"sourceIp": "203.0.113.10"},
        },
        "body": None,
        "isBase64Encoded": False,
    }


class _Context:
    function_name = "mfnav-api"
    aws_request_id = "lambda-req-1"


@respx.mock
def test_handler_serves_root_resource() -> None:
    from mfnav_api.lambda_handler import handler

    respx.get(f"{MFAPI_BASE_URL}/119598").mock(
        return_value=httpx.Response(200, json=HDFC_TOP_100_BODY)
    )

    event = _api_gateway_event(
        "/", {"mutualFundID": "119598", "start": "01-01-2023", "end": "31-01-2023"}
    )
    out = handler(event, _Context())

    assert out["statusCode"] == 200
    body = json.loads(out["body"])
    assert body["period"] == "01-01-2023 to 31-01-2023"
    assert [p["date"] for p in body["data"]] == ["15-01-2023", "02-01-2023"]


def test_handler_renders_client_errors() -> None:
    from mfnav_api.lambda_handler import handler

    out = handler(_api_gateway_event("/", {"mutualFundID": "x"}), _Context())
    assert out["statusCode"] == 400
    assert json.loads(out["body"]) == {"error": "mutualFundID must be an integer"}
