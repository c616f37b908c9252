# tests/conftest.py
import json

import pytest
import requests


def build_response(status_code=200, payload=None, reason="OK", body=None):
    """Builds a real requests.Response so the provider sees a genuine object."""
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    if body is None:
        body = json.dumps(payload if payload is not None else {})
    response._content = body.encode("utf-8")
    response.encoding = "utf-8"
    return response


@pytest.fixture
def make_response():
    return build_response


@pytest.fixture
def usd_payload():
    return {
        "result": "success",
        "base_code": "USD",
        "time_last_update_utc": "Mon, 19 Oct 2026 00:02:31 +0000",
        "rates": {"USD": 1, "EUR": 0.9, "GBP": 0.78},
    }
