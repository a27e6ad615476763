"""Gateway API tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from swop_client.core.config import Settings
from swop_client.main import create_app
from swop_client.routers.rates import get_client
from swop_client.services.rates.client import SwopClient

from conftest import LATEST_BODY, StubTransport


@pytest.fixture
def stub():
    return StubTransport(LATEST_BODY)


@pytest.fixture
def api(stub):
    app = create_app(Settings(api_key="k"))
    app.dependency_overrides[get_client] = lambda: SwopClient("k", stub)
    with TestClient(app) as client:
        yield client


def test_latest(api):
    resp = api.get("/rates/latest", params={"symbols": "USD,GBP"})
    assert resp.status_code == 200
    body = resp.json()
    assert len(body["data"]) == 2
    assert body["from_cache"] is False
    assert resp.headers["x-request-id"]


def test_missing_field_is_bad_gateway(api):
    resp = api.get("/rates/currencies")
    assert resp.status_code == 502
    assert resp.json()["error"] == "remote_error"
    assert resp.json()["response"] == LATEST_BODY


def test_time_series_without_dates_is_rejected(api, stub):
    resp = api.get("/rates/time-series", params={"symbols": "USD"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "validation_error"
    assert stub.calls == []


def test_convert(api):
    payload = {
        "quotes": LATEST_BODY["data"]["latest"],
        "from": "USD",
        "to": "GBP",
        "amount": 100,
    }
    resp = api.post("/rates/convert", json=payload)
    assert resp.status_code == 200
    assert resp.json()["result"] == pytest.approx(81.82, abs=1e-2)


def test_convert_mismatch_is_bad_request(api):
    quotes = [dict(q) for q in LATEST_BODY["data"]["latest"]]
    quotes[1]["baseCurrency"] = "CHF"
    resp = api.post("/rates/convert", json={"quotes": quotes, "from": "USD", "to": "GBP"})
    assert resp.status_code == 400
    assert resp.json()["error"] == "conversion_error"


def test_convert_rejects_non_positive_quote_payload(api):
    quotes = [dict(q) for q in LATEST_BODY["data"]["latest"]]
    quotes[0]["quote"] = 0
    resp = api.post("/rates/convert", json={"quotes": quotes, "from": "USD", "to": "GBP"})
    assert resp.status_code == 422


def test_currencies_are_normalized_through_model(api):
    body = {
        "data": {
            "currencies": [
                {"code": "CHF", "name": "Swiss Franc", "numericCode": "756", "decimalDigits": 2},
                {"code": "EUR", "active": True},
            ]
        }
    }
    api.app.dependency_overrides[get_client] = lambda: SwopClient("k", StubTransport(body))
    resp = api.get("/rates/currencies", params={"symbols": "CHF,EUR"})
    assert resp.status_code == 200
    assert resp.json()["data"] == [
        {"code": "CHF", "name": "Swiss Franc", "numericCode": "756", "decimalDigits": 2},
        {"code": "EUR", "active": True},
    ]
