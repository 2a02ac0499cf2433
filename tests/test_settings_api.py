"""Integration tests for /settings."""
import pytest


def test_default_rates(client):
    assert client.get("/settings").json() == {"hourly_rate": 100, "ot_rate": 150}


def test_rate_change_reprices_history(client):
    client.put("/entries/2024-03-05", json={"workHr": 8, "otHr": 2, "extra": 50})

    resp = client.put("/settings", json={"hourlyRate": 120, "otRate": 180}, params={"year": 2024, "month": 3})

    assert resp.status_code == 200
    row = resp.json()["statement"]["rows"][4]
    assert (row["regular_pay"], row["ot_pay"], row["daily_total"]) == (960, 360, 1370)
    assert client.get("/settings").json() == {"hourly_rate": 120, "ot_rate": 180}


def test_invalid_rates_become_zero(client):
    resp = client.put("/settings", json={"hourly_rate": "abc", "ot_rate": -3}, params={"year": 2024, "month": 3})
    assert resp.status_code == 200
    assert resp.json()["rates"] == {"hourly_rate": 0, "ot_rate": 0}


def test_settings_without_period_uses_current_month(client):
    resp = client.put("/settings", json={"hourly_rate": 110, "ot_rate": 160})
    assert resp.status_code == 200
    assert resp.json()["rates"] == {"hourly_rate": 110, "ot_rate": 160}


@pytest.mark.parametrize("params", [{"year": 2024, "month": 0}, {"year": 0, "month": 3}])
def test_explicit_zero_period_returns_422(client, params):
    resp = client.put("/settings", json={"hourly_rate": 110, "ot_rate": 160}, params=params)
    assert resp.status_code == 422
