"""Integration tests for the HTTP endpoints."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from jyotish_engine.tools.panchang import calculate_tithi
from main import app

client = TestClient(app)

CHART_PAYLOAD = {
    "date": "1990-06-15",
    "time": "08:30",
    "latitude": 28.6139,
    "longitude": 77.2090,
    "timezone": "Asia/Kolkata",
    "system": "vedic",
    "now": "2024-01-01T12:00:00",
}


def test_health():
    r = client.get("/api/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_chart():
    r = client.post("/api/chart", json=CHART_PAYLOAD)
    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    chart = body["chart"]
    assert chart["system"] == "vedic"
    assert chart["sun_sign"] in {"Gemini", "Cancer"}
    assert len(chart["houses"]) == 12
    assert chart["dasha_periods"][0]["start_date"] == "2024-01-01"
    assert chart["life_areas"]["career"]["score"] >= 0


def test_chart_bad_date_is_400():
    r = client.post("/api/chart", json={**CHART_PAYLOAD, "date": "1990-02-30"})
    assert r.status_code == 400
    assert "Invalid birth date" in r.json()["detail"]


def test_chart_schema_violation_is_422():
    r = client.post("/api/chart", json={**CHART_PAYLOAD, "latitude": 120})
    assert r.status_code == 422


def test_panchang_with_festivals():
    r = client.post("/api/panchang", json={"date": "2024-01-14", "time": "06:00"})
    assert r.status_code == 200
    body = r.json()
    assert body["panchang"]["vara"] == "Sunday"
    assert body["panchang"]["date"] == "2024-01-14"
    assert [f["name"] for f in body["festivals"]] == ["Makar Sankranti"]


def test_panchang_bad_time_is_400():
    r = client.post("/api/panchang", json={"date": "2024-01-14", "time": "99:00"})
    assert r.status_code == 400


@pytest.mark.parametrize("clock,expected", [("07:05", datetime(2024, 1, 14, 7, 5)),
                                            ("23:59", datetime(2024, 1, 14, 23, 59))])
def test_panchang_uses_exact_clock_minute(clock, expected):
    r = client.post("/api/panchang", json={"date": "2024-01-14", "time": clock})
    assert r.status_code == 200
    degrees = r.json()["panchang"]["tithi"]["degrees"]
    assert degrees == pytest.approx(calculate_tithi(expected).degrees)


def test_festivals_for_month():
    r = client.get("/api/festivals", params={"year": 2024, "month": 11})
    assert r.status_code == 200
    assert [f["name"] for f in r.json()["festivals"]] == ["Karwa Chauth", "Dhanteras", "Diwali"]


def test_festivals_for_year():
    r = client.get("/api/festivals", params={"year": 2030})
    assert r.status_code == 200
    assert len(r.json()["festivals"]) == 17


def test_muhurat_active():
    payload = {"start": "10:00", "end": "12:00", "now": "2024-01-01T11:00:00"}
    assert client.post("/api/muhurat/active", json=payload).json()["active"] is True
    payload["now"] = "2024-01-01T13:00:00"
    assert client.post("/api/muhurat/active", json=payload).json()["active"] is False


def test_muhurat_bad_window_is_400():
    r = client.post("/api/muhurat/active", json={"start": "10-00", "end": "12:00"})
    assert r.status_code == 400
