from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from index import app

client = TestClient(app)

WASHINGTON_QUERY = {
    "lat": 38.8976763,
    "lng": -77.036529,
    "elevation": 18.0,
    "date": "2021-04-12",
    "calculationMethod": "MWL",
}
LONDON_SOLSTICE_QUERY = {
    "lat": 51.5074,
    "lng": -0.1278,
    "date": "2021-06-21",
    "calculationMethod": "MWL",
}


def test_root_lists_methods() -> None:
    response = client.get("/")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "online"
    assert "MWL" in body["methods"]
    assert "NightMiddle" in body["highLats"]


def test_times_for_gps_returns_raw_utc_hours() -> None:
    response = client.get("/api/timesForGPS", params=WASHINGTON_QUERY)

    assert response.status_code == 200
    body = response.json()
    day = body["times"]["2021-04-12"]
    assert list(day) == [
        "imsak",
        "fajr",
        "sunrise",
        "dhuhr",
        "asr",
        "sunset",
        "maghrib",
        "isha",
        "midnight",
    ]
    assert day["fajr"] == pytest.approx(9.026755704840292, abs=1e-6)
    assert day["isha"] == pytest.approx(25.1845331305664, abs=1e-6)
    assert body["invalid"] == []


def test_times_for_several_days() -> None:
    response = client.get("/api/timesForGPS", params={**WASHINGTON_QUERY, "days": 3})

    assert response.status_code == 200
    assert list(response.json()["times"]) == ["2021-04-12", "2021-04-13", "2021-04-14"]


def test_makkah_ramadan_query() -> None:
    params = {**WASHINGTON_QUERY, "calculationMethod": "Makkah", "ramadan": "true"}
    day = client.get("/api/timesForGPS", params=params).json()["times"]["2021-04-12"]

    assert day["isha"] - day["maghrib"] == pytest.approx(2.0)


def test_unreachable_twilight_is_reported() -> None:
    response = client.get("/api/timesForGPS", params=LONDON_SOLSTICE_QUERY)

    assert response.status_code == 200
    body = response.json()
    assert body["times"]["2021-06-21"]["fajr"] is None
    assert body["times"]["2021-06-21"]["sunrise"] is not None
    assert body["invalid"] == ["2021-06-21"]


def test_high_latitude_method_query() -> None:
    params = {**LONDON_SOLSTICE_QUERY, "highLats": "AngleBased"}
    body = client.get("/api/timesForGPS", params=params).json()

    assert body["invalid"] == []
    assert body["times"]["2021-06-21"]["fajr"] is not None


@pytest.mark.parametrize(
    "overrides",
    [
        {"date": "12/04/2021"},
        {"calculationMethod": "Diyanet"},
        {"highLats": "Polar"},
        {"days": 0},
    ],
)
def test_bad_queries_are_rejected(overrides: dict) -> None:
    response = client.get("/api/timesForGPS", params={**WASHINGTON_QUERY, **overrides})

    assert response.status_code == 400
