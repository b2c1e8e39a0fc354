from __future__ import annotations

import pytest

from zipweather.config import GEOCODE_URL, WEATHER_GOV_ROOT

GEOCODE_20500 = GEOCODE_URL.format(zip="20500")
STATIONS_20500 = f"{WEATHER_GOV_ROOT}/points/38.9,-77.03/stations"
LATEST_KDCA = f"{WEATHER_GOV_ROOT}/stations/KDCA/observations/latest"


@pytest.fixture
def geocode_payload() -> dict:
    return {
        "records": [
            {
                "fields": {
                    "city": "Washington",
                    "state": "DC",
                    "zip": "20500",
                    "latitude": 38.9,
                    "longitude": -77.03,
                }
            }
        ]
    }


@pytest.fixture
def stations_payload() -> dict:
    return {"observationStations": ["https://api.weather.gov/stations/KDCA"]}


@pytest.fixture
def observation_payload() -> dict:
    return {"properties": {"temperature": {"value": 21.1}}}


@pytest.fixture
def upstream_20500(requests_mock, geocode_payload, stations_payload, observation_payload):
    """All three upstream APIs answering for ZIP 20500."""
    requests_mock.get(GEOCODE_20500, json=geocode_payload)
    requests_mock.get(STATIONS_20500, json=stations_payload)
    requests_mock.get(LATEST_KDCA, json=observation_payload)
    return requests_mock


class FakeClock:
    def __init__(self) -> None:
        self.now = 0.0

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
