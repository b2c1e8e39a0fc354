from __future__ import annotations

import pytest

from zipweather.errors import LocationNotFound
from zipweather.models import LookupResult
from zipweather.web import ROUTES, create_app


class _StubLookup:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[str] = []

    def lookup(self, zip_code: str) -> LookupResult:
        self.calls.append(zip_code)
        if self.error is not None:
            raise self.error
        return LookupResult(
            zip_code=zip_code,
            city="Washington",
            state="DC",
            temperature=21.1,
            station="KDCA",
        )


@pytest.fixture
def stub() -> _StubLookup:
    return _StubLookup()


@pytest.fixture
def client(stub):
    app = create_app(service=stub, secret_key="test-secret")
    app.config["TESTING"] = True
    return app.test_client()


def test_home_renders_form(client) -> None:
    response = client.get("/")

    assert response.status_code == 200
    assert b'name="zipCode"' in response.data


def test_lookup_post_renders_result(client, stub) -> None:
    response = client.post("/lookup", data={"zipCode": "20500"})

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Washington, DC 20500" in body
    assert "KDCA" in body
    assert "21.1 °C" in body
    assert "70.0 °F" in body
    assert stub.calls == ["20500"]


def test_lookup_get_reads_query_string(client, stub) -> None:
    response = client.get("/lookup", query_string={"zipCode": " 20500 "})

    assert response.status_code == 200
    assert stub.calls == ["20500"]


@pytest.mark.parametrize("zip_code", ["", "2050", "20500-0001", "abcde"])
def test_invalid_zip_redirects_home(client, stub, zip_code) -> None:
    response = client.post("/lookup", data={"zipCode": zip_code}, follow_redirects=True)

    assert response.status_code == 200
    assert response.request.path == "/"
    assert b'class="error"' in response.data
    assert stub.calls == []


def test_lookup_error_is_flashed(stub) -> None:
    stub.error = LocationNotFound("No location found for ZIP code '00000'.")
    client = create_app(service=stub, secret_key="test-secret").test_client()

    response = client.post("/lookup", data={"zipCode": "00000"}, follow_redirects=True)

    assert response.request.path == "/"
    assert "No location found for ZIP code" in response.get_data(as_text=True)


def test_routes_come_from_the_table(stub) -> None:
    def ping():
        return "pong"

    routes = ROUTES + (("/ping", "ping", ping, ("GET",)),)
    client = create_app(service=stub, routes=routes, secret_key="x").test_client()

    assert client.get("/ping").get_data(as_text=True) == "pong"
    assert client.get("/").status_code == 200


def test_lookup_rejects_other_methods(client) -> None:
    assert client.delete("/lookup").status_code == 405
