from __future__ import annotations

import pytest

from zipweather import main as cli
from zipweather.errors import UpstreamUnavailable
from zipweather.models import LookupResult


class _StubLookup:
    error: Exception | None = None

    def lookup(self, zip_code: str) -> LookupResult:
        if self.error is not None:
            raise self.error
        return LookupResult(zip_code, "Washington", "DC", 21.1, "KDCA")


@pytest.fixture(autouse=True)
def stub_service(monkeypatch):
    monkeypatch.setattr(cli, "configure_logging", lambda level: None)
    monkeypatch.setattr(cli, "WeatherLookupService", _StubLookup)
    _StubLookup.error = None
    return _StubLookup


def test_prints_result(capsys) -> None:
    cli.main(["20500"])

    out = capsys.readouterr().out
    assert "Washington, DC 20500" in out
    assert "KDCA" in out
    assert "21.1°C (70.0°F)" in out


def test_prompts_when_no_argument(monkeypatch, capsys) -> None:
    monkeypatch.setattr("builtins.input", lambda prompt: "20500")

    cli.main([])

    assert "KDCA" in capsys.readouterr().out


def test_rejects_bad_zip() -> None:
    with pytest.raises(SystemExit, match="five-digit"):
        cli.main(["hello"])


def test_lookup_error_exits(stub_service) -> None:
    stub_service.error = UpstreamUnavailable("https://api.weather.gov/x")

    with pytest.raises(SystemExit, match="No usable data"):
        cli.main(["20500"])


def test_colourize_bands() -> None:
    assert cli.colourize(30.0, 86.0).startswith(cli.Colours.RED)
    assert cli.colourize(0.0, 32.0).startswith(cli.Colours.CYAN)
    assert cli.colourize(15.0, 59.0).startswith(cli.Colours.GREEN)
