"""
zipweather package – look up the current temperature for a US ZIP code.

Public entry points
-------------------
* `zipweather.web.create_app` – the Flask front end (`app.py` at the repo root)
* `zipweather.main` – the command‑line driver (`python -m zipweather.main`)
* Service classes:
    - `ZipLookupService`      (ZIP → city/state/lat/lon)
    - `NOAAStationService`    (lat/lon → nearest station)
    - `WeatherGovService`     (station → latest temperature)
    - `WeatherLookupService`  (all three, in order)
* Records: `Location`, `Observation`, `LookupResult`
* Errors: `WeatherLookupError` and its subclasses

    >>> from zipweather import WeatherLookupService
    >>> WeatherLookupService().lookup("20500").station
"""

__all__ = [
    "VERSION",
    # Records
    "Location",
    "Observation",
    "LookupResult",
    # Services
    "ZipLookupService",
    "NOAAStationService",
    "WeatherGovService",
    "WeatherLookupService",
    # Errors
    "WeatherLookupError",
    "UpstreamUnavailable",
    "MalformedResponse",
    "LocationNotFound",
    "StationNotFound",
    "LookupTimeout",
]

from .version import VERSION  # noqa: F401

from .models import Location, Observation, LookupResult  # noqa: F401

from .services import (  # noqa: F401
    ZipLookupService,
    NOAAStationService,
    WeatherGovService,
    WeatherLookupService,
)

from .errors import (  # noqa: F401
    WeatherLookupError,
    UpstreamUnavailable,
    MalformedResponse,
    LocationNotFound,
    StationNotFound,
    LookupTimeout,
)
