"""
services package – wrappers around external APIs.

Export the high‑level service classes so callers can do:

    from zipweather.services import (
        ZipLookupService,
        NOAAStationService,
        WeatherGovService,
        WeatherLookupService,
    )
"""

# Re‑export the concrete service classes for a tidy public API
from .http         import NO_DATA, Deadline, JSONFetcher   # noqa: F401
from .zip_lookup   import ZipLookupService                 # noqa: F401
from .noaa_station import NOAAStationService               # noqa: F401
from .weather_gov  import WeatherGovService                # noqa: F401
from .lookup       import WeatherLookupService             # noqa: F401

# Define what gets imported when a user writes:
#   from zipweather.services import *
__all__ = [
    "NO_DATA",
    "Deadline",
    "JSONFetcher",
    "ZipLookupService",
    "NOAAStationService",
    "WeatherGovService",
    "WeatherLookupService",
]
