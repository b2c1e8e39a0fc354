import logging
from typing import Optional

from ..config import LOOKUP_DEADLINE
from ..errors import StationNotFound
from ..models import LookupResult
from .http import Deadline
from .noaa_station import NOAAStationService
from .weather_gov import WeatherGovService
from .zip_lookup import ZipLookupService

logger = logging.getLogger(__name__)


class WeatherLookupService:
    """ZIP → location → nearest station → latest temperature."""

    def __init__(
        self,
        zip_service: Optional[ZipLookupService] = None,
        station_service: Optional[NOAAStationService] = None,
        weather_service: Optional[WeatherGovService] = None,
        deadline_seconds: float = LOOKUP_DEADLINE,
    ):
        self.zip_service = zip_service or ZipLookupService()
        self.station_service = station_service or NOAAStationService()
        self.weather_service = weather_service or WeatherGovService()
        self.deadline_seconds = deadline_seconds

    def lookup(self, zip_code: str) -> LookupResult:
        """
        Run the three upstream calls in order and combine what they return.

        Nothing is cached; every call hits all three APIs. Any failure is
        raised as a `WeatherLookupError` subclass.
        """
        deadline = Deadline(self.deadline_seconds)

        deadline.check("resolving the ZIP code")
        loc = self.zip_service.resolve(zip_code, deadline)

        deadline.check("finding the nearest station")
        station_id = self.station_service.resolve(loc.latitude, loc.longitude, deadline)
        if not station_id:
            raise StationNotFound(
                f"No observation station found near {loc.city}, {loc.state}."
            )

        deadline.check("fetching the latest observation")
        obs = self.weather_service.resolve(station_id, deadline)

        result = LookupResult(
            zip_code=loc.zip,
            city=loc.city,
            state=loc.state,
            temperature=obs.temperature,
            station=obs.station,
        )
        logger.info("Lookup for %s done: %s", zip_code, result)
        return result
