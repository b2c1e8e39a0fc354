import logging
from typing import Optional

from ..config import WEATHER_GOV_ROOT
from ..errors import UpstreamUnavailable
from ..models import Observation
from ..utils import expect_mapping, get_mapping, get_number
from .http import NO_DATA, Deadline, JSONFetcher

logger = logging.getLogger(__name__)


class WeatherGovService:
    """Wraps the National Weather Service (weather.gov) latest-observation API."""

    def __init__(
        self,
        fetcher: Optional[JSONFetcher] = None,
        base_url: str = WEATHER_GOV_ROOT,
    ):
        self.fetcher = fetcher or JSONFetcher()
        self.base_url = base_url

    def url_for(self, station_id: str) -> str:
        return f"{self.base_url}/stations/{station_id}/observations/latest"

    def resolve(
        self, station_id: str, deadline: Optional[Deadline] = None
    ) -> Observation:
        """
        Latest temperature (°C) reported by `station_id`.

        A reading weather.gov leaves out, or reports as null, comes back as 0.
        """
        url = self.url_for(station_id)
        payload = self.fetcher.fetch(url, deadline)
        if payload is NO_DATA:
            raise UpstreamUnavailable(url)
        return self.parse(payload, station_id)

    @staticmethod
    def parse(payload, station_id: str) -> Observation:
        doc = expect_mapping(payload)

        props = get_mapping(doc, "properties")
        temperature = get_mapping(props, "temperature", "properties") if props else None
        if temperature is None:
            logger.warning("Station %s reported no temperature", station_id)
            return Observation(station=station_id)

        value = get_number(temperature, "value", "properties.temperature", nullable=True)
        logger.info("Station %s: %s °C", station_id, value)
        return Observation(station=station_id, temperature=value)
