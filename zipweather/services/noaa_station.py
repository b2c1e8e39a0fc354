import logging
from typing import Optional

from ..config import WEATHER_GOV_ROOT
from ..errors import MalformedResponse, UpstreamUnavailable
from ..utils import expect_mapping, first_item, get_sequence
from .http import NO_DATA, Deadline, JSONFetcher

logger = logging.getLogger(__name__)

# weather.gov station URLs end in the station code, e.g. .../stations/KDCA
STATION_ID_LENGTH = 4


def station_id_from_url(station_url: str) -> str:
    """Trailing characters of a station URL, which is its identifier."""
    return station_url[-STATION_ID_LENGTH:]


def format_coordinate(value: float) -> str:
    """Shortest form of a coordinate: 40.0 -> "40", 38.9 -> "38.9"."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


class NOAAStationService:
    """Find the nearest NWS observation station for a coordinate."""

    def __init__(
        self,
        fetcher: Optional[JSONFetcher] = None,
        base_url: str = WEATHER_GOV_ROOT,
    ):
        self.fetcher = fetcher or JSONFetcher()
        self.base_url = base_url

    def url_for(self, lat: float, lon: float) -> str:
        return (
            f"{self.base_url}/points/"
            f"{format_coordinate(lat)},{format_coordinate(lon)}/stations"
        )

    def resolve(
        self, lat: float, lon: float, deadline: Optional[Deadline] = None
    ) -> str:
        """
        Returns the identifier of the first station weather.gov lists for
        (lat, lon), or "" when it lists none.
        """
        url = self.url_for(lat, lon)
        payload = self.fetcher.fetch(url, deadline)
        if payload is NO_DATA:
            raise UpstreamUnavailable(url)
        return self.parse(payload)

    @staticmethod
    def parse(payload) -> str:
        doc = expect_mapping(payload)
        stations = get_sequence(doc, "observationStations")
        first = first_item(stations or [])
        if first is None:
            logger.warning("No observation stations listed")
            return ""
        if not isinstance(first, str):
            raise MalformedResponse("observationStations[0]", "a string", first)

        station_id = station_id_from_url(first)
        logger.info("Nearest observation station: %s", station_id)
        return station_id
