import logging
from typing import Optional

from ..config import GEOCODE_URL
from ..errors import LocationNotFound, MalformedResponse, UpstreamUnavailable
from ..models import Location
from ..utils import (
    expect_mapping,
    first_item,
    get_mapping,
    get_number,
    get_sequence,
    get_text,
    valid_coordinates,
)
from .http import NO_DATA, Deadline, JSONFetcher

logger = logging.getLogger(__name__)


class ZipLookupService:
    """Resolve a ZIP to city, state and lat/lon using OpenDataSoft."""

    def __init__(
        self,
        fetcher: Optional[JSONFetcher] = None,
        url_template: str = GEOCODE_URL,
    ):
        self.fetcher = fetcher or JSONFetcher()
        self.url_template = url_template

    def url_for(self, zip_code: str) -> str:
        # The zip goes into the query string as typed
        return self.url_template.format(zip=zip_code)

    def resolve(self, zip_code: str, deadline: Optional[Deadline] = None) -> Location:
        """
        Return the Location of the first record OpenDataSoft has for `zip_code`.

        Raises LocationNotFound when there is no record, MalformedResponse when
        a field has the wrong type and UpstreamUnavailable when no JSON came
        back at all. Fields missing from the record are left at their defaults.
        """
        url = self.url_for(zip_code)
        payload = self.fetcher.fetch(url, deadline)
        if payload is NO_DATA:
            raise UpstreamUnavailable(url)
        return self.parse(payload, zip_code)

    @staticmethod
    def parse(payload, zip_code: str = "") -> Location:
        doc = expect_mapping(payload)

        records = get_sequence(doc, "records")
        record = first_item(records or [])
        if record is None:
            raise LocationNotFound(f"No location found for ZIP code {zip_code!r}.")
        record = expect_mapping(record, "records[0]")

        fields = get_mapping(record, "fields", "records[0]")
        if fields is None:
            raise LocationNotFound(f"No location found for ZIP code {zip_code!r}.")

        path = "records[0].fields"
        # Place names may be missing, the coordinate may not: the station
        # lookup would happily run against 0,0
        missing = [key for key in ("latitude", "longitude") if key not in fields]
        if missing:
            raise LocationNotFound(
                f"No coordinates found for ZIP code {zip_code!r} "
                f"(missing {', '.join(missing)})."
            )

        loc = Location(
            city=get_text(fields, "city", path),
            state=get_text(fields, "state", path),
            zip=get_text(fields, "zip", path),
            latitude=get_number(fields, "latitude", path),
            longitude=get_number(fields, "longitude", path),
        )
        if not valid_coordinates(loc.latitude, loc.longitude):
            raise MalformedResponse(
                path, "latitude/longitude in range", (loc.latitude, loc.longitude)
            )

        logger.info(
            "ZIP %s -> %s, %s (%s, %s)",
            zip_code, loc.city, loc.state, loc.latitude, loc.longitude,
        )
        return loc
