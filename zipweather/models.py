from dataclasses import dataclass

from .utils.geo import c_to_f


@dataclass(frozen=True)
class Location:
    """A US zip code resolved to a place and a coordinate."""

    city: str = ""
    state: str = ""
    zip: str = ""
    latitude: float = 0.0
    longitude: float = 0.0


@dataclass(frozen=True)
class Observation:
    """Latest reading from a weather.gov observation station (°C)."""

    station: str
    temperature: float = 0.0


@dataclass(frozen=True)
class LookupResult:
    """
    What the result page shows for one zip code.

    The CamelCase properties mirror the names the result template was
    originally written against.
    """

    zip_code: str
    city: str
    state: str
    temperature: float
    station: str

    @property
    def temperature_f(self) -> float:
        return c_to_f(self.temperature)

    @property
    def ZipCode(self) -> str:
        return self.zip_code

    @property
    def City(self) -> str:
        return self.city

    @property
    def State(self) -> str:
        return self.state

    @property
    def Temperature(self) -> float:
        return self.temperature

    @property
    def Station(self) -> str:
        return self.station
