"""
Exceptions raised while looking up the weather for a zip code.

Everything derives from `WeatherLookupError`, so callers (the Flask views,
the CLI) can catch one type and show the message to the user.
"""


def _describe(value: object) -> str:
    # Small scalars are worth showing; containers just get their type
    if isinstance(value, (int, float, str, tuple)) and len(repr(value)) <= 40:
        return f"{type(value).__name__} {value!r}"
    return type(value).__name__


class WeatherLookupError(RuntimeError):
    """Base class for lookup failures."""


class UpstreamUnavailable(WeatherLookupError):
    """An upstream API could not be reached or did not return JSON."""

    def __init__(self, url: str):
        super().__init__(f"No usable data came back from {url}")
        self.url = url


class MalformedResponse(WeatherLookupError):
    """A field was present in an upstream response but had the wrong shape."""

    def __init__(self, path: str, expected: str, got: object):
        super().__init__(
            f"Malformed upstream response: expected {expected} at "
            f"'{path}', got {_describe(got)}"
        )
        self.path = path
        self.expected = expected


class LocationNotFound(WeatherLookupError):
    """The geocoding service has no record for the zip code."""


class StationNotFound(WeatherLookupError):
    """No observation station is listed for the coordinate."""


class LookupTimeout(WeatherLookupError):
    """The time budget for a lookup ran out before it finished."""
