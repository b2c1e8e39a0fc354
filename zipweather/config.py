import os

from .version import VERSION


# ----------------------------------------------------------------------
# Upstream APIs
# ----------------------------------------------------------------------
GEOCODE_URL = os.getenv(
    "ZIPWEATHER_GEOCODE_URL",
    "https://public.opendatasoft.com/api/records/1.0/search/"
    "?dataset=us-zip-code-latitude-and-longitude&q={zip}",
)
WEATHER_GOV_ROOT = os.getenv(
    "ZIPWEATHER_WEATHER_GOV_ROOT", "https://api.weather.gov"
).rstrip("/")

# weather.gov rejects requests without a User-Agent
USER_AGENT = {
    "User-Agent": os.getenv("ZIPWEATHER_USER_AGENT", f"zipweather/{VERSION}")
}

# Seconds
REQUEST_TIMEOUT = float(os.getenv("ZIPWEATHER_REQUEST_TIMEOUT", "10"))
LOOKUP_DEADLINE = float(os.getenv("ZIPWEATHER_LOOKUP_DEADLINE", "30"))


# ----------------------------------------------------------------------
# Web front end
# ----------------------------------------------------------------------
HOST = os.getenv("ZIPWEATHER_HOST", "0.0.0.0")
PORT = int(os.getenv("ZIPWEATHER_PORT", "8080"))
# Needed for flashing messages; a random key is fine for a single process
SECRET_KEY = os.getenv("ZIPWEATHER_SECRET_KEY") or os.urandom(24).hex()

LOG_LEVEL = os.getenv("ZIPWEATHER_LOG_LEVEL", "INFO").upper()


class Colours:
    """ANSI escape codes used by the command-line driver."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
