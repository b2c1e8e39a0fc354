import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Send package logs to stdout with a timestamped one-line format."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))

    root = logging.getLogger("zipweather")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    # Don't double-print through the root logger
    root.propagate = False
