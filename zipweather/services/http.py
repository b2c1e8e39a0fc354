import logging
import time
from typing import Any, Optional

import requests

from ..config import REQUEST_TIMEOUT, USER_AGENT
from ..errors import LookupTimeout

logger = logging.getLogger(__name__)


class _NoData:
    """Type of the `NO_DATA` sentinel."""

    def __repr__(self) -> str:
        return "NO_DATA"

    def __bool__(self) -> bool:
        return False


# Returned by `JSONFetcher.fetch` when nothing usable came back. A JSON body
# of `null` decodes to None, so None can't double as the sentinel.
NO_DATA = _NoData()


class Deadline:
    """Time budget shared by every upstream call in one lookup."""

    def __init__(self, seconds: float, clock=time.monotonic):
        self._clock = clock
        self.expires_at = clock() + seconds

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._clock())

    def expired(self) -> bool:
        return self.remaining() <= 0

    def check(self, step: str) -> None:
        if self.expired():
            raise LookupTimeout(f"Ran out of time before {step}.")


class JSONFetcher:
    """GET a URL and decode the body as JSON, returning `NO_DATA` on failure."""

    def __init__(self, timeout: float = REQUEST_TIMEOUT, headers: Optional[dict] = None):
        self.timeout = timeout
        self.headers = dict(USER_AGENT if headers is None else headers)

    def _timeout_for(self, deadline: Optional[Deadline]) -> float:
        if deadline is None:
            return self.timeout
        return min(self.timeout, deadline.remaining())

    def fetch(self, url: str, deadline: Optional[Deadline] = None) -> Any:
        """
        Return the decoded JSON body of ``GET url``, or `NO_DATA`.

        The status code is not inspected: an error page that parses as JSON
        is handed back like any other document and left to the caller's
        extraction logic.

        Running out of the lookup's `deadline` is not a transport failure and
        raises `LookupTimeout`, whether the budget was gone before the request
        or the request hit the deadline-capped timeout.
        """
        if deadline is not None:
            # requests refuses a zero timeout
            deadline.check(f"requesting {url}")

        timeout = self._timeout_for(deadline)
        try:
            resp = requests.get(url, headers=self.headers, timeout=timeout)
        except requests.Timeout as exc:
            if timeout < self.timeout:
                logger.error("Request to %s ran past the lookup deadline", url)
                raise LookupTimeout(f"Ran out of time waiting for {url}.") from exc
            logger.error("There was an error making the request to %s: %s", url, exc)
            return NO_DATA
        except requests.RequestException as exc:
            logger.error("There was an error making the request to %s: %s", url, exc)
            return NO_DATA

        logger.debug("GET %s -> %s", url, resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            logger.error("There was an error processing JSON data from %s: %s", url, exc)
            return NO_DATA
