from __future__ import annotations

import logging
from typing import Protocol

from linkscout.exceptions import HttpFetchError

logger = logging.getLogger(__name__)


class Fetcher(Protocol):
    """Fetch a URL and return its body.

    Implementations must not raise on network errors; a page that cannot be
    fetched yields an empty body, and therefore no links.
    """

    def fetch(self, url: str) -> str: ...


class HttpServiceFetcher:
    def __init__(self, http_service):
        self._http_service = http_service

    def close(self) -> None:
        close = getattr(self._http_service, "close", None)
        if close is not None:
            close()

    def fetch(self, url: str) -> str:
        try:
            response = self._http_service.fetch(url)
        except HttpFetchError as e:
            logger.warning("Fetch failed for %s: %s", url, e)
            return ""
        except Exception as e:
            logger.error("Fetch error for %s: %s", url, e, exc_info=True)
            return ""

        try:
            sc = int(response.status_code)
            if sc < 200 or sc >= 300:
                logger.warning("Non-success status for %s: %s", url, response.status_code)
        except (TypeError, ValueError):
            logger.exception("Error parsing status code for %s: %s", url, response.status_code)

        return response.text or ""
