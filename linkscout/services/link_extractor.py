import logging
from typing import Callable, Optional, Union

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


class LinkExtractor:
    """Pull raw anchor targets out of an HTML document.

    Every `<a href>` is returned in document order unless its `rel` is
    exactly `nofollow`. Values are returned untouched; resolving and
    filtering them is the crawler's job.
    """

    def __init__(
        self,
        soup_factory: Optional[Callable[[Union[str, bytes]], BeautifulSoup]] = None,
    ):
        # rel is kept as the raw attribute string so only an exact "nofollow" is skipped
        self._soup_factory = soup_factory or (
            lambda html: BeautifulSoup(html, "html.parser", multi_valued_attributes=None)
        )

    def extract(self, body: Optional[Union[str, bytes]]) -> list[str]:
        if not body:
            return []

        try:
            soup = self._soup_factory(body)
            return [a.get("href") for a in soup.find_all("a", href=True) if self._is_followed(a)]
        except Exception:
            logger.exception("Error extracting links from HTML body")
            return []

    @staticmethod
    def _is_followed(anchor) -> bool:
        rel = anchor.get("rel")
        if rel is None:
            return True
        # injected soup factories may still split rel into tokens
        if isinstance(rel, (list, tuple)):
            rel = " ".join(rel)
        return rel != "nofollow"
