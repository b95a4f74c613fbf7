import logging
from typing import Callable, Iterable, Optional, Union

from linkscout import config
from linkscout.domain.crawl_result import CrawlResult
from linkscout.domain.crawl_session import CrawlSession
from linkscout.services.crawl_policy import CrawlPolicy
from linkscout.services.fetcher import Fetcher, HttpServiceFetcher
from linkscout.services.http_service import HttpService
from linkscout.services.link_extractor import LinkExtractor
from linkscout.services.url_normalizer import UrlNormalizer

logger = logging.getLogger(__name__)


class Crawler:
    """Discovers every same-host link reachable from a seed URL.

    Pages are visited one at a time. The discovered links double as the
    work queue: after the seed page, the crawler walks them in insertion
    order, fetching each one not yet visited and appending whatever new
    links it yields, until the queue is exhausted or the session's time
    budget runs out. The earliest-discovered unvisited link is always the
    next page fetched.
    """

    def __init__(
        self,
        session: Optional[CrawlSession] = None,
        fetcher: Optional[Fetcher] = None,
        link_extractor: Optional[LinkExtractor] = None,
        http_client: Optional[Callable] = None,
    ):
        self.session = session or CrawlSession()
        # built per crawl when not injected, so user agent changes apply
        self._fetcher = fetcher
        self._http_client = http_client
        self.link_extractor = link_extractor or LinkExtractor()
        self.url_normalizer = UrlNormalizer(self.session)
        self.crawl_policy = CrawlPolicy(self.session, self.url_normalizer)

    def set_base_url(self, url: str) -> "Crawler":
        self.session.set_base_url(url)
        return self

    def set_blacklist(self, value: Union[str, Iterable[str]], override: bool = False) -> "Crawler":
        self.session.set_blacklist(value, override=override)
        return self

    def set_user_agent(self, value: str) -> "Crawler":
        self.session.set_user_agent(value)
        return self

    def set_timeout(self, timeout_seconds: Optional[int]) -> "Crawler":
        self.session.set_timeout(timeout_seconds)
        return self

    def get_links(self) -> list[str]:
        return self.session.get_links()

    def _build_fetcher(self) -> Fetcher:
        if self._fetcher is not None:
            return self._fetcher
        http_service = HttpService(
            self.session.user_agent,
            http_client=self._http_client,
            timeout=config.HTTP_TIMEOUT_SECONDS,
            verify_tls=config.HTTP_VERIFY_TLS,
        )
        return HttpServiceFetcher(http_service)

    def crawl(self, url: Optional[str] = None) -> CrawlResult:
        """Crawl from `url`, or from the session's base URL when omitted."""
        seed = url or self.session.base_url
        if not seed:
            raise ValueError("a seed url is required for crawl")

        session = self.session
        session.start(seed)
        fetcher = self._build_fetcher()
        logger.info("Starting crawl of %s (timeout=%s)", seed, session.timeout_seconds)

        try:
            timed_out = self._traverse(seed, fetcher)
        finally:
            # an injected fetcher belongs to the caller
            if fetcher is not self._fetcher:
                fetcher.close()

        logger.info(
            "Crawl of %s finished: %d links, %d pages in %.1fs",
            seed,
            len(session.discovered_links),
            session.pages_crawled,
            session.time_running(),
        )
        return CrawlResult(session.get_links(), session.pages_crawled, timed_out)

    def _traverse(self, seed: str, fetcher: Fetcher) -> bool:
        """Visit the seed, then every discovered link in insertion order.

        Returns True when the time budget cut the walk short.
        """
        session = self.session
        self._parse(seed, fetcher)

        cursor = 0
        while cursor < len(session.discovered_links):
            if session.should_return_before_timeout():
                logger.warning(
                    "Crawl of %s stopped after %.1fs with %d of %d links visited",
                    seed,
                    session.time_running(),
                    cursor,
                    len(session.discovered_links),
                )
                return True

            link = session.discovered_links.get(cursor)
            cursor += 1
            if session.is_visited(link):
                logger.debug("Skipping (visited) %s", link)
                continue
            self._parse(link, fetcher)
        return False

    def _parse(self, url: str, fetcher: Fetcher) -> int:
        """Fetch `url`, index its new links and mark it visited.

        Returns the number of links added to the session.
        """
        links_before = len(self.session.discovered_links)

        body = fetcher.fetch(url)
        self.session.increment_pages_crawled()

        for raw_link in self.link_extractor.extract(body):
            link = self.url_normalizer.resolve(raw_link)
            if self.crawl_policy.should_be_indexed(link):
                self.session.add_link(link)

        self.session.mark_visited(url)

        found = len(self.session.discovered_links) - links_before
        logger.info("Fetched %s -> %d new links", url, found)
        return found
