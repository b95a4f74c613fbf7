import time
from typing import Callable, Iterable, Optional, Union

from linkscout import config as settings
from linkscout.domain.blacklist import Blacklist
from linkscout.domain.config import CrawlerConfig
from linkscout.domain.discovered_links import DiscoveredLinks
from linkscout.domain.visited_tracker import VisitedTracker
from linkscout.utils.url import host_of


class CrawlSession:
    """
    All mutable state of a single crawl.

    Holds the scope anchor (`base_url`/`host`), the blacklist, user agent and
    time budget, plus the discovered and visited link sets. A session is
    configured before the crawl starts and becomes a read-only result holder
    once it is done.

    The clock is captured at construction and restarted by `start()`, so the
    budget always measures the crawl itself.
    """

    def __init__(
        self,
        config: Optional[CrawlerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        config = config or CrawlerConfig()
        self._clock = clock
        self.start_time: float = clock()

        # Configuration
        self.base_url: Optional[str] = config.root_url
        self.host: Optional[str] = None
        self.timeout_seconds: Optional[int] = config.timeout_seconds
        self.user_agent: str = config.user_agent
        self.blacklist = Blacklist(settings.DEFAULT_BLACKLIST)
        if config.blacklist or config.blacklist_override:
            self.blacklist.set_blacklist(config.blacklist, override=config.blacklist_override)

        # Execution state
        self.discovered_links = DiscoveredLinks()
        self.visited_tracker = VisitedTracker()
        self.pages_crawled: int = 0

    def set_base_url(self, url: str) -> "CrawlSession":
        self.base_url = url
        return self

    def set_blacklist(self, value: Union[str, Iterable[str]], override: bool = False) -> "CrawlSession":
        self.blacklist.set_blacklist(value, override=override)
        return self

    def set_user_agent(self, value: str) -> "CrawlSession":
        self.user_agent = value
        return self

    def set_timeout(self, timeout_seconds: Optional[int]) -> "CrawlSession":
        """Seconds the crawl may run, or None for no limit."""
        self.timeout_seconds = timeout_seconds
        return self

    def start(self, seed_url: str) -> None:
        """Anchor the session on `seed_url` and restart the clock."""
        self.base_url = seed_url
        self.host = host_of(seed_url)
        self.start_time = self._clock()

    def time_running(self) -> float:
        return self._clock() - self.start_time

    def should_return_before_timeout(self) -> bool:
        """True once the budget is used up, keeping a one second margin."""
        if self.timeout_seconds is None:
            return False
        return self.time_running() >= (self.timeout_seconds - 1)

    def add_link(self, url: str) -> bool:
        return self.discovered_links.add(url)

    def is_discovered(self, url: str) -> bool:
        return url in self.discovered_links

    def mark_visited(self, url: str) -> None:
        self.visited_tracker.mark(url)

    def is_visited(self, url: str) -> bool:
        return self.visited_tracker.is_visited(url)

    def increment_pages_crawled(self, count: int = 1) -> None:
        self.pages_crawled += int(count)

    def get_links(self) -> list[str]:
        return self.discovered_links.as_list()
