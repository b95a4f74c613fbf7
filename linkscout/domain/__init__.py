"""Domain objects for linkscout - explicit re-exports to satisfy linters."""
from .blacklist import Blacklist as Blacklist
from .config import CrawlerConfig as CrawlerConfig
from .crawl_result import CrawlResult as CrawlResult
from .crawl_session import CrawlSession as CrawlSession
from .discovered_links import DiscoveredLinks as DiscoveredLinks
from .visited_tracker import VisitedTracker as VisitedTracker

__all__ = ["Blacklist", "CrawlerConfig", "CrawlResult", "CrawlSession", "DiscoveredLinks", "VisitedTracker"]
