"""Crawl result data model."""
from typing import NamedTuple


class CrawlResult(NamedTuple):
    """Result of a crawl operation.

    Lets callers log what happened and tell an exhausted crawl apart
    from one cut short by the time budget.
    """
    links: list
    """Discovered links in insertion order"""

    pages_crawled: int
    """Number of pages fetched, failed fetches included"""

    timed_out: bool
    """True if the time budget stopped the traversal before every discovered link was examined"""
