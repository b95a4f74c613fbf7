import logging

from linkscout.domain.crawl_session import CrawlSession
from linkscout.services.url_normalizer import UrlNormalizer

logger = logging.getLogger(__name__)


class CrawlPolicy:
    """Decides whether a resolved link belongs in the discovered set.

    A link is rejected when it is external, blacklisted, does not contain
    the base URL, or was already discovered.
    """

    def __init__(self, session: CrawlSession, url_normalizer: UrlNormalizer):
        self.session = session
        self.url_normalizer = url_normalizer

    def should_be_indexed(self, link: str) -> bool:
        if self.url_normalizer.is_external(link):
            logger.debug("Skipping (external) %s", link)
            return False

        if self.session.blacklist.matches(link):
            logger.debug("Skipping (blacklisted) %s", link)
            return False

        # catches scheme mismatches the host comparison lets through
        if not self.session.base_url or self.session.base_url not in link:
            logger.debug("Skipping (outside %s) %s", self.session.base_url, link)
            return False

        if self.session.is_discovered(link):
            return False

        return True
