from linkscout.domain.crawl_session import CrawlSession
from linkscout.utils.url import host_of, path_of


class UrlNormalizer:
    """Classifies links as internal/external and rewrites internal ones
    onto the session's base URL."""

    def __init__(self, session: CrawlSession):
        self.session = session

    def is_external(self, url: str) -> bool:
        host = host_of(url)
        # no host, most likely a relative link
        if host is None:
            return False
        return host != self.session.host

    def resolve(self, raw_link: str) -> str:
        """Return the indexable form of `raw_link`.

        External and blacklisted links are returned as-is, as are links
        without a path. Everything else becomes `base_url/path`, which drops
        the query string and fragment.
        """
        if self.is_external(raw_link):
            return raw_link

        if self.session.blacklist.matches(raw_link):
            return raw_link

        path = path_of(raw_link)
        if path is None:
            return raw_link

        base = (self.session.base_url or "").rstrip("/")
        return f"{base}/{path.strip('/')}"
