"""Custom exceptions for linkscout services."""


class CrawlerConfigError(Exception):
    """Raised when a crawler config file is missing or invalid."""

    def __init__(self, config_path: str, reason: str = "invalid"):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Config '{config_path}' {reason}")


class HttpFetchError(Exception):
    """Raised when an HTTP fetch fails due to network/transport errors."""

    def __init__(self, url: str, original: Exception):
        self.url = url
        self.original = original
        super().__init__(f"HTTP fetch failed for {url}: {original}")
