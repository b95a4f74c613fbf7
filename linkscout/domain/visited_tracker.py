class VisitedTracker:
    """
    Tracks which URLs have been fetched and link-extracted during a crawl.

    Only containment is ever queried, so marking a URL twice is harmless.
    """

    def __init__(self):
        self._visited: set[str] = set()

    def mark(self, url: str) -> None:
        """Mark a URL as visited."""
        self._visited.add(url)

    def is_visited(self, url: str) -> bool:
        """Check if a URL has been visited."""
        return url in self._visited

    def __len__(self) -> int:
        return len(self._visited)
