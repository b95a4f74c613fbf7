from typing import Iterator


class DiscoveredLinks:
    """
    Ordered, duplicate-rejecting collection of indexed links.

    Insertion order is the traversal order, so the collection doubles as the
    crawl's work queue: `get(index)` lets the crawler walk it with a cursor
    while new links keep being appended. Nothing is ever removed.
    """

    def __init__(self):
        # url -> insertion index
        self._index: dict[str, int] = {}
        self._links: list[str] = []

    def add(self, url: str) -> bool:
        """Append `url` unless already present. Returns True when it was added."""
        if url in self._index:
            return False
        self._index[url] = len(self._links)
        self._links.append(url)
        return True

    def get(self, index: int) -> str:
        return self._links[index]

    def index_of(self, url: str) -> int:
        return self._index[url]

    def as_list(self) -> list[str]:
        return list(self._links)

    def __contains__(self, url: object) -> bool:
        return url in self._index

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[str]:
        return iter(self._links)
