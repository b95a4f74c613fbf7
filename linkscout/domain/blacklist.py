import re
from typing import Iterable, Optional, Pattern, Union


class Blacklist:
    """Substrings that disqualify a URL from being indexed.

    Entries are matched case-insensitively as literal substrings; they are
    escaped before being joined into a single alternation, so `.pdf` does
    not match `xpdf`. Entry order does not affect the result.
    """

    def __init__(self, entries: Optional[Iterable[str]] = None):
        self._entries: list[str] = list(entries or [])
        self._pattern: Optional[Pattern[str]] = None

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def set_blacklist(self, value: Union[str, Iterable[str]], override: bool = False) -> "Blacklist":
        """Add entries, or replace them all when `override` is set.

        A single string is always appended. Duplicates are kept.
        """
        if isinstance(value, str):
            self._entries.append(value)
        elif override:
            self._entries = list(value)
        else:
            self._entries.extend(value)
        self._pattern = None
        return self

    def _compiled(self) -> Optional[Pattern[str]]:
        if self._pattern is None:
            # an empty entry would match every URL
            parts = [re.escape(entry) for entry in self._entries if entry]
            if not parts:
                return None
            self._pattern = re.compile("(" + "|".join(parts) + ")", re.IGNORECASE)
        return self._pattern

    def matches(self, url: str) -> bool:
        pattern = self._compiled()
        if pattern is None:
            return False
        return pattern.search(url) is not None

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self):
        return f"<Blacklist entries={self._entries!r}>"
