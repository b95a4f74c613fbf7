from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from linkscout import config as settings


@dataclass(frozen=True)
class CrawlerConfigData:
    """Crawl-behavior fields for a crawler configuration."""

    root_url: Optional[str]
    blacklist: tuple[str, ...]
    blacklist_override: bool
    user_agent: str
    timeout_seconds: Optional[int]


_UNSET = object()


class CrawlerConfig:
    """Configuration record for one crawl.

    `blacklist` entries are added to the default blacklist unless
    `blacklist_override` is set, in which case they replace it.
    Unset values fall back to `linkscout.config`.
    """

    def __init__(
        self,
        root_url: Optional[str] = None,
        blacklist=None,
        blacklist_override: bool = False,
        user_agent: Optional[str] = None,
        timeout_seconds=_UNSET,
        config_path: Optional[str] = None,
    ):
        if timeout_seconds is _UNSET:
            timeout_seconds = settings.CRAWL_TIMEOUT_SECONDS
        if timeout_seconds is not None and int(timeout_seconds) < 0:
            raise ValueError("timeout_seconds must be >= 0 or None")
        if isinstance(blacklist, str):
            blacklist = [blacklist]

        self.config_path = config_path
        self.data = CrawlerConfigData(
            root_url=root_url,
            blacklist=tuple(blacklist or ()),
            blacklist_override=bool(blacklist_override),
            user_agent=user_agent or settings.USER_AGENT,
            timeout_seconds=int(timeout_seconds) if timeout_seconds is not None else None,
        )

    @property
    def root_url(self) -> Optional[str]:
        return self.data.root_url

    @property
    def blacklist(self) -> tuple[str, ...]:
        return self.data.blacklist

    @property
    def blacklist_override(self) -> bool:
        return self.data.blacklist_override

    @property
    def user_agent(self) -> str:
        return self.data.user_agent

    @property
    def timeout_seconds(self) -> Optional[int]:
        return self.data.timeout_seconds

    def __repr__(self):
        return f"<CrawlerConfig root={self.root_url} path={self.config_path} timeout={self.timeout_seconds}>"
