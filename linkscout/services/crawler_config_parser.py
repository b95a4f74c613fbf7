import os
from typing import Optional

from linkscout.domain.config import CrawlerConfig
from linkscout.exceptions import CrawlerConfigError


class CrawlerConfigParser:
    """Parse a YAML dict into a CrawlerConfig.

    Responsibility: schema/validation for YAML config files.
    It does NOT perform filesystem IO.

    Example::

        root_url: https://example.com
        timeout_seconds: 30        # null disables the budget
        user_agent: MyBot/1.0
        blacklist: [/tag/, /print]
        blacklist_override: false
    """

    def parse(self, *, config_path: str, data: dict) -> Optional[CrawlerConfig]:
        if "root_url" not in data:
            return None

        root_url = data.get("root_url")
        if not isinstance(root_url, str) or root_url.strip() == "":
            raise CrawlerConfigError(config_path, "root_url must be a non-empty string")

        blacklist = data.get("blacklist")
        if isinstance(blacklist, str):
            blacklist = [blacklist]
        if blacklist is not None and not (
            isinstance(blacklist, list) and all(isinstance(b, str) for b in blacklist)
        ):
            raise CrawlerConfigError(config_path, "blacklist must be a string or list of strings")

        kwargs = {}
        if "timeout_seconds" in data:
            timeout = data.get("timeout_seconds")
            if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, int) or timeout < 0):
                raise CrawlerConfigError(config_path, "timeout_seconds must be a non-negative integer or null")
            kwargs["timeout_seconds"] = timeout

        return CrawlerConfig(
            root_url=root_url.strip(),
            blacklist=blacklist,
            blacklist_override=bool(data.get("blacklist_override", False)),
            user_agent=data.get("user_agent"),
            config_path=os.path.basename(config_path),
            **kwargs,
        )
