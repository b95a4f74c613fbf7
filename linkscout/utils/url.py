"""URL component helpers.

Both helpers return None instead of raising on URLs `urlsplit` rejects
(e.g. an unterminated IPv6 literal), so callers can treat unparsable links
as host-less and path-less.
"""
from typing import Optional
from urllib.parse import urlsplit


def host_of(url: str) -> Optional[str]:
    """Return the host component of `url` exactly as written, or None.

    Unlike `SplitResult.hostname` the case is preserved and the port and
    userinfo are dropped.
    """
    try:
        netloc = urlsplit(url).netloc
    except ValueError:
        return None
    host = netloc.rpartition("@")[2]
    if host.startswith("["):
        end = host.find("]")
        host = host[: end + 1] if end != -1 else host
    else:
        host = host.partition(":")[0]
    return host or None


def path_of(url: str) -> Optional[str]:
    """Return the path component of `url`, or None if it has none."""
    try:
        path = urlsplit(url).path
    except ValueError:
        return None
    return path or None
