from __future__ import annotations

from typing import Optional
from urllib.parse import SplitResult, urlsplit


# Schemes that must carry a host to be meaningful.
_HOST_SCHEMES = {"http", "https", "ftp", "ws", "wss"}

_TAB_NEWLINE = str.maketrans("", "", "\t\r\n")

_FEED_URL_HINTS =("/rss", "/feed", "rss.xml", "feed.xml")
_FEED_URL_SUFFIXES = (".xml", ".rss")


def parse_absolute_url(value: str) -> Optional[SplitResult]:
    """
    Parse `value` as an absolute URL, returning None when it is not one.

    An absolute URL needs a scheme; web schemes additionally need a host.
    Tabs and newlines are dropped and spaces in the path or query are allowed,
    as browsers do; whitespace inside the host is not.
    """
    if not value:
        return None
    value = value.strip().translate(_TAB_NEWLINE)
    if not value:
        return None
    try:
        parts = urlsplit(value)
        # Accessing port validates it (raises ValueError when out of range).
        parts.port
    except ValueError:
        return None
    if not parts.scheme:
        return None
    if parts.scheme.lower() in _HOST_SCHEMES and not parts.hostname:
        return None
    if any(c.isspace() for c in parts.netloc):
        return None
    return parts


def is_absolute_url(value: str) -> bool:
    return parse_absolute_url(value) is not None


def looks_like_feed_url(url: str) -> bool:
    """Advisory check only: feeds with unconventional URLs are still fetched."""
    lowered = url.lower()
    return any(h in lowered for h in _FEED_URL_HINTS) or lowered.endswith(_FEED_URL_SUFFIXES)


def channel_link_from_url(url: Optional[str]) -> str:
    """`scheme://host[:port]` of the source feed, or "" when it cannot be parsed."""
    if not url:
        return ""
    parts = parse_absolute_url(url)
    if parts is None or not parts.hostname:
        return ""
    host = parts.netloc.rsplit("@", 1)[-1]
    return f"{parts.scheme.lower()}://{host}"
