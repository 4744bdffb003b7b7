"""
XML serializer: renders articles back into the `news-topic` dialect inside an
RSS 2.0 channel envelope.

Output is deterministic for identical input; the only implicit input is the
current time used for `lastBuildDate` when the caller supplies none.

Values are written verbatim, but the normalizer trims every field on the way
back in, so leading and trailing whitespace does not survive a round trip.
"""
from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional

from .dates import format_rfc2822
from .models import Article, ChannelMetadata


DEFAULT_FILENAME = "rss-feed.xml"
GENERATOR = "rss-editor"

DEFAULT_TITLE = "RSS Feed"
DEFAULT_DESCRIPTION = "Generated RSS Feed"
DEFAULT_LANGUAGE = "en-US"

# "&" must stay first so later replacements are not escaped twice.
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(value: str) -> str:
    for char, entity in _XML_ESCAPES:
        value = value.replace(char, entity)
    return value


def _element(indent: int, name: str, value: str) -> str:
    return f"{'  ' * indent}<{name}>{escape_xml(value or '')}</{name}>"


def _article_lines(article: Article) -> List[str]:
    return [
        "    <news-topic>",
        _element(3, "article-title", article.title),
        _element(3, "article-details", article.details),
        _element(3, "article-image", article.image),
        _element(3, "article-publish-date", article.publish_date),
        "    </news-topic>",
    ]


def serialize(
    articles: Iterable[Article],
    channel: Optional[ChannelMetadata] = None,
    *,
    now: Optional[datetime] = None,
) -> str:
    """
    Render `articles`, in order, as a UTF-8 XML document.

    Channel fields left as None fall back to defaults; `lastBuildDate`
    defaults to `now` (current UTC time when omitted) in RFC 2822 form.
    """
    channel = channel or ChannelMetadata()
    last_build_date = channel.last_build_date
    if last_build_date is None:
        last_build_date = format_rfc2822(now)

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<rss version="2.0">',
        "  <channel>",
        _element(2, "title", DEFAULT_TITLE if channel.title is None else channel.title),
        _element(2, "description", DEFAULT_DESCRIPTION if channel.description is None else channel.description),
        _element(2, "link", channel.link or ""),
        _element(2, "language", DEFAULT_LANGUAGE if channel.language is None else channel.language),
        _element(2, "lastBuildDate", last_build_date),
        _element(2, "generator", GENERATOR),
    ]
    for article in articles:
        lines.extend(_article_lines(article))
    lines.extend(["  </channel>", "</rss>"])
    return "\n".join(lines) + "\n"


def serialize_bytes(
    articles: Iterable[Article],
    channel: Optional[ChannelMetadata] = None,
    *,
    now: Optional[datetime] = None,
) -> bytes:
    return serialize(articles, channel, now=now).encode("utf-8")
