"""
Dialect normalizer: turns a parsed feed document into canonical Articles.

Three dialects are recognised and probed in a fixed order, first match wins:

1. the custom `news-topic` dialect (also what `rss_editor.serializer` writes)
2. RSS 2.0 (`item`)
3. Atom (`entry`)

Exactly one extraction path runs per document. Entries without a title are
dropped silently and ids are assigned to the kept entries by position.
"""
from __future__ import annotations

import enum
import logging
import re
from typing import Callable, Dict, List, Optional

from .models import Article, ParseResult
from .xmltree import XmlNode, child_text, find_first, iter_named, text_content

logger = logging.getLogger(__name__)


NO_ARTICLES_MESSAGE = "No articles found in the feed. Please check the feed format."

# Best-effort scrape of the first <img src="..."> in description markup. This
# is not an HTML parser; it is only consulted after enclosure and media:content.
_IMG_SRC_RE = re.compile(r"""<img[^>]+src=["']([^"']+)["']""", re.IGNORECASE)


class Dialect(enum.Enum):
    CUSTOM = "news-topic"
    RSS2 = "rss2"
    ATOM = "atom"
    UNRECOGNIZED = "unrecognized"


# Marker element per dialect, in probe order.
_PROBES = (
    (Dialect.CUSTOM, "news-topic"),
    (Dialect.RSS2, "item"),
    (Dialect.ATOM, "entry"),
)


def detect_dialect(document: XmlNode) -> Dialect:
    """Return the first dialect whose marker element occurs anywhere in the document."""
    for dialect, marker in _PROBES:
        if find_marker(document, marker) is not None:
            return dialect
    return Dialect.UNRECOGNIZED


def find_marker(document: XmlNode, marker: str) -> Optional[XmlNode]:
    return next(iter_named(document, marker, include_self=True), None)


def _extract_custom(topic: XmlNode) -> Dict[str, str]:
    return {
        "title": child_text(topic, "article-title"),
        "details": child_text(topic, "article-details"),
        "image": child_text(topic, "article-image"),
        "publish_date": child_text(topic, "article-publish-date"),
    }


def resolve_rss_image(item: XmlNode) -> str:
    """
    Image for an RSS item, by priority:
    image enclosure -> media:content -> first <img> in description -> "".
    """
    for enclosure in iter_named(item, "enclosure"):
        if enclosure.get("type").startswith("image/"):
            return enclosure.get("url")

    media = find_first(item, "content")
    if media is not None:
        return media.get("url")

    description = find_first(item, "description")
    if description is not None:
        match = _IMG_SRC_RE.search(text_content(description))
        if match:
            return match.group(1)
    return ""


def _extract_rss(item: XmlNode) -> Dict[str, str]:
    return {
        "title": child_text(item, "title"),
        "details": child_text(item, "description"),
        "image": resolve_rss_image(item),
        "publish_date": child_text(item, "pubDate"),
    }


def _atom_image(entry: XmlNode) -> str:
    for link in iter_named(entry, "link"):
        if link.get("type").startswith("image"):
            return link.get("href")
    return ""


def _extract_atom(entry: XmlNode) -> Dict[str, str]:
    return {
        "title": child_text(entry, "title"),
        "details": child_text(entry, "summary") or child_text(entry, "content"),
        "image": _atom_image(entry),
        "publish_date": child_text(entry, "published") or child_text(entry, "updated"),
    }


_EXTRACTORS: Dict[Dialect, Callable[[XmlNode], Dict[str, str]]] = {
    Dialect.CUSTOM: _extract_custom,
    Dialect.RSS2: _extract_rss,
    Dialect.ATOM: _extract_atom,
}

_MARKERS = dict(_PROBES)


def extract_articles(document: XmlNode, dialect: Dialect) -> List[Article]:
    """Run one dialect's extractor over every marker element, keeping titled entries."""
    if dialect is Dialect.UNRECOGNIZED:
        return []
    extract = _EXTRACTORS[dialect]
    articles: List[Article] = []
    dropped = 0
    for element in iter_named(document, _MARKERS[dialect], include_self=True):
        fields = extract(element)
        if not fields["title"]:
            dropped += 1
            continue
        articles.append(Article(id=f"article-{len(articles)}", **fields))
    if dropped:
        logger.debug("Dropped %d untitled %s entries", dropped, dialect.value)
    return articles


def normalize(document: XmlNode) -> ParseResult:
    """
    Detect the document's dialect and extract its articles.

    Returns a failure result when no dialect matches or when every entry of
    the matched dialect was dropped.
    """
    dialect = detect_dialect(document)
    articles = extract_articles(document, dialect)
    logger.info("Detected %s feed with %d article(s)", dialect.value, len(articles))
    if not articles:
        return ParseResult.fail(NO_ARTICLES_MESSAGE)
    return ParseResult.ok(articles)
