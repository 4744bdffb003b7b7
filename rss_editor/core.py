from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional, Sequence, Union

from .config import EditorConfig
from .exceptions import ExportBlockedError, FeedHTTPError, FeedTimeoutError, FeedTransportError, XMLParseError
from .fetcher import ACCEPT, RequestsTransport, Transport, fetch_feed
from .models import Article, ChannelMetadata, ParseResult
from .normalizer import normalize
from .serializer import serialize
from .urls import channel_link_from_url, is_absolute_url, looks_like_feed_url
from .validation import validate_articles
from .xmltree import parse_xml

logger = logging.getLogger(__name__)


INVALID_URL_MESSAGE = "Invalid URL format. Please enter a valid RSS feed URL (e.g., https://example.com/feed.xml)"
TIMEOUT_MESSAGE = "Request timeout. The RSS feed took too long to respond."
INVALID_XML_MESSAGE = "Invalid XML format. Please check the RSS feed URL."


@dataclass
class EditorOptions:
    timeout: float
    user_agent: str
    language: str


class FeedEditor:
    """
    High-level API: fetch a feed, extract articles, and export edited articles.

    Pipeline: check URL → fetch → parse XML → normalize → (caller edits) → preflight → serialize
    """

    def __init__(self, *, transport: Optional[Transport] = None, config: Optional[EditorConfig] = None) -> None:
        config = config or EditorConfig()
        self.transport = transport or RequestsTransport()
        self.options = EditorOptions(
            timeout=config.timeout,
            user_agent=config.user_agent,
            language=config.language,
        )

    @property
    def headers(self) -> Dict[str, str]:
        return {"User-Agent": self.options.user_agent, "Accept": ACCEPT}

    def parse(self, url: str) -> ParseResult:
        """Fetch `url` and extract its articles. Never raises for fetch or content errors."""
        url = (url or "").strip()
        if not is_absolute_url(url):
            return ParseResult.fail(INVALID_URL_MESSAGE)
        if not looks_like_feed_url(url):
            logger.warning(
                "URL does not appear to be an RSS feed (%s); make sure it is a feed URL, not a webpage URL", url
            )

        try:
            body = fetch_feed(url, self.transport, headers=self.headers, timeout=self.options.timeout)
        except FeedHTTPError as e:
            return ParseResult.fail(f"Failed to fetch RSS feed: {e.status} {e.reason}".rstrip())
        except FeedTimeoutError:
            logger.error("Timed out fetching %s", url)
            return ParseResult.fail(TIMEOUT_MESSAGE)
        except FeedTransportError as e:
            logger.error("Failed to fetch feed %s: %s", url, e)
            return ParseResult.fail(f"Network error while fetching the RSS feed: {e}")

        return self.parse_text(body)

    def parse_text(self, xml: Union[str, bytes]) -> ParseResult:
        """Extract articles from an already fetched document."""
        try:
            document = parse_xml(xml)
        except XMLParseError as e:
            logger.warning("%s", e)
            return ParseResult.fail(INVALID_XML_MESSAGE)
        return normalize(document)

    def export(
        self,
        articles: Sequence[Article],
        *,
        source_url: Optional[str] = None,
        channel: Optional[ChannelMetadata] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Serialize `articles` after the preflight check.

        Raises ExportBlockedError (with the id -> errors mapping) if any article
        is invalid; nothing is exported in that case.
        """
        errors = validate_articles(articles)
        if errors:
            logger.warning("Export blocked: %d article(s) failed validation", len(errors))
            raise ExportBlockedError(errors)

        channel = dataclasses.replace(channel) if channel else ChannelMetadata()
        if channel.link is None:
            channel.link = channel_link_from_url(source_url)
        if channel.language is None:
            channel.language = self.options.language
        return serialize(articles, channel, now=now)
