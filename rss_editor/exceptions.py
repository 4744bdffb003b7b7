from __future__ import annotations

from typing import Dict, List, Optional

from .models import ValidationError


class RSSEditorError(Exception):
    """Base class for all rss_editor errors."""


class FeedFetchError(RSSEditorError):
    """Raised when a feed cannot be fetched."""


class FeedHTTPError(FeedFetchError):
    """Raised when the feed server answers with a non-2xx status."""

    def __init__(self, status: int, reason: str = "") -> None:
        self.status = status
        self.reason = reason
        super().__init__(f"{status} {reason}".strip())


class FeedTimeoutError(FeedFetchError):
    """Raised when the feed server does not answer within the timeout."""


class FeedTransportError(FeedFetchError):
    """Raised on connection, DNS, TLS and other network failures."""


class XMLParseError(RSSEditorError):
    """Raised when a feed body is not a well-formed XML document."""


class ExportBlockedError(RSSEditorError):
    """Raised when preflight validation fails; nothing is exported."""

    def __init__(self, errors: Dict[str, List[ValidationError]], message: Optional[str] = None) -> None:
        self.errors = errors
        super().__init__(message or f"{len(errors)} article(s) failed validation")


class ConfigError(RSSEditorError):
    """Raised when an environment setting cannot be interpreted."""
