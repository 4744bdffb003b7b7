from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Protocol

import requests

from .exceptions import FeedHTTPError, FeedTimeoutError, FeedTransportError

logger = logging.getLogger(__name__)


DEFAULT_TIMEOUT = 10.0
DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; RSS Parser/1.0)"
ACCEPT = "application/xml, text/xml, application/rss+xml, application/atom+xml, */*"
DEFAULT_HEADERS = {
    "User-Agent": DEFAULT_USER_AGENT,
    "Accept": ACCEPT,
}


@dataclass(frozen=True)
class FetchResponse:
    status: int
    body: bytes
    reason: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    def fetch(self, url: str, headers: Mapping[str, str], timeout: float) -> FetchResponse:  # pragma: no cover - interface
        """
        Fetch `url` once. Returns non-2xx responses as-is; raises
        FeedTimeoutError on timeout and FeedTransportError on other failures.
        """
        ...


class RequestsTransport:
    """Default transport backed by a `requests.Session`."""

    def __init__(self, session: Optional[requests.Session] = None) -> None:
        self.session = session or requests.Session()

    def fetch(self, url: str, headers: Mapping[str, str], timeout: float) -> FetchResponse:
        try:
            response = self.session.get(url, headers=dict(headers), timeout=timeout)
        except requests.Timeout as e:
            raise FeedTimeoutError(f"Timed out after {timeout}s: {url}") from e
        except requests.RequestException as e:
            raise FeedTransportError(str(e) or e.__class__.__name__) from e
        return FetchResponse(status=response.status_code, body=response.content, reason=response.reason or "")


def fetch_feed(
    url: str,
    transport: Transport,
    *,
    headers: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> bytes:
    """
    Fetch a single feed URL and return the raw body.

    Raises FeedHTTPError on non-2xx statuses, FeedTimeoutError and
    FeedTransportError as raised by the transport.
    """
    logger.info("Fetching feed from: %s", url)
    response = transport.fetch(url, headers or DEFAULT_HEADERS, timeout)
    if not response.ok:
        logger.warning("Feed %s answered %d %s", url, response.status, response.reason)
        raise FeedHTTPError(response.status, response.reason)
    logger.debug("Fetched %d bytes from %s", len(response.body), url)
    return response.body
