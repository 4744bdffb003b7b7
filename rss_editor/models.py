from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence


EDITABLE_FIELDS = ("title", "details", "image", "publishDate")

# wire name -> attribute name
FIELD_ATTRIBUTES = {
    "title": "title",
    "details": "details",
    "image": "image",
    "publishDate": "publish_date",
}


@dataclass(frozen=True)
class Article:
    """
    Canonical record every feed dialect is normalized into.

    Created only by the normalizer; edits go through `rss_editor.editing`
    which returns new instances. `id` is positional (`article-<n>`) and never
    derived from feed content.
    """
    id: str
    title: str = ""
    details: str = ""
    image: str = ""
    publish_date: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "details": self.details,
            "image": self.image,
            "publishDate": self.publish_date,
        }


@dataclass(frozen=True)
class ParseResult:
    """Either a list of articles (success) or an error message, never both."""
    success: bool
    articles: Optional[List[Article]] = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, articles: Sequence[Article]) -> "ParseResult":
        return cls(success=True, articles=list(articles))

    @classmethod
    def fail(cls, error: str) -> "ParseResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class ValidationError:
    field: str
    message: str


@dataclass
class ChannelMetadata:
    """Channel-level values for export; `None` means use the serializer default."""
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    language: Optional[str] = None
    last_build_date: Optional[str] = None
