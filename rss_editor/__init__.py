"""
rss_editor

A small library that reads RSS 2.0, Atom and `news-topic` feeds into one
article shape, lets callers edit the articles, and writes them back out as XML.

Core ideas:
- Input: a feed URL (or raw feed XML)
- Process: fetch → parse XML → detect dialect → normalize → edit → validate → serialize
- Output: a normalized `news-topic` XML document

Example
-------
from rss_editor import FeedEditor, update_article_field

editor = FeedEditor()
result = editor.parse("https://feeds.bbci.co.uk/news/rss.xml")
if not result.success:
    raise SystemExit(result.error)

articles = update_article_field(result.articles, "article-0", "title", "Edited headline")
xml = editor.export(articles, source_url="https://feeds.bbci.co.uk/news/rss.xml")
"""
from .models import Article, ChannelMetadata, ParseResult, ValidationError
from .core import FeedEditor
from .editing import update_article_field
from .normalizer import Dialect, detect_dialect, normalize
from .serializer import escape_xml, serialize
from .validation import validate_article, validate_articles

__all__ = [
    "Article",
    "ChannelMetadata",
    "ParseResult",
    "ValidationError",
    "FeedEditor",
    "update_article_field",
    "Dialect",
    "detect_dialect",
    "normalize",
    "escape_xml",
    "serialize",
    "validate_article",
    "validate_articles",
]
