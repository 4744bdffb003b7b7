from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .models import Article, ValidationError
from .urls import parse_absolute_url


TITLE_EMPTY_MESSAGE = "Title cannot be empty"
IMAGE_INVALID_MESSAGE = "Invalid URL format"
IMAGE_SCHEME_MESSAGE = "Image URL must use http:// or https://"


def validate_title(title: str) -> Optional[ValidationError]:
    if not title or not title.strip():
        return ValidationError(field="title", message=TITLE_EMPTY_MESSAGE)
    return None


def validate_image_url(image: str) -> Optional[ValidationError]:
    """Empty is fine (the image is optional); anything else must be an http(s) URL."""
    if not image or not image.strip():
        return None
    parts = parse_absolute_url(image)
    if parts is None:
        return ValidationError(field="image", message=IMAGE_INVALID_MESSAGE)
    if parts.scheme.lower() not in ("http", "https"):
        return ValidationError(field="image", message=IMAGE_SCHEME_MESSAGE)
    return None


def validate_article(article: Article) -> List[ValidationError]:
    """Title check first, then image check. An empty list means valid."""
    errors: List[ValidationError] = []
    for error in (validate_title(article.title), validate_image_url(article.image)):
        if error is not None:
            errors.append(error)
    return errors


def validate_articles(articles: Iterable[Article]) -> Dict[str, List[ValidationError]]:
    """
    Preflight check before export.

    Maps article id -> errors, leaving out valid articles. Any entry in the
    result blocks export.
    """
    out: Dict[str, List[ValidationError]] = {}
    for article in articles:
        errors = validate_article(article)
        if errors:
            out[article.id] = errors
    return out
