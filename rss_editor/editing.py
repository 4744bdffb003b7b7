from __future__ import annotations

import dataclasses
from typing import Iterable, List

from .models import Article, EDITABLE_FIELDS, FIELD_ATTRIBUTES


def update_article_field(articles: Iterable[Article], article_id: str, field: str, value: str) -> List[Article]:
    """
    Return a new list where only `field` of the article `article_id` is replaced.

    `field` is one of title/details/image/publishDate. Order and all other
    articles are kept as they are; an unknown id yields an unchanged copy.
    """
    if field not in EDITABLE_FIELDS:
        raise ValueError(f"Unknown article field: {field!r} (expected one of {', '.join(EDITABLE_FIELDS)})")
    attribute = FIELD_ATTRIBUTES[field]
    out: List[Article] = []
    for article in articles:
        if article.id == article_id:
            article = dataclasses.replace(article, **{attribute: value})
        out.append(article)
    return out
