"""CLI for extracting, editing and re-exporting feed articles."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from .config import load_config
from .core import FeedEditor
from .dates import is_valid_date
from .editing import update_article_field
from .exceptions import ExportBlockedError
from .models import Article, ChannelMetadata
from .serializer import DEFAULT_FILENAME

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_PARSE_FAILED = 1
EXIT_EXPORT_BLOCKED = 2


def parse_edit(value: str) -> Tuple[str, str, str]:
    """`article-0:title=New title` -> ("article-0", "title", "New title")."""
    target, sep, new_value = value.partition("=")
    article_id, colon, field = target.partition(":")
    if not sep or not colon or not article_id or not field:
        raise argparse.ArgumentTypeError(f"expected ID:FIELD=VALUE, got {value!r}")
    return article_id, field, new_value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="rss-editor", description="Extract, edit and re-export feed articles")
    sub = parser.add_subparsers(dest="command", required=True)

    def add_export_args(p: argparse.ArgumentParser) -> None:
        p.add_argument(
            "-o",
            "--output",
            help=f"Write the XML to this file, or to {DEFAULT_FILENAME} inside this directory (default: stdout)",
        )
        p.add_argument(
            "--set",
            dest="edits",
            action="append",
            type=parse_edit,
            default=[],
            metavar="ID:FIELD=VALUE",
            help="Replace one field of one article (repeatable)",
        )
        p.add_argument("--title", help="Channel title")
        p.add_argument("--description", help="Channel description")
        p.add_argument("--language", help="Channel language")

    fetch = sub.add_parser("fetch", help="Fetch a feed URL and export it")
    fetch.add_argument("url")
    add_export_args(fetch)

    convert = sub.add_parser("convert", help="Convert a local feed file")
    convert.add_argument("path", type=Path)
    add_export_args(convert)

    show = sub.add_parser("show", help="Print extracted articles as JSON lines")
    show.add_argument("url")

    return parser


def _apply_edits(articles: List[Article], edits: Sequence[Tuple[str, str, str]]) -> List[Article]:
    for article_id, field, value in edits:
        if not any(a.id == article_id for a in articles):
            logger.warning("No article with id %s; edit ignored", article_id)
        articles = update_article_field(articles, article_id, field, value)
    return articles


def _export(editor: FeedEditor, articles: List[Article], args: argparse.Namespace, source_url: Optional[str]) -> int:
    try:
        articles = _apply_edits(articles, args.edits)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_EXPORT_BLOCKED

    for article in articles:
        if article.publish_date and not is_valid_date(article.publish_date):
            logger.warning("%s has an unrecognised publish date: %r", article.id, article.publish_date)

    channel = ChannelMetadata(title=args.title, description=args.description, language=args.language)
    try:
        xml = editor.export(articles, source_url=source_url, channel=channel)
    except ExportBlockedError as e:
        for article_id, errors in e.errors.items():
            for error in errors:
                print(f"{article_id}: {error.field}: {error.message}", file=sys.stderr)
        return EXIT_EXPORT_BLOCKED

    if args.output:
        target = Path(args.output)
        if target.is_dir():
            target = target / DEFAULT_FILENAME
        target.write_text(xml, encoding="utf-8")
        logger.info("Wrote %d article(s) to %s", len(articles), target)
    else:
        sys.stdout.write(xml)
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(asctime)s - %(levelname)s - %(message)s")
    editor = FeedEditor(config=config)

    if args.command == "convert":
        result = editor.parse_text(args.path.read_bytes())
        source_url = None
    else:
        result = editor.parse(args.url)
        source_url = args.url

    if not result.success:
        print(f"error: {result.error}", file=sys.stderr)
        return EXIT_PARSE_FAILED

    if args.command == "show":
        for article in result.articles:
            print(json.dumps(article.to_dict(), ensure_ascii=False))
        return EXIT_OK

    return _export(editor, result.articles, args, source_url)


if __name__ == "__main__":
    sys.exit(main())
