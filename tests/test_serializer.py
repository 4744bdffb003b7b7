"""Tests for the XML serializer."""

from datetime import datetime, timezone

from rss_editor.models import Article, ChannelMetadata
from rss_editor.normalizer import normalize
from rss_editor.serializer import escape_xml, serialize, serialize_bytes
from rss_editor.xmltree import parse_xml

FROZEN = datetime(2026, 10, 18, 12, 0, 0, tzinfo=timezone.utc)


class TestEscapeXml:
    def test_ampersand_first(self):
        assert escape_xml('A & B < "C"') == "A &amp; B &lt; &quot;C&quot;"

    def test_all_five(self):
        assert escape_xml("&<>\"'") == "&amp;&lt;&gt;&quot;&apos;"

    def test_existing_entity_is_escaped_once(self):
        assert escape_xml("&amp;") == "&amp;amp;"


class TestSerialize:
    def test_exact_document(self):
        article = Article(
            id="article-0",
            title="Tom & Jerry",
            details="<p>hi</p>",
            image="https://example.com/a.png",
            publish_date="Mon, 01 Jan 2024 12:00:00 GMT",
        )

        xml = serialize([article], now=FROZEN)

        assert xml == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<rss version="2.0">\n'
            "  <channel>\n"
            "    <title>RSS Feed</title>\n"
            "    <description>Generated RSS Feed</description>\n"
            "    <link></link>\n"
            "    <language>en-US</language>\n"
            "    <lastBuildDate>Sun, 18 Oct 2026 12:00:00 GMT</lastBuildDate>\n"
            "    <generator>rss-editor</generator>\n"
            "    <news-topic>\n"
            "      <article-title>Tom &amp; Jerry</article-title>\n"
            "      <article-details>&lt;p&gt;hi&lt;/p&gt;</article-details>\n"
            "      <article-image>https://example.com/a.png</article-image>\n"
            "      <article-publish-date>Mon, 01 Jan 2024 12:00:00 GMT</article-publish-date>\n"
            "    </news-topic>\n"
            "  </channel>\n"
            "</rss>\n"
        )

    def test_channel_metadata_is_escaped(self):
        channel = ChannelMetadata(
            title="Mine & yours",
            description="d",
            link="https://example.com",
            language="fr-FR",
            last_build_date="Mon, 01 Jan 2024 00:00:00 GMT",
        )

        xml = serialize([], channel)

        assert "<title>Mine &amp; yours</title>" in xml
        assert "<link>https://example.com</link>" in xml
        assert "<language>fr-FR</language>" in xml
        assert "<lastBuildDate>Mon, 01 Jan 2024 00:00:00 GMT</lastBuildDate>" in xml

    def test_deterministic_with_frozen_clock(self, articles):
        assert serialize(articles, now=FROZEN) == serialize(articles, now=FROZEN)

    def test_preserves_input_order(self, articles):
        xml = serialize(list(reversed(articles)), now=FROZEN)

        assert xml.index("Second") < xml.index("Tom &amp; Jerry")

    def test_bytes_are_utf8(self):
        data = serialize_bytes([Article(id="article-0", title="Café")], now=FROZEN)

        assert "Café".encode("utf-8") in data


class TestRoundTrip:
    def test_normalize_of_serialize_restores_fields(self, articles):
        result = normalize(parse_xml(serialize(articles, now=FROZEN)))

        assert result.success
        restored = [(a.title, a.details, a.image, a.publish_date) for a in result.articles]
        original = [(a.title, a.details, a.image, a.publish_date) for a in articles]
        assert restored == original

    def test_edge_whitespace_is_trimmed_on_reparse(self):
        padded = Article(
            id="article-0",
            title="  Title  ",
            details="\n  body text\t ",
            image=" ",
            publish_date=" 2024 ",
        )

        xml = serialize([padded], now=FROZEN)
        restored = normalize(parse_xml(xml)).articles[0]

        assert "<article-details>\n  body text\t </article-details>" in xml
        assert (restored.title, restored.details, restored.image, restored.publish_date) == (
            "Title",
            "body text",
            "",
            "2024",
        )

    def test_output_is_well_formed(self, articles):
        doc = parse_xml(serialize_bytes(articles, now=FROZEN))

        assert doc.name == "rss"
        assert doc.get("version") == "2.0"
