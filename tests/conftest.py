import pytest

from rss_editor.models import Article


CUSTOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss>
  <news-topic>
    <article-title>  </article-title>
    <article-details>dropped</article-details>
  </news-topic>
  <news-topic>
    <article-title> Second story </article-title>
    <article-details>Body text</article-details>
    <article-image>https://example.com/b.png</article-image>
    <article-publish-date>Mon, 01 Jan 2024 12:00:00 GMT</article-publish-date>
  </news-topic>
</rss>
"""

RSS_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:media="http://search.yahoo.com/mrss/">
  <channel>
    <title>Example</title>
    <item>
      <title>Enclosure wins</title>
      <description><![CDATA[<p>Hello <img src="http://y/b.jpg"></p>]]></description>
      <pubDate>Mon, 01 Jan 2024 12:00:00 GMT</pubDate>
      <media:content url="http://m/c.jpg" medium="image"/>
      <enclosure type="image/jpeg" url="http://x/a.jpg" length="100"/>
    </item>
    <item>
      <title>Media wins</title>
      <description><![CDATA[<img src='http://y/b.jpg'>]]></description>
      <enclosure type="audio/mpeg" url="http://x/a.mp3"/>
      <media:content url="http://m/c.jpg"/>
    </item>
    <item>
      <title>Scraped</title>
      <description><![CDATA[<p>Intro</p><IMG class="lead" SRC="http://y/b.jpg"/>]]></description>
    </item>
    <item>
      <title>No image</title>
      <description>Plain text</description>
    </item>
  </channel>
</rss>
"""

ATOM_FEED = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <entry>
    <title>Atom one</title>
    <content>Full content</content>
    <summary>Short summary</summary>
    <updated>2024-01-02T00:00:00Z</updated>
    <published>2024-01-01T00:00:00Z</published>
    <link rel="alternate" href="https://example.com/1"/>
    <link rel="enclosure" type="image/png" href="https://example.com/1.png"/>
  </entry>
  <entry>
    <title>Atom two</title>
    <content>Only content</content>
    <updated>2024-01-03T00:00:00Z</updated>
  </entry>
</feed>
"""


@pytest.fixture
def custom_feed():
    return CUSTOM_FEED


@pytest.fixture
def rss_feed():
    return RSS_FEED


@pytest.fixture
def atom_feed():
    return ATOM_FEED


@pytest.fixture
def articles():
    return [
        Article(
            id="article-0",
            title="Tom & Jerry <live>",
            details='<p>He said "hi" & it\'s fine</p>',
            image="https://example.com/a.png",
            publish_date="Mon, 01 Jan 2024 12:00:00 GMT",
        ),
        Article(id="article-1", title="Second", details="", image="", publish_date=""),
    ]
