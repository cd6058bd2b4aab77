"""
RSS feed source implementation.

Fetches a feed through the shared text fetcher (so the request timeout and
User-Agent apply) and parses it with feedparser, which copes with RSS 2.0,
Atom and most malformed real-world XML.
"""

import calendar
import logging
from datetime import datetime, timezone
from typing import Callable, List, Optional

import feedparser

from hackradar.errors import FeedParseError
from hackradar.fetcher import fetch_text
from hackradar.models.feed_item import FeedItem
from hackradar.sources.base import Source

logger = logging.getLogger(__name__)


class RssFeedSource(Source):
    """
    A single named RSS/Atom feed.

    Entries provide:
    - Title
    - Article link
    - Publication date (published, falling back to updated)
    - Summary/description
    """

    def __init__(self, name: str, url: str, fetch: Callable[..., str] = None):
        """
        Initialize RssFeedSource.

        Args:
            name: Display name of the feed.
            url: Feed URL.
            fetch: Text fetcher, replaceable for testing. Defaults to fetch_text.
        """
        self._name = name
        self.url = url
        self._fetch = fetch or fetch_text

    @property
    def name(self) -> str:
        return self._name

    def fetch_items(self) -> List[FeedItem]:
        """
        Fetch the feed and normalize its entries.

        Raises:
            FetchError: If the feed could not be downloaded.
            FeedParseError: If the body is not a parseable feed.
        """
        body = self._fetch(self.url)
        feed = feedparser.parse(body)

        if feed.bozo and not feed.entries:
            raise FeedParseError(f"{self.url}: {feed.get('bozo_exception')}")

        items: List[FeedItem] = []
        for entry in feed.entries:
            item = self._normalize_entry(entry)
            if item is not None:
                items.append(item)

        logger.info("[feeds] %s: %d items", self.name, len(items))
        return items

    def _normalize_entry(self, entry) -> Optional[FeedItem]:
        """
        Convert a feedparser entry to a FeedItem.

        Returns:
            FeedItem if valid, None if title or link is missing.
        """
        title = str(entry.get("title") or "").strip()
        link = str(entry.get("link") or "").strip()
        if not title or not link:
            return None

        description = entry.get("summary") or entry.get("description")

        return FeedItem(
            title=title,
            link=link,
            source_name=self.name,
            published_at=self._parse_date(entry),
            description=str(description) if description else None,
        )

    @staticmethod
    def _parse_date(entry) -> Optional[datetime]:
        """Return the entry's publish (or update) time as an aware UTC datetime."""
        parsed = entry.get("published_parsed") or entry.get("updated_parsed")
        if not parsed:
            return None
        try:
            return datetime.fromtimestamp(calendar.timegm(parsed), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError, OSError):
            return None
