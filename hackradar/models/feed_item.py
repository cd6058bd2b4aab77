"""
Feed item model.

A FeedItem is one entry read from an RSS source. It only lives for the
duration of an aggregation pass: the classifier decides whether it is a
winner announcement and the link extractor crawls its page.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass
class FeedItem:
    """
    A normalized RSS entry.

    Attributes:
        title: Entry title (required).
        link: Absolute URL of the article (required, identifies the item).
        source_name: Name of the feed the entry came from.
        published_at: Publish time (timezone-aware, UTC) if the feed gave a parseable date.
        description: Entry summary/description, raw markup allowed.
    """

    title: str
    link: str
    source_name: str = ""
    published_at: Optional[datetime] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate required fields.

        Raises:
            ValueError: If title or link is missing.
        """
        errors = []

        if not self.title or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if not self.link or not self.link.strip():
            errors.append("link is required and cannot be empty")

        if errors:
            raise ValueError(f"FeedItem validation failed: {'; '.join(errors)}")

    @property
    def sort_key(self) -> datetime:
        """Publish time used for newest-first ordering; undated items sort as the epoch."""
        return self.published_at or EPOCH

    @property
    def published_iso(self) -> Optional[str]:
        """Publish time as an ISO-8601 string, or None."""
        if self.published_at is None:
            return None
        return self.published_at.isoformat().replace("+00:00", "Z")

    def __str__(self) -> str:
        return f"[{self.source_name or 'feed'}] {self.title}"
