"""
Feed sources module.

RSS sources and the reader that merges them.
"""

from hackradar.sources.base import Source
from hackradar.sources.rss import RssFeedSource
from hackradar.sources.reader import (
    FeedReadResult,
    SourceResult,
    default_sources,
    fetch_from_source,
    read_feeds,
    sort_newest_first,
)

__all__ = [
    "Source",
    "RssFeedSource",
    "FeedReadResult",
    "SourceResult",
    "default_sources",
    "fetch_from_source",
    "read_feeds",
    "sort_newest_first",
]
