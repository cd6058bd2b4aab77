"""
Feed reader.

Fetches every configured source with error isolation, merges their entries
and orders them newest first.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from hackradar.config import RSS_SOURCES
from hackradar.models.feed_item import FeedItem
from hackradar.sources.base import Source
from hackradar.sources.rss import RssFeedSource

logger = logging.getLogger(__name__)


@dataclass
class SourceResult:
    """Result of fetching from a single source."""
    source_name: str
    items_fetched: int
    success: bool
    error: Optional[str] = None
    duration_ms: float = 0.0


@dataclass
class FeedReadResult:
    """Merged items from all sources plus per-source diagnostics."""
    items: List[FeedItem] = field(default_factory=list)
    source_results: List[SourceResult] = field(default_factory=list)

    @property
    def sources_succeeded(self) -> int:
        return sum(1 for r in self.source_results if r.success)

    @property
    def sources_failed(self) -> int:
        return sum(1 for r in self.source_results if not r.success)


def default_sources(feeds: Iterable[tuple[str, str]] = None) -> List[Source]:
    """Build RssFeedSource instances for the configured (name, url) pairs."""
    return [RssFeedSource(name, url) for name, url in (feeds if feeds is not None else RSS_SOURCES)]


def fetch_from_source(source: Source) -> tuple[List[FeedItem], SourceResult]:
    """
    Fetch items from a single source with error isolation.

    Any exception raised by the source is recorded in the SourceResult and
    the source contributes no items.
    """
    start = time.monotonic()
    try:
        items = source.fetch_items()
    except Exception as e:
        duration_ms = (time.monotonic() - start) * 1000
        logger.warning("[feeds] %s failed: %s", source.name, e)
        return [], SourceResult(
            source_name=source.name,
            items_fetched=0,
            success=False,
            error=f"{type(e).__name__}: {e}",
            duration_ms=duration_ms,
        )

    duration_ms = (time.monotonic() - start) * 1000
    return items, SourceResult(
        source_name=source.name,
        items_fetched=len(items),
        success=True,
        duration_ms=duration_ms,
    )


def sort_newest_first(items: List[FeedItem]) -> List[FeedItem]:
    """Return items ordered by publish date, newest first; undated items last."""
    return sorted(items, key=lambda it: it.sort_key, reverse=True)


def read_feeds(sources: List[Source]) -> FeedReadResult:
    """
    Fetch all sources one after another and merge their items.

    One source failing does not affect others, and the call never raises
    because of a source.

    Args:
        sources: Sources to read, in configured order.

    Returns:
        FeedReadResult with items sorted newest first.
    """
    result = FeedReadResult()
    merged: List[FeedItem] = []

    for source in sources:
        items, source_result = fetch_from_source(source)
        merged.extend(items)
        result.source_results.append(source_result)

    result.items = sort_newest_first(merged)
    logger.info(
        "[feeds] %d items from %d/%d sources",
        len(result.items), result.sources_succeeded, len(sources),
    )
    return result
