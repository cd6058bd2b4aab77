"""
Article classifier.

Pure, side-effect-free predicates that flag feed items likely to be
hackathon winner announcements. This is a heuristic filter: precision is
traded for simplicity.
"""

from typing import Iterable, List

from hackradar.models.feed_item import FeedItem
from hackradar.scoring.hints import WINNER_HINTS


def _haystack(item: FeedItem) -> str:
    return f"{item.title} {item.description or ''}".lower()


def matched_hints(item: FeedItem, hints: Iterable[str] = WINNER_HINTS) -> List[str]:
    """
    Return the hints found in the item's title and description.

    Args:
        item: Feed item to inspect.
        hints: Lowercase vocabulary to look for.

    Returns:
        Matching hints in vocabulary order (empty if none).
    """
    text = _haystack(item)
    return [h for h in hints if h in text]


def is_likely_winners_article(item: FeedItem, hints: Iterable[str] = WINNER_HINTS) -> bool:
    """True when any hint occurs in the item's title or description."""
    text = _haystack(item)
    return any(h in text for h in hints)


def select_candidate_articles(items: List[FeedItem], limit: int) -> List[FeedItem]:
    """
    Keep the first `limit` qualifying items, preserving input order.

    Callers pass items sorted newest first, so this yields the newest
    candidates.
    """
    candidates = [it for it in items if is_likely_winners_article(it)]
    return candidates[:limit]
