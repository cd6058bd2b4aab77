"""
Data models module.

Defines data structures for feed items, winner projects and idea suggestions.
"""

from hackradar.models.feed_item import FeedItem
from hackradar.models.winner_project import (
    PROJECT_SOURCES,
    ProjectLink,
    WinnerProject,
    WinnersResponse,
)
from hackradar.models.idea import IdeaItem, IdeasResponse

__all__ = [
    "FeedItem",
    "PROJECT_SOURCES",
    "ProjectLink",
    "WinnerProject",
    "WinnersResponse",
    "IdeaItem",
    "IdeasResponse",
]
