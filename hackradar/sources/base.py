"""
Base source abstraction for HackRadar.

Defines the abstract interface that all feed sources must implement.
"""

from abc import ABC, abstractmethod
from typing import List

from hackradar.models.feed_item import FeedItem


class Source(ABC):
    """
    Abstract base class for all feed sources.

    Each configured feed (MLH blog, Dev.to tag feed, ...) is wrapped in a
    Source so the reader can fetch them uniformly and isolate failures.

    Attributes:
        name: Human readable source name, reported in WinnersResponse.sources.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the display name of this source (e.g. "MLH Blog")."""
        pass

    @abstractmethod
    def fetch_items(self) -> List[FeedItem]:
        """
        Fetch and normalize the entries of this source.

        Implementations should:
        - Respect REQUEST_TIMEOUT from config
        - Skip entries that cannot be normalized (missing title or link)
        - Raise a HackRadarError when the source as a whole is unusable;
          the reader turns that into a failed SourceResult

        Returns:
            List of FeedItem instances (may be empty).
        """
        pass

    def __str__(self) -> str:
        return f"Source({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
