"""
Winner project models.

ProjectLink is what the link extractor pulls out of an article; WinnerProject
is the externally visible unit served by /api/winners; WinnersResponse is the
payload that gets cached.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


# Project hosting sites recognised by the link extractor, in match order
PROJECT_SOURCES: tuple[str, ...] = (
    "devpost",
    "challengepost",
    "devfolio",
    "hackster",
    "github",
    "gitlab",
    "medium",
)


def to_iso(dt: datetime) -> str:
    """Render a datetime as ISO-8601 with a trailing Z for UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class ProjectLink:
    """An anchor from an article page whose URL matched a project host."""

    href: str
    anchor_text: str
    source: str


@dataclass
class WinnerProject:
    """
    A project linked from a winner announcement article.

    Attributes:
        title: Anchor text, a title derived from the URL, or the page title.
        url: Absolute project URL. Unique within one response.
        source: Hosting site tag (one of PROJECT_SOURCES).
        image: Open Graph / Twitter card image URL, if one was found.
        published_at: Publish time of the article that linked the project.
        description: Reserved; always None at present.
        tags: Reserved; always empty at present.
    """

    title: str
    url: str
    source: str
    image: Optional[str] = None
    published_at: Optional[str] = None
    description: Optional[str] = None
    tags: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """
        Validate that required fields are present and valid.

        Raises:
            ValueError: If validation fails.
        """
        errors = []

        if not self.url or not self.url.lower().startswith(("http://", "https://")):
            errors.append(f"url must start with http:// or https://, got {self.url!r}")

        if self.source not in PROJECT_SOURCES:
            errors.append(f"source must be one of {', '.join(PROJECT_SOURCES)}, got {self.source!r}")

        if errors:
            raise ValueError(f"WinnerProject validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        """Convert to the JSON wire shape."""
        return {
            "title": self.title,
            "url": self.url,
            "source": self.source,
            "image": self.image,
            "publishedAt": self.published_at,
            "description": self.description,
            "tags": list(self.tags),
        }

    def __str__(self) -> str:
        return f"[{self.source}] {self.title} <{self.url}>"


@dataclass
class WinnersResponse:
    """Payload of /api/winners."""

    projects: list[WinnerProject]
    fetched_at: datetime
    sources: list[str]

    def to_dict(self) -> dict:
        """Convert to the JSON wire shape."""
        return {
            "projects": [p.to_dict() for p in self.projects],
            "fetchedAt": to_iso(self.fetched_at),
            "sources": list(self.sources),
        }
