"""
Project page metadata enrichment.

Best-effort lookup of a project's Open Graph image and title. Every failure
degrades the project (no image, anchor-derived title) instead of dropping it.
"""

import logging
import re
from dataclasses import dataclass, replace
from typing import Callable, Optional
from urllib.parse import unquote, urljoin, urlparse

from bs4 import BeautifulSoup

from hackradar.config import ENRICH_TIMEOUT
from hackradar.errors import FetchError
from hackradar.fetcher import fetch_text
from hackradar.models.winner_project import ProjectLink, WinnerProject
from hackradar.outcome import StageOutcome

logger = logging.getLogger(__name__)


# Checked in order; the first tag with a non-empty content attribute wins
OG_IMAGE_SELECTORS: list[str] = [
    'meta[property="og:image"]',
    'meta[name="og:image"]',
    'meta[name="twitter:image"]',
    'meta[property="twitter:image"]',
]

# Anchor texts shorter than this are replaced by the page title
MIN_TITLE_LENGTH = 3


@dataclass
class PageMetadata:
    """Metadata scraped from a project page."""
    image: Optional[str] = None
    title: Optional[str] = None


def prettify_title_from_url(url: str) -> str:
    """
    Derive a readable title from a URL's last path segment.

    "https://devpost.com/software/smart-bin_v2" -> "Smart Bin V2".
    Falls back to the host name, then to the URL itself.
    """
    try:
        parsed = urlparse(url)
    except ValueError:
        return url

    segments = [s for s in parsed.path.split("/") if s]
    raw = segments[-1] if segments else parsed.hostname
    if not raw:
        return url

    text = unquote(re.sub(r"[-_]+", " ", raw))
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)


def parse_page_metadata(html: str, base_url: str) -> PageMetadata:
    """
    Extract image and title from a page's markup.

    Args:
        html: Page markup.
        base_url: URL the page was fetched from, for resolving relative images.

    Returns:
        PageMetadata; fields are None when absent.
    """
    soup = BeautifulSoup(html, "html.parser")
    meta = PageMetadata()

    for selector in OG_IMAGE_SELECTORS:
        tag = soup.select_one(selector)
        content = (tag.get("content") or "").strip() if tag else ""
        if content:
            meta.image = urljoin(base_url, content)
            break

    og_title = soup.select_one('meta[property="og:title"]')
    title = (og_title.get("content") or "").strip() if og_title else ""
    if not title and soup.title is not None:
        title = " ".join(soup.title.get_text().split())
    meta.title = title or None

    return meta


def build_project(link: ProjectLink, published_at: Optional[str] = None) -> WinnerProject:
    """Create an unenriched WinnerProject from an extracted link."""
    return WinnerProject(
        title=link.anchor_text or prettify_title_from_url(link.href),
        url=link.href,
        source=link.source,
        image=None,
        published_at=published_at,
        description=None,
        tags=[],
    )


def enrich_project(
    project: WinnerProject,
    anchor_text: str = "",
    fetch: Callable[..., str] = None,
    timeout: Optional[float] = None,
) -> StageOutcome:
    """
    Fetch a project page and fill in its image and, if needed, its title.

    Args:
        project: Project built from the extracted link.
        anchor_text: Original anchor text; the page title replaces the
            project title when this is shorter than MIN_TITLE_LENGTH.
        fetch: Text fetcher, replaceable for testing. Defaults to fetch_text.
        timeout: Fetch timeout in seconds. Defaults to ENRICH_TIMEOUT.

    Returns:
        StageOutcome whose value is always a WinnerProject: the enriched copy
        on success, the original project when skipped.
    """
    fetch = fetch or fetch_text
    if timeout is None:
        timeout = ENRICH_TIMEOUT

    try:
        html = fetch(project.url, timeout=timeout)
    except FetchError as e:
        logger.debug("[metadata] %s not enriched: %s", project.url, e.reason)
        return StageOutcome.skipped(f"fetch failed: {e.reason}", value=project)

    try:
        meta = parse_page_metadata(html, project.url)
    except Exception as e:
        logger.debug("[metadata] %s not enriched: parse error %s", project.url, e)
        return StageOutcome.skipped(f"parse failed: {e}", value=project)

    changes = {}
    if meta.image:
        changes["image"] = meta.image
    if meta.title and len(anchor_text.strip()) < MIN_TITLE_LENGTH:
        changes["title"] = meta.title

    return StageOutcome.success(replace(project, **changes))
