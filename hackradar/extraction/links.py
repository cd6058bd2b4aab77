"""
Project link extraction.

Loads an article page, collects every anchor, resolves it against the
article URL and keeps the ones pointing at a known project host.
Uses BeautifulSoup with the stdlib html.parser so garbled markup never
stops extraction.
"""

import logging
import re
from typing import Callable, List, Optional
from urllib.parse import urljoin, urlparse, urlunparse

from bs4 import BeautifulSoup

from hackradar.errors import FetchError
from hackradar.fetcher import fetch_text
from hackradar.models.winner_project import ProjectLink
from hackradar.outcome import StageOutcome

logger = logging.getLogger(__name__)


# Ordered (source, pattern) table; the first match wins
PROJECT_URL_PATTERNS: list[tuple[str, re.Pattern]] = [
    ("devpost", re.compile(r"(^|[/.])devpost\.com/.+")),
    ("challengepost", re.compile(r"challengepost\.com/.+")),
    ("devfolio", re.compile(r"devfolio\.co/.+")),
    ("hackster", re.compile(r"hackster\.io/.+")),
    ("github", re.compile(r"github\.com/.+")),
    ("gitlab", re.compile(r"gitlab\.com/.+")),
    ("medium", re.compile(r"medium\.com/.+")),
]


def classify_project_url(href: str) -> Optional[str]:
    """
    Match an absolute URL against the project host table.

    Args:
        href: Absolute URL.

    Returns:
        Source tag of the first matching pattern, or None.
    """
    if urlparse(href).scheme not in ("http", "https"):
        return None
    for source, pattern in PROJECT_URL_PATTERNS:
        if pattern.search(href):
            return source
    return None


def extract_anchors(html: str, base_url: str) -> List[tuple[str, str]]:
    """
    Collect (absolute href, anchor text) pairs in document order.

    Anchors whose href cannot be resolved are dropped.
    """
    soup = BeautifulSoup(html, "html.parser")
    anchors = []
    for a in soup.find_all("a", href=True):
        raw = a["href"].strip()
        if not raw:
            continue
        try:
            # Round-trip through urlparse so the scheme comes back lowercased
            href = urlunparse(urlparse(urljoin(base_url, raw)))
        except ValueError:
            continue
        text = " ".join(a.get_text(" ").split())
        anchors.append((href, text))
    return anchors


def find_project_links(html: str, base_url: str) -> List[ProjectLink]:
    """Return the anchors of a page that point at known project hosts."""
    links = []
    for href, text in extract_anchors(html, base_url):
        source = classify_project_url(href)
        if source is None:
            continue
        links.append(ProjectLink(href=href, anchor_text=text, source=source))
    return links


def extract_project_links(
    article_url: str,
    fetch: Callable[..., str] = None,
) -> StageOutcome:
    """
    Fetch an article and extract its project links.

    Args:
        article_url: Absolute URL of the article.
        fetch: Text fetcher, replaceable for testing. Defaults to fetch_text.

    Returns:
        StageOutcome whose value is a list of ProjectLink, or a skipped
        outcome when the page could not be fetched or parsed.
    """
    fetch = fetch or fetch_text

    try:
        html = fetch(article_url)
    except FetchError as e:
        logger.info("[links] Skipping article %s: %s", article_url, e.reason)
        return StageOutcome.skipped(f"fetch failed: {e.reason}")

    try:
        links = find_project_links(html, article_url)
    except Exception as e:
        logger.info("[links] Skipping article %s: parse error %s", article_url, e)
        return StageOutcome.skipped(f"parse failed: {e}")

    logger.debug("[links] %s: %d project links", article_url, len(links))
    return StageOutcome.success(links)
