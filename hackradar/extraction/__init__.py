"""
Extraction module.

Pulls project links out of article pages and enriches them with page metadata.
"""

from hackradar.extraction.links import (
    PROJECT_URL_PATTERNS,
    classify_project_url,
    extract_anchors,
    extract_project_links,
    find_project_links,
)
from hackradar.extraction.metadata import (
    OG_IMAGE_SELECTORS,
    PageMetadata,
    build_project,
    enrich_project,
    parse_page_metadata,
    prettify_title_from_url,
)

__all__ = [
    "PROJECT_URL_PATTERNS",
    "classify_project_url",
    "extract_anchors",
    "extract_project_links",
    "find_project_links",
    "OG_IMAGE_SELECTORS",
    "PageMetadata",
    "build_project",
    "enrich_project",
    "parse_page_metadata",
    "prettify_title_from_url",
]
