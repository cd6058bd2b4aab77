"""
Tests for project link extraction and metadata enrichment.

Tests URL classification against the project host table, anchor resolution,
Open Graph image/title lookup and failure tolerance.
"""

import pytest

from hackradar.errors import FetchError
from hackradar.extraction.links import (
    PROJECT_URL_PATTERNS,
    classify_project_url,
    extract_anchors,
    extract_project_links,
    find_project_links,
)
from hackradar.extraction.metadata import (
    build_project,
    enrich_project,
    parse_page_metadata,
    prettify_title_from_url,
)
from hackradar.models.winner_project import ProjectLink

from tests.fakes import FakeFetcher
from tests.test_config import (
    CONFIG,
    EMPTY_OG_PAGE,
    NO_META_PAGE,
    SMART_BIN_PAGE,
    TWITTER_ONLY_PAGE,
    WINNERS_ARTICLE_HTML,
    WINNERS_ARTICLE_URL,
)


# =============================================================================
# Test URL Classification
# =============================================================================

class TestClassifyProjectUrl:

    def test_pattern_table_order(self):
        assert [source for source, _ in PROJECT_URL_PATTERNS] == CONFIG["project_sources"]

    def test_github_repo(self):
        assert classify_project_url("https://github.com/acme/project") == "github"

    def test_unknown_host_is_discarded(self):
        assert classify_project_url("https://example.com/blog") is None

    @pytest.mark.parametrize("url, source", [
        ("https://devpost.com/software/smart-bin", "devpost"),
        ("https://hackmit.devpost.com/project-gallery", "devpost"),
        ("https://challengepost.com/software/old-one", "challengepost"),
        ("https://devfolio.co/projects/quiet-hours", "devfolio"),
        ("https://www.hackster.io/team/robot-arm", "hackster"),
        ("https://gitlab.com/team/ai-tutor", "gitlab"),
        ("https://medium.com/@dev/how-we-won-1234", "medium"),
    ])
    def test_known_hosts(self, url, source):
        assert classify_project_url(url) == source

    def test_bare_host_without_path_is_discarded(self):
        assert classify_project_url("https://github.com/") is None

    def test_non_http_schemes_are_discarded(self):
        assert classify_project_url("mailto:someone@github.com/x") is None
        assert classify_project_url("javascript:void(0)") is None

    def test_first_match_wins(self):
        # A devpost URL that mentions github in its path is still devpost
        assert classify_project_url("https://devpost.com/software/github.com/x") == "devpost"


# =============================================================================
# Test Anchor Extraction
# =============================================================================

class TestExtractAnchors:

    def test_resolves_relative_links_against_article(self):
        anchors = extract_anchors(WINNERS_ARTICLE_HTML, WINNERS_ARTICLE_URL)
        hrefs = [href for href, _ in anchors]
        assert "https://blog.example.com/2025/other-post" in hrefs

    def test_collapses_anchor_whitespace(self):
        anchors = dict(extract_anchors(WINNERS_ARTICLE_HTML, WINNERS_ARTICLE_URL))
        assert anchors["https://github.com/acme/smart-bin"] == "smart-bin repo"

    def test_skips_empty_href(self):
        html = '<a href="">empty</a><a href="https://github.com/a/b">b</a>'
        assert extract_anchors(html, "https://example.com/") == [("https://github.com/a/b", "b")]

    def test_uppercase_scheme_is_lowercased(self):
        html = '<a href="HTTPS://github.com/Acme/Project">p</a>'
        assert extract_anchors(html, "http://example.com/") == [("https://github.com/Acme/Project", "p")]

    def test_garbled_markup_is_tolerated(self):
        html = '<div><a href="https://github.com/a/b">unclosed <b>bold</div><a href="https://gitlab.com/c/d">d'
        hrefs = [href for href, _ in extract_anchors(html, "https://example.com/")]
        assert hrefs == ["https://github.com/a/b", "https://gitlab.com/c/d"]


class TestFindProjectLinks:

    def test_keeps_document_order_and_duplicates(self):
        links = find_project_links(WINNERS_ARTICLE_HTML, WINNERS_ARTICLE_URL)
        assert [link.href for link in links] == [
            "https://devpost.com/software/smart-bin",
            "https://github.com/acme/smart-bin",
            "https://devfolio.co/projects/quiet-hours",
            "https://devpost.com/software/smart-bin",
            "https://gitlab.com/team/ai-tutor",
        ]

    def test_links_carry_source_and_text(self):
        link = find_project_links(WINNERS_ARTICLE_HTML, WINNERS_ARTICLE_URL)[0]
        assert link == ProjectLink(
            href="https://devpost.com/software/smart-bin",
            anchor_text="Smart Bin",
            source="devpost",
        )


class TestExtractProjectLinks:

    def test_success_outcome(self):
        fetch = FakeFetcher({WINNERS_ARTICLE_URL: WINNERS_ARTICLE_HTML})
        outcome = extract_project_links(WINNERS_ARTICLE_URL, fetch=fetch)

        assert outcome.ok
        assert len(outcome.value) == 5
        assert fetch.urls == [WINNERS_ARTICLE_URL]

    def test_fetch_failure_is_skipped_not_raised(self):
        fetch = FakeFetcher({WINNERS_ARTICLE_URL: FetchError(WINNERS_ARTICLE_URL, "timed out after 15s")})
        outcome = extract_project_links(WINNERS_ARTICLE_URL, fetch=fetch)

        assert not outcome.ok
        assert outcome.value is None
        assert "timed out" in outcome.reason

    def test_page_without_links_is_empty_success(self):
        fetch = FakeFetcher({WINNERS_ARTICLE_URL: "<p>No links</p>"})
        outcome = extract_project_links(WINNERS_ARTICLE_URL, fetch=fetch)
        assert outcome.ok
        assert outcome.value == []


# =============================================================================
# Test Metadata Parsing
# =============================================================================

class TestParsePageMetadata:

    def test_og_image_resolved_against_page(self):
        meta = parse_page_metadata(SMART_BIN_PAGE, "https://devpost.com/software/smart-bin")
        assert meta.image == "https://devpost.com/images/smart-bin.png"

    def test_og_title_preferred_over_document_title(self):
        meta = parse_page_metadata(SMART_BIN_PAGE, "https://devpost.com/software/smart-bin")
        assert meta.title == "Smart Bin - recycling made easy"

    def test_twitter_image_and_document_title_fallback(self):
        meta = parse_page_metadata(TWITTER_ONLY_PAGE, "https://devfolio.co/projects/quiet-hours")
        assert meta.image == "https://cdn.example.com/qh.jpg"
        assert meta.title == "Quiet Hours"

    def test_empty_content_falls_through_to_next_selector(self):
        meta = parse_page_metadata(EMPTY_OG_PAGE, "https://gitlab.com/team/ai-tutor")
        assert meta.image == "https://cdn.example.com/fallback.png"

    def test_page_without_metadata(self):
        meta = parse_page_metadata(NO_META_PAGE, "https://www.hackster.io/team/robot-arm")
        assert meta.image is None
        assert meta.title is None


class TestPrettifyTitleFromUrl:

    def test_last_path_segment(self):
        assert prettify_title_from_url("https://devpost.com/software/smart-bin_v2") == "Smart Bin V2"

    def test_percent_decoding(self):
        assert prettify_title_from_url("https://github.com/acme/caf%C3%A9-app") == "Café App"

    def test_host_when_path_is_empty(self):
        assert prettify_title_from_url("https://github.com/") == "Github.Com"


# =============================================================================
# Test Enrichment
# =============================================================================

class TestEnrichProject:

    def _project(self, url, text="Smart Bin", source="devpost"):
        return build_project(ProjectLink(href=url, anchor_text=text, source=source), "2025-10-14T10:00:00Z")

    def test_adds_image_and_keeps_anchor_title(self):
        url = "https://devpost.com/software/smart-bin"
        fetch = FakeFetcher({url: SMART_BIN_PAGE})
        outcome = enrich_project(self._project(url), anchor_text="Smart Bin", fetch=fetch)

        assert outcome.ok
        assert outcome.value.image == "https://devpost.com/images/smart-bin.png"
        assert outcome.value.title == "Smart Bin"
        assert outcome.value.published_at == "2025-10-14T10:00:00Z"

    def test_uses_enrichment_timeout(self):
        url = "https://devpost.com/software/smart-bin"
        fetch = FakeFetcher({url: SMART_BIN_PAGE})
        enrich_project(self._project(url), anchor_text="Smart Bin", fetch=fetch, timeout=8)
        assert fetch.calls == [(url, 8)]

    def test_short_anchor_is_replaced_by_page_title(self):
        url = "https://devfolio.co/projects/quiet-hours"
        fetch = FakeFetcher({url: TWITTER_ONLY_PAGE})
        project = self._project(url, text="QH", source="devfolio")
        outcome = enrich_project(project, anchor_text="QH", fetch=fetch)
        assert outcome.value.title == "Quiet Hours"

    def test_empty_anchor_starts_from_url_title(self):
        project = self._project("https://gitlab.com/team/ai-tutor", text="", source="gitlab")
        assert project.title == "Ai Tutor"

    def test_timeout_degrades_but_keeps_project(self):
        url = "https://github.com/acme/slow"
        fetch = FakeFetcher({url: FetchError(url, "timed out after 8s")})
        project = self._project(url, text="Slow", source="github")
        outcome = enrich_project(project, anchor_text="Slow", fetch=fetch)

        assert not outcome.ok
        assert outcome.value is project
        assert outcome.value.image is None

    def test_does_not_mutate_input_project(self):
        url = "https://devpost.com/software/smart-bin"
        project = self._project(url)
        enrich_project(project, anchor_text="Smart Bin", fetch=FakeFetcher({url: SMART_BIN_PAGE}))
        assert project.image is None
