"""
Winners Pipeline - Core aggregation logic.

This module orchestrates one aggregation pass:

    Feeds → Classifier → Link extraction → Metadata enrichment → Response

Steps:
1. Read every configured RSS source (with error isolation)
2. Keep the newest articles that look like winner announcements
3. Crawl each candidate article for links to project hosts
4. Deduplicate links by URL and stop at the project cap
5. Enrich each accepted project with its Open Graph image/title
6. Stamp the response with the capture time and the source names

Design principles:
- Error isolation: a bad feed, article or project page never fails the pass
- Ordering: articles newest first, links in document order, kept in output
- Bounded work: article and project caps cut the pass short, nothing is
  fetched past the cap
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, List, Optional

from hackradar.config import (
    ENRICH_TIMEOUT,
    ENRICH_WORKERS,
    MAX_ARTICLES,
    MAX_PROJECTS,
    RSS_SOURCES,
    WINNERS_CACHE_TTL,
)
from hackradar.cache import TTLCache, get_winners_cache
from hackradar.extraction.links import extract_project_links
from hackradar.extraction.metadata import build_project, enrich_project
from hackradar.models.feed_item import FeedItem
from hackradar.models.winner_project import WinnerProject, WinnersResponse
from hackradar.outcome import StageOutcome
from hackradar.scoring.classifier import select_candidate_articles
from hackradar.sources.base import Source
from hackradar.sources.reader import FeedReadResult, SourceResult, default_sources, read_feeds

logger = logging.getLogger(__name__)

WINNERS_CACHE_KEY = "winners"


# =============================================================================
# Pipeline Result Data Structures
# =============================================================================

@dataclass
class ArticleResult:
    """Result of crawling a single candidate article."""
    title: str
    url: str
    links_found: int = 0
    projects_accepted: int = 0
    skipped_reason: Optional[str] = None


@dataclass
class PipelineResult:
    """Complete result of one aggregation pass."""
    started_at: datetime
    finished_at: Optional[datetime] = None

    response: Optional[WinnersResponse] = None

    source_results: List[SourceResult] = field(default_factory=list)
    article_results: List[ArticleResult] = field(default_factory=list)

    total_items_read: int = 0
    candidate_articles: int = 0
    duplicates_skipped: int = 0
    links_rejected: int = 0
    projects_enriched: int = 0
    projects_degraded: int = 0
    cap_reached: bool = False

    @property
    def sources_succeeded(self) -> int:
        return sum(1 for r in self.source_results if r.success)

    @property
    def sources_failed(self) -> int:
        return sum(1 for r in self.source_results if not r.success)

    @property
    def articles_skipped(self) -> int:
        return sum(1 for r in self.article_results if r.skipped_reason)

    @property
    def project_count(self) -> int:
        return len(self.response.projects) if self.response else 0

    @property
    def duration_seconds(self) -> float:
        if self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return 0.0

    def to_summary(self) -> str:
        """Generate a human-readable summary."""
        lines = [
            "=" * 60,
            "WINNERS PASS SUMMARY",
            "=" * 60,
            f"Started:  {self.started_at.strftime('%Y-%m-%d %H:%M:%S')}",
            f"Duration: {self.duration_seconds:.2f}s",
            "",
            "Sources:",
        ]

        for sr in self.source_results:
            status = "✓" if sr.success else "✗"
            lines.append(f"  {status} {sr.source_name}: {sr.items_fetched} items ({sr.duration_ms:.0f}ms)")
            if sr.error:
                lines.append(f"      Error: {sr.error}")

        lines.extend([
            "",
            f"Feed items:         {self.total_items_read}",
            f"Candidate articles: {self.candidate_articles}",
            "",
            "Articles:",
        ])

        for ar in self.article_results:
            if ar.skipped_reason:
                lines.append(f"  ✗ {ar.title}: {ar.skipped_reason}")
            else:
                lines.append(f"  ✓ {ar.title}: {ar.projects_accepted}/{ar.links_found} links kept")

        lines.extend([
            "",
            f"Projects:   {self.project_count}{' (cap reached)' if self.cap_reached else ''}",
            f"Enriched:   {self.projects_enriched}",
            f"Degraded:   {self.projects_degraded}",
            f"Duplicates: {self.duplicates_skipped}",
            f"Rejected:   {self.links_rejected}",
            "=" * 60,
        ])
        return "\n".join(lines)


# =============================================================================
# Pipeline Configuration
# =============================================================================

@dataclass
class PipelineConfig:
    """
    Configuration for an aggregation pass.

    Defaults come from the environment; CLI arguments override them.
    """
    max_articles: int = MAX_ARTICLES
    max_projects: int = MAX_PROJECTS
    enrich_workers: int = ENRICH_WORKERS
    enrich_timeout: float = ENRICH_TIMEOUT
    feeds: List[tuple[str, str]] = field(default_factory=lambda: list(RSS_SOURCES))
    verbose: bool = False

    def __post_init__(self) -> None:
        for name in ("max_articles", "max_projects", "enrich_workers"):
            if getattr(self, name) < 1:
                raise ValueError(f"PipelineConfig.{name} must be at least 1, got {getattr(self, name)}")

    @property
    def source_names(self) -> List[str]:
        return [name for name, _ in self.feeds]


# =============================================================================
# Pipeline Class
# =============================================================================

class WinnersPipeline:
    """
    Aggregates hackathon winner projects from RSS-announced articles.

    Usage:
        pipeline = WinnersPipeline(PipelineConfig(max_projects=20))
        result = pipeline.run()
        payload = result.response.to_dict()
    """

    def __init__(
        self,
        config: PipelineConfig = None,
        sources: List[Source] = None,
        fetch: Callable[..., str] = None,
    ):
        """
        Initialize the pipeline.

        Args:
            config: Pass configuration. Defaults to PipelineConfig().
            sources: Feed sources. Defaults to RssFeedSource for each configured feed.
            fetch: Text fetcher for article and project pages. Defaults to fetch_text.
        """
        self.config = config or PipelineConfig()
        self._sources = sources
        self._fetch = fetch

    def _get_sources(self) -> List[Source]:
        if self._sources is not None:
            return self._sources
        return default_sources(self.config.feeds)

    def _source_names(self) -> List[str]:
        """Names reported in the response; the configured list, independent of fetch results."""
        if self._sources is not None:
            return [s.name for s in self._sources]
        return self.config.source_names

    def _enrich_batch(
        self,
        batch: List[tuple[WinnerProject, str]],
        executor: Optional[ThreadPoolExecutor],
    ) -> List[StageOutcome]:
        """
        Enrich a batch of projects, returning outcomes in batch order.

        With an executor the fetches overlap, but each outcome is stored at
        its original index so completion order never leaks into the output.
        """
        def enrich(entry: tuple[WinnerProject, str]) -> StageOutcome:
            project, anchor_text = entry
            return enrich_project(
                project,
                anchor_text=anchor_text,
                fetch=self._fetch,
                timeout=self.config.enrich_timeout,
            )

        if executor is None or len(batch) < 2:
            return [enrich(entry) for entry in batch]

        outcomes: List[Optional[StageOutcome]] = [None] * len(batch)
        futures = [(i, executor.submit(enrich, entry)) for i, entry in enumerate(batch)]
        for i, future in futures:
            outcomes[i] = future.result()
        return outcomes

    def _process_article(
        self,
        article: FeedItem,
        projects: List[WinnerProject],
        seen: set,
        result: PipelineResult,
        executor: Optional[ThreadPoolExecutor],
    ) -> None:
        """Crawl one article and append its new projects, honouring the cap."""
        article_result = ArticleResult(title=article.title, url=article.link)
        result.article_results.append(article_result)

        outcome = extract_project_links(article.link, fetch=self._fetch)
        if not outcome.ok:
            article_result.skipped_reason = outcome.reason
            return

        links = outcome.value
        article_result.links_found = len(links)

        batch: List[tuple[WinnerProject, str]] = []
        for link in links:
            if len(projects) + len(batch) >= self.config.max_projects:
                result.cap_reached = True
                break
            if link.href in seen:
                result.duplicates_skipped += 1
                continue
            seen.add(link.href)
            try:
                project = build_project(link, article.published_iso)
            except ValueError as e:
                logger.info("[winners] Rejected link %s: %s", link.href, e)
                result.links_rejected += 1
                continue
            batch.append((project, link.anchor_text))

        for enriched in self._enrich_batch(batch, executor):
            if enriched.ok:
                result.projects_enriched += 1
            else:
                result.projects_degraded += 1
            projects.append(enriched.value)

        article_result.projects_accepted = len(batch)
        if len(projects) >= self.config.max_projects:
            result.cap_reached = True

    def run(self) -> PipelineResult:
        """
        Execute one aggregation pass.

        Returns:
            PipelineResult whose response is always set when run() returns.

        Raises:
            Exception: Only for failures outside the per-stage guards.
        """
        result = PipelineResult(started_at=datetime.now())
        sources = self._get_sources()

        if self.config.verbose:
            logger.info("[winners] Initialized %d sources: %s", len(sources), [s.name for s in sources])

        feed_result: FeedReadResult = read_feeds(sources)
        result.source_results = feed_result.source_results
        result.total_items_read = len(feed_result.items)

        candidates = select_candidate_articles(feed_result.items, self.config.max_articles)
        result.candidate_articles = len(candidates)
        logger.info("[winners] %d candidate articles", len(candidates))

        projects: List[WinnerProject] = []
        seen: set = set()

        workers = max(1, self.config.enrich_workers)
        executor = ThreadPoolExecutor(max_workers=workers) if workers > 1 else None
        try:
            for article in candidates:
                if len(projects) >= self.config.max_projects:
                    result.cap_reached = True
                    break
                self._process_article(article, projects, seen, result, executor)
        finally:
            if executor is not None:
                executor.shutdown(wait=True)

        result.response = WinnersResponse(
            projects=projects,
            fetched_at=datetime.now(timezone.utc),
            sources=self._source_names(),
        )
        result.finished_at = datetime.now()

        logger.info(
            "[winners] %d projects (%d enriched, %d degraded, %d articles skipped) in %.1fs",
            len(projects), result.projects_enriched, result.projects_degraded,
            result.articles_skipped, result.duration_seconds,
        )
        return result


# =============================================================================
# Convenience Functions
# =============================================================================

def run_pipeline(
    max_articles: int = None,
    max_projects: int = None,
    enrich_workers: int = None,
    verbose: bool = False,
) -> PipelineResult:
    """
    Run one aggregation pass with the given overrides.

    Convenience function for programmatic use and the CLI.
    """
    config = PipelineConfig(
        max_articles=MAX_ARTICLES if max_articles is None else max_articles,
        max_projects=MAX_PROJECTS if max_projects is None else max_projects,
        enrich_workers=ENRICH_WORKERS if enrich_workers is None else enrich_workers,
        verbose=verbose,
    )
    return WinnersPipeline(config).run()


def get_winners(
    cache: TTLCache = None,
    ttl: float = None,
    pipeline_factory: Callable[[], WinnersPipeline] = None,
) -> WinnersResponse:
    """
    Serve the winners payload, refreshing it at most once per TTL.

    Concurrent callers that miss the cache share a single pipeline run.

    Args:
        cache: Cache to use. Defaults to the process-wide winners cache.
        ttl: Seconds a payload stays fresh. Defaults to WINNERS_CACHE_TTL.
        pipeline_factory: Builds the pipeline on a miss. Defaults to WinnersPipeline.

    Returns:
        The cached or freshly computed WinnersResponse.
    """
    cache = cache if cache is not None else get_winners_cache()
    ttl = WINNERS_CACHE_TTL if ttl is None else ttl
    factory = pipeline_factory or WinnersPipeline

    def refresh() -> WinnersResponse:
        try:
            return factory().run().response
        except Exception:
            logger.exception("[winners] Pipeline failed")
            raise

    return cache.get_or_refresh(WINNERS_CACHE_KEY, ttl, refresh)
