"""
Pytest Configuration and Fixtures

This module provides:
- Console summary of results per test category
- Shared fixtures for all tests (fake fetcher, sources, cache, Flask client)
- Test category markers
"""

import pytest
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Any

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.fakes import FakeFetcher
from tests.test_config import CONFIG, EXPECTED, TEST_DATA, FEED_URL, SECOND_FEED_URL


# =============================================================================
# PYTEST HOOKS FOR CONSOLE SUMMARY
# =============================================================================

class TestResultCollector:
    """Collects test results for the end-of-run summary."""

    def __init__(self):
        self.results: List[Dict[str, Any]] = []
        self.start_time: datetime = None
        self.categories: Dict[str, List[Dict]] = {}

    def add_result(self, nodeid: str, outcome: str, duration: float):
        # nodeid format: tests/test_pipeline.py::TestClass::test_method
        filename = nodeid.split("::")[0].split("/")[-1]
        category = filename.replace("test_", "").replace(".py", "")

        result = {"nodeid": nodeid, "outcome": outcome, "duration": duration}
        self.results.append(result)
        self.categories.setdefault(category, []).append(result)

    def get_summary(self) -> Dict[str, int]:
        return {
            "total": len(self.results),
            "passed": sum(1 for r in self.results if r["outcome"] == "passed"),
            "failed": sum(1 for r in self.results if r["outcome"] == "failed"),
            "skipped": sum(1 for r in self.results if r["outcome"] == "skipped"),
        }


_collector = TestResultCollector()


def pytest_configure(config):
    """Register custom markers and start the collector."""
    config.addinivalue_line("markers", "source_resilience: Feed source error isolation tests")
    config.addinivalue_line("markers", "ordering: Output ordering guarantees")
    config.addinivalue_line("markers", "caching: Cache freshness and single-flight tests")
    _collector.start_time = datetime.now()


def pytest_runtest_logreport(report):
    """Called after each test phase."""
    if report.when == "call":
        _collector.add_result(report.nodeid, report.outcome, report.duration)


def pytest_sessionfinish(session, exitstatus):
    """Print a per-category summary."""
    summary = _collector.get_summary()
    if not summary["total"]:
        return

    print("\n" + "=" * 60)
    print("TEST RUN COMPLETE")
    print("=" * 60)
    for category, results in sorted(_collector.categories.items()):
        passed = sum(1 for r in results if r["outcome"] == "passed")
        print(f"  {category:<24} {passed}/{len(results)} passed")
    print("-" * 60)
    print(f"Total: {summary['total']} | Passed: {summary['passed']} | Failed: {summary['failed']} | Skipped: {summary['skipped']}")
    print(f"Pass Rate: {(summary['passed'] / max(summary['total'], 1) * 100):.1f}%")
    print("=" * 60)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def test_config():
    """Provide access to test configuration."""
    return CONFIG


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def fake_fetch():
    """FakeFetcher serving the sample feeds and pages."""
    return FakeFetcher({**TEST_DATA["feeds"], **TEST_DATA["pages"]})


@pytest.fixture
def sample_sources(fake_fetch):
    """Two RSS sources backed by the fake fetcher."""
    from hackradar.sources.rss import RssFeedSource

    return [
        RssFeedSource("Example Blog", FEED_URL, fetch=fake_fetch),
        RssFeedSource("Example News", SECOND_FEED_URL, fetch=fake_fetch),
    ]


@pytest.fixture
def sequential_config():
    """Pipeline config with sequential enrichment and default caps."""
    from hackradar.pipeline import PipelineConfig

    return PipelineConfig(
        max_articles=10,
        max_projects=50,
        enrich_workers=1,
        enrich_timeout=8,
        feeds=[("Example Blog", FEED_URL), ("Example News", SECOND_FEED_URL)],
    )


@pytest.fixture
def fake_clock():
    """Manually advanced monotonic clock."""
    class Clock:
        def __init__(self):
            self.now = 1000.0

        def __call__(self) -> float:
            return self.now

        def advance(self, seconds: float) -> None:
            self.now += seconds

    return Clock()


@pytest.fixture
def fresh_cache(fake_clock):
    """TTLCache driven by the fake clock."""
    from hackradar.cache import TTLCache

    return TTLCache(clock=fake_clock)


@pytest.fixture
def client():
    """Flask test client."""
    from web.app import app

    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
