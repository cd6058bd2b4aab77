"""
Configuration module for HackRadar.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of hackradar/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose logging (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

# Root log level name ("DEBUG", "INFO", "WARNING", ...)
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

# Port used when running the Flask app directly
PORT: int = int(os.getenv("PORT", "5001"))

# Message returned by /api/ping
PING_MESSAGE: str = os.getenv("PING_MESSAGE", "ping")

# Comma-separated list of allowed CORS origins ("*" for any)
CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")


# =============================================================================
# Fetching Configuration
# =============================================================================

# Timeout for feed and article fetches, in seconds
REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "15"))

# Timeout for per-project metadata fetches, in seconds
ENRICH_TIMEOUT: float = float(os.getenv("ENRICH_TIMEOUT", "8"))

# User agent sent with every outbound request
USER_AGENT: str = os.getenv(
    "USER_AGENT", "Mozilla/5.0 (HackRadar Hackathon Aggregator)"
)


# =============================================================================
# Winners Pipeline Configuration
# =============================================================================

# Default RSS sources as (name, url) pairs
DEFAULT_RSS_SOURCES: list[tuple[str, str]] = [
    ("MLH Blog", "https://mlh.io/blog/feed"),
    ("Dev.to #hackathon", "https://dev.to/feed/tag/hackathon"),
    ("Hashnode Townhall", "https://townhall.hashnode.com/rss"),
]


def parse_feed_list(raw: str) -> list[tuple[str, str]]:
    """
    Parse a feed list of the form "Name|url;Name|url".

    Entries without a "|" use the URL as the name. Blank entries are ignored.

    Args:
        raw: Raw environment value.

    Returns:
        List of (name, url) pairs.
    """
    feeds = []
    for chunk in raw.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        if "|" in chunk:
            name, url = chunk.split("|", 1)
            name, url = name.strip(), url.strip()
        else:
            name = url = chunk
        if url:
            feeds.append((name or url, url))
    return feeds


# Raw override for the RSS source list; empty means use the defaults
WINNERS_FEEDS: str = os.getenv("WINNERS_FEEDS", "")

RSS_SOURCES: list[tuple[str, str]] = parse_feed_list(WINNERS_FEEDS) or list(DEFAULT_RSS_SOURCES)

# How long a winners payload is served from cache, in seconds
WINNERS_CACHE_TTL: float = float(os.getenv("WINNERS_CACHE_TTL", "600"))

# Newest qualifying articles crawled per pass
MAX_ARTICLES: int = int(os.getenv("MAX_ARTICLES", "10"))

# Hard cap on projects per response
MAX_PROJECTS: int = int(os.getenv("MAX_PROJECTS", "50"))

# Worker threads for project page enrichment (1 = sequential)
ENRICH_WORKERS: int = int(os.getenv("ENRICH_WORKERS", "4"))


# =============================================================================
# Idea Generation Configuration
# =============================================================================

# OpenAI API key; ideas fall back to keyword rules when empty
OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")

OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")

OPENAI_API_URL: str = os.getenv(
    "OPENAI_API_URL", "https://api.openai.com/v1/chat/completions"
)

# Longest idea query accepted; longer queries are truncated
MAX_QUERY_CHARS: int = int(os.getenv("MAX_QUERY_CHARS", "2000"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def is_development() -> bool:
    """Check if running in development environment."""
    return APP_ENV == "development"


def validate_config() -> list[str]:
    """
    Validate configuration values.

    Returns:
        List of invalid configuration keys with reasons (empty if all valid).
    """
    errors = []

    if not RSS_SOURCES:
        errors.append("WINNERS_FEEDS must contain at least one feed")

    if REQUEST_TIMEOUT <= 0:
        errors.append("REQUEST_TIMEOUT must be positive")

    if ENRICH_TIMEOUT <= 0:
        errors.append("ENRICH_TIMEOUT must be positive")

    if WINNERS_CACHE_TTL < 0:
        errors.append("WINNERS_CACHE_TTL cannot be negative")

    if MAX_ARTICLES < 1:
        errors.append("MAX_ARTICLES must be at least 1")

    if MAX_PROJECTS < 1:
        errors.append("MAX_PROJECTS must be at least 1")

    if ENRICH_WORKERS < 1:
        errors.append("ENRICH_WORKERS must be at least 1")

    if MAX_QUERY_CHARS < 1:
        errors.append("MAX_QUERY_CHARS must be at least 1")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  LOG_LEVEL: {LOG_LEVEL}")
    print(f"  RSS_SOURCES: {', '.join(name for name, _ in RSS_SOURCES)}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  ENRICH_TIMEOUT: {ENRICH_TIMEOUT}s")
    print(f"  WINNERS_CACHE_TTL: {WINNERS_CACHE_TTL}s")
    print(f"  MAX_ARTICLES: {MAX_ARTICLES}")
    print(f"  MAX_PROJECTS: {MAX_PROJECTS}")
    print(f"  ENRICH_WORKERS: {ENRICH_WORKERS}")
    print(f"  OPENAI_API_KEY: {'***' if OPENAI_API_KEY else '(not set)'}")
    print(f"  OPENAI_MODEL: {OPENAI_MODEL}")
