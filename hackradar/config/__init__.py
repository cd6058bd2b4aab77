"""
Configuration module.

Handles environment variables, API keys, and application settings.
"""

from hackradar.config.config import (
    APP_ENV,
    DEBUG,
    LOG_LEVEL,
    PORT,
    PING_MESSAGE,
    CORS_ORIGINS,
    REQUEST_TIMEOUT,
    ENRICH_TIMEOUT,
    USER_AGENT,
    DEFAULT_RSS_SOURCES,
    WINNERS_FEEDS,
    RSS_SOURCES,
    WINNERS_CACHE_TTL,
    MAX_ARTICLES,
    MAX_PROJECTS,
    ENRICH_WORKERS,
    OPENAI_API_KEY,
    OPENAI_MODEL,
    OPENAI_API_URL,
    MAX_QUERY_CHARS,
    parse_feed_list,
    is_production,
    is_development,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "LOG_LEVEL",
    "PORT",
    "PING_MESSAGE",
    "CORS_ORIGINS",
    "REQUEST_TIMEOUT",
    "ENRICH_TIMEOUT",
    "USER_AGENT",
    "DEFAULT_RSS_SOURCES",
    "WINNERS_FEEDS",
    "RSS_SOURCES",
    "WINNERS_CACHE_TTL",
    "MAX_ARTICLES",
    "MAX_PROJECTS",
    "ENRICH_WORKERS",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_API_URL",
    "MAX_QUERY_CHARS",
    "parse_feed_list",
    "is_production",
    "is_development",
    "validate_config",
    "print_config_summary",
]
