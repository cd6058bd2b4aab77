"""
Exception types for HackRadar.

Every stage of the winners pipeline converts these into skipped outcomes, so
they only escape to callers of the low-level helpers.
"""


class HackRadarError(Exception):
    """Base class for all HackRadar errors."""


class FetchError(HackRadarError):
    """An outbound GET failed (network error, timeout or non-2xx status)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"{url}: {reason}")


class IdeaProviderError(HackRadarError):
    """An idea provider could not produce usable ideas."""


class FeedParseError(HackRadarError):
    """A feed body could not be parsed into entries."""
