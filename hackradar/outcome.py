"""
Tagged stage outcomes.

Pipeline stages return a StageOutcome instead of raising, so the aggregator
can count and log degraded paths without using exceptions for control flow.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class StageOutcome(Generic[T]):
    """
    Either a value (ok) or a reason the stage was skipped.

    Usage:
        outcome = StageOutcome.success(links)
        if outcome.ok:
            use(outcome.value)
        else:
            log(outcome.reason)
    """

    ok: bool
    value: Optional[T] = None
    reason: str = ""

    @classmethod
    def success(cls, value: Any) -> "StageOutcome":
        return cls(ok=True, value=value)

    @classmethod
    def skipped(cls, reason: str, value: Any = None) -> "StageOutcome":
        """A skipped outcome; value may carry a degraded fallback."""
        return cls(ok=False, value=value, reason=reason)

    def __str__(self) -> str:
        return "ok" if self.ok else f"skipped ({self.reason})"
