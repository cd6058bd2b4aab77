"""
Scoring module.

Classifies feed items as likely winner announcements.
"""

from hackradar.scoring.hints import WINNER_HINTS
from hackradar.scoring.classifier import (
    is_likely_winners_article,
    matched_hints,
    select_candidate_articles,
)

__all__ = [
    "WINNER_HINTS",
    "is_likely_winners_article",
    "matched_hints",
    "select_candidate_articles",
]
