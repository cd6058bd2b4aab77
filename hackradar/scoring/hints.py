"""
Winner announcement vocabulary.

An article qualifies as a likely winners post when its title or description
contains any of these hints as a case-insensitive substring.

CUSTOMIZATION:

    Hints are matched as substrings, so "announc" covers "announced",
    "announcing" and "announcement". Short hints like "top" are deliberately
    loose: false positives only cost one extra article crawl.
"""

WINNER_HINTS: tuple[str, ...] = (
    "winner",
    "winners",
    "top",
    "prize",
    "finalist",
    "finalists",
    "result",
    "results",
    "announc",
)
