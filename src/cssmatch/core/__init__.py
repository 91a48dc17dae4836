"""
Core matching primitives.
"""

from cssmatch.core.matcher import (
    NO_MATCH,
    Match,
    NoMatch,
    PatternLike,
    find_all,
    find_first,
    iter_matches,
    resolve_pattern,
    search,
)

__all__ = [
    "NO_MATCH",
    "Match",
    "NoMatch",
    "PatternLike",
    "find_all",
    "find_first",
    "iter_matches",
    "resolve_pattern",
    "search",
]
