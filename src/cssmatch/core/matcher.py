"""
Applying patterns to text.

Both retrieval operations are pure: no state is kept between calls and
absence of a match is a normal result, never an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Union

from cssmatch.grammar import Pattern, get_grammar

PatternLike = Union[Pattern, str, re.Pattern]


@dataclass(frozen=True)
class Match:
    """A located occurrence of a pattern: matched text and its start offset."""
    value: str
    start: int

    @property
    def end(self) -> int:
        return self.start + len(self.value)


class NoMatch:
    """Result of find_first when the pattern does not occur."""
    __slots__ = ()
    _instance = None

    value = None
    start = -1

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "NO_MATCH"

    def __reduce__(self):
        return "NO_MATCH"


NO_MATCH = NoMatch()


def resolve_pattern(pattern: PatternLike) -> re.Pattern:
    """
    Get the compiled regex behind a pattern argument.

    Strings are looked up by name in the built-in grammar; they are never
    compiled as ad-hoc regexes (use Grammar.define or compile_pattern).
    """
    if isinstance(pattern, Pattern):
        return pattern.regex
    if isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return get_grammar()[pattern].regex
    raise TypeError(f"Expected Pattern, pattern name or re.Pattern, got {type(pattern).__name__}")


def iter_matches(pattern: PatternLike, text: str) -> Iterator[Match]:
    """Lazily yield non-overlapping matches, left to right."""
    regex = resolve_pattern(pattern)
    return (Match(value=m.group(0), start=m.start()) for m in regex.finditer(text))


def find_all(pattern: PatternLike, text: str) -> list[Match]:
    """Every non-overlapping match of `pattern` in `text`, in order."""
    return list(iter_matches(pattern, text))


def find_first(pattern: PatternLike, text: str) -> Match | NoMatch:
    """The first element of find_all, or NO_MATCH."""
    return next(iter_matches(pattern, text), NO_MATCH)


def search(pattern: PatternLike, text: str) -> str | None:
    """Value of the first match, or None."""
    return find_first(pattern, text).value
