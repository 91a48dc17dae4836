"""
cssmatch: composable regular-expression patterns for CSS and HTML text.
"""

from cssmatch.core import (
    NO_MATCH,
    Match,
    NoMatch,
    find_all,
    find_first,
    iter_matches,
    search,
)
from cssmatch.grammar import (
    Grammar,
    GrammarConfig,
    GrammarGraph,
    InvalidPatternDefinition,
    Pattern,
    build_grammar,
    compile_pattern,
    get_grammar,
)
from cssmatch.grammar.rules import (
    CSS_AT_RULES,
    CSS_BLOCKS,
    CSS_BORDER_STYLE,
    CSS_BORDER_WIDTH,
    CSS_COLORS,
    CSS_COMMENTS,
    CSS_FONT_FAMILY,
    CSS_FONT_SIZE,
    CSS_FONT_SIZE_AND_LINE_HEIGHT,
    CSS_FONT_STYLE,
    CSS_FONT_VARIANT,
    CSS_FONT_WEIGHT,
    CSS_LENGTH,
    CSS_LINE_HEIGHT,
    CSS_MEDIA_TYPES,
    CSS_NUMBER,
    CSS_PERCENTAGE,
    CSS_PROPERTIES,
    HTML_TAG,
    HTML_TAG_ATTRIBUTES,
)

__all__ = [
    # matching
    "NO_MATCH",
    "Match",
    "NoMatch",
    "find_all",
    "find_first",
    "iter_matches",
    "search",
    # grammar
    "Grammar",
    "GrammarConfig",
    "GrammarGraph",
    "InvalidPatternDefinition",
    "Pattern",
    "build_grammar",
    "compile_pattern",
    "get_grammar",
    # pattern names
    "CSS_AT_RULES",
    "CSS_BLOCKS",
    "CSS_BORDER_STYLE",
    "CSS_BORDER_WIDTH",
    "CSS_COLORS",
    "CSS_COMMENTS",
    "CSS_FONT_FAMILY",
    "CSS_FONT_SIZE",
    "CSS_FONT_SIZE_AND_LINE_HEIGHT",
    "CSS_FONT_STYLE",
    "CSS_FONT_VARIANT",
    "CSS_FONT_WEIGHT",
    "CSS_LENGTH",
    "CSS_LINE_HEIGHT",
    "CSS_MEDIA_TYPES",
    "CSS_NUMBER",
    "CSS_PERCENTAGE",
    "CSS_PROPERTIES",
    "HTML_TAG",
    "HTML_TAG_ATTRIBUTES",
]
