"""
Grammar processing and the built-in pattern catalog.
"""

from cssmatch.grammar.patterns import (
    GrammarConfig,
    InvalidPatternDefinition,
    Pattern,
    compile_pattern,
)
from cssmatch.grammar.processor import (
    Grammar,
    GrammarGraph,
    GrammarProcessor,
    build_grammar,
    get_grammar,
)
from cssmatch.grammar.rules import DEFAULT_RULES

__all__ = [
    "GrammarConfig",
    "InvalidPatternDefinition",
    "Pattern",
    "compile_pattern",
    "Grammar",
    "GrammarGraph",
    "GrammarProcessor",
    "build_grammar",
    "get_grammar",
    "DEFAULT_RULES",
]
