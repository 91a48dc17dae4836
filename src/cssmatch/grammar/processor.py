"""
Grammar processing.

Turns a table of rule templates into a Grammar of compiled patterns:
- Builds the reference graph between rules
- Orders rules so every dependency is expanded before its dependents
- Splices expanded definitions into their dependents
- Compiles every pattern once the whole graph has resolved
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from cssmatch.grammar.patterns import (
    NAME_RE,
    REFERENCE_RE,
    GrammarConfig,
    InvalidPatternDefinition,
    Pattern,
    compile_pattern,
    find_references,
)
from cssmatch.grammar.rules import DEFAULT_RULES

logger = logging.getLogger(__name__)


# ============================================================================
# Graph Node Classes
# ============================================================================

class RuleNode:
    """A named rule in the grammar graph."""

    def __init__(self, name: str, template: str):
        self.name = name
        self.template = template
        self.out_neighbours = list(find_references(template))

    def __str__(self):
        return f"RuleNode(name={self.name!r}, refs={self.out_neighbours})"


# ============================================================================
# Grammar Graph
# ============================================================================

@dataclass
class GrammarGraph:
    """Reference graph between rule templates."""
    rules: dict[str, RuleNode] = field(default_factory=dict)

    def add_rule(self, name: str, template: str):
        if not isinstance(name, str) or not NAME_RE.match(name):
            raise InvalidPatternDefinition(str(name), "rule name must be an identifier")
        if not isinstance(template, str):
            raise InvalidPatternDefinition(
                name, f"template must be a string, got {type(template).__name__}"
            )
        if name in self.rules:
            raise InvalidPatternDefinition(name, "duplicate rule name")
        self.rules[name] = RuleNode(name, template)

    def dependents(self, name: str) -> list[str]:
        """Rules that reference `name` directly."""
        return [r.name for r in self.rules.values() if name in r.out_neighbours]

    def topological_order(self) -> list[str]:
        """
        Order rules so each one comes after everything it references.

        Rules keep their declaration order wherever the graph allows it.

        Raises:
            InvalidPatternDefinition: On an unknown reference or a cycle
        """
        order = []
        done = set()
        visiting = []

        def visit(name: str):
            if name in done:
                return
            if name in visiting:
                cycle = visiting[visiting.index(name):] + [name]
                raise InvalidPatternDefinition(
                    name, "reference cycle", " -> ".join(cycle)
                )
            visiting.append(name)
            for ref in self.rules[name].out_neighbours:
                if ref not in self.rules:
                    raise InvalidPatternDefinition(
                        name, "reference to unknown rule", ref
                    )
                visit(ref)
            visiting.pop()
            done.add(name)
            order.append(name)

        for name in self.rules:
            visit(name)

        return order


def expand_template(template: str, definitions: Mapping[str, str], name: str) -> str:
    """Replace every ``{Name}`` in a template with that rule's definition."""

    def substitute(match):
        ref = match.group(1)
        if ref not in definitions:
            raise InvalidPatternDefinition(name, "reference to unknown rule", ref)
        return f"(?:{definitions[ref]})"

    return REFERENCE_RE.sub(substitute, template)


# ============================================================================
# Grammar
# ============================================================================

class Grammar(Mapping):
    """
    Read-only catalog of compiled patterns, keyed by name.

    Iterates in build order, so a pattern always comes after the
    patterns it was composed from.
    """

    def __init__(
        self,
        patterns: dict[str, Pattern],
        config: GrammarConfig,
        graph: GrammarGraph,
    ):
        self._patterns = dict(patterns)
        self._config = config
        self._graph = graph

    @property
    def config(self) -> GrammarConfig:
        return self._config

    def dependents(self, name: str) -> list[str]:
        """Patterns whose templates reference `name` directly."""
        if name not in self._patterns:
            raise KeyError(f"Unknown pattern: {name}")
        return self._graph.dependents(name)

    def __getitem__(self, name: str) -> Pattern:
        try:
            return self._patterns[name]
        except KeyError:
            available = ", ".join(self._patterns)
            raise KeyError(f"Unknown pattern: {name}. Available: {available}") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)

    def definitions(self) -> dict[str, str]:
        return {name: p.definition for name, p in self._patterns.items()}

    def define(self, name: str, template: str) -> Pattern:
        """
        Build a caller-supplied pattern on top of this grammar.

        The template may reference any pattern of the grammar. The grammar
        itself is left untouched.

        Raises:
            InvalidPatternDefinition: If the template cannot be built
        """
        if not isinstance(template, str):
            raise InvalidPatternDefinition(
                name, f"template must be a string, got {type(template).__name__}"
            )
        definition = expand_template(template, self.definitions(), name)
        return compile_pattern(
            name,
            definition,
            self.config,
            template=template,
            references=find_references(template),
        )

    def __repr__(self):
        return f"Grammar(patterns={list(self._patterns)})"


# ============================================================================
# Grammar Processor
# ============================================================================

class GrammarProcessor:
    """Builds a Grammar from (name, template) rules."""

    def __init__(self, config: GrammarConfig | None = None):
        self.config = config or GrammarConfig()

    def process(self, rules: Iterable[tuple[str, str]]) -> Grammar:
        """
        Process rule templates into a Grammar.

        Args:
            rules: (name, template) pairs, in any order

        Returns:
            Grammar with one compiled pattern per rule

        Raises:
            InvalidPatternDefinition: If any rule cannot be built
        """
        graph = self._build_graph(rules)
        order = graph.topological_order()
        logger.debug(f"Build order: {order}")

        definitions = self._expand(graph, order)

        patterns = {}
        for name in order:
            node = graph.rules[name]
            patterns[name] = compile_pattern(
                name,
                definitions[name],
                self.config,
                template=node.template,
                references=tuple(node.out_neighbours),
            )
            logger.debug(f"Compiled {name}: {definitions[name]}")

        logger.info(f"Built grammar with {len(patterns)} patterns")
        return Grammar(patterns, self.config, graph)

    def _build_graph(self, rules: Iterable[tuple[str, str]]) -> GrammarGraph:
        graph = GrammarGraph()
        for name, template in rules:
            graph.add_rule(name, template)
        return graph

    def _expand(self, graph: GrammarGraph, order: list[str]) -> dict[str, str]:
        """Expand templates in dependency order."""
        definitions = {}
        for name in order:
            definitions[name] = expand_template(graph.rules[name].template, definitions, name)
        return definitions


def build_grammar(
    rules: Iterable[tuple[str, str]] = DEFAULT_RULES,
    config: GrammarConfig | None = None,
) -> Grammar:
    """Build a fresh grammar; see GrammarProcessor.process."""
    return GrammarProcessor(config).process(rules)


_default_grammar: Grammar | None = None
_default_lock = threading.Lock()


def get_grammar() -> Grammar:
    """Return the process-wide built-in grammar, building it on first use."""
    global _default_grammar
    if _default_grammar is None:
        with _default_lock:
            if _default_grammar is None:
                _default_grammar = build_grammar()
    return _default_grammar
