"""
Named regular-expression patterns.

A pattern starts life as a template: regular expression text in which
``{Name}`` refers to another rule of the same grammar, e.g.

    CssLength -> {CssNumber}(em|ex|px|in|cm|mm|pt|pc)

Templates are expanded by the grammar processor into plain definitions
before anything is compiled; a Pattern only ever holds the expanded form.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

# Quantifiers such as {1,3} start with a digit and never match.
REFERENCE_RE = re.compile(r"(?<!\\)\{([A-Za-z_][A-Za-z0-9_]*)\}")

NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class InvalidPatternDefinition(ValueError):
    """
    A pattern could not be built.

    Raised at construction time only: bad regular expression, unknown
    reference, reference cycle, duplicate or malformed rule name.
    Matching never raises this.
    """

    def __init__(self, name: str, message: str, reason: str | None = None):
        self.name = name
        self.message = message
        self.reason = reason
        super().__init__(self.format())

    def format(self) -> str:
        text = f"{self.name}: {self.message}"
        if self.reason:
            text += f" ({self.reason})"
        return text


@dataclass(frozen=True)
class GrammarConfig:
    """Regex options applied to every pattern of a grammar."""
    ignore_case: bool = True
    dot_all: bool = True
    extra_flags: int = 0

    @property
    def flags(self) -> int:
        flags = self.extra_flags
        if self.ignore_case:
            flags |= re.IGNORECASE
        if self.dot_all:
            flags |= re.DOTALL
        return flags


def find_references(template: str) -> tuple[str, ...]:
    """Rule names referenced by a template, in order of first appearance."""
    names = []
    for name in REFERENCE_RE.findall(template):
        if name not in names:
            names.append(name)
    return tuple(names)


@dataclass(frozen=True)
class Pattern:
    """
    An immutable, compiled grammar rule.

    Examples:
        CssNumber -> Pattern(name="CssNumber", definition="([0-9]*\\.[0-9]+|[0-9]+)")
        CssLength -> Pattern(name="CssLength", references=("CssNumber",), ...)
    """
    name: str
    definition: str
    regex: re.Pattern = field(repr=False, compare=False)
    template: str | None = None
    references: tuple[str, ...] = ()

    @property
    def flags(self) -> int:
        return self.regex.flags

    def is_compound(self) -> bool:
        return bool(self.references)

    def __str__(self):
        return self.definition


def compile_pattern(
    name: str,
    definition: str,
    config: GrammarConfig | None = None,
    *,
    template: str | None = None,
    references: tuple[str, ...] = (),
) -> Pattern:
    """
    Compile a fully expanded definition into a Pattern.

    Args:
        name: Identifier of the pattern
        definition: Regular expression text with no ``{Name}`` references left
        config: Regex options (defaults to case-insensitive, dot-matches-all)
        template: The unexpanded text the definition was produced from
        references: Names of the rules the template referred to

    Returns:
        The compiled Pattern

    Raises:
        InvalidPatternDefinition: If the definition is not a usable regex
    """
    config = config or GrammarConfig()

    if not isinstance(definition, str):
        raise InvalidPatternDefinition(
            name, f"definition must be a string, got {type(definition).__name__}"
        )

    unresolved = find_references(definition)
    if unresolved:
        raise InvalidPatternDefinition(
            name,
            "definition has unresolved references",
            ", ".join(unresolved),
        )

    try:
        regex = re.compile(definition, config.flags)
    except re.error as exc:
        raise InvalidPatternDefinition(
            name, "not a valid regular expression", str(exc)
        ) from exc

    return Pattern(
        name=name,
        definition=definition,
        regex=regex,
        template=template if template is not None else definition,
        references=tuple(references),
    )
