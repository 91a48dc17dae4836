"""
Main CLI entry point.
"""

import click
import logging

__version__ = "0.1.0"


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def main(verbose):
    """cssmatch: find CSS and HTML fragments with composable patterns."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


@main.command("list")
@click.option("--definitions", "-d", is_flag=True, help="Show expanded definitions")
def list_patterns(definitions):
    """List the built-in patterns in build order."""
    from cssmatch.grammar import get_grammar

    grammar = get_grammar()
    for name, pattern in grammar.items():
        if definitions:
            click.echo(f"{name}\t{pattern.definition}")
        else:
            click.echo(name)


@main.command()
@click.argument("name")
def show(name):
    """Show a pattern's template, references and expanded definition."""
    from cssmatch.grammar import get_grammar

    grammar = get_grammar()
    if name not in grammar:
        raise click.BadParameter(f"Unknown pattern: {name}", param_hint="NAME")

    pattern = grammar[name]
    click.echo(f"name: {pattern.name}")
    click.echo(f"template: {pattern.template}")
    click.echo(f"references: {', '.join(pattern.references) or '-'}")
    dependents = grammar.dependents(name)
    click.echo(f"used by: {', '.join(dependents) or '-'}")
    click.echo(f"definition: {pattern.definition}")


@main.command()
@click.argument("pattern")
@click.argument("files", nargs=-1, type=click.Path(exists=True, dir_okay=False))
@click.option("--custom", "-c", is_flag=True, help="Treat PATTERN as a template, not a pattern name")
@click.option("--first", "-f", "first_only", is_flag=True, help="Only report the first match per input")
@click.option("--json", "as_json", is_flag=True, help="Print matches as JSON")
@click.option("--encoding", default="utf-8", help="Input file encoding")
def find(pattern, files, custom, first_only, as_json, encoding):
    """
    Find PATTERN in FILES (or stdin).

    Prints one "start<TAB>value" line per match, prefixed with the file
    name when several files are given. Exits with status 1 when nothing
    matched.
    """
    import json
    import sys
    from pathlib import Path

    from cssmatch.core import find_all, find_first
    from cssmatch.grammar import InvalidPatternDefinition, get_grammar

    logger = logging.getLogger(__name__)

    grammar = get_grammar()
    if custom:
        try:
            target = grammar.define("custom", pattern)
        except InvalidPatternDefinition as exc:
            raise click.BadParameter(str(exc), param_hint="PATTERN") from exc
    elif pattern in grammar:
        target = grammar[pattern]
    else:
        raise click.BadParameter(f"Unknown pattern: {pattern}", param_hint="PATTERN")

    if files:
        sources = []
        for f in files:
            try:
                sources.append((str(f), Path(f).read_text(encoding=encoding)))
            except UnicodeDecodeError as exc:
                raise click.BadParameter(
                    f"{f}: cannot decode as {encoding} ({exc.reason} at byte {exc.start})",
                    param_hint="FILES",
                ) from exc
            except LookupError as exc:
                raise click.BadParameter(str(exc), param_hint="'--encoding'") from exc
    else:
        sources = [("-", sys.stdin.read())]

    logger.debug(f"Searching {len(sources)} input(s) for {target.name}")

    results = []
    for label, text in sources:
        if first_only:
            first = find_first(target, text)
            matches = [first] if first else []
        else:
            matches = find_all(target, text)
        logger.debug(f"{label}: {len(matches)} match(es)")
        results.extend((label, m) for m in matches)

    if as_json:
        click.echo(json.dumps([
            {"file": label, "start": m.start, "value": m.value}
            for label, m in results
        ], indent=2))
    else:
        prefix_files = len(sources) > 1
        for label, m in results:
            prefix = f"{label}:" if prefix_files else ""
            click.echo(f"{prefix}{m.start}\t{m.value}")

    if not results:
        sys.exit(1)


if __name__ == "__main__":
    main()
