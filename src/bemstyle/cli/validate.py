"""CLI command: bemstyle validate -- lint a style tree before resolving it."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bemstyle.model.diagnostic import Severity
from bemstyle.sheet import SheetParseError, load_style_tree
from bemstyle.validation import validate as run_validate
from bemstyle.validation.validator import count_by_severity, plural


@click.command()
@click.argument("tree_file", type=click.Path(exists=True))
@click.option("--strict", is_flag=True, help="Fail on warnings as well as errors.")
def validate(tree_file: str, strict: bool) -> None:
    """Check that TREE_FILE is a style tree every selector can resolve.

    Each finding is printed on its own line, prefixed with the file name and
    followed by a fix hint when one is known.  Exits 1 if any finding is an
    error (or, with --strict, a warning).
    """
    tree_path = Path(tree_file)
    name = tree_path.name

    try:
        tree = load_style_tree(tree_path)
    except SheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    diagnostics = run_validate(tree)
    for diag in diagnostics:
        click.echo(f"{name}: {diag}")
        if diag.fix:
            click.echo(f"    fix: {diag.fix}")

    counts = count_by_severity(diagnostics)
    if not diagnostics:
        click.echo(f"{name}: no problems found")
    else:
        click.echo(
            f"{name}: {plural(counts[Severity.ERROR], 'error')}, "
            f"{plural(counts[Severity.WARNING], 'warning')}, "
            f"{plural(counts[Severity.INFO], 'note')}"
        )

    failing = counts[Severity.ERROR] + (counts[Severity.WARNING] if strict else 0)
    sys.exit(1 if failing else 0)
