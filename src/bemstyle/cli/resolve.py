"""CLI command: bemstyle resolve -- resolve one node of a style tree."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from bemstyle.config import DEFAULT_CONFIG
from bemstyle.engine import resolve as resolve_props
from bemstyle.errors import SelectorError, SheetParseError, StyleTreeError
from bemstyle.model.props import StyleProps
from bemstyle.sheet import load_style_tree


@click.command()
@click.argument("tree_file", type=click.Path(exists=True))
@click.option("--class-name", "-c", default=None, help="Block class name.")
@click.option(
    "--select", "-s", "selects", multiple=True, help="Element key to resolve (repeatable)."
)
@click.option(
    "--modifier",
    "-m",
    "modifiers",
    multiple=True,
    help="Active modifier, with or without its '&' prefix (repeatable).",
)
@click.option(
    "--chain",
    "chains",
    multiple=True,
    help="Then resolve this key inside the previous result (repeatable).",
)
def resolve(
    tree_file: str,
    class_name: str | None,
    selects: tuple[str, ...],
    modifiers: tuple[str, ...],
    chains: tuple[str, ...],
) -> None:
    """Resolve the class name and style of one node and print them as JSON.

    Without --select the block itself is resolved.  Each --chain step resolves
    a descendant of the previous node, so ``--select card --chain title``
    yields the class ``block__card__title``.
    """
    tree_path = Path(tree_file)

    try:
        tree = load_style_tree(tree_path)
    except SheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    prefix = DEFAULT_CONFIG.modifier_prefix
    selector = list(selects) + [
        m if m.startswith(prefix) else prefix + m for m in modifiers
    ]

    try:
        resolution = resolve_props(StyleProps(class_name=class_name, style=tree), selector)
        for key in chains:
            resolution = resolution.resolve_child(key)
    except (SelectorError, StyleTreeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(json.dumps(resolution.props(), indent=2, sort_keys=True))
