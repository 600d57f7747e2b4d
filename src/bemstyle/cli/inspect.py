"""CLI command: bemstyle inspect -- display the structure of a style tree."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from bemstyle.config import DEFAULT_CONFIG
from bemstyle.model.tree import is_subtree, primitives
from bemstyle.naming import derive_class_name
from bemstyle.sheet import SheetParseError, load_style_tree


@click.command()
@click.argument("tree_file", type=click.Path(exists=True))
@click.option("--class-name", "-c", default=None, help="Block class name to preview.")
def inspect(tree_file: str, class_name: str | None) -> None:
    """Parse a style tree file and list its block properties, elements and modifiers.

    With --class-name, shows the class each element and modifier would get.
    """
    tree_path = Path(tree_file)

    try:
        tree = load_style_tree(tree_path)
    except SheetParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    config = DEFAULT_CONFIG
    block = primitives(tree)
    elements = {
        k: v for k, v in tree.items() if is_subtree(v) and not config.is_modifier(k)
    }
    modifiers = {k: v for k, v in tree.items() if is_subtree(v) and config.is_modifier(k)}

    click.echo(f"Tree: {tree_path.name}")
    if class_name:
        click.echo(f"Block: {class_name}")
    click.echo(f"Properties: {len(block)}")
    click.echo(f"Elements:   {len(elements)}")
    click.echo(f"Modifiers:  {len(modifiers)}")
    click.echo()

    click.echo("Properties:")
    for key, value in block.items():
        click.echo(f"  {key}: {value}")
    click.echo()

    click.echo("Elements:")
    for key, value in elements.items():
        parts = [f"  {key}"]
        if class_name:
            parts.append(f'class="{derive_class_name(class_name, [key], [])}"')
        parts.append(f"properties={len(primitives(value))}")
        click.echo("  ".join(parts))
    click.echo()

    click.echo("Modifiers:")
    for key, value in modifiers.items():
        parts = [f"  {key}"]
        if class_name:
            parts.append(f'class="{derive_class_name(class_name, [], [key])}"')
        parts.append(f"properties={len(primitives(value))}")
        nested = [k for k, v in value.items() if is_subtree(v)]
        if nested:
            parts.append(f"elements={','.join(nested)}")
        click.echo("  ".join(parts))
