"""CLI command: dialectcss inspect -- display parsed rules, anchors and decorations."""

from __future__ import annotations

from pathlib import Path

import click

from dialectcss.compiler import Compiler
from dialectcss.model.layout import LayoutIntent
from dialectcss.transforms import find_family


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
def inspect(stylefile: str) -> None:
    """Parse a localized stylesheet and display its structure.

    Shows rules (with property counts), layout anchors and decoration rules.
    """
    text = Path(stylefile).read_text(encoding="utf-8")
    result = Compiler().compile(text)

    click.echo(f"Rules:       {len(result.rules)}")
    click.echo(f"Expanded:    {len(result.expanded)}")
    click.echo(f"Decorations: {len(result.decorations)}")
    click.echo(f"Warnings:    {len(result.warnings)}")
    click.echo()

    click.echo("Rules:")
    for selector, props in result.rules.items():
        click.echo(f"  {selector}  ({len(props)} properties)")
    click.echo()

    click.echo("Layout anchors:")
    for selector, props in result.rules.items():
        family = find_family(selector)
        if family is None or not family.has_intent(props):
            continue
        intent = LayoutIntent.from_properties(props, family.prefix)
        parts = [f"  {selector}", f"family={family.prefix}", f"mode={intent.mode.value}"]
        if intent.position is not None:
            parts.append(f"position={intent.position.value}")
        if intent.has_offset:
            parts.append(f"offset=({intent.offset_x}, {intent.offset_y})")
        if intent.is_rotated:
            parts.append(f"rotate={intent.rotation}")
        click.echo("  ".join(parts))
    click.echo()

    click.echo("Decorations:")
    for rule in result.decorations:
        parts = [f"  {rule.id}", f"selector={rule.selector}", f"overflow={rule.overflow_mode.value}"]
        click.echo("  ".join(parts))
