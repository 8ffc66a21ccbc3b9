"""CLI command: dialectcss import -- canonical CSS or a theme file to localized text."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dialectcss.generator import generate_localized
from dialectcss.parser import ParseError, import_theme


@click.command("import")
@click.argument("themefile", type=click.Path(exists=True))
def import_cmd(themefile: str) -> None:
    """Convert a theme file into localized text."""
    try:
        result = import_theme(Path(themefile).read_text(encoding="utf-8"))
    except ParseError as exc:
        location = f" (line {exc.line}, column {exc.column})" if exc.line is not None else ""
        click.echo(f"Parse error{location}: {exc}", err=True)
        sys.exit(1)

    click.echo(f"# imported from {result.format} ({len(result.rules)} rules)", err=True)
    click.echo(generate_localized(result.rules))
