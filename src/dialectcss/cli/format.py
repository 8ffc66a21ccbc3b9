"""CLI command: dialectcss format -- regenerate localized text."""

from __future__ import annotations

from pathlib import Path

import click

from dialectcss.compiler import Compiler


@click.command("format")
@click.argument("stylefile", type=click.Path(exists=True))
def format_cmd(stylefile: str) -> None:
    """Print the stylesheet in normalized localized form."""
    text = Path(stylefile).read_text(encoding="utf-8")
    result = Compiler().compile(text)
    click.echo(result.localized)
