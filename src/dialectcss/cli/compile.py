"""CLI command: dialectcss compile -- localized text to canonical CSS."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dialectcss.compiler import Compiler
from dialectcss.config import CompilerConfig
from dialectcss.generator import CanonicalOptions, export
from dialectcss.transforms import apply_transforms


@click.command("compile")
@click.argument("stylefile", type=click.Path(exists=True))
@click.option("--important/--no-important", default=True, help="Append !important to every declaration.")
@click.option("--minify", is_flag=True, help="Minify the CSS output.")
@click.option("--comments", is_flag=True, help="Add header and category comments.")
@click.option(
    "--format", "fmt", type=click.Choice(["css", "scss", "json"]), default="css",
    help="Output format.",
)
@click.option("-o", "--output", type=click.Path(), default=None, help="Write output to a file.")
def compile_cmd(
    stylefile: str, important: bool, minify: bool, comments: bool, fmt: str, output: str | None
) -> None:
    """Compile a localized stylesheet file and print the result.

    Exits with code 1 when the input has errors.
    """
    text = Path(stylefile).read_text(encoding="utf-8")
    config = CompilerConfig(use_important=important, minify=minify, add_comments=comments)
    compiler = Compiler(config)
    result = compiler.compile(text)

    for diag in result.diagnostics:
        click.echo(str(diag), err=True)

    if fmt == "css":
        rendered = result.canonical
    else:
        options = CanonicalOptions(use_important=important, minify=minify, add_comments=comments)
        rendered = export(apply_transforms(result.rules, builtin_transforms=compiler.transforms), fmt, options)

    if output:
        Path(output).write_text(rendered, encoding="utf-8")
        click.echo(f"Wrote {len(result.expanded)} rule(s) to {output}")
    else:
        click.echo(rendered, nl=not rendered.endswith("\n"))

    if result.errors or not result.applied:
        sys.exit(1)
