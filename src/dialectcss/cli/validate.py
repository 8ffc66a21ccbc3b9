"""CLI command: dialectcss validate -- check localized stylesheet format."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from dialectcss.model.diagnostic import Severity
from dialectcss.validation import validate as run_validate


@click.command()
@click.argument("stylefile", type=click.Path(exists=True))
def validate(stylefile: str) -> None:
    """Validate a localized stylesheet file.

    Prints diagnostics (errors, warnings, info) and exits with code 0 if
    no errors are found, or code 1 if there are errors.
    """
    path = Path(stylefile)
    diagnostics = run_validate(path.read_text(encoding="utf-8"))

    if not diagnostics:
        click.echo(f"OK: {path.name} is valid (0 diagnostics)")
        sys.exit(0)

    errors = [d for d in diagnostics if d.severity is Severity.ERROR]
    warnings = [d for d in diagnostics if d.severity is Severity.WARNING]
    infos = [d for d in diagnostics if d.severity is Severity.INFO]

    for diag in diagnostics:
        click.echo(str(diag))

    click.echo()
    click.echo(
        f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(infos)} info"
    )

    if errors:
        sys.exit(1)
    sys.exit(0)
