"""dialectcss CLI entry point: Click group with subcommands."""

import logging

import click

from dialectcss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dialectcss")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """dialectcss - compile localized stylesheets into canonical CSS."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from dialectcss.cli.compile import compile_cmd  # noqa: E402
from dialectcss.cli.format import format_cmd  # noqa: E402
from dialectcss.cli.importer import import_cmd  # noqa: E402
from dialectcss.cli.inspect import inspect  # noqa: E402
from dialectcss.cli.serve import serve  # noqa: E402
from dialectcss.cli.validate import validate  # noqa: E402

cli.add_command(compile_cmd)
cli.add_command(format_cmd)
cli.add_command(validate)
cli.add_command(import_cmd)
cli.add_command(inspect)
cli.add_command(serve)
