"""scopecss CLI entry point: Click group with subcommands."""

import logging

import click

from scopecss import __version__


@click.group()
@click.version_option(version=__version__, prog_name="scopecss")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
def cli(verbose: bool) -> None:
    """scopecss - compile nested CSS into class-scoped stylesheets."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from scopecss.cli.check import check  # noqa: E402
from scopecss.cli.compile import compile_  # noqa: E402
from scopecss.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_)
cli.add_command(check)
cli.add_command(inspect)
