"""fluidtype CLI entry point: Click group with subcommands."""

import logging

import click

from fluidtype import __version__


@click.group()
@click.version_option(version=__version__, prog_name="fluidtype")
@click.option("-v", "--verbose", count=True, help="Log rewrites (-v) or resolved parameters (-vv)")
def cli(verbose: int) -> None:
    """fluidtype - turn fluid font-size, line-height and letter-spacing into responsive CSS."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG if verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register subcommands
from fluidtype.cli.process import process  # noqa: E402
from fluidtype.cli.check import check  # noqa: E402
from fluidtype.cli.inspect import inspect  # noqa: E402

cli.add_command(process)
cli.add_command(check)
cli.add_command(inspect)
