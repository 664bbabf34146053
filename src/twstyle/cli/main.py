"""twstyle CLI entry point: Click group with subcommands."""

import logging

import click

from twstyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="twstyle")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """twstyle - turn utility class names into style objects."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from twstyle.cli.synthesize import parse, synthesize  # noqa: E402
from twstyle.cli.serve import serve  # noqa: E402

cli.add_command(synthesize)
cli.add_command(parse)
cli.add_command(serve)
