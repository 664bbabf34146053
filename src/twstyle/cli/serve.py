"""CLI command: twstyle serve -- run the style synthesis JSON API."""

from __future__ import annotations

import sys

import click

from twstyle.errors import TwStyleError


@click.command()
@click.option(
    "--css",
    "css_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Compiled utility CSS to read rules from",
)
@click.option("--config", "config_file", default=None, help="JSON config file")
@click.option("--host", default="127.0.0.1", help="Host to bind to")
@click.option("--port", default=5000, type=int, help="Port to bind to")
@click.option("--debug/--no-debug", default=False, help="Enable debug mode")
def serve(css_file: str, config_file: str | None, host: str, port: int, debug: bool) -> None:
    """Start the style synthesis web server."""
    from twstyle.config import load_config
    from twstyle.generator import UtilityTable
    from twstyle.synthesis import StyleComposer
    from twstyle.web.app import create_app

    try:
        config = load_config(config_file)
        composer = StyleComposer(UtilityTable.from_file(css_file), config)
    except TwStyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    app = create_app(composer=composer)
    click.echo(f"Serving {len(composer.table)} utilities on {host}:{port}")
    app.run(host=host, port=port, debug=debug)
