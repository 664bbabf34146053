"""CLI commands: twstyle synthesize / twstyle parse."""

from __future__ import annotations

import sys

import click

from twstyle.config import load_config
from twstyle.errors import TwStyleError
from twstyle.generator import UtilityTable
from twstyle.parser.classes import parse_class_list
from twstyle.serialize import to_css, to_json
from twstyle.synthesis import StyleComposer, compose_classes


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.option(
    "--css",
    "css_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Compiled utility CSS to read rules from",
)
@click.option("--config", "config_file", default=None, help="JSON config file")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "css"]),
    default="json",
    show_default=True,
    help="Output format",
)
@click.option("--selector", default=".tw", show_default=True, help="Selector for CSS output")
def synthesize(
    classes: tuple[str, ...],
    css_file: str,
    config_file: str | None,
    output_format: str,
    selector: str,
) -> None:
    """Synthesize one style object from utility CLASSES.

    Prints the merged, ordered style object as JSON (or as CSS text with
    --format css) and exits with code 1 on any error.
    """
    try:
        config = load_config(config_file)
        table = UtilityTable.from_file(css_file)
        style = StyleComposer(table, config)(list(classes))
    except TwStyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if output_format == "css":
        click.echo(to_css(style, selector), nl=False)
    else:
        click.echo(to_json(style, indent=2))


@click.command()
@click.argument("classes", nargs=-1, required=True)
@click.option("--config", "config_file", default=None, help="JSON config file")
def parse(classes: tuple[str, ...], config_file: str | None) -> None:
    """Show how utility CLASSES split into base classes and variants."""
    try:
        config = load_config(config_file)
        parsed = parse_class_list(compose_classes(list(classes)), config.separator)
    except TwStyleError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for base, variants in parsed:
        if variants:
            click.echo(f"{base}  variants={','.join(variants)}")
        else:
            click.echo(base)
