"""selectorkit CLI entry point: Click group with subcommands."""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from selectorkit import __version__
from selectorkit.config import SelectorKitConfig
from selectorkit.errors import (
    ParseError,
    RecipeError,
    SelectorError,
    UnknownFieldError,
)
from selectorkit.rectangle import Rectangle
from selectorkit.selector import build_selector
from selectorkit.serialization import (
    declared_fields,
    deserialize,
    parse,
    serialize,
)

_LOG_LEVELS = click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False)


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    type=_LOG_LEVELS,
    default=SelectorKitConfig.log_level,
    help="Logging level",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.option(
    "--strict/--no-strict",
    default=SelectorKitConfig.strict_fields,
    help="Reject unknown JSON fields",
)
@click.pass_context
def cli(
    ctx: click.Context, log_level: str, indent: int | None, strict: bool
) -> None:
    """selectorkit - compose CSS selector strings."""
    config = SelectorKitConfig(
        json_indent=indent, strict_fields=strict, log_level=log_level.upper()
    )
    logging.basicConfig(
        level=config.log_level, format="%(levelname)s %(name)s: %(message)s"
    )
    ctx.obj = config


@cli.command()
@click.argument("recipe", required=False)
@click.option(
    "--file",
    "recipe_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read the recipe JSON from a file",
)
def render(recipe: str | None, recipe_file: str | None) -> None:
    """Render a selector from a JSON recipe.

    A recipe is either {"parts": [[category, value], ...]} or
    {"left": recipe, "combinator": "+", "right": recipe}.
    """
    if recipe_file:
        recipe = Path(recipe_file).read_text(encoding="utf-8")
    if recipe is None:
        raise click.UsageError("Pass a RECIPE argument or --file")

    try:
        selector = build_selector(parse(recipe))
    except (ParseError, RecipeError, SelectorError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.render())


@cli.command()
@click.argument("width", type=float, required=False)
@click.argument("height", type=float, required=False)
@click.option("--from-json", "source", help="Read the rectangle from JSON")
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def area(
    config: SelectorKitConfig,
    width: float | None,
    height: float | None,
    source: str | None,
    as_json: bool,
) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    if source is not None:
        try:
            rect = deserialize(Rectangle, source, strict=config.strict_fields)
        except (ParseError, UnknownFieldError, TypeError) as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
        missing = declared_fields(Rectangle) - vars(rect).keys()
        if missing:
            names = ", ".join(sorted(missing))
            click.echo(f"Error: missing field(s): {names}", err=True)
            sys.exit(1)
        invalid = [
            name
            for name in ("width", "height")
            if isinstance(getattr(rect, name), bool)
            or not isinstance(getattr(rect, name), (int, float))
        ]
        if invalid:
            names = ", ".join(invalid)
            click.echo(f"Error: non-numeric field(s): {names}", err=True)
            sys.exit(1)
    elif width is None or height is None:
        raise click.UsageError("Pass WIDTH and HEIGHT or --from-json")
    else:
        rect = Rectangle(width, height)

    if as_json:
        click.echo(serialize(rect, indent=config.json_indent))
    click.echo(f"{rect.get_area():g}")
