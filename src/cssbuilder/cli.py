"""cssbuilder CLI entry point: Click group with subcommands."""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, TextIO

import click

from cssbuilder import __version__
from cssbuilder.builder import SelectorBuilder
from cssbuilder.config import CssBuilderConfig
from cssbuilder.errors import SelectorError
from cssbuilder.log import configure_logging
from cssbuilder.model.rectangle import Rectangle
from cssbuilder.serialization import encode

logger = logging.getLogger(__name__)

# CLI part kinds mapped to SelectorBuilder method names.
PART_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "attr": "attr",
    "pseudo-class": "pseudo_class",
    "pseudo-element": "pseudo_element",
}


class TreeError(ValueError):
    """Raised when a JSON selector tree has the wrong shape."""


def apply_part(builder: SelectorBuilder, kind: str, value: str) -> SelectorBuilder:
    method = PART_METHODS.get(kind)
    if method is None:
        raise TreeError(
            f"Unknown part kind {kind!r}; expected one of: {', '.join(PART_METHODS)}"
        )
    return getattr(builder, method)(value)


def build_tree(node: Any) -> SelectorBuilder:
    """Build a selector from a decoded JSON tree.

    A compound is ``{"parts": [[kind, value], ...]}``; a combination is
    ``{"combine": [left, combinator, right]}``.
    """
    if not isinstance(node, dict):
        raise TreeError(f"Expected an object, got {type(node).__name__}")
    if "parts" in node:
        parts = node["parts"]
        if not isinstance(parts, list):
            raise TreeError(f"'parts' must be a list, got {type(parts).__name__}")
        builder = SelectorBuilder()
        for part in parts:
            if (
                not isinstance(part, list)
                or len(part) != 2
                or not all(isinstance(item, str) for item in part)
            ):
                raise TreeError(f"Part must be a [kind, value] pair, got {part!r}")
            apply_part(builder, part[0], part[1])
        return builder
    if "combine" in node:
        operands = node["combine"]
        if not isinstance(operands, list) or len(operands) != 3:
            raise TreeError("'combine' must be a [left, combinator, right] list")
        left, combinator, right = operands
        if not isinstance(combinator, str):
            raise TreeError(f"Combinator must be a string, got {combinator!r}")
        return build_tree(left).combine(build_tree(right), combinator)
    raise TreeError("Selector node needs a 'parts' or 'combine' key")


def _fail(message: str) -> None:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--log-level", default=None, help="Logging level (default from CSSBUILDER_LOG_LEVEL)")
@click.pass_context
def cli(ctx: click.Context, log_level: str | None) -> None:
    """cssbuilder - assemble CSS selectors from ordered parts."""
    try:
        config = CssBuilderConfig.from_env()
    except ValueError as exc:
        raise click.BadParameter(
            f"CSSBUILDER_JSON_INDENT must be an integer: {exc}"
        ) from exc
    if log_level:
        config = CssBuilderConfig(log_level=log_level.upper(), json_indent=config.json_indent)
    try:
        configure_logging(config.log_level)
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="--log-level") from exc
    ctx.obj = config


@cli.command()
@click.argument("parts", nargs=-1, required=True)
def build(parts: tuple[str, ...]) -> None:
    """Build one compound selector from KIND=VALUE parts, applied in order.

    KIND is one of: element, id, class, attr, pseudo-class, pseudo-element.
    """
    builder = SelectorBuilder()
    for raw in parts:
        kind, sep, value = raw.partition("=")
        if not sep or kind not in PART_METHODS:
            raise click.BadParameter(
                f"{raw!r} is not KIND=VALUE with KIND in {', '.join(PART_METHODS)}",
                param_hint="PARTS",
            )
        try:
            apply_part(builder, kind, value)
        except SelectorError as exc:
            _fail(str(exc))
    click.echo(builder.stringify())


@cli.command()
@click.argument("source", type=click.File("r", encoding="utf-8"))
def render(source: TextIO) -> None:
    """Render a selector tree read from a JSON file (or '-' for stdin)."""
    try:
        tree = json.load(source)
    except json.JSONDecodeError as exc:
        _fail(f"Invalid JSON: {exc}")
    try:
        builder = build_tree(tree)
    except (SelectorError, TreeError) as exc:
        _fail(str(exc))
    logger.info("Rendered %d fragment(s)", len(builder.fragments))
    click.echo(builder.stringify())


@cli.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
@click.option("--json", "as_json", is_flag=True, help="Print the rectangle as JSON")
@click.pass_obj
def area(config: CssBuilderConfig, width: float, height: float, as_json: bool) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    rect = Rectangle(width=width, height=height)
    if as_json:
        payload = {"width": rect.width, "height": rect.height, "area": rect.area()}
        click.echo(encode(payload, indent=config.json_indent))
        return
    click.echo(f"{rect.area():g}")
