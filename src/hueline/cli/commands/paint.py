# topmark:header:start
#
#   project      : hueline
#   file         : paint.py
#   file_relpath : src/hueline/cli/commands/paint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline `paint` command.

Renders its arguments through a `Builder`: named-style attributes first,
then ``--attr`` attributes, then the text (words joined by a space), then a
reset unless ``--no-reset`` is given.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hueline.ansi import Ansi
from hueline.cli.cli_types import AttributeParam
from hueline.cli.errors import HuelineConfigError, HuelineIOError
from hueline.config.logging import get_logger
from hueline.errors import ConfigError

if TYPE_CHECKING:
    from hueline.builder import Builder
    from hueline.cli.console import ClickConsole
    from hueline.config.model import Config

logger = get_logger(__name__)


@click.command(
    name="paint",
    help="Print TEXT with the given display attributes.",
)
@click.argument("words", metavar="TEXT...", nargs=-1, required=True)
@click.option(
    "-a",
    "--attr",
    "attributes",
    type=AttributeParam(),
    multiple=True,
    help="Attribute to apply (e.g. bold, fg_red, bg-hi-blue). Repeatable.",
)
@click.option(
    "-s",
    "--style",
    "styles",
    multiple=True,
    help="Named style from the [styles] table of the configuration. Repeatable.",
)
@click.option(
    "-n",
    "--no-newline",
    is_flag=True,
    default=False,
    help="Do not print a trailing newline.",
)
@click.option(
    "--no-reset",
    is_flag=True,
    default=False,
    help="Do not append a trailing reset.",
)
@click.pass_context
def paint_command(
    ctx: click.Context,
    *,
    words: tuple[str, ...],
    attributes: tuple[Ansi, ...],
    styles: tuple[str, ...],
    no_newline: bool,
    no_reset: bool,
) -> None:
    """Print the words with the given attributes.

    Args:
        ctx (click.Context): The Click context.
        words (tuple[str, ...]): Text fragments, joined with single spaces.
        attributes (tuple[Ansi, ...]): Attributes from ``--attr``.
        styles (tuple[str, ...]): Named styles from ``--style``.
        no_newline (bool): Suppress the trailing newline.
        no_reset (bool): Suppress the trailing reset.

    Raises:
        HuelineConfigError: If a named style is not defined.
        HuelineIOError: If writing to stdout fails.
    """
    config: Config = ctx.obj["config"]
    console: ClickConsole = ctx.obj["console"]

    builder: Builder = console.builder()
    try:
        for name in styles:
            for attribute in config.style(name):
                builder.ansi(attribute)
    except ConfigError as exc:
        raise HuelineConfigError(str(exc)) from exc

    for attribute in attributes:
        builder.ansi(attribute)
    builder.text(" ".join(words))
    if not no_reset:
        builder.ansi(Ansi.RESET)
    logger.debug("paint: %r", builder)

    try:
        if no_newline:
            builder.print()
        else:
            builder.println()
    except OSError as exc:
        raise HuelineIOError(f"Cannot write output: {exc}") from exc
