# topmark:header:start
#
#   project      : hueline
#   file         : attributes.py
#   file_relpath : src/hueline/cli/commands/attributes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline `attributes` command: list catalogue names and SGR codes (uncolored)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hueline.ansi import Ansi

if TYPE_CHECKING:
    from hueline.cli.console import ClickConsole


@click.command(
    name="attributes",
    help="List every display attribute name with its SGR code.",
)
@click.pass_context
def attributes_command(ctx: click.Context) -> None:
    """Print ``<name>\\t<code>`` for each attribute, in catalogue order."""
    console: ClickConsole = ctx.obj["console"]
    for attribute in Ansi:
        console.print(f"{attribute.method_name}\t{int(attribute)}")
