# topmark:header:start
#
#   project      : hueline
#   file         : palette.py
#   file_relpath : src/hueline/cli/commands/palette.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline `palette` command.

Prints one sample line per catalogue color (or per style attribute with
``--styles``), each rendered by its own `Builder`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from hueline.ansi import COLOR_TABLE, STYLE_ATTRIBUTES, Ansi, ColorChannel

if TYPE_CHECKING:
    from hueline.builder import Builder
    from hueline.cli.console import ClickConsole

_CHANNELS: dict[str, tuple[ColorChannel, ...]] = {
    "fg": (ColorChannel.FOREGROUND,),
    "bg": (ColorChannel.BACKGROUND,),
    "all": (ColorChannel.FOREGROUND, ColorChannel.BACKGROUND),
}


def _sample_line(console: ClickConsole, name: str, attribute: Ansi) -> str:
    b: Builder = console.builder()
    b.text(f"{name:<16} {int(attribute):>3}  ")
    b.ansi(attribute).text(" sample ").ansi(Ansi.RESET)
    return b.to_string()


@click.command(
    name="palette",
    help="Show a sample of every color (or style) attribute.",
)
@click.option(
    "--channel",
    type=click.Choice(sorted(_CHANNELS)),
    default="all",
    show_default=True,
    help="Which color channel to show.",
)
@click.option(
    "--styles",
    "show_styles",
    is_flag=True,
    default=False,
    help="Show the style attributes (bold, underline, ...) instead of colors.",
)
@click.pass_context
def palette_command(ctx: click.Context, *, channel: str, show_styles: bool) -> None:
    """Print one labeled sample per attribute."""
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    if show_styles:
        if verbosity > 0:
            console.print(console.styled("Style attributes:", Ansi.BOLD, Ansi.UNDERLINE))
        for attribute in STYLE_ATTRIBUTES:
            console.print(_sample_line(console, attribute.method_name, attribute))
        return

    for wanted in _CHANNELS[channel]:
        if verbosity > 0:
            title: str = "Foreground" if wanted is ColorChannel.FOREGROUND else "Background"
            console.print(console.styled(f"{title} colors:", Ansi.BOLD, Ansi.UNDERLINE))
        for row in COLOR_TABLE:
            if row.channel is wanted:
                console.print(_sample_line(console, row.name, row.attribute))
