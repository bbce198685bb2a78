# topmark:header:start
#
#   project      : hueline
#   file         : console.py
#   file_relpath : src/hueline/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

`ClickConsole` separates CLI output from internal logging: use it for
messages intended for end users, and `logging` for diagnostics. Styling goes
through hueline's own `Builder`, with the color decision resolved once by the
CLI group.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from hueline.ansi import Ansi
from hueline.builder import Builder
from hueline.color import apply_color_mode

if TYPE_CHECKING:
    from typing import TextIO


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, styled text carries escape sequences.
        out (TextIO | None): Stream for standard output (defaults to ``sys.stdout``).
        err (TextIO | None): Stream for error output (defaults to ``sys.stderr``).
    """

    enable_color: bool
    out: TextIO
    err: TextIO

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out or sys.stdout
        self.err = err or sys.stderr

    def builder(self) -> Builder:
        """Return an empty builder that follows this console's color decision."""
        return apply_color_mode(Builder(no_color=not self.enable_color), self.enable_color)

    def styled(self, text: str, *attributes: Ansi) -> str:
        """Return ``text`` wrapped in ``attributes`` (plain if color is off).

        Args:
            text (str): The literal text.
            *attributes (Ansi): Attributes applied before the text.

        Returns:
            str: The rendered string, ending with a reset when colored.
        """
        b: Builder = self.builder()
        for attribute in attributes:
            b.ansi(attribute)
        return b.text(text).ansi(Ansi.RESET).to_string()

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a message to stdout.

        Args:
            text (str): Message text.
            nl (bool): If True, append a newline.
        """
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning message to stderr.

        Args:
            text (str): Warning text.
            nl (bool): If True, append a newline.
        """
        click.echo(self.styled(text, Ansi.FG_YELLOW), nl=nl, file=self.err, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error message to stderr.

        Args:
            text (str): Error text.
            nl (bool): If True, append a newline.
        """
        click.echo(
            self.styled(text, Ansi.FG_HI_RED), nl=nl, file=self.err, color=self.enable_color
        )
