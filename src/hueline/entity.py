# topmark:header:start
#
#   project      : hueline
#   file         : entity.py
#   file_relpath : src/hueline/entity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Builder content entities.

A builder's content is an ordered list of `Entity` values. An entity is
either a literal `Text` fragment or a single `AnsiCode` display attribute.
Both are frozen dataclasses, so equality is structural and entities can be
shared freely between snapshots.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from hueline.ansi import Ansi, render


@dataclass(frozen=True)
class Text:
    """A literal text fragment, emitted verbatim (may be empty)."""

    content: str

    def render(self, *, color: bool = True) -> str:  # pylint: disable=unused-argument
        """Return the literal content; text survives the plain path unchanged."""
        return self.content


@dataclass(frozen=True)
class AnsiCode:
    """A display attribute marker."""

    code: Ansi

    def render(self, *, color: bool = True) -> str:
        """Return the escape sequence, or ``""`` on the plain-text path."""
        return render(self.code) if color else ""


Entity: TypeAlias = "Text | AnsiCode"

RESET_ENTITY: AnsiCode = AnsiCode(Ansi.RESET)
