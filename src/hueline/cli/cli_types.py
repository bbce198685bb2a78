# topmark:header:start
#
#   project      : hueline
#   file         : cli_types.py
#   file_relpath : src/hueline/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom Click parameter types for the hueline CLI.

- `EnumChoiceParam` converts a string to a member of a string-valued Enum.
- `AttributeParam` converts a catalogue name (``bold``, ``fg-red``, ...) to an
  `hueline.ansi.Ansi` member.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, cast

import click

from hueline.ansi import Ansi
from hueline.errors import UnknownAttributeError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


def _complete(candidates: Iterable[str], incomplete: str) -> list[CompletionItem]:
    # Runtime import to avoid import-time dependency for non-completion paths
    from click.shell_completion import CompletionItem as RuntimeCompletionItem

    prefix: str = (incomplete or "").lower()
    return [RuntimeCompletionItem(c) for c in candidates if c.lower().startswith(prefix)]


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum."""

    enum_cls: type[E]
    name: str
    choices: list[str]

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = self.enum_cls.__name__.lower()
        self.choices = [cast("str", getattr(e, "value", str(e))) for e in self.enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        """Raise a BadParameter with a NoReturn signature (clear to type checkers)."""
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (case-insensitive enum value) to a member of the Enum."""
        if value is None or isinstance(value, self.enum_cls):
            return cast("E | None", value)

        lookup: dict[str, E] = {
            cast("str", getattr(choice, "value", str(choice))).lower(): choice
            for choice in cast("Iterable[E]", self.enum_cls)
        }
        key: str = str(value).lower()
        if key in lookup:
            return lookup[key]

        self._fail_noreturn(
            f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
            param,
            ctx,
        )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion for Click."""
        return _complete(self.choices, incomplete)

    def __repr__(self) -> str:
        """Return a string representation."""
        return f"EnumChoiceParam({self.enum_cls.__name__})"


class AttributeParam(click.ParamType):
    """A Click parameter type for catalogue attribute names."""

    name = "attribute"

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Ansi:
        """Convert a name such as ``fg_red`` or ``FG-RED`` to `Ansi.FG_RED`."""
        if isinstance(value, Ansi):
            return value
        try:
            return Ansi.from_name(str(value))
        except UnknownAttributeError:
            self.fail(
                f"Unknown attribute '{value}'. Run 'hueline attributes' for the list.",
                param,
                ctx,
            )

    def shell_complete(
        self,
        ctx: click.Context,  # pylint: disable=unused-argument
        param: click.Parameter,  # pylint: disable=unused-argument
        incomplete: str,
    ) -> list[CompletionItem]:
        """Tab completion over the catalogue names."""
        return _complete((a.method_name for a in Ansi), incomplete)
