# topmark:header:start
#
#   project      : hueline
#   file         : shortcuts.py
#   file_relpath : src/hueline/shortcuts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""One-attribute, one-literal helpers.

These wrap a literal in a single attribute followed by a reset. They always
emit color (the environment is not consulted) and produce exactly what

```python
Builder(no_color=True).ansi(attr).text(text).ansi(Ansi.RESET).force_color().to_string()
```

produces, i.e. ``<attr escape><text>\\x1b[0m``.

Per-color helpers are generated for the 16 foreground colors: ``red(text)``
returns the string, ``print_red(text)`` writes it, and ``println_red(text)``
writes it followed by a newline. High-intensity variants use a ``hi_``
prefix (``hi_red``, ``print_hi_red``, ``println_hi_red``).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from hueline.ansi import COLOR_TABLE, Ansi, ColorChannel
from hueline.builder import Builder

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import TextIO

    from hueline.ansi import ColorSpec


def color_sprint(attribute: Ansi, text: str) -> str:
    """Return ``text`` wrapped in ``attribute`` and a trailing reset.

    Args:
        attribute (Ansi): The attribute to apply.
        text (str): The literal to wrap.

    Returns:
        str: The escape-coded string.
    """
    # no_color is irrelevant once color is forced; skip the environment query.
    builder: Builder = Builder(no_color=True).force_color()
    return builder.ansi(attribute).text(text).ansi(Ansi.RESET).to_string()


def color_print(attribute: Ansi, text: str, file: TextIO | None = None) -> None:
    """Write `color_sprint(attribute, text)` to ``file`` (default: stdout)."""
    out: TextIO = file if file is not None else sys.stdout
    out.write(color_sprint(attribute, text))


def color_println(attribute: Ansi, text: str, file: TextIO | None = None) -> None:
    """Write `color_sprint(attribute, text)` and a newline to ``file``."""
    out: TextIO = file if file is not None else sys.stdout
    out.write(color_sprint(attribute, text) + "\n")


def _make_sprint(attribute: Ansi, name: str) -> Callable[[str], str]:
    def _sprint(text: str) -> str:
        return color_sprint(attribute, text)

    _sprint.__name__ = _sprint.__qualname__ = name
    _sprint.__doc__ = f"Return ``text`` in `Ansi.{attribute.name}`, followed by a reset."
    return _sprint


def _make_print(attribute: Ansi, name: str, *, newline: bool) -> Callable[..., None]:
    def _print(text: str, file: TextIO | None = None) -> None:
        if newline:
            color_println(attribute, text, file)
        else:
            color_print(attribute, text, file)

    _print.__name__ = _print.__qualname__ = name
    _print.__doc__ = f"Write ``text`` in `Ansi.{attribute.name}` to ``file`` (default: stdout)."
    return _print


def _generate(row: ColorSpec) -> dict[str, Any]:
    attribute: Ansi = row.attribute
    base: str = row.color_name
    return {
        base: _make_sprint(attribute, base),
        f"print_{base}": _make_print(attribute, f"print_{base}", newline=False),
        f"println_{base}": _make_print(attribute, f"println_{base}", newline=True),
    }


SHORTCUTS: dict[str, Callable[..., Any]] = {}
for _row in COLOR_TABLE:
    if _row.channel is ColorChannel.FOREGROUND:
        SHORTCUTS.update(_generate(_row))
del _row

if TYPE_CHECKING:
    # Declarations for the helpers generated above from `COLOR_TABLE`.
    def black(text: str) -> str: ...
    def print_black(text: str, file: TextIO | None = None) -> None: ...
    def println_black(text: str, file: TextIO | None = None) -> None: ...
    def red(text: str) -> str: ...
    def print_red(text: str, file: TextIO | None = None) -> None: ...
    def println_red(text: str, file: TextIO | None = None) -> None: ...
    def green(text: str) -> str: ...
    def print_green(text: str, file: TextIO | None = None) -> None: ...
    def println_green(text: str, file: TextIO | None = None) -> None: ...
    def yellow(text: str) -> str: ...
    def print_yellow(text: str, file: TextIO | None = None) -> None: ...
    def println_yellow(text: str, file: TextIO | None = None) -> None: ...
    def blue(text: str) -> str: ...
    def print_blue(text: str, file: TextIO | None = None) -> None: ...
    def println_blue(text: str, file: TextIO | None = None) -> None: ...
    def magenta(text: str) -> str: ...
    def print_magenta(text: str, file: TextIO | None = None) -> None: ...
    def println_magenta(text: str, file: TextIO | None = None) -> None: ...
    def cyan(text: str) -> str: ...
    def print_cyan(text: str, file: TextIO | None = None) -> None: ...
    def println_cyan(text: str, file: TextIO | None = None) -> None: ...
    def white(text: str) -> str: ...
    def print_white(text: str, file: TextIO | None = None) -> None: ...
    def println_white(text: str, file: TextIO | None = None) -> None: ...
    def hi_black(text: str) -> str: ...
    def print_hi_black(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_black(text: str, file: TextIO | None = None) -> None: ...
    def hi_red(text: str) -> str: ...
    def print_hi_red(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_red(text: str, file: TextIO | None = None) -> None: ...
    def hi_green(text: str) -> str: ...
    def print_hi_green(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_green(text: str, file: TextIO | None = None) -> None: ...
    def hi_yellow(text: str) -> str: ...
    def print_hi_yellow(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_yellow(text: str, file: TextIO | None = None) -> None: ...
    def hi_blue(text: str) -> str: ...
    def print_hi_blue(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_blue(text: str, file: TextIO | None = None) -> None: ...
    def hi_magenta(text: str) -> str: ...
    def print_hi_magenta(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_magenta(text: str, file: TextIO | None = None) -> None: ...
    def hi_cyan(text: str) -> str: ...
    def print_hi_cyan(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_cyan(text: str, file: TextIO | None = None) -> None: ...
    def hi_white(text: str) -> str: ...
    def print_hi_white(text: str, file: TextIO | None = None) -> None: ...
    def println_hi_white(text: str, file: TextIO | None = None) -> None: ...
else:
    globals().update(SHORTCUTS)

__all__ = [
    "SHORTCUTS",
    "color_print",
    "color_println",
    "color_sprint",
    "black",
    "print_black",
    "println_black",
    "red",
    "print_red",
    "println_red",
    "green",
    "print_green",
    "println_green",
    "yellow",
    "print_yellow",
    "println_yellow",
    "blue",
    "print_blue",
    "println_blue",
    "magenta",
    "print_magenta",
    "println_magenta",
    "cyan",
    "print_cyan",
    "println_cyan",
    "white",
    "print_white",
    "println_white",
    "hi_black",
    "print_hi_black",
    "println_hi_black",
    "hi_red",
    "print_hi_red",
    "println_hi_red",
    "hi_green",
    "print_hi_green",
    "println_hi_green",
    "hi_yellow",
    "print_hi_yellow",
    "println_hi_yellow",
    "hi_blue",
    "print_hi_blue",
    "println_hi_blue",
    "hi_magenta",
    "print_hi_magenta",
    "println_hi_magenta",
    "hi_cyan",
    "print_hi_cyan",
    "println_hi_cyan",
    "hi_white",
    "print_hi_white",
    "println_hi_white",
]
