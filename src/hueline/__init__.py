# topmark:header:start
#
#   project      : hueline
#   file         : __init__.py
#   file_relpath : src/hueline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline package.

hueline renders styled terminal text. A `Builder` collects literal text and
SGR display attributes in order, then renders them to an escape-coded string
(or to plain text when color output is inappropriate).

Example:
    ```python
    from hueline import Ansi, Builder, red

    Builder().text("Hello, ").bold().text("world!").reset().println()
    print(red("error"))
    ```
"""

from __future__ import annotations

from hueline.ansi import (
    COLOR_TABLE,
    STYLE_ATTRIBUTES,
    Ansi,
    BaseColor,
    ColorChannel,
    ColorSpec,
    Intensity,
    color_code,
    render,
)
from hueline.builder import Builder
from hueline.entity import AnsiCode, Entity, Text
from hueline.errors import ConfigError, HuelineError, UnknownAttributeError
from hueline.shortcuts import (
    SHORTCUTS,
    black,
    blue,
    color_print,
    color_println,
    color_sprint,
    cyan,
    green,
    hi_black,
    hi_blue,
    hi_cyan,
    hi_green,
    hi_magenta,
    hi_red,
    hi_white,
    hi_yellow,
    magenta,
    print_black,
    print_blue,
    print_cyan,
    print_green,
    print_hi_black,
    print_hi_blue,
    print_hi_cyan,
    print_hi_green,
    print_hi_magenta,
    print_hi_red,
    print_hi_white,
    print_hi_yellow,
    print_magenta,
    print_red,
    print_white,
    print_yellow,
    println_black,
    println_blue,
    println_cyan,
    println_green,
    println_hi_black,
    println_hi_blue,
    println_hi_cyan,
    println_hi_green,
    println_hi_magenta,
    println_hi_red,
    println_hi_white,
    println_hi_yellow,
    println_magenta,
    println_red,
    println_white,
    println_yellow,
    red,
    white,
    yellow,
)

__all__ = [
    "COLOR_TABLE",
    "STYLE_ATTRIBUTES",
    "Ansi",
    "AnsiCode",
    "BaseColor",
    "Builder",
    "ColorChannel",
    "ColorSpec",
    "ConfigError",
    "Entity",
    "HuelineError",
    "Intensity",
    "Text",
    "UnknownAttributeError",
    "color_code",
    "color_print",
    "color_println",
    "color_sprint",
    "render",
    "SHORTCUTS",
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "hi_black",
    "hi_red",
    "hi_green",
    "hi_yellow",
    "hi_blue",
    "hi_magenta",
    "hi_cyan",
    "hi_white",
    "print_black",
    "print_red",
    "print_green",
    "print_yellow",
    "print_blue",
    "print_magenta",
    "print_cyan",
    "print_white",
    "print_hi_black",
    "print_hi_red",
    "print_hi_green",
    "print_hi_yellow",
    "print_hi_blue",
    "print_hi_magenta",
    "print_hi_cyan",
    "print_hi_white",
    "println_black",
    "println_red",
    "println_green",
    "println_yellow",
    "println_blue",
    "println_magenta",
    "println_cyan",
    "println_white",
    "println_hi_black",
    "println_hi_red",
    "println_hi_green",
    "println_hi_yellow",
    "println_hi_blue",
    "println_hi_magenta",
    "println_hi_cyan",
    "println_hi_white",
]
