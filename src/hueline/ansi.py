# topmark:header:start
#
#   project      : hueline
#   file         : ansi.py
#   file_relpath : src/hueline/ansi.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""SGR attribute catalogue.

This module defines the closed set of display attributes hueline knows about
and how each one is written to a terminal. Every attribute renders as its own
``ESC [ <code> m`` sequence; parameters are never combined.

Key types:
    - `Ansi`: `IntEnum` of the ten style attributes and the 32 color
      attributes. The integer value *is* the SGR parameter.
    - `ColorChannel`, `Intensity`, `BaseColor`: the three axes of the color
      table. `color_code()` maps a point on those axes to its `Ansi` member.

The color members are also exposed as `COLOR_TABLE`, a tuple of
`ColorSpec` rows. Builders and shortcut helpers are generated from that
table instead of being written out per color.

Example:
    ```python
    from hueline.ansi import Ansi, BaseColor, ColorChannel, Intensity, color_code

    assert str(Ansi.FG_GREEN) == "\\x1b[32m"
    assert color_code(ColorChannel.BACKGROUND, Intensity.HIGH, BaseColor.RED) is Ansi.BG_HI_RED
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Final

from hueline.errors import UnknownAttributeError

ESC: Final[str] = "\x1b"
CSI: Final[str] = ESC + "["


class Ansi(IntEnum):
    """A single SGR display attribute.

    `str()` and f-string formatting return the escape sequence, not the
    integer; use `int()` or `.value` for the raw SGR parameter.
    """

    # Styles
    RESET = 0
    BOLD = 1
    FAINT = 2
    ITALIC = 3
    UNDERLINE = 4
    BLINK_SLOW = 5
    BLINK_RAPID = 6
    REVERSE_VIDEO = 7
    CONCEALED = 8
    CROSSED_OUT = 9
    # Foreground
    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_MAGENTA = 35
    FG_CYAN = 36
    FG_WHITE = 37
    FG_HI_BLACK = 90
    FG_HI_RED = 91
    FG_HI_GREEN = 92
    FG_HI_YELLOW = 93
    FG_HI_BLUE = 94
    FG_HI_MAGENTA = 95
    FG_HI_CYAN = 96
    FG_HI_WHITE = 97
    # Background
    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_MAGENTA = 45
    BG_CYAN = 46
    BG_WHITE = 47
    BG_HI_BLACK = 100
    BG_HI_RED = 101
    BG_HI_GREEN = 102
    BG_HI_YELLOW = 103
    BG_HI_BLUE = 104
    BG_HI_MAGENTA = 105
    BG_HI_CYAN = 106
    BG_HI_WHITE = 107

    def __str__(self) -> str:
        return render(self)

    def __format__(self, format_spec: str) -> str:
        return format(render(self), format_spec)

    @property
    def method_name(self) -> str:
        """Return the snake_case name used for generated builder methods.

        Returns:
            str: e.g. ``"fg_hi_red"`` for `Ansi.FG_HI_RED`.
        """
        return self.name.lower()

    @property
    def is_style(self) -> bool:
        """Return True for the non-color attributes (reset, bold, ...)."""
        return self.value < 10

    @classmethod
    def from_name(cls, name: str) -> Ansi:
        """Look up a member by name, case-insensitively.

        Dashes are accepted in place of underscores, so ``"fg-red"``,
        ``"FG_RED"`` and ``"fg_red"`` all resolve to `Ansi.FG_RED`.

        Args:
            name (str): The attribute name.

        Returns:
            Ansi: The matching member.

        Raises:
            UnknownAttributeError: If no member has that name.
        """
        key: str = name.strip().upper().replace("-", "_")
        member: Ansi | None = cls.__members__.get(key)
        if member is None:
            raise UnknownAttributeError(name)
        return member


def render(attribute: Ansi) -> str:
    """Return the escape sequence for a single attribute.

    Args:
        attribute (Ansi): The attribute to render.

    Returns:
        str: ``"\\x1b[<code>m"``.
    """
    return f"{CSI}{int(attribute)}m"


class ColorChannel(str, Enum):
    """Which part of the cell a color applies to."""

    FOREGROUND = "fg"
    BACKGROUND = "bg"


class Intensity(str, Enum):
    """Normal (30-37/40-47) or high-intensity (90-97/100-107) colors."""

    NORMAL = "normal"
    HIGH = "hi"


class BaseColor(IntEnum):
    """The eight base colors; the value is the offset within a color block."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7


_CHANNEL_BASE: Final[dict[ColorChannel, int]] = {
    ColorChannel.FOREGROUND: 30,
    ColorChannel.BACKGROUND: 40,
}
_HIGH_INTENSITY_OFFSET: Final[int] = 60


def color_code(channel: ColorChannel, intensity: Intensity, color: BaseColor) -> Ansi:
    """Return the color attribute at the given point of the color table.

    Args:
        channel (ColorChannel): Foreground or background.
        intensity (Intensity): Normal or high intensity.
        color (BaseColor): One of the eight base colors.

    Returns:
        Ansi: The matching color member.
    """
    code: int = _CHANNEL_BASE[channel] + int(color)
    if intensity is Intensity.HIGH:
        code += _HIGH_INTENSITY_OFFSET
    return Ansi(code)


@dataclass(frozen=True)
class ColorSpec:
    """One row of the color table.

    Attributes:
        name (str): Snake-case method name (e.g. ``"bg_hi_cyan"``).
        channel (ColorChannel): Foreground or background.
        intensity (Intensity): Normal or high.
        color (BaseColor): The base color.
    """

    name: str
    channel: ColorChannel
    intensity: Intensity
    color: BaseColor

    @property
    def attribute(self) -> Ansi:
        """Return the `Ansi` member for this row."""
        return color_code(self.channel, self.intensity, self.color)

    @property
    def color_name(self) -> str:
        """Return the channel-less name (``"red"``, ``"hi_red"``)."""
        prefix: str = "hi_" if self.intensity is Intensity.HIGH else ""
        return f"{prefix}{self.color.name.lower()}"


def _build_color_table() -> tuple[ColorSpec, ...]:
    rows: list[ColorSpec] = []
    for channel in ColorChannel:
        for intensity in Intensity:
            for color in BaseColor:
                hi: str = "hi_" if intensity is Intensity.HIGH else ""
                name: str = f"{channel.value}_{hi}{color.name.lower()}"
                rows.append(ColorSpec(name, channel, intensity, color))
    return tuple(rows)


COLOR_TABLE: Final[tuple[ColorSpec, ...]] = _build_color_table()

STYLE_ATTRIBUTES: Final[tuple[Ansi, ...]] = tuple(a for a in Ansi if a.is_style)
