# topmark:header:start
#
#   project      : hueline
#   file         : builder.py
#   file_relpath : src/hueline/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Styled-content builder.

`Builder` accumulates literal text and display attributes in emission order
and serializes them into a single string. Every mutator returns the builder,
so calls chain:

```python
from hueline import Builder

Builder().text("Hello, ").bold().text("world!").reset().println()
```

Color decision:
    At construction the builder asks `hueline.environment.no_color()` whether
    color should be disabled and caches the answer. `force_color()` overrides
    that answer for the lifetime of the instance. Rendering only consults these
    two flags; it never reads the environment.

Render algorithm:
    - Color disabled: only `Text` entities are concatenated; attributes are
      dropped.
    - Color enabled: if the content is non-empty and its *last* entity is not
      `Ansi.RESET`, a leading reset is emitted first. Then every entity is
      emitted in order.

One appender per catalogue member (``bold()``, ``fg_red()``,
``bg_hi_cyan()``, ...) is generated from `hueline.ansi.Ansi` at import time.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from hueline.ansi import Ansi, color_code, render
from hueline.config.logging import get_logger
from hueline.entity import RESET_ENTITY, AnsiCode, Text
from hueline.environment import no_color as query_no_color

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable
    from typing import TextIO

    from hueline.ansi import BaseColor, ColorChannel, Intensity
    from hueline.config.logging import HuelineLogger
    from hueline.entity import Entity

logger: HuelineLogger = get_logger(__name__)


class Builder:
    """Ordered, append-only sequence of text and display attributes.

    Args:
        no_color (bool | None): Explicit color-disabled flag. When ``None``,
            the environment is queried once via `hueline.environment.no_color`.
        stream (TextIO | None): Stream used for the environment query
            (defaults to ``sys.stdout``). Ignored when ``no_color`` is given.
    """

    __slots__ = ("_content", "_no_color", "_force_color")

    _content: list[Entity]
    _no_color: bool
    _force_color: bool

    def __init__(self, *, no_color: bool | None = None, stream: TextIO | None = None) -> None:
        self._content = []
        if no_color is None:
            no_color = query_no_color(stream)
        self._no_color = no_color
        self._force_color = False
        logger.trace("Builder created (no_color=%s)", self._no_color)

    # --- flags ---

    @property
    def color_disabled(self) -> bool:
        """Whether the environment asked for plain output (overridable)."""
        return self._no_color

    @color_disabled.setter
    def color_disabled(self, value: bool) -> None:
        self._no_color = value

    @property
    def color_forced(self) -> bool:
        """Whether `force_color()` has been called on this builder."""
        return self._force_color

    @property
    def color_enabled(self) -> bool:
        """Return the effective color decision used by `to_string()`."""
        return self._force_color or not self._no_color

    def force_color(self) -> Builder:
        """Emit escape sequences regardless of the environment.

        Returns:
            Builder: ``self``, for chaining.
        """
        self._force_color = True
        return self

    # --- accumulation ---

    def text(self, text: str) -> Builder:
        """Append a literal fragment.

        The text is not inspected: empty strings and embedded control
        characters are kept as-is.

        Args:
            text (str): The literal text.

        Returns:
            Builder: ``self``, for chaining.
        """
        self._content.append(Text(text))
        return self

    def ansi(self, ansi: Ansi) -> Builder:
        """Append any catalogue attribute, including `Ansi.RESET`.

        Args:
            ansi (Ansi): The attribute to append.

        Returns:
            Builder: ``self``, for chaining.
        """
        self._content.append(AnsiCode(ansi))
        return self

    def append(self, channel: ColorChannel, intensity: Intensity, color: BaseColor) -> Builder:
        """Append the color attribute at a point of the color table.

        Args:
            channel (ColorChannel): Foreground or background.
            intensity (Intensity): Normal or high intensity.
            color (BaseColor): The base color.

        Returns:
            Builder: ``self``, for chaining.
        """
        return self.ansi(color_code(channel, intensity, color))

    def extend(self, entities: Iterable[Entity]) -> Builder:
        """Append several entities in order.

        Args:
            entities (Iterable[Entity]): `Text` / `AnsiCode` values.

        Returns:
            Builder: ``self``, for chaining.
        """
        for entity in entities:
            if isinstance(entity, Text):
                self.text(entity.content)
            else:
                self.ansi(entity.code)
        return self

    # --- rendering ---

    def to_string(self) -> str:
        """Render the content.

        Returns:
            str: The escape-coded string, or the plain text when color is
            disabled.
        """
        if not self.color_enabled:
            return "".join(e.render(color=False) for e in self._content)

        parts: list[str] = []
        # Only the last entity is checked; earlier resets do not count.
        if self._content and self._content[-1] != RESET_ENTITY:
            parts.append(render(Ansi.RESET))
        parts.extend(e.render() for e in self._content)
        return "".join(parts)

    render = to_string

    def __str__(self) -> str:
        return self.to_string()

    def print(self, file: TextIO | None = None) -> None:
        """Write the rendered content to ``file`` (default: ``sys.stdout``).

        The content is written with a single ``write`` call. Write errors
        propagate; the builder is left untouched and can be rendered again.

        Args:
            file (TextIO | None): Destination stream.
        """
        out: TextIO = file if file is not None else sys.stdout
        out.write(self.to_string())

    def println(self, file: TextIO | None = None) -> None:
        """Like `print()`, followed by a newline in the same write.

        Args:
            file (TextIO | None): Destination stream.
        """
        out: TextIO = file if file is not None else sys.stdout
        out.write(self.to_string() + "\n")

    # --- inspection ---

    def content_raw(self) -> tuple[Entity, ...]:
        """Return a read-only snapshot of the content, in order."""
        return tuple(self._content)

    snapshot = content_raw

    def copy(self) -> Builder:
        """Return an independent builder with the same content and flags."""
        clone = Builder(no_color=self._no_color)
        clone._content = list(self._content)
        clone._force_color = self._force_color
        return clone

    def __len__(self) -> int:
        return len(self._content)

    def __bool__(self) -> bool:
        # Truthy even when empty; `len()` counts entities.
        return True

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(entities={len(self._content)}, "
            f"no_color={self._no_color}, force_color={self._force_color})"
        )

    if TYPE_CHECKING:
        # Declarations for the appenders attached below from `Ansi`.
        def reset(self) -> Builder: ...
        def bold(self) -> Builder: ...
        def faint(self) -> Builder: ...
        def italic(self) -> Builder: ...
        def underline(self) -> Builder: ...
        def blink_slow(self) -> Builder: ...
        def blink_rapid(self) -> Builder: ...
        def reverse_video(self) -> Builder: ...
        def concealed(self) -> Builder: ...
        def crossed_out(self) -> Builder: ...
        def fg_black(self) -> Builder: ...
        def fg_red(self) -> Builder: ...
        def fg_green(self) -> Builder: ...
        def fg_yellow(self) -> Builder: ...
        def fg_blue(self) -> Builder: ...
        def fg_magenta(self) -> Builder: ...
        def fg_cyan(self) -> Builder: ...
        def fg_white(self) -> Builder: ...
        def fg_hi_black(self) -> Builder: ...
        def fg_hi_red(self) -> Builder: ...
        def fg_hi_green(self) -> Builder: ...
        def fg_hi_yellow(self) -> Builder: ...
        def fg_hi_blue(self) -> Builder: ...
        def fg_hi_magenta(self) -> Builder: ...
        def fg_hi_cyan(self) -> Builder: ...
        def fg_hi_white(self) -> Builder: ...
        def bg_black(self) -> Builder: ...
        def bg_red(self) -> Builder: ...
        def bg_green(self) -> Builder: ...
        def bg_yellow(self) -> Builder: ...
        def bg_blue(self) -> Builder: ...
        def bg_magenta(self) -> Builder: ...
        def bg_cyan(self) -> Builder: ...
        def bg_white(self) -> Builder: ...
        def bg_hi_black(self) -> Builder: ...
        def bg_hi_red(self) -> Builder: ...
        def bg_hi_green(self) -> Builder: ...
        def bg_hi_yellow(self) -> Builder: ...
        def bg_hi_blue(self) -> Builder: ...
        def bg_hi_magenta(self) -> Builder: ...
        def bg_hi_cyan(self) -> Builder: ...
        def bg_hi_white(self) -> Builder: ...


def _make_appender(attribute: Ansi) -> Callable[[Builder], Builder]:
    def _append(self: Builder) -> Builder:
        return self.ansi(attribute)

    _append.__name__ = attribute.method_name
    _append.__qualname__ = f"Builder.{attribute.method_name}"
    _append.__doc__ = f"Append `Ansi.{attribute.name}` ({render(attribute)!r}) and return ``self``."
    return _append


for _attribute in Ansi:
    setattr(Builder, _attribute.method_name, _make_appender(_attribute))
del _attribute
