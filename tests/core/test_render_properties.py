# topmark:header:start
#
#   project      : hueline
#   file         : test_render_properties.py
#   file_relpath : tests/core/test_render_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the builder's render algorithm."""

from __future__ import annotations

import re

from hypothesis import given

from hueline.ansi import Ansi, render
from hueline.builder import Builder
from hueline.entity import AnsiCode, Text
from tests.strategies_hueline import s_attribute, s_entities

_ESCAPE_RE = re.compile(r"\x1b\[\d+m")


@given(attribute=s_attribute)
def test_attribute_escape_format(attribute: Ansi) -> None:
    """Every attribute renders as ESC [ digits m."""
    assert _ESCAPE_RE.fullmatch(render(attribute)) is not None


@given(entities=s_entities)
def test_plain_render_is_text_concatenation(entities: list[Text | AnsiCode]) -> None:
    """With color disabled, output is exactly the concatenated text."""
    b = Builder(no_color=True).extend(entities)
    expected = "".join(e.content for e in entities if isinstance(e, Text))
    assert b.to_string() == expected


@given(entities=s_entities)
def test_color_render_is_idempotent_and_prefixed(entities: list[Text | AnsiCode]) -> None:
    """Color output is repeatable and carries a leading reset iff the last entity is not RESET."""
    b = Builder(no_color=False).extend(entities)
    first = b.to_string()
    assert b.to_string() == first
    assert b.content_raw() == tuple(entities)

    body = "".join(e.render(color=True) for e in entities)
    needs_reset = bool(entities) and entities[-1] != AnsiCode(Ansi.RESET)
    assert first == (render(Ansi.RESET) + body if needs_reset else body)
