# topmark:header:start
#
#   project      : hueline
#   file         : test_shortcuts.py
#   file_relpath : tests/core/test_shortcuts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the one-attribute helpers in `hueline.shortcuts`."""

from __future__ import annotations

import io

import pytest

import hueline
from hueline import shortcuts
from hueline.ansi import COLOR_TABLE, Ansi, ColorChannel
from hueline.builder import Builder
from hueline.shortcuts import SHORTCUTS, color_print, color_println, color_sprint
from tests.conftest import parametrize, type_checking_declarations


def test_color_sprint() -> None:
    """`color_sprint` wraps the text in the attribute and a reset."""
    assert color_sprint(Ansi.FG_RED, "hi") == "\x1b[31mhi\x1b[0m"
    assert color_sprint(Ansi.FG_RED, "This is red text") == "\x1b[31mThis is red text\x1b[0m"


def test_color_sprint_ignores_no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """The helpers always emit color, like the builder with color forced."""
    monkeypatch.setenv("NO_COLOR", "")
    assert color_sprint(Ansi.BOLD, "b") == "\x1b[1mb\x1b[0m"


@parametrize("attribute", list(Ansi))
def test_color_sprint_matches_forced_builder(attribute: Ansi) -> None:
    """Helpers are byte-identical to the equivalent forced builder."""
    expected: str = (
        Builder(no_color=True).ansi(attribute).text("s").ansi(Ansi.RESET).force_color().to_string()
    )
    assert color_sprint(attribute, "s") == expected


def test_color_print_and_println() -> None:
    """Print forms write the same string, with or without a newline."""
    out = io.StringIO()
    color_print(Ansi.FG_RED, "This is red text", file=out)
    color_println(Ansi.FG_RED, "This is red text", file=out)
    assert out.getvalue() == (
        "\x1b[31mThis is red text\x1b[0m" + "\x1b[31mThis is red text\x1b[0m\n"
    )


def test_generated_helpers_cover_all_foreground_colors() -> None:
    """Three helpers exist per foreground color: 16 x 3."""
    assert len(SHORTCUTS) == 48
    for row in COLOR_TABLE:
        if row.channel is ColorChannel.FOREGROUND:
            for name in (row.color_name, f"print_{row.color_name}", f"println_{row.color_name}"):
                assert name in SHORTCUTS


def test_named_helpers_render_expected_strings() -> None:
    """Named helpers are reachable from the module and the package."""
    assert shortcuts.red("hi") == "\x1b[31mhi\x1b[0m"
    black_text: str = hueline.black("This is black text")
    assert black_text == "\x1b[30mThis is black text\x1b[0m"
    assert hueline.hi_white("w") == "\x1b[97mw\x1b[0m"


def test_named_print_helpers(capsys: pytest.CaptureFixture[str]) -> None:
    """`print_<color>` and `println_<color>` write to stdout by default."""
    SHORTCUTS["print_green"]("g")
    SHORTCUTS["println_hi_blue"]("b")
    assert capsys.readouterr().out == "\x1b[32mg\x1b[0m\x1b[94mb\x1b[0m\n"


def test_helpers_are_exported() -> None:
    """`__all__` advertises every generated helper, in the module and the package."""
    assert set(SHORTCUTS) <= set(shortcuts.__all__)
    assert set(SHORTCUTS) <= set(hueline.__all__)
    assert "color_sprint" in shortcuts.__all__
    for name in SHORTCUTS:
        assert getattr(hueline, name) is SHORTCUTS[name]


def test_typed_declarations_match_generated_helpers() -> None:
    """Every generated helper has a declaration visible to type checkers, and vice versa."""
    assert type_checking_declarations(shortcuts) == set(SHORTCUTS)
