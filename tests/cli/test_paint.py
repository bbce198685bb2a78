# topmark:header:start
#
#   project      : hueline
#   file         : test_paint.py
#   file_relpath : tests/cli/test_paint.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `hueline paint`."""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

import pytest

from hueline.builder import Builder
from hueline.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path
    from typing import TextIO


@mark_cli
def test_paint_with_color_always() -> None:
    """Attributes come first, then the text, then a reset."""
    result = run_cli(["--color", "always", "paint", "-a", "bold", "-a", "fg-red", "hello"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[1m\x1b[31mhello\x1b[0m\n"


@mark_cli
def test_paint_is_plain_when_not_a_tty() -> None:
    """CliRunner's stdout is not a terminal, so AUTO renders plain text."""
    result = run_cli(["paint", "-a", "bold", "hello", "world"])
    assert_SUCCESS(result)
    assert result.output == "hello world\n"


@mark_cli
def test_no_color_flag_beats_color_always() -> None:
    """``--no-color`` forces the plain path."""
    result = run_cli(["--no-color", "--color", "always", "paint", "-a", "bold", "x"])
    assert_SUCCESS(result)
    assert result.output == "x\n"


@mark_cli
def test_paint_no_newline_no_reset() -> None:
    """Without a trailing reset the builder emits a leading one."""
    result = run_cli(["--color", "always", "paint", "-n", "--no-reset", "-a", "fg_green", "ok"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[0m\x1b[32mok"


@mark_cli
def test_force_color_env_enables_color(monkeypatch: pytest.MonkeyPatch) -> None:
    """FORCE_COLOR turns on color in AUTO mode."""
    monkeypatch.setenv("FORCE_COLOR", "1")
    result = run_cli(["paint", "-a", "underline", "u"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[4mu\x1b[0m\n"


@mark_cli
def test_unknown_attribute_is_a_usage_error() -> None:
    """Click rejects unknown attribute names before the command runs."""
    result = run_cli(["paint", "-a", "fg_orange", "x"])
    assert result.exit_code == 2
    assert "Unknown attribute 'fg_orange'" in result.output


@mark_cli
def test_paint_requires_text() -> None:
    """TEXT is mandatory."""
    result = run_cli(["paint", "-a", "bold"])
    assert result.exit_code == 2


@mark_cli
def test_verbose_and_quiet_are_exclusive() -> None:
    """-v and -q together are a usage error."""
    result = run_cli(["-v", "-q", "paint", "x"])
    assert result.exit_code == ExitCode.USAGE_ERROR


@mark_cli
def test_named_style_from_discovered_config(tmp_path: Path) -> None:
    """Styles from hueline.toml are applied before --attr attributes."""
    (tmp_path / "hueline.toml").write_text(
        'color = "always"\n\n[styles]\nerror = ["bold", "fg_hi_red"]\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["paint", "-s", "error", "-a", "bg_black", "boom"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[1m\x1b[91m\x1b[40mboom\x1b[0m\n"


@mark_cli
def test_explicit_config_option(tmp_path: Path) -> None:
    """``--config`` points at a specific file."""
    cfg = tmp_path / "custom.toml"
    cfg.write_text('[styles]\nok = ["fg_green"]\n', encoding="utf-8")
    result = run_cli(["--config", str(cfg), "--color", "always", "paint", "-s", "ok", "fine"])
    assert_SUCCESS(result)
    assert result.output == "\x1b[32mfine\x1b[0m\n"


@mark_cli
def test_unknown_style_is_a_config_error(tmp_path: Path) -> None:
    """A missing style maps to the CONFIG_ERROR exit code."""
    (tmp_path / "hueline.toml").write_text("[styles]\n", encoding="utf-8")
    result = run_cli_in(tmp_path, ["paint", "-s", "nope", "x"])
    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "Unknown style 'nope'" in result.output


@mark_cli
def test_invalid_config_is_a_config_error(tmp_path: Path) -> None:
    """Invalid config files are rejected before any command runs."""
    (tmp_path / "hueline.toml").write_text('color = "rainbow"\n', encoding="utf-8")
    result = run_cli_in(tmp_path, ["paint", "x"])
    assert result.exit_code == ExitCode.CONFIG_ERROR


def _broken_pipe(self: Builder, file: TextIO | None = None) -> None:
    raise BrokenPipeError(errno.EPIPE, "Broken pipe")


@mark_cli
@parametrize(
    ("method", "extra_args"),
    [
        ("println", []),
        ("print", ["-n"]),
    ],
)
def test_write_failure_is_an_io_error(
    monkeypatch: pytest.MonkeyPatch, method: str, extra_args: list[str]
) -> None:
    """A closed stdout maps to the IO_ERROR exit code with a readable message."""
    monkeypatch.setattr(Builder, method, _broken_pipe)
    result = run_cli(["paint", *extra_args, "x"])
    assert result.exit_code == ExitCode.IO_ERROR
    assert "Cannot write output: [Errno 32] Broken pipe" in result.output
