# topmark:header:start
#
#   project      : hueline
#   file         : errors.py
#   file_relpath : src/hueline/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the hueline CLI.

Raise these in commands to report errors with standardized messages and exit
codes. They prefer the project console if one is stored in the Click context
(see `show()`), and fall back to Click's default display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from hueline.cli.exit_codes import ExitCode


class HuelineCliError(click.ClickException):
    """Base class for all hueline CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(self.format_message())
                return
        super().show(file)


class HuelineUsageError(HuelineCliError):
    """Error for command-line invocation errors (invalid flags/args/names)."""

    exit_code = ExitCode.USAGE_ERROR


class HuelineConfigError(HuelineCliError):
    """Error for invalid configuration files or unknown named styles."""

    exit_code = ExitCode.CONFIG_ERROR


class HuelineIOError(HuelineCliError):
    """Error for failures while writing program output."""

    exit_code = ExitCode.IO_ERROR
