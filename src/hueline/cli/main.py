# topmark:header:start
#
#   project      : hueline
#   file         : main.py
#   file_relpath : src/hueline/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``verbosity_level``: program-output detail (``-1`` quiet, ``0`` default, ``1+`` verbose).
- ``config``: the loaded `hueline.config.model.Config`.
- ``color_enabled``: the resolved color decision.
- ``console``: a `ClickConsole` honoring that decision.

Subcommands read these instead of re-parsing options.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from hueline.cli.commands.attributes import attributes_command
from hueline.cli.commands.paint import paint_command
from hueline.cli.commands.palette import palette_command
from hueline.cli.commands.version import version_command
from hueline.cli.console import ClickConsole
from hueline.cli.errors import HuelineConfigError
from hueline.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from hueline.color import ColorMode, resolve_color_mode
from hueline.config.loader import discover_config_file
from hueline.config.logging import get_logger, resolve_env_log_level, setup_logging
from hueline.config.model import load_config
from hueline.errors import ConfigError

if TYPE_CHECKING:
    from hueline.config.model import Config

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Initialize shared state (verbosity, config & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (Path | None): Explicit config file from ``--config``.

    Raises:
        HuelineConfigError: If the configuration file is invalid.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured via env only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    if config_path is None:
        config_path = discover_config_file(Path.cwd())
    try:
        config: Config = load_config(config_path)
    except ConfigError as exc:
        raise HuelineConfigError(str(exc)) from exc
    ctx.obj["config"] = config

    effective_color_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or config.color)
    enable_color: bool = resolve_color_mode(color_mode_override=effective_color_mode)
    logger.debug("color mode %s resolved to %s", effective_color_mode.value, enable_color)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Render styled terminal text.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the hueline CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'hueline paint -a bold TEXT' to render styled text.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(paint_command)

cli.add_command(palette_command)

cli.add_command(attributes_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
