# topmark:header:start
#
#   project      : hueline
#   file         : color.py
#   file_relpath : src/hueline/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent color-mode helpers.

The builder only knows two flags (environment says "no color", caller says
"force color"). Front ends such as the CLI have a richer notion of user
intent, expressed as a `ColorMode`. This module resolves that intent to a
single boolean and applies it to a `Builder`.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING

from hueline.config.logging import get_logger
from hueline.environment import FORCE_COLOR_ENV, no_color_requested, stream_isatty

if TYPE_CHECKING:
    from hueline.builder import Builder
    from hueline.config.logging import HuelineLogger


logger: HuelineLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: ``ALWAYS`` → True; ``NEVER`` → False.
        2. **Environment**:
            - ``FORCE_COLOR`` (set and not equal to ``"0"``) → True
            - ``NO_COLOR`` (set to any value) → False
        3. **Auto**: whether stdout is a TTY.

    Args:
        color_mode_override (ColorMode | None): Explicit mode; ``None`` and
            ``AUTO`` both fall through to the environment.
        stdout_isatty (bool | None): Optional override for TTY detection.
            When ``None``, ``sys.stdout`` is inspected.

    Returns:
        bool: True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv(FORCE_COLOR_ENV)
    if force_color and force_color != "0":
        return True
    if no_color_requested():
        return False

    if stdout_isatty is None:
        stdout_isatty = stream_isatty()
    return stdout_isatty


def apply_color_mode(builder: Builder, enabled: bool) -> Builder:
    """Make ``builder`` render with or without color.

    Args:
        builder (Builder): The builder to configure.
        enabled (bool): The resolved color decision.

    Returns:
        Builder: The same builder.
    """
    if enabled:
        return builder.force_color()
    if builder.color_forced:
        logger.debug("Builder has force_color set; leaving color enabled")
    builder.color_disabled = True
    return builder
