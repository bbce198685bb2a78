# topmark:header:start
#
#   project      : hueline
#   file         : environment.py
#   file_relpath : src/hueline/environment.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Terminal capability query.

All process-environment inspection lives here, behind `no_color()`. Builders
call it once at construction and cache the answer; rendering never reads the
environment.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING, Final

from hueline.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from hueline.config.logging import HuelineLogger

logger: HuelineLogger = get_logger(__name__)

NO_COLOR_ENV: Final[str] = "NO_COLOR"
FORCE_COLOR_ENV: Final[str] = "FORCE_COLOR"


def no_color_requested() -> bool:
    """Return True if the ``NO_COLOR`` opt-out is present (any value, even empty)."""
    return os.environ.get(NO_COLOR_ENV) is not None


def stream_isatty(stream: TextIO | None = None) -> bool:
    """Return True if ``stream`` (default: ``sys.stdout``) is an interactive terminal.

    Streams without ``isatty``, closed streams and a missing ``sys.stdout``
    all count as "not a terminal".

    Args:
        stream (TextIO | None): The stream to inspect.

    Returns:
        bool: Whether the stream is attached to a TTY.
    """
    target: TextIO | None = stream if stream is not None else sys.stdout
    if target is None:
        return False
    isatty = getattr(target, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        return False


def no_color(stream: TextIO | None = None) -> bool:
    """Decide whether color output should be disabled.

    Color is disabled when ``NO_COLOR`` is set, or when the output stream is
    not an interactive terminal.

    Args:
        stream (TextIO | None): The destination stream; defaults to ``sys.stdout``.

    Returns:
        bool: True if escape sequences should be suppressed.
    """
    if no_color_requested():
        logger.trace("color disabled: %s is set", NO_COLOR_ENV)
        return True
    if not stream_isatty(stream):
        logger.trace("color disabled: output stream is not a TTY")
        return True
    return False
