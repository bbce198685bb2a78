# topmark:header:start
#
#   project      : hueline
#   file         : keys.py
#   file_relpath : src/hueline/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for hueline configuration.

The same keys are read from ``hueline.toml`` (top level) and from
``[tool.hueline]`` in ``pyproject.toml``. Renaming a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by hueline configuration."""

    # Discovery
    CONFIG_FILENAME: Final[str] = "hueline.toml"
    PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
    SECTION_TOOL: Final[str] = "tool"
    SECTION_HUELINE: Final[str] = "hueline"

    # Top-level keys
    KEY_COLOR: Final[str] = "color"

    # [styles]
    SECTION_STYLES: Final[str] = "styles"
