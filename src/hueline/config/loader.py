# topmark:header:start
#
#   project      : hueline
#   file         : loader.py
#   file_relpath : src/hueline/config/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Discover and read hueline TOML configuration.

Sources, checked per directory while walking up from the start directory:

1. ``hueline.toml`` (keys at the top level)
2. ``pyproject.toml`` with a ``[tool.hueline]`` table

The nearest directory that provides either wins; within a directory
``hueline.toml`` takes precedence. Parsing is done with `tomlkit` and
returned as plain ``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from hueline.config.keys import Toml
from hueline.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from hueline.config.logging import HuelineLogger

TomlTable = dict[str, Any]

logger: HuelineLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def extract_hueline_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the hueline settings table from a parsed document.

    Args:
        path (Path): The file the document was read from; its name selects the layout.
        data (TomlTable): The parsed document.

    Returns:
        TomlTable | None: The settings, or None if a ``pyproject.toml`` has no
        ``[tool.hueline]`` table.
    """
    if path.name != Toml.PYPROJECT_FILENAME:
        return data
    tool: Any = data.get(Toml.SECTION_TOOL, {})
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(Toml.SECTION_HUELINE)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Return the nearest config file at or above ``start``.

    Args:
        start (Path): File or directory where discovery starts.

    Returns:
        Path | None: ``hueline.toml`` or a ``pyproject.toml`` carrying
        ``[tool.hueline]``; None if there is none up to the filesystem root.
    """
    cur: Path = start.resolve()
    if cur.is_file():
        cur = cur.parent

    while True:
        candidate: Path = cur / Toml.CONFIG_FILENAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate

        pyproject: Path = cur / Toml.PYPROJECT_FILENAME
        if (
            pyproject.is_file()
            and extract_hueline_table(pyproject, load_toml_dict(pyproject)) is not None
        ):
            logger.debug("Discovered [tool.hueline] in %s", pyproject)
            return pyproject

        parent: Path = cur.parent
        if parent == cur:
            return None
        cur = parent
