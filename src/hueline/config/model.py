# topmark:header:start
#
#   project      : hueline
#   file         : model.py
#   file_relpath : src/hueline/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration.

`Config` is a frozen snapshot built from a parsed TOML table. Collections are
stored as tuples and a read-only mapping so the snapshot can be shared freely.

Example ``hueline.toml``:

```toml
color = "auto"

[styles]
error = ["bold", "fg_hi_red"]
note = ["italic", "fg_cyan"]
```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, cast

from hueline.ansi import Ansi
from hueline.color import ColorMode
from hueline.config.keys import Toml
from hueline.config.loader import extract_hueline_table, load_toml_dict
from hueline.config.logging import get_logger
from hueline.errors import ConfigError, UnknownAttributeError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path

    from hueline.config.logging import HuelineLogger

logger: HuelineLogger = get_logger(__name__)


def _empty_styles() -> Mapping[str, tuple[Ansi, ...]]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        color (ColorMode): Default color mode when the CLI does not override it.
        styles (Mapping[str, tuple[Ansi, ...]]): Named attribute sequences.
        source (Path | None): The file this config was read from, if any.
    """

    color: ColorMode = ColorMode.AUTO
    styles: Mapping[str, tuple[Ansi, ...]] = field(default_factory=_empty_styles)
    source: Path | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, source: Path | None = None) -> Config:
        """Build a config from a parsed settings table.

        Args:
            data (Mapping[str, Any]): The ``hueline`` settings table.
            source (Path | None): Where the table came from (for messages).

        Returns:
            Config: The validated snapshot.

        Raises:
            ConfigError: On an unknown color mode, a malformed ``[styles]``
                table or an unknown attribute name.
        """
        where: str = f" in {source}" if source else ""

        color_raw: Any = data.get(Toml.KEY_COLOR, ColorMode.AUTO.value)
        try:
            color = ColorMode(str(color_raw).lower())
        except ValueError as exc:
            choices: str = ", ".join(m.value for m in ColorMode)
            raise ConfigError(
                f"Invalid '{Toml.KEY_COLOR}' value {color_raw!r}{where}; expected one of: {choices}"
            ) from exc

        styles_raw: Any = data.get(Toml.SECTION_STYLES, {})
        if not isinstance(styles_raw, dict):
            raise ConfigError(f"'[{Toml.SECTION_STYLES}]' must be a table{where}")

        styles: dict[str, tuple[Ansi, ...]] = {}
        for name, attrs in cast("dict[str, Any]", styles_raw).items():
            if isinstance(attrs, str):
                attrs = [attrs]
            if not isinstance(attrs, list):
                raise ConfigError(f"Style '{name}' must be a list of attribute names{where}")
            try:
                styles[name] = tuple(Ansi.from_name(str(a)) for a in cast("list[Any]", attrs))
            except UnknownAttributeError as exc:
                raise ConfigError(f"Style '{name}'{where}: {exc}") from exc

        logger.debug("Loaded config%s: color=%s, styles=%s", where, color.value, sorted(styles))
        return cls(color=color, styles=MappingProxyType(styles), source=source)

    def style(self, name: str) -> tuple[Ansi, ...]:
        """Return the attributes of a named style.

        Args:
            name (str): The style name.

        Returns:
            tuple[Ansi, ...]: The style's attributes, in order.

        Raises:
            ConfigError: If the style is not defined.
        """
        try:
            return self.styles[name]
        except KeyError:
            known: str = ", ".join(sorted(self.styles)) or "<none>"
            raise ConfigError(f"Unknown style {name!r} (defined: {known})") from None


def load_config(path: Path | None) -> Config:
    """Load a config file, or return the defaults when ``path`` is None.

    Args:
        path (Path | None): A ``hueline.toml`` or ``pyproject.toml`` file.

    Returns:
        Config: The loaded configuration.

    Raises:
        ConfigError: If the file's content is invalid.
    """
    if path is None:
        return Config()
    table: dict[str, Any] | None = extract_hueline_table(path, load_toml_dict(path))
    return Config.from_dict(table or {}, source=path)
