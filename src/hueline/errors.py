# topmark:header:start
#
#   project      : hueline
#   file         : errors.py
#   file_relpath : src/hueline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library-level exceptions for hueline.

Rendering itself never raises: the builder and the attribute catalogue are
total over their inputs. These exceptions cover the surfaces that accept
*names* (attribute lookup, named styles, configuration files).

The CLI translates them into Click exceptions with stable exit codes (see
`hueline.cli.errors`).
"""

from __future__ import annotations


class HuelineError(Exception):
    """Base class for all hueline library errors."""


class UnknownAttributeError(HuelineError, ValueError):
    """Raised when a display attribute name is not in the catalogue.

    Args:
        name (str): The name that failed to resolve.

    Attributes:
        name (str): The name that failed to resolve.
    """

    name: str

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown display attribute: {name!r}")
        self.name = name


class ConfigError(HuelineError):
    """Raised when a configuration document is invalid."""
