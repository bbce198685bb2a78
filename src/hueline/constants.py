# topmark:header:start
#
#   project      : hueline
#   file         : constants.py
#   file_relpath : src/hueline/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

HUELINE_VERSION: str = get_version("hueline")
