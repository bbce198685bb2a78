# topmark:header:start
#
#   project      : hueline
#   file         : __main__.py
#   file_relpath : src/hueline/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running hueline via ``python -m hueline``.

Delegates to `hueline.cli.main.cli`, the same entry point as the ``hueline``
console script.
"""

from __future__ import annotations

from hueline.cli.main import cli

if __name__ == "__main__":
    cli()
