# topmark:header:start
#
#   project      : hueline
#   file         : __init__.py
#   file_relpath : src/hueline/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for hueline.

Submodules:
    - `hueline.config.logging`: TRACE level, colored formatter, `get_logger()`.
    - `hueline.config.keys`: TOML section and key names.
    - `hueline.config.loader`: TOML discovery and parsing (tomlkit).
    - `hueline.config.model`: the frozen `Config` snapshot.

This package deliberately re-exports nothing so that importing
`hueline.config.logging` stays free of import cycles.
"""
