# topmark:header:start
#
#   project      : hueline
#   file         : __init__.py
#   file_relpath : src/hueline/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""hueline CLI subcommands."""
