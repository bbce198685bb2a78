# topmark:header:start
#
#   project      : hueline
#   file         : __init__.py
#   file_relpath : src/hueline/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Small helpers that do not belong to the rendering core."""
