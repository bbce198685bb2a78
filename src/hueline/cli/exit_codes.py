# topmark:header:start
#
#   project      : hueline
#   file         : exit_codes.py
#   file_relpath : src/hueline/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the hueline CLI.

The codes follow the BSD ``sysexits`` convention so that other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the hueline CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure (non-specific error).
        USAGE_ERROR: Invalid flags, arguments or attribute names. Mirrors BSD
            ``EX_USAGE (64)``.
        IO_ERROR: Writing the output failed (e.g. broken pipe). Mirrors BSD
            ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration file. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 64
    IO_ERROR = 74
    CONFIG_ERROR = 78
