"""Error codes for CLI exit status.

The numeric values are used as process exit codes and must stay stable.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad input, unknown name kind)
    - 2: Environment error (host could not be identified)
    - 5: I/O error (config file unreadable or invalid)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    IO_ERROR = 5
