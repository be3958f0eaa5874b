"""Exit codes for the command line.

A missing token has its own code so wrapper scripts can tell "not set up
yet" apart from every other failure.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes. Values are part of the CLI contract.

    - 0: Success
    - 1: No GitHub token could be resolved
    - 2: User error (bad option combination, cancelled prompt)
    - 3: Data error (unusable tag, unknown selection)
    - 4: Network error (GitHub API failure)
    - 5: I/O error (config file unreadable or unwritable)
    """

    OK = 0
    NO_TOKEN = 1
    USER_ERROR = 2
    DATA_ERROR = 3
    NETWORK_ERROR = 4
    IO_ERROR = 5
