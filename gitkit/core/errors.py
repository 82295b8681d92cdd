"""Exit codes for the gitkit command line.

The library itself reports failures as `Err` values; these codes are only
used when a CLI command turns such a failure into a process exit status.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    Values are part of the CLI contract and should remain stable:
    - 0: Success
    - 1: User error (bad arguments, invalid commit hash)
    - 2: Git error (command failed or produced unexpected output)
    - 3: Not found (branch, remote or main branch missing)
    - 4: Configuration error (unreadable config, missing repository path)
    """

    OK = 0
    USER_ERROR = 1
    GIT_ERROR = 2
    NOT_FOUND = 3
    CONFIG_ERROR = 4

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
