"""Output formatting for the CLI."""

from .console import ConsoleProtocol, MockConsole, RichConsole, Style
from .errors import git_error_exit_code, print_git_error
from .log import configure_logging

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "Style",
    "configure_logging",
    "git_error_exit_code",
    "print_git_error",
]
