"""Logging setup for the CLI.

The library only creates loggers; handlers are installed here, when the
command line asks for verbose output.
"""

from __future__ import annotations

import logging

__all__ = ["configure_logging"]


def configure_logging(verbose: bool) -> None:
    """Route gitkit logs to stderr through Rich; DEBUG when verbose."""
    from rich.console import Console
    from rich.logging import RichHandler

    handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
