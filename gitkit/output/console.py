"""Console output for CLI commands.

Commands write through ConsoleProtocol; RichConsole renders to the terminal and
MockConsole records lines for assertions. Messages are never parsed as rich
markup: branch names like `fix/[bug]` are printed verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    WARNING = auto()
    DIM = auto()
    BOLD = auto()
    HEADER = auto()

    def __str__(self) -> str:
        return self.name.lower()


# theme entries, keyed by str(Style)
_THEME: dict[str, str] = {
    "success": "green",
    "error": "red bold",
    "warning": "yellow",
    "dim": "dim",
    "bold": "bold",
    "header": "blue bold",
}


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...

    def header(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """ConsoleProtocol on a rich Console with a style theme."""

    def __init__(self) -> None:
        from rich.console import Console
        from rich.theme import Theme

        self._console = Console(theme=Theme(_THEME), highlight=False)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = None if style is Style.DEFAULT else str(style)
        self._console.print(message, style=rich_style, markup=False)

    def success(self, message: str) -> None:
        self._labelled("OK", "success", message)

    def error(self, message: str) -> None:
        self._labelled("error:", "error", message)

    def header(self, message: str) -> None:
        self._console.print()
        self.print(message, Style.HEADER)

    def newline(self) -> None:
        self._console.print()

    def _labelled(self, label: str, style: str, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble((label, style), " ", message))


@dataclass
class OutputRecord:
    message: str
    style: Style


@dataclass
class MockConsole:
    """Records every line instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=list[OutputRecord])

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def header(self, message: str) -> None:
        self.outputs.append(OutputRecord(message, Style.HEADER))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style is Style.ERROR for o in self.outputs)

    def has_success(self) -> bool:
        return any(o.style is Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        return [o for o in self.outputs if substring in o.message]
