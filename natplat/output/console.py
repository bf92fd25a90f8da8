"""Console output abstraction.

Commands write through `ConsoleProtocol` so they can be tested against
`MockConsole` without a terminal. `RichConsole` is the only place that
imports rich.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()
    DIM = auto()  # Probe details, hints

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message verbatim, with optional styling."""
        ...

    def error(self, message: str) -> None: ...

    def field(self, label: str, value: str) -> None:
        """Print an aligned `label: value` line."""
        ...

    def json(self, data: Mapping[str, object]) -> None:
        """Print a mapping as JSON (machine-readable output)."""
        ...


_LABEL_WIDTH = 14


class RichConsole:
    """Console implementation using Rich."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        # File names are printed for scripts to capture: never wrap them at
        # the terminal width and never turn ":name:" into an emoji.
        self._console = Console(highlight=False, emoji=False, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.ERROR: "red bold",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        if rich_style:
            self._console.print(message, style=rich_style, markup=False)
        else:
            self._console.print(message, markup=False)

    def error(self, message: str) -> None:
        from rich.text import Text

        self._console.print(Text.assemble(("error:", "red bold"), " ", message))

    def field(self, label: str, value: str) -> None:
        from rich.text import Text

        line = Text(f"{label + ':':<{_LABEL_WIDTH}}", style="bold")
        line.append(value)
        self._console.print(line)

    def json(self, data: Mapping[str, object]) -> None:
        self._console.print_json(json.dumps(dict(data)))


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def field(self, label: str, value: str) -> None:
        self.outputs.append(OutputRecord(f"{label}: {value}", Style.DEFAULT))

    def json(self, data: Mapping[str, object]) -> None:
        self.outputs.append(OutputRecord(json.dumps(dict(data)), Style.DEFAULT))

    # Test helpers

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
