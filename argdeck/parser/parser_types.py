# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Data structures passed between the stages of Argdeck's parsing pipeline.

Contents:
- `Token`: A flag name and the positional value strings that followed it.
- `Task`: A binding's handler bound to its resolved values, awaiting `run()`.
- `WarningKind` / `ParseWarning`: Non-fatal diagnostics collected while parsing.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable

DEFAULT_PRIORITY = -1

Handler = Callable[[list[str]], Any]


@dataclass
class Token:
    """A flag name with the positional values that followed it on the command line."""

    name: str
    values: list[str] = field(default_factory=list)

    def add(self, value: str) -> None:
        self.values.append(value)


@dataclass(frozen=True)
class Task:
    """A pending call of a binding's handler with its resolved values."""

    name: str
    dest: str
    handler: Handler
    values: tuple[str, ...]
    priority: int = DEFAULT_PRIORITY
    stores_result: bool = True

    def __call__(self) -> Any:
        return self.handler(list(self.values))


class WarningKind(Enum):
    """Categories of non-fatal parse diagnostics."""

    UNRECOGNIZED = "unrecognized"
    DISCARDED = "discarded"
    ARITY = "arity"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class ParseWarning:
    """A non-fatal diagnostic produced while parsing."""

    kind: WarningKind
    name: str
    message: str

    def __str__(self) -> str:
        return self.message
