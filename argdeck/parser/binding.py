# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Binding` dataclass, the registered unit behind every flag or
command name known to a `CLIBuilder`.

Key Attributes:
- `name`: Canonical name the binding is registered under (without dashes).
- `handler`: Callable receiving the list of value strings for one occurrence.
- `arity`: Number of values the handler consumes, or `None` for any number.
- `priority`: Higher priorities run first.
- `dest`: Key under which the handler's return value is stored.
- `alias`: Optional alternate name.
- `default`: Value reported under `dest` when the flag never appears.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from argdeck.exceptions import ArityError
from argdeck.logger import logger
from argdeck.parser.parser_types import (
    DEFAULT_PRIORITY,
    Handler,
    ParseWarning,
    Task,
    WarningKind,
)


@dataclass
class Binding:
    """
    Represents a registered command or flag.

    Attributes:
        name (str): Unique canonical name.
        handler (Handler): Callable taking the occurrence's value strings.
        arity (int | None): Expected number of values; None means unconstrained.
        priority (int): Execution priority, higher runs first.
        dest (str): Result key; defaults to `name`.
        alias (str | None): Alternate name, if any.
        default (Any): Result reported when the binding never runs.
        help (str): Help text shown by `render_help()`.
        stores_result (bool): Whether the handler's return value is recorded.
    """

    name: str
    handler: Handler
    arity: int | None = None
    priority: int = DEFAULT_PRIORITY
    dest: str = ""
    alias: str | None = None
    default: Any = None
    help: str = ""
    stores_result: bool = True

    def __post_init__(self) -> None:
        if not self.dest:
            self.dest = self.name

    def get_arity_text(self) -> str:
        return "*" if self.arity is None else str(self.arity)

    def pack(self, values: list[str]) -> tuple[Task, list[ParseWarning]]:
        """
        Bind `values` to this binding's handler.

        Raises:
            ArityError: If fewer values are supplied than the fixed arity.
        """
        warnings: list[ParseWarning] = []
        if self.arity is not None:
            if len(values) < self.arity:
                raise ArityError(self.name, len(values), self.arity)
            if len(values) > self.arity:
                message = (
                    f"{self.name}: Expected {self.arity} arguments, "
                    f"but {len(values)} was given."
                )
                logger.warning(message)
                warnings.append(ParseWarning(WarningKind.ARITY, self.name, message))
                values = values[: self.arity]
        task = Task(
            name=self.name,
            dest=self.dest,
            handler=self.handler,
            values=tuple(values),
            priority=self.priority,
            stores_result=self.stores_result,
        )
        return task, warnings
