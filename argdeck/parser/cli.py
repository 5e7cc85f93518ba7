# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CLIBuilder` and `ParsedCLI`, the two phases of an
Argdeck command line.

`CLIBuilder` is the registration phase. Commands, typed values and boolean
options are declared on it, each optionally with an alias and a priority.
`CLIBuilder.parse()` tokenizes the argument vector, expands combined short
flags, resolves names and aliases, checks arity and returns a `ParsedCLI`.

`ParsedCLI` is the execution phase. `run()` calls the queued handlers in
descending priority order and collects their return values by destination.

Key Features:
- Declarative registration via `add_command()`, `add_value()`, `add_option()`
- One alias per binding, sharing a namespace with canonical names
- Typed conversion and validator predicates for values
- Combined short flags (`-abc` -> `-a -b -c`) when unambiguous
- Priority-ordered deferred execution
- `Ok` / `Err` results instead of process exits
- Rich-powered help listing

Example Usage:
    builder = CLIBuilder()
    builder.add_value("r", float, range_of(0.0, 1.0), dest="range")
    builder.add_option("o", alias="option")

    parsed = builder.parse(["prog", "-o", "-r", "0.5"]).unwrap()
    result = parsed.run().unwrap()

    # result.values == {'range': 0.5, 'o': True}
"""
from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Any, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from argdeck.console import console
from argdeck.exceptions import ArgdeckError, ConfigurationError, ValidationError
from argdeck.logger import logger
from argdeck.options_manager import OptionsManager
from argdeck.parser.ambiguity import resolve_ambiguity
from argdeck.parser.binding import Binding
from argdeck.parser.dispatcher import dispatch
from argdeck.parser.parser_types import (
    DEFAULT_PRIORITY,
    Handler,
    ParseWarning,
    Task,
)
from argdeck.parser.registry import Registry
from argdeck.parser.tokenizer import flag_name, tokenize
from argdeck.parser.utils import convert
from argdeck.result import Err, Ok, Result
from argdeck.utils import get_program_invocation
from argdeck.validators import ValueValidator, always


def format_flag(name: str) -> str:
    """Render a name the way it is typed: `-x` for one character, `--name` otherwise."""
    return f"-{name}" if len(name) == 1 else f"--{name}"


@dataclass
class RunResult:
    """Values produced by a successful `ParsedCLI.run()`."""

    values: dict[str, Any] = field(default_factory=dict)
    warnings: tuple[ParseWarning, ...] = ()

    def __getitem__(self, dest: str) -> Any:
        return self.values[dest]

    def get(self, dest: str, default: Any = None) -> Any:
        return self.values.get(dest, default)


class CLIBuilder:
    """
    Registration phase of an Argdeck command line.

    Names are given without leading dashes; `"-v"` and `"--verbose"` are
    accepted and normalized to `"v"` and `"verbose"`. Every registration
    method returns the builder so calls can be chained.
    """

    def __init__(
        self,
        program: str | None = None,
        description: str = "",
        options_manager: OptionsManager | None = None,
    ) -> None:
        self.console: Console = console
        self.program: str | None = program
        self.description: str = description
        self.options_manager: OptionsManager = options_manager or OptionsManager()
        self._registry: Registry = Registry()
        self._parsed: bool = False

    @property
    def registry(self) -> Registry:
        return self._registry

    def _normalize_name(self, name: str | None) -> str | None:
        if name is None:
            return None
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Names must be non-empty strings, got {name!r}.")
        if name.startswith("-"):
            stripped = flag_name(name)
            if stripped is None:
                raise ConfigurationError(f"'{name}' is not a valid flag name.")
            return stripped
        return name

    def _ensure_building(self, operation: str) -> None:
        if self._parsed:
            raise ConfigurationError(f"Can not {operation}() after parse().")

    def _register(self, binding: Binding) -> CLIBuilder:
        self._registry.add(binding)
        return self

    def add_command(
        self,
        name: str,
        handler: Handler,
        arity: int | None = None,
        priority: int = DEFAULT_PRIORITY,
        *,
        alias: str | None = None,
        dest: str | None = None,
        help: str = "",
    ) -> CLIBuilder:
        """
        Register a command.

        Args:
            name (str): Command name.
            handler (Handler): Called with the list of value strings; its return
                value is stored under `dest`.
            arity (int | None): Number of values the handler consumes, or None
                to accept any number.
            priority (int): Higher priorities run first.
            alias (str | None): Optional alternate name.
            dest (str | None): Result key; defaults to the name.
            help (str): Help text.

        Raises:
            ConfigurationError: On duplicate names, an invalid arity or
                registration after parsing.
        """
        self._ensure_building("add_command")
        if not callable(handler):
            raise ConfigurationError(f"Handler for '{name}' must be callable.")
        if arity is not None and (
            isinstance(arity, bool) or not isinstance(arity, int) or arity < 0
        ):
            raise ConfigurationError(
                f"Arity for '{name}' must be a non-negative integer or None."
            )
        canonical = self._normalize_name(name)
        assert canonical is not None
        return self._register(
            Binding(
                name=canonical,
                handler=handler,
                arity=arity,
                priority=priority,
                dest=dest or canonical,
                alias=self._normalize_name(alias),
                help=help,
            )
        )

    def add_value(
        self,
        name: str,
        target_type: Any = str,
        validator: ValueValidator | None = None,
        *,
        alias: str | None = None,
        default: Any = None,
        dest: str | None = None,
        priority: int = DEFAULT_PRIORITY,
        help: str = "",
    ) -> CLIBuilder:
        """
        Register a flag taking exactly one value.

        The value is converted to `target_type`, checked by `validator` and
        stored under `dest`. If the flag never appears, `default` is reported.

        Raises:
            ConfigurationError: On duplicate names or registration after parsing.
        """
        self._ensure_building("add_value")
        canonical = self._normalize_name(name)
        assert canonical is not None
        check = validator or always()

        def handler(values: list[str]) -> Any:
            raw = values[0]
            value = convert(raw, target_type)
            if not check(value):
                raise ValidationError(raw, canonical)
            return value

        return self._register(
            Binding(
                name=canonical,
                handler=handler,
                arity=1,
                priority=priority,
                dest=dest or canonical,
                alias=self._normalize_name(alias),
                default=default,
                help=help,
            )
        )

    def add_option(
        self,
        name: str,
        *,
        alias: str | None = None,
        default: bool = False,
        dest: str | None = None,
        priority: int = DEFAULT_PRIORITY,
        help: str = "",
    ) -> CLIBuilder:
        """
        Register a boolean flag taking no values.

        Presence stores True under `dest`; absence leaves `default` in place.

        Raises:
            ConfigurationError: On duplicate names or registration after parsing.
        """
        self._ensure_building("add_option")
        canonical = self._normalize_name(name)
        assert canonical is not None

        def handler(_: list[str]) -> bool:
            return True

        return self._register(
            Binding(
                name=canonical,
                handler=handler,
                arity=0,
                priority=priority,
                dest=dest or canonical,
                alias=self._normalize_name(alias),
                default=default,
                help=help,
            )
        )

    def _register_program(self, program: str) -> None:
        if program in self._registry:
            logger.debug("Invocation name '%s' shadows a registered name", program)
            return
        self._registry.add(
            Binding(
                name=program,
                handler=lambda _: None,
                arity=None,
                priority=DEFAULT_PRIORITY,
                stores_result=False,
            )
        )

    def parse(self, argv: Sequence[str] | None = None) -> Result[ParsedCLI]:
        """
        Parse an argument vector whose first element is the invocation name.

        Args:
            argv (Sequence[str] | None): Defaults to `sys.argv`.

        Returns:
            Result[ParsedCLI]: `Ok(ParsedCLI)`, or `Err` carrying the
            `ArityError` or `ConfigurationError` that stopped parsing.

        Raises:
            ConfigurationError: If this builder has already parsed.
        """
        self._ensure_building("parse")
        if argv is None:
            argv = sys.argv
        argv = list(argv)
        self._parsed = True
        try:
            program_token, *tokens = tokenize(argv)
            self.program = self.program or program_token.name
            self._register_program(program_token.name)
            if program_token.values:
                logger.debug(
                    "Ignoring values before the first flag: %s", program_token.values
                )
            tokens, warnings = resolve_ambiguity(tokens, self._registry)
            tasks, dispatch_warnings = dispatch(tokens, self._registry)
        except ArgdeckError as error:
            logger.error("Parsing failed: %s", error)
            return Err(error)
        warnings.extend(dispatch_warnings)
        logger.debug("Parsed %d task(s) with %d warning(s)", len(tasks), len(warnings))
        return Ok(
            ParsedCLI(
                program=program_token.name,
                tasks=tasks,
                warnings=warnings,
                bindings=self._registry.bindings(),
                options_manager=self.options_manager,
            )
        )

    def get_usage(self) -> str:
        program = self.program or get_program_invocation()
        return f"usage: {program} [options]"

    def render_help(self) -> None:
        """Print the registered bindings as a table."""
        self.console.print(escape(self.get_usage()))
        if self.description:
            self.console.print(escape(self.description))
        table = Table(box=None, show_header=True, header_style="bold")
        table.add_column("Flag")
        table.add_column("Alias")
        table.add_column("Args", justify="right")
        table.add_column("Priority", justify="right")
        table.add_column("Help")
        for binding in self._registry.bindings():
            if not binding.stores_result:
                continue
            alias = format_flag(binding.alias) if binding.alias else ""
            table.add_row(
                escape(format_flag(binding.name)),
                escape(alias),
                binding.get_arity_text(),
                str(binding.priority),
                escape(binding.help),
            )
        self.console.print(table)

    def __str__(self) -> str:
        names = ", ".join(binding.name for binding in self._registry.bindings())
        return f"CLIBuilder(bindings=[{names}], parsed={self._parsed})"

    def __repr__(self) -> str:
        return str(self)


class ParsedCLI:
    """
    Execution phase of an Argdeck command line.

    Created only by `CLIBuilder.parse()`. Holds the priority-ordered tasks and
    the warnings collected while parsing.
    """

    def __init__(
        self,
        program: str,
        tasks: list[Task],
        warnings: list[ParseWarning],
        bindings: list[Binding],
        options_manager: OptionsManager,
    ) -> None:
        self.program: str = program
        self.tasks: tuple[Task, ...] = tuple(tasks)
        self.warnings: tuple[ParseWarning, ...] = tuple(warnings)
        self.options: OptionsManager = options_manager
        self._defaults: dict[str, Any] = {
            binding.dest: binding.default
            for binding in bindings
            if binding.stores_result
        }

    def run(self) -> Result[RunResult]:
        """
        Execute every queued task in priority order.

        The first conversion, validation or other Argdeck error stops the run;
        no later task executes and `Err` is returned. Exceptions that are not
        Argdeck errors propagate unchanged.

        Returns:
            Result[RunResult]: `Ok(RunResult)` with values keyed by destination.
        """
        values = dict(self._defaults)
        for task in self.tasks:
            logger.debug("Running '%s' with %s", task.name, list(task.values))
            try:
                result = task()
            except ArgdeckError as error:
                logger.error("'%s' failed: %s", task.name, error)
                return Err(error)
            if task.stores_result:
                values[task.dest] = result
        self.options.from_dict(values)
        return Ok(RunResult(values=values, warnings=self.warnings))

    def __str__(self) -> str:
        names = ", ".join(task.name for task in self.tasks)
        return f"ParsedCLI(program='{self.program}', tasks=[{names}])"

    def __repr__(self) -> str:
        return str(self)
