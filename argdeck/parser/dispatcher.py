# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Turns resolved tokens into an ordered list of `Task`s.

Each token is looked up as a binding name, then as an alias. Unknown tokens
produce warnings and no task. Tasks are ordered by descending priority using
Python's stable sort, so tasks of equal priority keep command-line order.
"""
from __future__ import annotations

from argdeck.logger import logger
from argdeck.parser.parser_types import ParseWarning, Task, Token, WarningKind
from argdeck.parser.registry import Registry


def unrecognized(token: Token) -> list[ParseWarning]:
    """Warnings for a token that matches no binding or alias."""
    message = f"Unrecognized option '{token.name}'."
    logger.warning(message)
    warnings = [ParseWarning(WarningKind.UNRECOGNIZED, token.name, message)]
    for value in token.values:
        message = f"Discarded arguments '{value}'"
        logger.warning(message)
        warnings.append(ParseWarning(WarningKind.DISCARDED, token.name, message))
    return warnings


def dispatch(
    tokens: list[Token], registry: Registry
) -> tuple[list[Task], list[ParseWarning]]:
    """
    Resolve `tokens` against `registry` and return priority-ordered tasks.

    Raises:
        ArityError: If a token supplies fewer values than its binding expects.
    """
    tasks: list[Task] = []
    warnings: list[ParseWarning] = []
    for token in tokens:
        binding = registry.resolve(token.name)
        if binding is None:
            warnings.extend(unrecognized(token))
            continue
        task, arity_warnings = binding.pack(token.values)
        tasks.append(task)
        warnings.extend(arity_warnings)
    tasks.sort(key=lambda task: task.priority, reverse=True)
    return tasks, warnings
