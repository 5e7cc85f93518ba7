# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Expansion of combined short flags.

`-abc` is read as `-a -b -c` when `abc` is not itself registered but each of
`a`, `b` and `c` is. Combined flags never carry values; values that followed
the cluster are discarded with a warning.
"""
from __future__ import annotations

from argdeck.logger import logger
from argdeck.parser.parser_types import ParseWarning, Token, WarningKind
from argdeck.parser.registry import Registry


def is_combined(name: str, registry: Registry) -> bool:
    """True if `name` is unregistered but every character of it is registered."""
    if name in registry:
        return False
    return all(char in registry for char in name)


def resolve_ambiguity(
    tokens: list[Token], registry: Registry
) -> tuple[list[Token], list[ParseWarning]]:
    """Return a new token list with combined short flags split apart."""
    resolved: list[Token] = []
    warnings: list[ParseWarning] = []
    for token in tokens:
        if not is_combined(token.name, registry):
            resolved.append(token)
            continue
        logger.debug("Expanding combined flags '%s'", token.name)
        resolved.extend(Token(char) for char in token.name)
        for value in token.values:
            message = f"Discarded arguments '{value}'"
            logger.warning(message)
            warnings.append(ParseWarning(WarningKind.DISCARDED, token.name, message))
    return resolved, warnings
