# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw argument vector into `Token`s.

Conventions:
- `argv[0]` is the invocation name and always forms its own token.
- `-name` starts a token named `name`; `--name` starts a token named `name`.
- Everything else, including a bare `-` or `--`, is a value of the most
  recently started token.

There is no `--flag=value` syntax and no end-of-options marker.
"""
from __future__ import annotations

from typing import Sequence

from argdeck.exceptions import ConfigurationError
from argdeck.parser.parser_types import Token


def flag_name(arg: str) -> str | None:
    """Return the token name `arg` starts, or None if `arg` is a value."""
    if arg.startswith("--"):
        if len(arg) > 2:
            return arg[2:]
        return None
    if arg.startswith("-") and len(arg) > 1:
        return arg[1:]
    return None


def tokenize(argv: Sequence[str]) -> list[Token]:
    """
    Tokenize `argv`, whose first element is the invocation name.

    Raises:
        ConfigurationError: If `argv` is empty.
    """
    if not argv:
        raise ConfigurationError("Cannot parse an empty argument vector.")
    tokens = [Token(argv[0])]
    for arg in argv[1:]:
        name = flag_name(arg)
        if name is None:
            tokens[-1].add(arg)
        else:
            tokens.append(Token(name))
    return tokens
