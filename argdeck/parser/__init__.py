"""
Argdeck CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .ambiguity import resolve_ambiguity
from .binding import Binding
from .cli import CLIBuilder, ParsedCLI, RunResult
from .dispatcher import dispatch
from .parser_types import DEFAULT_PRIORITY, ParseWarning, Task, Token, WarningKind
from .registry import Registry
from .tokenizer import tokenize
from .utils import convert

__all__ = [
    "Binding",
    "CLIBuilder",
    "DEFAULT_PRIORITY",
    "ParsedCLI",
    "ParseWarning",
    "Registry",
    "RunResult",
    "Task",
    "Token",
    "WarningKind",
    "convert",
    "dispatch",
    "resolve_ambiguity",
    "tokenize",
]
