# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by Argdeck.

These exceptions separate programmer mistakes made while declaring a CLI
(duplicate names, registering after parsing) from problems with the user's
input (values that cannot be converted, rejected values, missing values).

All exceptions inherit from `ArgdeckError`, the base exception for the package.

Exception Hierarchy:
- ArgdeckError
    ├── ConfigurationError
    ├── ConversionError
    ├── ValidationError
    └── ArityError

Non-fatal problems (unrecognized options, discarded values, surplus values)
are not exceptions; they are reported as `ParseWarning` records.
"""
from typing import Any


class ArgdeckError(Exception):
    """Base exception for Argdeck."""


class ConfigurationError(ArgdeckError):
    """Raised when the CLI declaration itself is invalid."""


class ConversionError(ArgdeckError):
    """Raised when a raw string cannot be converted to the target type."""

    def __init__(self, raw: str, target_type: Any, reason: str = "") -> None:
        self.raw = raw
        self.target_type = target_type
        type_name = getattr(target_type, "__name__", str(target_type))
        message = f"Unexpected conversion of '{raw}' to {type_name}."
        if reason:
            message = f"{message} {reason}"
        super().__init__(message)


class ValidationError(ArgdeckError):
    """Raised when a converted value is rejected by its validator."""

    def __init__(self, raw: str, name: str | None = None) -> None:
        self.raw = raw
        self.name = name
        prefix = f"{name}: " if name else ""
        super().__init__(f"{prefix}Invalid value '{raw}'")


class ArityError(ArgdeckError):
    """Raised when a binding receives fewer values than it expects."""

    def __init__(self, name: str, supplied: int, expected: int) -> None:
        self.name = name
        self.supplied = supplied
        self.expected = expected
        super().__init__(
            f"{name}: Too few arguments ({supplied}), expects {expected}"
        )
