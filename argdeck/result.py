# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result values returned by `CLIBuilder.parse()` and `ParsedCLI.run()`.

A `Result` is either `Ok(value)` or `Err(error)`. `unwrap()` re-raises the
carried error; callers that want to recover inspect `error` instead.

Example:
    result = builder.parse(sys.argv)
    if result.is_err():
        logger.error("Bad arguments: %s", result.error)
    parsed = result.unwrap()
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from argdeck.exceptions import ArgdeckError

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the error that stopped the operation."""

    error: ArgdeckError

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        """Re-raise the carried error."""
        raise self.error

    def unwrap_or(self, default: Any) -> Any:
        return default


Result = Union[Ok[T], Err]
