# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry of bindings and aliases for an Argdeck CLI.

The registry owns two disjoint namespaces: canonical binding names and alias
names. Any attempt to reuse a name that is already taken in either namespace
raises `ConfigurationError`.
"""
from __future__ import annotations

from argdeck.exceptions import ConfigurationError
from argdeck.logger import logger
from argdeck.parser.binding import Binding


class Registry:
    """Stores bindings by canonical name plus an alias -> name mapping."""

    def __init__(self) -> None:
        self._bindings: dict[str, Binding] = {}
        self._aliases: dict[str, str] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._bindings or name in self._aliases

    def __len__(self) -> int:
        return len(self._bindings)

    def _check_available(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise ConfigurationError(f"Names must be non-empty strings, got {name!r}.")
        if name in self:
            raise ConfigurationError(f"Duplicate names are prohibited.('{name}').")

    def add(self, binding: Binding) -> None:
        """Register `binding` and its alias, if any."""
        self._check_available(binding.name)
        if binding.alias is not None:
            if binding.alias == binding.name:
                raise ConfigurationError(
                    f"Duplicate names are prohibited.('{binding.alias}')."
                )
            self._check_available(binding.alias)
            self._aliases[binding.alias] = binding.name
        self._bindings[binding.name] = binding
        logger.debug(
            "Registered '%s' (alias=%s, arity=%s, priority=%d)",
            binding.name,
            binding.alias,
            binding.get_arity_text(),
            binding.priority,
        )

    def is_binding(self, name: str) -> bool:
        return name in self._bindings

    def is_alias(self, name: str) -> bool:
        return name in self._aliases

    def resolve(self, name: str) -> Binding | None:
        """Return the binding for a canonical name or alias, or None."""
        if name in self._bindings:
            return self._bindings[name]
        canonical = self._aliases.get(name)
        if canonical is not None:
            return self._bindings[canonical]
        return None

    def bindings(self) -> list[Binding]:
        return list(self._bindings.values())

    def aliases(self) -> dict[str, str]:
        return dict(self._aliases)
