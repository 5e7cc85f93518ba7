# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Exposes parsed results as `argparse.Namespace` objects.

Handlers in Argdeck return values instead of writing into caller-owned
variables. After `ParsedCLI.run()` succeeds, the values are stored in an
`OptionsManager` under the "cli_args" namespace. Callers that want the
"bind a flag to a variable" feel can hold a getter from `get_value_getter()`
and read it after the run.

Typical Usage:
    parsed = builder.parse(sys.argv).unwrap()
    parsed.run().unwrap()
    if parsed.options.get("verbose"):
        ...
    get_range = parsed.options.get_value_getter("range")
"""

from argparse import Namespace
from collections import defaultdict
from typing import Any, Callable

from argdeck.logger import logger


class OptionsManager:
    """Holds option values across one or more named namespaces."""

    def __init__(self, namespaces: list[tuple[str, Namespace]] | None = None) -> None:
        self.options: defaultdict = defaultdict(Namespace)
        if namespaces:
            for namespace_name, namespace in namespaces:
                self.from_namespace(namespace, namespace_name)

    def from_namespace(
        self, namespace: Namespace, namespace_name: str = "cli_args"
    ) -> None:
        self.options[namespace_name] = namespace

    def from_dict(self, values: dict[str, Any], namespace_name: str = "cli_args") -> None:
        """Replace a namespace with the given values."""
        self.from_namespace(Namespace(**values), namespace_name)
        logger.debug("Stored %d option(s) in '%s'", len(values), namespace_name)

    def get(
        self, option_name: str, default: Any = None, namespace_name: str = "cli_args"
    ) -> Any:
        """Get the value of an option."""
        return getattr(self.options[namespace_name], option_name, default)

    def set(self, option_name: str, value: Any, namespace_name: str = "cli_args") -> None:
        """Set the value of an option."""
        setattr(self.options[namespace_name], option_name, value)

    def has_option(self, option_name: str, namespace_name: str = "cli_args") -> bool:
        """Check if an option exists in the namespace."""
        return hasattr(self.options[namespace_name], option_name)

    def get_value_getter(
        self, option_name: str, namespace_name: str = "cli_args"
    ) -> Callable[[], Any]:
        """Get the value of an option as a getter function."""

        def _getter() -> Any:
            return self.get(option_name, namespace_name=namespace_name)

        return _getter

    def get_namespace_dict(self, namespace_name: str) -> dict[str, Any]:
        """Return all options in a namespace as a dictionary."""
        if namespace_name not in self.options:
            raise ValueError(f"Namespace '{namespace_name}' not found.")
        return vars(self.options[namespace_name])
