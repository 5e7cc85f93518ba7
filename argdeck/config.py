# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argdeck command lines.

A command line can be declared in a YAML or TOML file instead of code:

    program: tool
    description: Example tool
    bindings:
      - kind: option
        name: o
        alias: option
      - kind: value
        name: r
        type: float
        dest: range
        validator:
          range: [0.0, 1.0]
      - kind: command
        name: p
        alias: print
        action: my_module.print_args
        priority: 10
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, model_validator
from pydantic import ValidationError as SchemaError

from argdeck.exceptions import ConfigurationError
from argdeck.logger import logger
from argdeck.parser.cli import CLIBuilder
from argdeck.parser.parser_types import DEFAULT_PRIORITY
from argdeck.validators import (
    ValueValidator,
    always,
    email,
    one_of,
    range_of,
    regex_match,
)

TYPE_NAMES: dict[str, type] = {
    "str": str,
    "int": int,
    "float": float,
    "bool": bool,
}


def import_action(dotted_path: str) -> Any:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigurationError(f"Invalid action path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigurationError(
            f"Could not import '{dotted_path}': {error}"
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigurationError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(action):
        raise ConfigurationError(f"'{dotted_path}' is not callable")
    return action


class RawValidator(BaseModel):
    """Validator declaration; exactly one field may be set."""

    range: list[Any] | None = None
    one_of: list[Any] | None = None
    regex: str | None = None
    email: bool = False

    @model_validator(mode="after")
    def validate_single_rule(self) -> RawValidator:
        rules = [
            self.range is not None,
            self.one_of is not None,
            self.regex is not None,
            self.email,
        ]
        if sum(rules) > 1:
            raise ValueError("Only one validator rule may be given per binding.")
        if self.range is not None and len(self.range) != 2:
            raise ValueError("range must be a [low, high] pair.")
        return self

    def build(self, target_type: type) -> ValueValidator:
        if self.range is not None:
            low, high = (target_type(bound) for bound in self.range)
            return range_of(low, high)
        if self.one_of is not None:
            return one_of(target_type(choice) for choice in self.one_of)
        if self.regex is not None:
            return regex_match(self.regex)
        if self.email:
            return email()
        return always()


class RawBinding(BaseModel):
    """Raw binding model for Argdeck configuration."""

    kind: Literal["command", "value", "option"]
    name: str
    alias: str | None = None
    dest: str | None = None
    help: str = ""
    priority: int = DEFAULT_PRIORITY
    default: Any = None

    action: str | None = None
    arity: int | None = Field(default=None, ge=0)

    type: str = "str"
    validator: RawValidator | None = None

    @model_validator(mode="after")
    def validate_kind_fields(self) -> RawBinding:
        if self.kind == "command" and not self.action:
            raise ValueError(f"Command '{self.name}' requires an action path.")
        if self.kind != "command" and self.action:
            raise ValueError(f"Only commands take an action ('{self.name}').")
        if self.type not in TYPE_NAMES:
            raise ValueError(
                f"Unsupported type '{self.type}'. Must be one of: "
                f"{', '.join(TYPE_NAMES)}"
            )
        if self.validator is not None and self.kind != "value":
            raise ValueError(f"Only values take a validator ('{self.name}').")
        return self

    def register(self, builder: CLIBuilder) -> None:
        if self.kind == "command":
            assert self.action is not None
            builder.add_command(
                self.name,
                import_action(self.action),
                self.arity,
                self.priority,
                alias=self.alias,
                dest=self.dest,
                help=self.help,
            )
        elif self.kind == "value":
            target_type = TYPE_NAMES[self.type]
            validator = self.validator.build(target_type) if self.validator else None
            builder.add_value(
                self.name,
                target_type,
                validator,
                alias=self.alias,
                default=self.default,
                dest=self.dest,
                priority=self.priority,
                help=self.help,
            )
        else:
            builder.add_option(
                self.name,
                alias=self.alias,
                default=bool(self.default),
                dest=self.dest,
                priority=self.priority,
                help=self.help,
            )


class ArgdeckConfig(BaseModel):
    """Argdeck configuration model."""

    program: str | None = None
    description: str = ""
    bindings: list[RawBinding] = Field(default_factory=list)

    def to_builder(self) -> CLIBuilder:
        builder = CLIBuilder(program=self.program, description=self.description)
        for binding in self.bindings:
            binding.register(builder)
        return builder


def loader(file_path: Path | str) -> CLIBuilder:
    """
    Load an Argdeck command line from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        CLIBuilder: A builder with every declared binding registered.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigurationError: If the file format is unsupported or invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ConfigurationError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping with a list of bindings."
        )

    try:
        config = ArgdeckConfig.model_validate(raw_config)
    except SchemaError as error:
        raise ConfigurationError(f"Invalid configuration in {path}: {error}") from error
    logger.debug("Loaded %d binding(s) from %s", len(config.bindings), path)
    return config.to_builder()
