# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value validators for Argdeck bindings.

A validator is a plain predicate taking an already-converted value and
returning True if the value is acceptable. Validators never see raw strings
that failed conversion.

Included Validators:
- always: Accepts any value. Default for `add_value()`.
- range_of: Half-open numeric range `low <= v < high`.
- one_of: Value must equal one element of a collection.
- regex_match: The whole string must match a pattern.
- email: Addresses of the form `local@domain.tld`.

`prompt_validator` adapts a conversion + validator pair to a Prompt Toolkit
`Validator`, so the same rules can guard interactive input.
"""
import re
from typing import Any, Callable, Iterable

from prompt_toolkit.validation import Validator as PromptValidator

from argdeck.exceptions import ConversionError
from argdeck.parser.utils import convert

ValueValidator = Callable[[Any], bool]

EMAIL_PATTERN = r"^\w+([-+.]\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$"


def always() -> ValueValidator:
    """Validator that accepts every value."""

    def validate(_: Any) -> bool:
        return True

    return validate


def range_of(low: Any, high: Any) -> ValueValidator:
    """Validator for the half-open range `low <= value < high`."""

    def validate(value: Any) -> bool:
        return low <= value < high

    return validate


def one_of(choices: Iterable[Any]) -> ValueValidator:
    """Validator that accepts only members of `choices` of the same type."""
    allowed = tuple(choices)

    def validate(value: Any) -> bool:
        return any(
            type(value) is type(choice) and value == choice for choice in allowed
        )

    return validate


def regex_match(pattern: str) -> ValueValidator:
    """Validator requiring the entire string to match `pattern`."""
    compiled = re.compile(pattern)

    def validate(value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return compiled.fullmatch(value) is not None

    return validate


def email() -> ValueValidator:
    """Validator for e-mail addresses."""
    return regex_match(EMAIL_PATTERN)


def prompt_validator(
    target_type: Any = str,
    validator: ValueValidator | None = None,
    error_message: str | None = None,
) -> PromptValidator:
    """Prompt Toolkit validator that converts the text and applies `validator`."""
    check = validator or always()

    def validate(text: str) -> bool:
        try:
            value = convert(text, target_type)
        except ConversionError:
            return False
        return check(value)

    if error_message is None:
        type_name = getattr(target_type, "__name__", str(target_type))
        error_message = f"Invalid input. Enter a valid {type_name}."

    return PromptValidator.from_callable(validate, error_message=error_message)
