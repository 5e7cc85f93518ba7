# Argdeck CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion utilities for Argdeck argument parsing.

This module converts the raw strings found on a command line into the Python
types bindings ask for. Every failure surfaces as a `ConversionError` carrying
the offending string and the target type; no partial value is ever returned.

Functions:
- convert_bool: Convert 'true' / 'false' (any capitalization) to a boolean.
- convert_enum: Convert a string to an Enum member by name or value.
- convert_number: Convert a plain ASCII decimal literal to an int or float.
- convert: General-purpose conversion to a target type (including unions,
  literals, enums and datetimes).
"""
import re
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from argdeck.exceptions import ConversionError

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def convert_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Only 'true' and 'false' are accepted, compared case-insensitively.

    Raises:
        ConversionError: If the string is neither.
    """
    normalized = value.lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    raise ConversionError(value, bool)


def convert_enum(value: str, enum_type: EnumMeta) -> Any:
    """
    Convert a string to an Enum member.

    Tries the member name first, then the member value coerced to the type of
    the enum's values.
    """
    try:
        return enum_type[value]
    except KeyError:
        pass

    base_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(base_type(value))
    except (ValueError, TypeError):
        values = [str(member.value) for member in enum_type]
        raise ConversionError(
            value, enum_type, f"Expected one of {{{', '.join(values)}}}."
        ) from None


def convert_number(value: str, target_type: type) -> Any:
    """
    Convert a string to `int` or `float`.

    Only plain ASCII literals are accepted: no surrounding whitespace, no digit
    separators and no non-ASCII digits.
    """
    pattern = INT_PATTERN if target_type is int else FLOAT_PATTERN
    if pattern.fullmatch(value) is None:
        raise ConversionError(value, target_type)
    try:
        return target_type(value)
    except (ValueError, OverflowError) as error:
        raise ConversionError(value, target_type) from error


def convert(value: str, target_type: Any) -> Any:
    """
    Convert a raw string to the given target type.

    Args:
        value (str): The raw command-line string.
        target_type (Any): The desired type. Plain types such as `str`, `int`,
            `float` and `bool` are handled directly; `Literal`, unions, `Enum`
            subclasses and `datetime` are supported; any other callable is
            called with the raw string.

    Returns:
        Any: The converted value.

    Raises:
        ConversionError: If the string does not fully convert.
    """
    if target_type is str:
        return value

    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        if value not in args:
            raise ConversionError(value, target_type, f"Expected one of {args}.")
        return value

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            try:
                return convert(value, arg)
            except ConversionError:
                continue
        raise ConversionError(value, target_type)

    if isinstance(target_type, EnumMeta):
        return convert_enum(value, target_type)

    if target_type is bool:
        return convert_bool(value)

    if target_type in (int, float):
        return convert_number(value, target_type)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ConversionError(value, datetime) from error

    if not callable(target_type):
        raise ConversionError(value, target_type, "Target type is not callable.")

    try:
        return target_type(value)
    except (ValueError, TypeError, ArithmeticError) as error:
        raise ConversionError(value, target_type) from error
