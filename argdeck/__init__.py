"""
Argdeck CLI Toolkit

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgdeckError,
    ArityError,
    ConfigurationError,
    ConversionError,
    ValidationError,
)
from .parser import CLIBuilder, ParsedCLI, RunResult
from .result import Err, Ok
from .validators import always, email, one_of, range_of, regex_match

logger = logging.getLogger("argdeck")


__all__ = [
    "ArgdeckError",
    "ArityError",
    "CLIBuilder",
    "ConfigurationError",
    "ConversionError",
    "Err",
    "Ok",
    "ParsedCLI",
    "RunResult",
    "ValidationError",
    "always",
    "email",
    "one_of",
    "range_of",
    "regex_match",
]
