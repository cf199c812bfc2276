"""
Clapper Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Arg
from .command import Command
from .flag import Flag
from .parser_types import ArgValue, FlagValue, ParseResult
from .registry import Registry
from .tokens import (
    is_flag,
    is_inverted_flag,
    is_short_flag,
    is_unsupported_flag,
    is_variadic_argument,
    normalize_tokens,
)

__all__ = [
    "Arg",
    "ArgValue",
    "Command",
    "Flag",
    "FlagValue",
    "ParseResult",
    "Registry",
    "is_flag",
    "is_inverted_flag",
    "is_short_flag",
    "is_unsupported_flag",
    "is_variadic_argument",
    "normalize_tokens",
]
