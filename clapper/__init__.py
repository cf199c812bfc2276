"""
Clapper Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ClapperError,
    ParseError,
    ParseErrorKind,
    SchemaError,
    UnknownCommandError,
    UnknownFlagError,
    UnsupportedFlagError,
)
from .parser import Arg, ArgValue, Command, Flag, FlagValue, ParseResult, Registry

logger = logging.getLogger("clapper")

__version__ = "0.1.0"

__all__ = [
    "Arg",
    "ArgValue",
    "ClapperError",
    "Command",
    "Flag",
    "FlagValue",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "Registry",
    "SchemaError",
    "UnknownCommandError",
    "UnknownFlagError",
    "UnsupportedFlagError",
]
