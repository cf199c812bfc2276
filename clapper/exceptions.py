# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes raised by the Clapper argument parser.

Registration mistakes and command-line mistakes are kept apart: the first are
programming errors in the caller's schema, the second are user input that the
caller is expected to report.

All exceptions inherit from `ClapperError`, the base exception for the package.

Exception Hierarchy:
- ClapperError
    ├── SchemaError
    └── ParseError
          ├── UnknownCommandError
          ├── UnknownFlagError
          └── UnsupportedFlagError

`ParseError` is a closed family: every instance carries a `ParseErrorKind` tag
and the offending token, and no subclasses exist beyond the three above. Call
sites can therefore handle failures exhaustively:

    try:
        result = registry.parse(tokens)
    except ParseError as error:
        match error.kind:
            case ParseErrorKind.UNKNOWN_COMMAND: ...
            case ParseErrorKind.UNKNOWN_FLAG: ...
            case ParseErrorKind.UNSUPPORTED_FLAG: ...
"""
from __future__ import annotations

from enum import Enum


class ClapperError(Exception):
    """Base exception for the Clapper argument parser."""


class SchemaError(ClapperError):
    """Exception raised when a command, flag or argument cannot be registered."""


class ParseErrorKind(Enum):
    """Tag identifying which rule a command line violated."""

    UNKNOWN_COMMAND = "unknown command"
    UNKNOWN_FLAG = "unknown flag"
    UNSUPPORTED_FLAG = "unsupported flag"

    def __str__(self) -> str:
        return self.value


class ParseError(ClapperError):
    """
    Exception raised when a command line does not match the registered schema.

    Attributes:
        kind (ParseErrorKind): Which rule was violated.
        name (str): The offending command name or flag token.
    """

    kind: ParseErrorKind
    __match_args__ = ("name",)

    def __init__(self, name: str) -> None:
        if not hasattr(self, "kind"):
            raise TypeError("instantiate a concrete ParseError subclass")
        self.name = name
        super().__init__(f"{self.kind} {name} found in the arguments")

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(f"ParseError cannot be subclassed outside {__name__}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class UnknownCommandError(ParseError):
    """Exception raised when the selected command has no registered descriptor."""

    kind = ParseErrorKind.UNKNOWN_COMMAND


class UnknownFlagError(ParseError):
    """
    Exception raised when a well-formed flag does not resolve to a registered flag.

    Attributes:
        is_short (bool): True if the token used the single-dash short form.
    """

    kind = ParseErrorKind.UNKNOWN_FLAG
    __match_args__ = ("name", "is_short")

    def __init__(self, name: str, is_short: bool = False) -> None:
        super().__init__(name)
        self.is_short = is_short

    def __repr__(self) -> str:
        return f"UnknownFlagError(name={self.name!r}, is_short={self.is_short!r})"


class UnsupportedFlagError(ParseError):
    """Exception raised when a flag-shaped token has a malformed dash prefix."""

    kind = ParseErrorKind.UNSUPPORTED_FLAG
