# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result models produced by `Registry.parse()`.

Contents:
- `FlagValue`: A registered `Flag` paired with the raw text it received.
- `ArgValue`: A registered `Arg` paired with the raw text it received.
- `ParseResult`: The selected command together with one value holder for
  every flag and argument that command declares.

A `ParseResult` is allocated fresh for each parse, so the registered schema is
never written to and repeated parses cannot see each other's values.

Values stay raw strings, with "" meaning "not set on the command line".
Defaults are not substituted; the accessors below (`value_or_default`,
`as_bool`, `as_list`) are a thin typed layer for callers that want them.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from clapper.parser.argument import Arg
from clapper.parser.command import Command
from clapper.parser.flag import Flag

_TRUE_VALUES = ("true", "1", "yes", "y", "on")


@dataclass
class FlagValue:
    """Tracks the value a flag received during one parse."""

    flag: Flag
    value: str = ""

    @property
    def name(self) -> str:
        return self.flag.name

    @property
    def is_set(self) -> bool:
        return self.value != ""

    @property
    def value_or_default(self) -> str:
        return self.value if self.is_set else self.flag.default_value

    def as_bool(self) -> bool:
        """Interpret the value (or the default when unset) as a boolean."""
        return self.value_or_default.lower() in _TRUE_VALUES


@dataclass
class ArgValue:
    """Tracks the value an argument received during one parse."""

    arg: Arg
    value: str = ""

    @property
    def name(self) -> str:
        return self.arg.name

    @property
    def is_set(self) -> bool:
        return self.value != ""

    @property
    def value_or_default(self) -> str:
        return self.value if self.is_set else self.arg.default_value

    def append(self, token: str) -> None:
        """Add a token to a variadic value as a comma-joined list."""
        self.value = f"{self.value},{token}" if self.value else token

    def as_list(self) -> list[str]:
        """Split a variadic value back into its tokens."""
        if not self.value:
            return []
        return self.value.split(",")


@dataclass
class ParseResult:
    """
    Structured outcome of a successful parse.

    Attributes:
        command (Command): The command the tokens were matched against.
        flags (dict[str, FlagValue]): One entry per registered flag, by long name.
        args (dict[str, ArgValue]): One entry per registered argument, by name.
    """

    command: Command
    flags: dict[str, FlagValue] = field(default_factory=dict)
    args: dict[str, ArgValue] = field(default_factory=dict)

    @classmethod
    def for_command(cls, command: Command) -> ParseResult:
        """Build an empty result holding an unset value for every descriptor."""
        return cls(
            command=command,
            flags={name: FlagValue(flag) for name, flag in command.flags.items()},
            args={name: ArgValue(command.get_arg(name)) for name in command.arg_names},
        )

    @property
    def name(self) -> str:
        """Name of the selected command ("" for the root command)."""
        return self.command.name

    def flag(self, name: str) -> FlagValue:
        """Return the value holder for a flag, raising KeyError if unknown."""
        return self.flags[name]

    def arg(self, name: str) -> ArgValue:
        """Return the value holder for an argument, raising KeyError if unknown."""
        return self.args[name]

    def to_dict(self) -> dict[str, dict[str, str]]:
        """Return the raw values as plain dictionaries."""
        return {
            "flags": {name: value.value for name, value in self.flags.items()},
            "args": {name: value.value for name, value in self.args.items()},
        }
