# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Flag` dataclass used by `Command` to describe one named
command-line switch.

Flags are created through `Command.add_flag()`, which derives the inverted and
default-value fields from the registration name; constructing `Flag` directly
skips those rules.

Key Attributes:
- `name`: Long name, addressed as `--name` (or `--no-name` when inverted)
- `short_name`: Optional single character, addressed as `-x`
- `is_boolean`: Presence alone sets the flag, no value is consumed
- `is_inverted`: Boolean flag registered as `no-name`; presence sets it to "false"
- `default_value`: Informational default, never applied by the parser
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Flag:
    """
    Represents a registered command-line flag.

    Attributes:
        name (str): Long name of the flag, without leading dashes.
        short_name (str): Single character short name, or "" if none.
        is_boolean (bool): True if the flag takes no value.
        is_inverted (bool): True if the flag is addressed as `--no-<name>`.
        default_value (str): Default value as text.
    """

    name: str
    short_name: str = ""
    is_boolean: bool = False
    is_inverted: bool = False
    default_value: str = ""

    @property
    def presence_value(self) -> str:
        """Value a boolean flag takes when it appears on the command line."""
        return "false" if self.is_inverted else "true"

    def get_flag_text(self) -> str:
        """Return the spelling a user types to address this flag."""
        if self.is_inverted:
            return f"--no-{self.name}"
        return f"--{self.name}"
