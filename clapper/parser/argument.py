# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Arg` dataclass used by `Command` to describe one positional
command-line argument.

Positional tokens are matched to arguments in registration order. The last
registered argument may be variadic (registered as `name...`), in which case
it collects every surplus positional token as a comma-joined list.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class Arg:
    """
    Represents a registered positional argument.

    Attributes:
        name (str): Argument name, without the `...` variadic marker.
        is_variadic (bool): True if the argument collects all surplus tokens.
        default_value (str): Default value as text.
    """

    name: str
    is_variadic: bool = False
    default_value: str = ""

    def get_positional_text(self) -> str:
        """Return the argument as it would be declared, e.g. `subjects...`."""
        if self.is_variadic:
            return f"{self.name}..."
        return self.name
