# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, the descriptor for the root command or one sub-command.

A `Command` is the declarative catalog of what one command accepts: its flags
(indexed by long and by short name) and its positional arguments in
registration order. It is filled in by the caller's setup code through
`add_flag()` and `add_arg()` and then only read by `Registry.parse()`.

Registration is idempotent: adding a flag or argument whose name is already
taken returns the existing descriptor together with `True` instead of raising.

Example:
    info, _ = registry.register("info")
    info.add_arg("category", "manager")
    info.add_arg("subjects...")
    info.add_flag("verbose", "v", True)
    info.add_flag("no-clean", "", True)
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from clapper.exceptions import SchemaError
from clapper.logger import logger
from clapper.parser.argument import Arg
from clapper.parser.flag import Flag
from clapper.parser.tokens import is_variadic_argument


class Command:
    """
    Registered command and the flags and arguments it accepts.

    The empty name denotes the root command.
    """

    def __init__(self, name: str = "") -> None:
        self.name: str = name
        self._flags: dict[str, Flag] = {}
        self._flags_short: dict[str, str] = {}
        self._args: dict[str, Arg] = {}
        self._arg_names: list[str] = []

    @property
    def is_root(self) -> bool:
        return self.name == ""

    @property
    def flags(self) -> Mapping[str, Flag]:
        """Registered flags keyed by long name (read-only view)."""
        return MappingProxyType(self._flags)

    @property
    def args(self) -> Mapping[str, Arg]:
        """Registered arguments keyed by name (read-only view)."""
        return MappingProxyType(self._args)

    @property
    def arg_names(self) -> tuple[str, ...]:
        """Argument names in registration order."""
        return tuple(self._arg_names)

    def get_flag(self, name: str) -> Flag | None:
        return self._flags.get(name)

    def get_flag_by_short(self, short_name: str) -> Flag | None:
        long_name = self._flags_short.get(short_name)
        if long_name is None:
            return None
        return self._flags[long_name]

    def get_arg(self, name: str) -> Arg | None:
        return self._args.get(name)

    def add_flag(
        self,
        name: str,
        short_name: str = "",
        is_boolean: bool = False,
        default_value: str = "",
    ) -> tuple[Flag, bool]:
        """
        Register a flag on this command.

        A boolean flag named `no-<name>` becomes the inverted flag `<name>`:
        its default is forced to "true" and any short name is discarded.
        Other boolean flags always default to "false". Short names longer
        than one character are truncated to their first character.

        Args:
            name (str): Long name, without leading dashes.
            short_name (str): Optional short name.
            is_boolean (bool): True if the flag takes no value.
            default_value (str): Default for non-boolean flags.

        Returns:
            tuple[Flag, bool]: The flag and whether it was already registered.

        Raises:
            SchemaError: If the name is empty or the short name already
                belongs to another flag.
        """
        name = name.strip()
        short_name = short_name.strip()[:1]
        default_value = default_value.strip()

        is_inverted = False
        if is_boolean and name.startswith("no-"):
            is_inverted = True
            name = name[len("no-") :]
            default_value = "true"
            short_name = ""
        elif is_boolean:
            default_value = "false"

        if not name:
            raise SchemaError(f"Flag name cannot be empty on command '{self.name}'")

        if name in self._flags:
            return self._flags[name], True

        if short_name and short_name in self._flags_short:
            raise SchemaError(
                f"Short flag '-{short_name}' is already used by flag "
                f"'{self._flags_short[short_name]}' on command '{self.name}'"
            )

        flag = Flag(
            name=name,
            short_name=short_name,
            is_boolean=is_boolean,
            is_inverted=is_inverted,
            default_value=default_value,
        )
        self._flags[name] = flag
        if short_name:
            self._flags_short[short_name] = name
        logger.debug("Registered flag '%s' on command '%s'", name, self.name)
        return flag, False

    def add_arg(self, name: str, default_value: str = "") -> tuple[Arg, bool]:
        """
        Register a positional argument on this command.

        A name ending in `...` declares the variadic argument; the suffix is
        stripped from the stored name. Only the last argument may be variadic.

        Args:
            name (str): Argument name, optionally suffixed with `...`.
            default_value (str): Default value as text.

        Returns:
            tuple[Arg, bool]: The argument and whether it was already registered.

        Raises:
            SchemaError: If the name is empty or an argument is added after
                the variadic one.
        """
        name = name.strip()
        default_value = default_value.strip()

        is_variadic, name = is_variadic_argument(name)
        name = name.strip()

        if not name:
            raise SchemaError(f"Argument name cannot be empty on command '{self.name}'")

        if name in self._args:
            return self._args[name], True

        if self._arg_names and self._args[self._arg_names[-1]].is_variadic:
            raise SchemaError(
                f"Argument '{name}' cannot follow variadic argument "
                f"'{self._arg_names[-1]}' on command '{self.name}'"
            )

        arg = Arg(name=name, is_variadic=is_variadic, default_value=default_value)
        self._args[name] = arg
        self._arg_names.append(name)
        logger.debug("Registered argument '%s' on command '%s'", name, self.name)
        return arg, False

    def __str__(self) -> str:
        return (
            f"Command(name={self.name!r}, flags={len(self._flags)}, "
            f"args={len(self._args)})"
        )

    def __repr__(self) -> str:
        return str(self)
