# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Registry`, the catalog of commands accepted by a
program, and the single-pass parser that matches command-line tokens against
it.

The registry maps command names to `Command` descriptors. The empty name is
the root command, used when no sub-command is given or can be inferred.

Parsing runs in four steps:
1. Command selection: the root command is chosen when there are no tokens,
   when the first token is a flag, or when the first token is not a known
   command and the root command declares positional arguments. Otherwise the
   first token names the sub-command.
2. Normalization: `--name=value` is split into `--name`, `value`.
3. Shape validation: any malformed flag (`---x`, `-long`) aborts the parse.
4. Matching: tokens are walked left to right and routed to flags or to the
   next free positional argument.

The registry itself is never written to while parsing; each call to `parse()`
returns a freshly allocated `ParseResult`.

Example Usage:
    registry = Registry()
    root, _ = registry.register("")
    root.add_arg("output")
    root.add_flag("verbose", "v", True)
    root.add_flag("dir", "", False, "/var/users")

    result = registry.parse(["--verbose", "--dir", "./sub/dir", "userinfo"])

    # result.name == ""
    # result.flags["verbose"].value == "true"
    # result.args["output"].value == "userinfo"
"""
from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from clapper.exceptions import (
    UnknownCommandError,
    UnknownFlagError,
    UnsupportedFlagError,
)
from clapper.logger import logger
from clapper.parser.command import Command
from clapper.parser.flag import Flag
from clapper.parser.parser_types import ParseResult
from clapper.parser.tokens import (
    is_flag,
    is_inverted_flag,
    is_short_flag,
    is_unsupported_flag,
    normalize_tokens,
)


class Registry:
    """
    Holds the registered commands and parses command lines against them.

    Features:
    - Root command plus any number of named sub-commands.
    - Short (`-v`) and long (`--verbose`) flags.
    - Boolean flags and inverted (`--no-clean`) flags.
    - Inline assignment (`--version=2.0.0`).
    - Positional arguments with one trailing variadic argument.
    """

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}

    @property
    def commands(self) -> Mapping[str, Command]:
        return dict(self._commands)

    @property
    def root(self) -> Command | None:
        """The root command, if one was registered."""
        return self._commands.get("")

    def register(self, name: str = "") -> tuple[Command, bool]:
        """
        Register a command.

        Args:
            name (str): Command name; surrounding whitespace is ignored and the
                empty name registers the root command.

        Returns:
            tuple[Command, bool]: The command and whether it was already registered.
        """
        name = name.strip()
        if name in self._commands:
            return self._commands[name], True
        command = Command(name)
        self._commands[name] = command
        logger.debug("Registered command '%s'", name)
        return command, False

    def parse(self, tokens: Sequence[str] | None = None) -> ParseResult:
        """
        Parse command-line tokens into a `ParseResult`.

        Args:
            tokens (Sequence[str] | None): The command line without the program
                name, typically `sys.argv[1:]`.

        Returns:
            ParseResult: The selected command with the values it received.

        Raises:
            UnknownCommandError: If the selected command is not registered.
            UnsupportedFlagError: If a flag token has a malformed dash prefix.
            UnknownFlagError: If a flag token does not resolve to a registered flag.
        """
        tokens = list(tokens or [])
        logger.debug("Parsing tokens: %s", tokens)

        if self._is_root_command(tokens):
            name, remaining = "", tokens
        else:
            name, remaining = tokens[0], tokens[1:]

        command = self._commands.get(name)
        if command is None:
            logger.debug("Unknown command '%s'", name)
            raise UnknownCommandError(name)

        remaining = normalize_tokens(remaining)
        for token in remaining:
            if is_flag(token) and is_unsupported_flag(token):
                logger.debug("Unsupported flag '%s'", token)
                raise UnsupportedFlagError(token)

        result = ParseResult.for_command(command)
        i = 0
        while i < len(remaining):
            i = self._handle_token(command, remaining, i, result)

        logger.debug("Parsed command '%s': %s", name, result.to_dict())
        return result

    def _is_root_command(self, tokens: list[str]) -> bool:
        """Decide whether the tokens belong to the root command."""
        if not tokens or is_flag(tokens[0]):
            return True
        root = self.root
        return root is not None and bool(root.arg_names) and tokens[0] not in self

    def _handle_token(
        self,
        command: Command,
        tokens: list[str],
        i: int,
        result: ParseResult,
    ) -> int:
        token = tokens[i]
        if not token:
            return i + 1

        if not is_flag(token):
            self._assign_positional(command, token, result)
            return i + 1

        flag = self._resolve_flag(command, token)
        if flag.is_boolean:
            result.flags[flag.name].value = flag.presence_value
            return i + 1

        if i + 1 < len(tokens) and tokens[i + 1] and not is_flag(tokens[i + 1]):
            result.flags[flag.name].value = tokens[i + 1]
            return i + 2
        return i + 1

    def _resolve_flag(self, command: Command, token: str) -> Flag:
        """Look up the flag a well-formed flag token addresses."""
        if is_short_flag(token):
            flag = command.get_flag_by_short(token[1:])
            if flag is None:
                logger.debug("Unknown short flag '%s'", token)
                raise UnknownFlagError(token, is_short=True)
            return flag

        inverted, name = is_inverted_flag(token)
        if inverted:
            flag = command.get_flag(name)
            if flag is None or not flag.is_inverted:
                logger.debug("Unknown inverted flag '%s'", token)
                raise UnknownFlagError(token)
            return flag

        flag = command.get_flag(token.lstrip("-"))
        if flag is None or flag.is_inverted:
            logger.debug("Unknown flag '%s'", token)
            raise UnknownFlagError(token)
        return flag

    def _assign_positional(
        self, command: Command, token: str, result: ParseResult
    ) -> None:
        """Give a positional token to the first free argument slot."""
        names = command.arg_names
        for index, name in enumerate(names):
            value = result.args[name]
            if index == len(names) - 1 and value.arg.is_variadic:
                value.append(token)
                return
            if not value.is_set:
                value.value = token
                return
        logger.debug("Ignoring surplus positional token '%s'", token)

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __getitem__(self, name: str) -> Command:
        return self._commands[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        names = ", ".join(repr(name) for name in self._commands)
        return f"Registry(commands=[{names}])"

    def __repr__(self) -> str:
        return str(self)
