"""
Clapper Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Demonstration program: registers a reference schema, parses its own command
line and prints what each command, argument and flag received.

    python -m clapper info student -V -v --output ./opt/dir --no-clean
"""
import os
import sys
from typing import Sequence

from rich.markup import escape

from clapper.console import console
from clapper.exceptions import ParseError
from clapper.parser import ParseResult, Registry
from clapper.utils import setup_logging


def build_registry(register_root: bool = True) -> Registry:
    """Build the reference schema used by the demonstration program."""
    registry = Registry()

    if register_root:
        root, _ = registry.register("")
        root.add_arg("output", "")
        root.add_flag("force", "f", True, "")
        root.add_flag("verbose", "v", True, "")
        root.add_flag("version", "V", False, "")
        root.add_flag("dir", "", False, "/var/users")

    info, _ = registry.register("info")
    info.add_arg("category", "manager")
    info.add_arg("username", "")
    info.add_arg("subjects...", "")
    info.add_flag("verbose", "v", True, "")
    info.add_flag("version", "V", False, "1.0.1")
    info.add_flag("output", "o", False, "./")
    info.add_flag("no-clean", "", True, "")

    registry.register("ghost")
    return registry


def render_result(result: ParseResult) -> None:
    console.print(
        f"[clapper.name]sub-command[/] => [clapper.command]{escape(repr(result.name))}[/]",
        soft_wrap=True,
    )
    for name, value in result.args.items():
        arg = value.arg
        console.print(
            f"argument-value => {escape(name)}=[clapper.value]{escape(repr(value.value))}[/] "
            f"[clapper.default](variadic={arg.is_variadic}, "
            f"default={escape(repr(arg.default_value))}, "
            f"syntax={escape(repr(arg.get_positional_text()))})[/]",
            soft_wrap=True,
        )
    for name, value in result.flags.items():
        flag = value.flag
        console.print(
            f"flag-value => {escape(name)}=[clapper.value]{escape(repr(value.value))}[/] "
            f"[clapper.default](short={escape(repr(flag.short_name))}, "
            f"boolean={flag.is_boolean}, inverted={flag.is_inverted}, "
            f"default={escape(repr(flag.default_value))}, "
            f"syntax={escape(repr(flag.get_flag_text()))})[/]",
            soft_wrap=True,
        )


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    registry = build_registry(register_root="CLAPPER_NO_ROOT" not in os.environ)

    try:
        result = registry.parse(argv)
    except ParseError as error:
        console.print(
            f"[clapper.error]error[/] => {escape(repr(error))}", soft_wrap=True
        )
        return 1

    render_result(result)
    return 0


def run() -> None:
    setup_logging()
    sys.exit(main())


if __name__ == "__main__":
    run()
