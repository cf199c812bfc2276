# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Token classification helpers for the Clapper parser.

Every helper here is a pure predicate over a single command-line token (or, for
`is_variadic_argument`, over a registration name). They hold no state and never
consult the registry, so the parser can apply them before it knows which
command is active.

Token shapes:
- `student`         bare word, a positional value
- `-v`              short flag
- `--verbose`       long flag
- `--no-clean`      inverted flag
- `--version=2.0`   long flag with an inline value (split by `normalize_tokens`)
- `---v`, `-long`   malformed, rejected as unsupported
"""
from __future__ import annotations

from typing import Iterable

INVERTED_PREFIX = "--no-"
VARIADIC_SUFFIX = "..."


def is_flag(token: str) -> bool:
    """Return True if the token is flag-shaped (at least two chars, leading dash)."""
    return len(token) >= 2 and token.startswith("-")


def is_short_flag(token: str) -> bool:
    """Return True if the token is a two character single-dash flag like `-v`."""
    return is_flag(token) and len(token) == 2 and not token.startswith("--")


def is_inverted_flag(token: str) -> tuple[bool, str]:
    """
    Check whether the token addresses an inverted flag.

    Returns:
        tuple[bool, str]: Whether the token starts with `--no-` and the flag
        name with that prefix removed (empty when it does not match).
    """
    if is_flag(token) and token.startswith(INVERTED_PREFIX):
        return True, token[len(INVERTED_PREFIX) :]
    return False, ""


def is_variadic_argument(name: str) -> tuple[bool, str]:
    """
    Check whether a registration name declares a variadic argument.

    Only applied to names passed to `Command.add_arg`, never to runtime tokens.

    Returns:
        tuple[bool, str]: Whether the name ends with `...` and the name with
        the suffix removed (unchanged when it does not match).
    """
    if not is_flag(name) and name.endswith(VARIADIC_SUFFIX):
        return True, name[: -len(VARIADIC_SUFFIX)]
    return False, name


def is_unsupported_flag(token: str) -> bool:
    """
    Return True if a flag-shaped token has a malformed dash prefix.

    A two character flag must start with exactly one dash (`-v`, not `--`).
    Anything longer must start with exactly two dashes (`--verbose`, not
    `-verbose` or `---verbose`). Whether the flag is registered is irrelevant.
    """
    if len(token) < 2:
        return False
    if len(token) == 2:
        return not token.startswith("-") or token.startswith("--")
    return not token.startswith("--") or token.startswith("---")


def normalize_tokens(tokens: Iterable[str]) -> list[str]:
    """
    Split inline flag assignments into separate tokens.

    `--version=2.0.0` becomes `--version`, `2.0.0`. Only flag-shaped tokens are
    split; empty fragments (as in `--output=`) are dropped.
    """
    normalized: list[str] = []
    for token in tokens:
        if is_flag(token) and "=" in token:
            normalized.extend(part for part in token.split("=") if part)
        else:
            normalized.append(token)
    return normalized
