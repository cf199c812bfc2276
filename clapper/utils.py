# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""utils.py

Logging set-up for programs built on Clapper.

The parser never installs handlers of its own. `Registry`, `Command` and the
config loader write DEBUG records to the "clapper" logger, and a program
decides where those records land by calling `setup_logging` once at start-up
(the bundled `clapper-demo` does so in `clapper.__main__.run`).
"""
from __future__ import annotations

import logging
import os

import pythonjsonlogger.json
from rich.logging import RichHandler

JSON_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
TEXT_LOG_FORMAT = "%(asctime)s [%(name)s] [%(levelname)s] %(message)s"
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def running_in_container() -> bool:
    """True if PID 1 belongs to a known container runtime's cgroup."""
    try:
        with open("/proc/1/cgroup", "r", encoding="UTF-8") as f:
            content = f.read()
    except OSError:
        return False
    return any(marker in content for marker in CONTAINER_MARKERS)


def _json_formatter() -> logging.Formatter:
    return pythonjsonlogger.json.JsonFormatter(JSON_LOG_FORMAT)


def setup_logging(
    mode: str | None = None,
    log_filename: str | None = None,
    json_log_to_file: bool = False,
    file_log_level: int = logging.DEBUG,
    console_log_level: int = logging.WARNING,
) -> None:
    """
    Route the "clapper" logger, and the rest of the root logger, to the console
    and optionally to a file.

    The mode is validated before anything is changed, so a bad mode leaves the
    existing root handlers in place. Once it is valid, every root handler is
    replaced by one console handler, plus a file handler when `log_filename`
    is given. The console level defaults to WARNING, which keeps the parser's
    DEBUG records (selected command, registered flags and arguments, ignored
    surplus positionals) out of normal program output. The file level defaults
    to DEBUG, so a log file captures all of them.

    Args:
        mode (str | None):
            "cli" for a Rich console handler, or "json" for one JSON object
            per line on stderr. When omitted, `CLAPPER_LOG_MODE` is used, and
            failing that "json" inside a container and "cli" elsewhere.
        log_filename (str | None):
            File to append records to. No file handler is added when omitted.
        json_log_to_file (bool):
            Write JSON lines to the file instead of plain text.
        file_log_level (int):
            Minimum level for the file handler.
        console_log_level (int):
            Minimum level for the console handler.

    Raises:
        ValueError: If `mode` is neither "cli" nor "json".
    """
    if not mode:
        mode = os.getenv("CLAPPER_LOG_MODE") or (
            "json" if running_in_container() else "cli"
        )

    if mode == "cli":
        console_handler: RichHandler | logging.StreamHandler = RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    elif mode == "json":
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_json_formatter())
    else:
        raise ValueError(f"Invalid log mode: {mode}")

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)
    root.handlers.clear()

    console_handler.setLevel(console_log_level)
    root.addHandler(console_handler)

    if log_filename:
        file_handler = logging.FileHandler(log_filename, "a", "UTF-8")
        file_handler.setLevel(file_log_level)
        if json_log_to_file:
            file_handler.setFormatter(_json_formatter())
        else:
            file_handler.setFormatter(
                logging.Formatter(TEXT_LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
            )
        root.addHandler(file_handler)

    logging.getLogger("clapper").debug("Logging initialized in '%s' mode.", mode)
