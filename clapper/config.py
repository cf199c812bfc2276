# Clapper Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Schema loader that builds a `Registry` from a YAML or TOML file.

Only the schema is declared in the file (commands, their flags and their
positional arguments). Values are still taken exclusively from the command
line at parse time.

Example (YAML):
    commands:
      - name: ""
        args:
          - name: output
        flags:
          - {name: force, short: f, boolean: true}
          - {name: dir, default: /var/users}
      - name: info
        args:
          - {name: category, default: manager}
          - {name: "subjects..."}
        flags:
          - {name: no-clean, boolean: true}
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from clapper.exceptions import SchemaError
from clapper.logger import logger
from clapper.parser.registry import Registry


class RawArg(BaseModel):
    """Raw positional argument entry."""

    name: str
    default: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("argument name must not be empty")
        return value


class RawFlag(BaseModel):
    """Raw flag entry."""

    name: str
    short: str = ""
    boolean: bool = False
    default: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("flag name must not be empty")
        if value.strip().startswith("-"):
            raise ValueError(f"flag name '{value}' must be given without dashes")
        return value


class RawCommand(BaseModel):
    """Raw command entry; the empty name declares the root command."""

    name: str = ""
    args: list[RawArg] = Field(default_factory=list)
    flags: list[RawFlag] = Field(default_factory=list)


class RegistryConfig(BaseModel):
    """Clapper schema configuration model."""

    commands: list[RawCommand] = Field(default_factory=list)

    def to_registry(self) -> Registry:
        registry = Registry()
        for raw_command in self.commands:
            command, existed = registry.register(raw_command.name)
            if existed:
                logger.warning(
                    "Command '%s' declared more than once; merging entries.",
                    command.name,
                )
            for raw_arg in raw_command.args:
                command.add_arg(raw_arg.name, raw_arg.default)
            for raw_flag in raw_command.flags:
                command.add_flag(
                    raw_flag.name, raw_flag.short, raw_flag.boolean, raw_flag.default
                )
        return registry


def _read_config(path: Path) -> Any:
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            return yaml.safe_load(config_file)
        elif suffix == ".toml":
            return toml.load(config_file)
        raise ValueError(f"Unsupported config format: {suffix}")


def loader(file_path: Path | str) -> Registry:
    """
    Load a Clapper schema from a YAML or TOML file.

    The file should contain a mapping with a `commands` list. Each command has
    a `name` (empty for the root command) and optional `args` and `flags`
    lists.

    Args:
        file_path (Path | str): Path to the config file (YAML or TOML).

    Returns:
        Registry: A registry holding the declared commands.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file format is unsupported or the content is not a mapping.
        SchemaError: If the content does not describe a valid schema.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = _read_config(path)

    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of commands.\n"
            "Example:\n"
            "commands:\n"
            "  - name: 'info'\n"
            "    args:\n"
            "      - name: 'category'"
        )

    try:
        config = RegistryConfig.model_validate(raw_config)
    except ValidationError as error:
        raise SchemaError(f"Invalid schema in {path}: {error}") from error

    logger.debug("Loaded %d command(s) from %s", len(config.commands), path)
    return config.to_registry()
