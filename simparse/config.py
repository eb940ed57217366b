# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loads command definitions from YAML, TOML or JSON files into a `SchemaRegistry`.

A file holds either one definition:

    command: nvidia-smi
    global_options:
      - short: i
        long: id
        arguments: ID
      - short: q
        long: query

or several under a `commands` key:

    commands:
      - command: dcgmi
        subcommands:
          - name: diag
            options:
              - short: r
                arguments: LEVEL
      - command: ipmitool
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import ValidationError

from simparse.exceptions import ConfigError
from simparse.logger import logger
from simparse.registry import SchemaRegistry
from simparse.schema import CommandDefinition

SUPPORTED_SUFFIXES = (".yaml", ".yml", ".toml", ".json")


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "simparse.yaml",
        Path.cwd() / "simparse.toml",
        Path.cwd() / ".simparse.yaml",
        Path.cwd() / ".simparse.toml",
        Path(os.environ.get("SIMPARSE_CONFIG", "simparse.yaml")),
        Path.home() / ".config" / "simparse" / "simparse.yaml",
        Path.home() / ".config" / "simparse" / "simparse.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def _read_raw(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(config_file)
            elif suffix == ".toml":
                return toml.load(config_file)
            elif suffix == ".json":
                return json.load(config_file)
    except UnicodeDecodeError as error:
        raise ConfigError(f"Config file is not valid UTF-8: '{path}' ({error})") from error
    except (yaml.YAMLError, toml.TomlDecodeError, json.JSONDecodeError) as error:
        raise ConfigError(f"Could not parse '{path}': {error}") from error
    raise ConfigError(f"Unsupported config format: {suffix}")


def load_definitions(file_path: Path | str) -> list[CommandDefinition]:
    """
    Load command definitions from a YAML, TOML or JSON file.

    Args:
        file_path (Path | str): Path to the definition file.

    Returns:
        list[CommandDefinition]: The definitions, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigError: If the format is unsupported, the file cannot be parsed, or
            a definition fails validation.
    """
    path = Path(file_path)
    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    raw_config = _read_raw(path)
    if isinstance(raw_config, dict) and "commands" in raw_config:
        raw_definitions = raw_config["commands"]
    elif isinstance(raw_config, dict) and "command" in raw_config:
        raw_definitions = [raw_config]
    else:
        raise ConfigError(
            f"'{path}' must contain a command definition or a 'commands' list.\n"
            "Example:\n"
            "commands:\n"
            "  - command: nvidia-smi\n"
            "    global_options:\n"
            "      - short: i\n"
            "        arguments: ID"
        )

    if not isinstance(raw_definitions, list):
        raise ConfigError(f"'commands' in '{path}' must be a list.")

    definitions = []
    for index, entry in enumerate(raw_definitions):
        if not isinstance(entry, dict):
            raise ConfigError(f"Entry {index} in '{path}' is not a mapping.")
        try:
            definitions.append(CommandDefinition.model_validate(entry))
        except ValidationError as error:
            raise ConfigError(
                f"Invalid command definition #{index} in '{path}':\n{error}"
            ) from error

    logger.debug("Loaded %d definition(s) from %s", len(definitions), path)
    return definitions


def _expand(path: Path) -> list[Path]:
    if path.is_dir():
        return sorted(
            child
            for child in path.iterdir()
            if child.is_file() and child.suffix.lower() in SUPPORTED_SUFFIXES
        )
    return [path]


def load_registry(*paths: Path | str) -> SchemaRegistry:
    """
    Build a `SchemaRegistry` from definition files and directories.

    Directories are scanned (non-recursively, sorted by name) for supported files.
    A command defined twice raises `DuplicateCommandError`.
    """
    registry = SchemaRegistry()
    for raw_path in paths:
        for path in _expand(Path(raw_path)):
            for definition in load_definitions(path):
                registry.register(definition)
    logger.info("Schema registry ready with %d command(s).", len(registry))
    return registry
