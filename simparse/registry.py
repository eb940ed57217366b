# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Registry of command definitions keyed by command name.

`SchemaRegistry` is the bridge between declarative command definitions and the
parser. Tool simulators hand it a raw line and get back a `ParsedCommand` parsed
with the schema of that line's base command:

    registry = SchemaRegistry()
    registry.register(nvidia_smi_definition)
    parsed = registry.parse("nvidia-smi -q mig")

Commands without a definition are parsed heuristically. Flag and subcommand
validation lives here as well, never in the parser.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from difflib import get_close_matches
from typing import Iterable, Iterator

from simparse.exceptions import DuplicateCommandError
from simparse.logger import logger
from simparse.parser import ParsedCommand, parse, tokenize
from simparse.parser.flags import FlagSchema
from simparse.schema import CommandDefinition, build_flag_schema, normalize_flag_name


@dataclass(frozen=True)
class ValidationResult:
    """Whether a flag or subcommand is known, plus close matches if it is not."""

    valid: bool
    suggestions: list[str] = field(default_factory=list)


class SchemaRegistry:
    """Holds `CommandDefinition` objects and builds parser schemas from them."""

    def __init__(self, definitions: Iterable[CommandDefinition] | None = None) -> None:
        self._definitions: dict[str, CommandDefinition] = {}
        for definition in definitions or []:
            self.register(definition)

    def register(self, definition: CommandDefinition, replace: bool = False) -> None:
        """
        Add a definition.

        Raises:
            DuplicateCommandError: If the command is already registered and
                `replace` is False.
        """
        if definition.command in self._definitions and not replace:
            raise DuplicateCommandError(
                f"Command '{definition.command}' is already registered."
            )
        self._definitions[definition.command] = definition
        logger.debug(
            "Registered command '%s' with %d flag(s).",
            definition.command,
            len(definition.flag_names()),
        )

    def get(self, command: str) -> CommandDefinition | None:
        return self._definitions.get(command)

    def has(self, command: str) -> bool:
        return command in self._definitions

    def command_names(self) -> list[str]:
        return sorted(self._definitions)

    def get_flag_schema(self, command: str) -> FlagSchema | None:
        """Return the parser schema for `command`, or None if unknown or option-less."""
        definition = self.get(command)
        if definition is None:
            return None
        return build_flag_schema(definition)

    def parse(self, line: str) -> ParsedCommand:
        """Parse `line` with the schema of its base command, if one is registered."""
        tokens = tokenize(line.strip())
        schema = self.get_flag_schema(tokens[0]) if tokens else None
        if tokens and schema is None:
            logger.debug("No flag schema for '%s'; using heuristics.", tokens[0])
        return parse(line, schema)

    def by_category(self, category: str) -> list[CommandDefinition]:
        """Return the definitions in `category`, in registration order."""
        return [
            definition for definition in self if definition.category == category
        ]

    def categories(self) -> list[str]:
        return sorted({definition.category for definition in self})

    def get_command_help(self, command: str) -> str:
        """
        Return plain-text help for `command`: title, usage, global options and
        subcommands.
        """
        definition = self.get(command)
        if definition is None:
            return f"Unknown command: {command}"

        title = definition.command
        if definition.description:
            title = f"{title} - {definition.description}"
        lines = [title, "", f"Usage: {definition.synopsis or definition.command}"]

        if definition.global_options:
            lines += ["", "Options:"]
            for option in definition.global_options:
                lines.append(f"  {option.usage_text()}")
                if option.description:
                    lines.append(f"      {option.description}")

        if definition.subcommands:
            lines += ["", "Subcommands:"]
            for subcommand in definition.subcommands:
                lines.append(
                    f"  {subcommand.name:<20} {subcommand.description}".rstrip()
                )
        return "\n".join(lines)

    def get_flag_help(self, command: str, flag: str) -> str:
        """Return plain-text help for one option of `command`."""
        definition = self.get(command)
        option = definition.find_option(flag) if definition else None
        if option is None:
            return f"Unknown flag: {flag}"

        lines = [option.usage_text()]
        if option.description:
            lines.append(f"  {option.description}")
        if option.example:
            lines.append(f"  Example: {option.example}")
        return "\n".join(lines)

    def validate_flag(self, command: str, flag: str) -> ValidationResult:
        """Check `flag` (dashes optional) against the definition of `command`."""
        definition = self.get(command)
        if definition is None:
            return ValidationResult(valid=False)
        known = definition.flag_names()
        name = normalize_flag_name(flag)
        if name in known:
            return ValidationResult(valid=True)
        return ValidationResult(valid=False, suggestions=get_close_matches(name, known))

    def validate_subcommand(self, command: str, name: str) -> ValidationResult:
        definition = self.get(command)
        if definition is None or not definition.subcommands:
            return ValidationResult(valid=False)
        known = definition.subcommand_names()
        if name in known:
            return ValidationResult(valid=True)
        return ValidationResult(valid=False, suggestions=get_close_matches(name, known))

    def __contains__(self, command: object) -> bool:
        return command in self._definitions

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)

    def __repr__(self) -> str:
        return f"SchemaRegistry(commands={self.command_names()!r})"
