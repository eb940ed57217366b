# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative command definitions and the flag schemas derived from them.

A simulated tool describes its options once, and `build_flag_schema()` turns that
description into the name -> takes-value table understood by `parse()`:

    definition = CommandDefinition(
        command="nvidia-smi",
        global_options=[
            CommandOption(short="i", long="id", arguments="ID"),
            CommandOption(short="q", long="query"),
        ],
    )
    build_flag_schema(definition)
    # {'i': True, 'id': True, 'q': False, 'query': False}

Option names may be written with or without their dashes, and long names may carry
a trailing `=` (`--query-gpu=`), which is dropped.
"""
from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from simparse.parser.flags import FlagSchema


def normalize_flag_name(text: str) -> str:
    """Strip leading dashes and a single trailing `=` from an option name."""
    name = text.lstrip("-")
    if name.endswith("="):
        name = name[:-1]
    return name


class CommandOption(BaseModel):
    """One option accepted by a command, in short, long or free-form spelling."""

    model_config = ConfigDict(extra="ignore")

    short: str | None = None
    long: str | None = None
    flag: str | None = None
    description: str = ""
    arguments: str | None = None
    example: str = ""

    @property
    def takes_value(self) -> bool:
        return bool(self.arguments)

    def names(self) -> list[str]:
        """Return the normalized, non-empty names of this option."""
        spellings = (self.short, self.long, self.flag)
        return [
            name
            for name in (normalize_flag_name(text) for text in spellings if text)
            if name
        ]

    def spellings(self) -> list[str]:
        """
        Return the option as it is typed: `-` + short, `--` + long, and the
        free-form `flag` with its own dashes (one dash when it has none).
        """
        spellings = []
        if self.short and normalize_flag_name(self.short):
            spellings.append(f"-{normalize_flag_name(self.short)}")
        if self.long and normalize_flag_name(self.long):
            spellings.append(f"--{normalize_flag_name(self.long)}")
        if self.flag and normalize_flag_name(self.flag):
            flag = self.flag.strip().removesuffix("=")
            spellings.append(flag if flag.startswith("-") else f"-{flag}")
        return spellings

    def matches(self, flag: str) -> bool:
        return normalize_flag_name(flag) in self.names()

    def usage_text(self) -> str:
        usage = ", ".join(self.spellings())
        return f"{usage} {self.arguments}" if self.takes_value else usage


class SubcommandDefinition(BaseModel):
    """A named subcommand and the options it adds."""

    model_config = ConfigDict(extra="ignore")

    name: str
    description: str = ""
    options: list[CommandOption] = Field(default_factory=list)


class CommandDefinition(BaseModel):
    """Full description of a simulated tool's command-line surface."""

    model_config = ConfigDict(extra="ignore")

    command: str
    category: str = "general"
    description: str = ""
    synopsis: str = ""
    global_options: list[CommandOption] = Field(default_factory=list)
    subcommands: list[SubcommandDefinition] = Field(default_factory=list)

    @field_validator("command")
    @classmethod
    def validate_command(cls, value: str) -> str:
        value = value.strip()
        if not value or any(char.isspace() for char in value):
            raise ValueError("command must be a single non-empty word")
        return value

    def iter_options(self) -> Iterable[CommandOption]:
        """Yield global options first, then every subcommand's options."""
        yield from self.global_options
        for subcommand in self.subcommands:
            yield from subcommand.options

    def flag_names(self) -> list[str]:
        """Return every known flag name, without duplicates, in definition order."""
        seen: dict[str, None] = {}
        for option in self.iter_options():
            for name in option.names():
                seen.setdefault(name, None)
        return list(seen)

    def flag_spellings(self) -> list[str]:
        """Return every option spelling, without duplicates, in definition order."""
        seen: dict[str, None] = {}
        for option in self.iter_options():
            for spelling in option.spellings():
                seen.setdefault(spelling, None)
        return list(seen)

    def find_option(self, flag: str) -> CommandOption | None:
        """Return the first option named `flag` (dashes optional), global options first."""
        return next((option for option in self.iter_options() if option.matches(flag)), None)

    def subcommand_names(self) -> list[str]:
        return [subcommand.name for subcommand in self.subcommands]


def build_flag_schema(definition: CommandDefinition) -> FlagSchema | None:
    """
    Build the parser flag schema for `definition`.

    Later options overwrite earlier ones with the same name, so a subcommand can
    redefine a global flag.

    Returns:
        FlagSchema | None: `None` when the definition names no options, which keeps
        the parser in heuristic mode.
    """
    schema: dict[str, bool] = {}
    for option in definition.iter_options():
        for name in option.names():
            schema[name] = option.takes_value
    return schema or None
