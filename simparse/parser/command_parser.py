# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Drives tokenization and flag resolution to build a `ParsedCommand`.

`parse()` is the single entry point consumed by command handlers. It walks the
tokens after the base command once, tracking two one-way switches:

- `stop_flag_parsing`: flipped by the `--` sentinel; afterwards every token is
  routed as a plain token, even if it starts with a dash.
- `parsing_subcommands`: closed by the first flag when no schema is given, or by
  the first plain token that contains `=` or is an integer. Plain tokens go to
  `subcommands` while it is open and to `positional_args` afterwards.

With a schema the first flag does not close subcommand capture, since the schema
says exactly which tokens are flag values. This lets `tool -q mig` keep `mig` as a
subcommand when `q` is registered as boolean.

The parser never raises and never mutates the schema it is given.
"""
from __future__ import annotations

import re

from simparse.logger import logger
from simparse.parser.flags import (
    END_OF_OPTIONS,
    FlagSchema,
    FlagValue,
    is_flag,
    is_long_flag,
    resolve_long_flag,
    resolve_short_flags,
)
from simparse.parser.parsed_command import ParsedCommand
from simparse.parser.tokenizer import tokenize

INTEGER_PATTERN = re.compile(r"-?\d+")


def _is_subcommand_candidate(token: str) -> bool:
    return "=" not in token and INTEGER_PATTERN.fullmatch(token) is None


def parse(line: str, schema: FlagSchema | None = None) -> ParsedCommand:
    """
    Parse a raw command line into a `ParsedCommand`.

    Args:
        line (str): The command line as typed by the user.
        schema (FlagSchema | None): Optional mapping of flag name (no dashes) to
            whether it takes a value. Unknown flags fall back to heuristics.

    Returns:
        ParsedCommand: The structured command. Blank input yields an empty command
        whose `raw` is still the original string.
    """
    trimmed = line.strip()
    if not trimmed:
        return ParsedCommand.empty(line)

    tokens = tokenize(trimmed)
    if not tokens:
        return ParsedCommand.empty(line)

    base_command, raw_args = tokens[0], tokens[1:]
    flags: dict[str, FlagValue] = {}
    subcommands: list[str] = []
    positional_args: list[str] = []

    stop_flag_parsing = False
    parsing_subcommands = True

    index = 0
    while index < len(raw_args):
        token = raw_args[index]
        next_token = raw_args[index + 1] if index + 1 < len(raw_args) else None
        index += 1

        if token == END_OF_OPTIONS:
            stop_flag_parsing = True
            continue

        if stop_flag_parsing or not is_flag(token):
            if parsing_subcommands and _is_subcommand_candidate(token):
                subcommands.append(token)
            else:
                parsing_subcommands = False
                positional_args.append(token)
            continue

        if schema is None:
            parsing_subcommands = False

        if is_long_flag(token):
            resolutions = [
                resolve_long_flag(token, next_token, stop_flag_parsing, schema)
            ]
        else:
            resolutions = resolve_short_flags(
                token, next_token, stop_flag_parsing, schema
            )

        for resolution in resolutions:
            flags[resolution.name] = resolution.value
            if resolution.consumed_next:
                index += 1

    parsed = ParsedCommand(
        base_command=base_command,
        subcommands=tuple(subcommands),
        flags=flags,
        positional_args=tuple(positional_args),
        raw_args=tuple(raw_args),
        raw=line,
    )
    logger.debug("Parsed %r -> %s", line, parsed)
    return parsed
