# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Convenience lookups over a `ParsedCommand`."""
from __future__ import annotations

from typing import Iterable

from simparse.parser.flags import FlagValue
from simparse.parser.parsed_command import ParsedCommand


def has_flag(parsed: ParsedCommand, *names: str) -> bool:
    """Return True if any of `names` was given on the command line."""
    return any(name in parsed.flags for name in names)


def get_flag_value(parsed: ParsedCommand, *names: str) -> FlagValue | None:
    """Return the value of the first name present in `parsed.flags`, else None."""
    for name in names:
        if name in parsed.flags:
            return parsed.flags[name]
    return None


def get_flag_string(
    parsed: ParsedCommand, names: str | Iterable[str], default: str = ""
) -> str:
    """
    Return the string value of the first matching flag.

    Boolean flags and missing flags both yield `default`, so
    `get_flag_string(parse("x --bool"), ["bool"], "d")` is `"d"`.
    """
    if isinstance(names, str):
        names = (names,)
    value = get_flag_value(parsed, *names)
    return value if isinstance(value, str) else default


def to_legacy_args(parsed: ParsedCommand) -> list[str]:
    """Return the flat argument list for handlers that predate `ParsedCommand`."""
    return list(parsed.raw_args)


def debug_parsed_command(parsed: ParsedCommand) -> str:
    """Render `parsed` as plain multi-line text for diagnostics."""
    lines = [f"Base command: {parsed.base_command}"]
    if parsed.subcommands:
        lines.append(f"Subcommands: {' → '.join(parsed.subcommands)}")
    if parsed.flags:
        rendered = [
            f"--{name}" if isinstance(value, bool) else f"--{name}={value}"
            for name, value in parsed.flags.items()
        ]
        lines.append(f"Flags: {', '.join(rendered)}")
    if parsed.positional_args:
        lines.append(f"Positional args: {', '.join(parsed.positional_args)}")
    return "\n".join(lines)
