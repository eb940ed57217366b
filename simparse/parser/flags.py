# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Flag classification and value resolution for the command-line parser.

A flag either stands alone (boolean, stored as `True`) or consumes a value. The
decision follows a fixed precedence:

1. Explicit `--name=value` syntax (long flags only) always wins.
2. A schema entry for the flag name: `True` consumes the next token unless that
   token is itself a flag, `False` never consumes anything.
3. Heuristic fallback: consume the next token when flag parsing is still active
   and the next token is not a flag.
4. Otherwise the flag is boolean.

The heuristic deliberately assumes that a flag followed by a plain token owns it.
For a boolean flag that is not in the schema, `tool -q mig` therefore yields
`q="mig"`. Register the flag in a schema to avoid that.

Short flags are never bundled: `-mig` is the flag `mig`, not `-m -i -g`.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Mapping

FlagValue = str | bool
FlagSchema = Mapping[str, bool]

END_OF_OPTIONS = "--"


@dataclass(frozen=True)
class FlagResolution:
    """Outcome of resolving one flag token."""

    name: str
    value: FlagValue
    consumed_next: bool = False

    def __iter__(self) -> Iterator[FlagValue]:
        return iter((self.name, self.value, self.consumed_next))


def is_flag(token: str) -> bool:
    """Return True for `-x`, `--xyz` and friends, but not for `-` or `--`."""
    return token.startswith("-") and len(token) > 1 and token != END_OF_OPTIONS


def is_long_flag(token: str) -> bool:
    return token.startswith("--") and len(token) > 2


def is_short_flag(token: str) -> bool:
    return token.startswith("-") and not token.startswith("--") and len(token) > 1


def _resolve_name(
    name: str,
    next_token: str | None,
    stop_flag_parsing: bool,
    schema: FlagSchema | None,
) -> FlagResolution:
    """Apply schema-then-heuristic precedence to a bare flag name."""
    consumable = next_token is not None and not is_flag(next_token)

    if schema is not None and name in schema:
        if schema[name] and consumable:
            return FlagResolution(name, next_token, True)  # type: ignore[arg-type]
        return FlagResolution(name, True, False)

    if not stop_flag_parsing and consumable:
        return FlagResolution(name, next_token, True)  # type: ignore[arg-type]
    return FlagResolution(name, True, False)


def resolve_long_flag(
    token: str,
    next_token: str | None,
    stop_flag_parsing: bool = False,
    schema: FlagSchema | None = None,
) -> FlagResolution:
    """
    Resolve a `--name`, `--name value` or `--name=value` token.

    Args:
        token (str): The flag token, including its leading dashes.
        next_token (str | None): The token that follows, if any.
        stop_flag_parsing (bool): Whether `--` has already been seen.
        schema (FlagSchema | None): Optional name -> takes-value table.

    Returns:
        FlagResolution: Name, value and whether `next_token` was consumed.
    """
    body = token[2:]
    name, separator, value = body.partition("=")
    if separator:
        return FlagResolution(name, value, False)
    return _resolve_name(body, next_token, stop_flag_parsing, schema)


def resolve_short_flags(
    token: str,
    next_token: str | None,
    stop_flag_parsing: bool = False,
    schema: FlagSchema | None = None,
) -> list[FlagResolution]:
    """
    Resolve a short flag token such as `-i`, `-L` or `-mig`.

    Everything after the single dash is one flag name. The result is a list so
    callers can treat short and bundled-style tokens uniformly; it always holds
    exactly one resolution.
    """
    return [_resolve_name(token[1:], next_token, stop_flag_parsing, schema)]
