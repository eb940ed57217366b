# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParsedCommand`, the structured result of parsing one command line.

A `ParsedCommand` is an immutable value: sequences are stored as tuples and the
flag table is exposed through a read-only mapping proxy. It carries:

- `base_command`: the first token (usually the tool name), `""` for empty input.
- `subcommands`: plain tokens captured before subcommand capture closed.
- `flags`: flag name (without dashes) -> `True` or a string value.
- `positional_args`: plain tokens captured after subcommand capture closed.
- `raw_args`: every token after the base command, unmodified.
- `raw`: the original input line, byte for byte.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from simparse.parser.flags import FlagValue


def _freeze_flags(flags: Mapping[str, FlagValue] | None) -> Mapping[str, FlagValue]:
    return MappingProxyType(dict(flags or {}))


@dataclass(frozen=True)
class ParsedCommand:
    """Structured representation of a single command line."""

    base_command: str = ""
    subcommands: tuple[str, ...] = ()
    flags: Mapping[str, FlagValue] = field(default_factory=dict)
    positional_args: tuple[str, ...] = ()
    raw_args: tuple[str, ...] = ()
    raw: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "subcommands", tuple(self.subcommands))
        object.__setattr__(self, "positional_args", tuple(self.positional_args))
        object.__setattr__(self, "raw_args", tuple(self.raw_args))
        object.__setattr__(self, "flags", _freeze_flags(self.flags))

    def __hash__(self) -> int:
        # Equal flag tables may differ in insertion order.
        return hash(
            (
                self.base_command,
                self.subcommands,
                frozenset(self.flags.items()),
                self.positional_args,
                self.raw_args,
                self.raw,
            )
        )

    @classmethod
    def empty(cls, raw: str = "") -> ParsedCommand:
        """Return the result used for blank input."""
        return cls(raw=raw)

    @property
    def is_empty(self) -> bool:
        return not self.base_command

    def as_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable copy of this command."""
        return {
            "base_command": self.base_command,
            "subcommands": list(self.subcommands),
            "flags": dict(self.flags),
            "positional_args": list(self.positional_args),
            "raw_args": list(self.raw_args),
            "raw": self.raw,
        }

    def __str__(self) -> str:
        return (
            f"ParsedCommand(base_command={self.base_command!r}, "
            f"subcommands={list(self.subcommands)!r}, flags={dict(self.flags)!r}, "
            f"positional_args={list(self.positional_args)!r})"
        )
