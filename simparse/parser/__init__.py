"""
SimParse Command-Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .accessors import (
    debug_parsed_command,
    get_flag_string,
    get_flag_value,
    has_flag,
    to_legacy_args,
)
from .command_parser import parse
from .flags import (
    FlagResolution,
    FlagSchema,
    FlagValue,
    is_flag,
    is_long_flag,
    is_short_flag,
    resolve_long_flag,
    resolve_short_flags,
)
from .parsed_command import ParsedCommand
from .tokenizer import TokenizerState, tokenize

__all__ = [
    "ParsedCommand",
    "FlagResolution",
    "FlagSchema",
    "FlagValue",
    "TokenizerState",
    "parse",
    "tokenize",
    "is_flag",
    "is_long_flag",
    "is_short_flag",
    "resolve_long_flag",
    "resolve_short_flags",
    "has_flag",
    "get_flag_value",
    "get_flag_string",
    "to_legacy_args",
    "debug_parsed_command",
]
