"""
SimParse Command-Line Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .parser import (
    ParsedCommand,
    debug_parsed_command,
    get_flag_string,
    get_flag_value,
    has_flag,
    parse,
    to_legacy_args,
    tokenize,
)
from .registry import SchemaRegistry, ValidationResult
from .schema import CommandDefinition, CommandOption, SubcommandDefinition
from .version import __version__

logger = logging.getLogger("simparse")


__all__ = [
    "ParsedCommand",
    "parse",
    "tokenize",
    "has_flag",
    "get_flag_value",
    "get_flag_string",
    "to_legacy_args",
    "debug_parsed_command",
    "SchemaRegistry",
    "ValidationResult",
    "CommandDefinition",
    "CommandOption",
    "SubcommandDefinition",
    "__version__",
]
