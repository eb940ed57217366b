# SimParse — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes used around the SimParse parser.

The parser itself never raises: any string produces a `ParsedCommand`. These
exceptions cover the layers that feed it, such as loading command definitions
from disk and registering them.

Exception Hierarchy:
- SimParseError
    ├── ConfigError
    └── DuplicateCommandError
"""


class SimParseError(Exception):
    """Base exception for SimParse."""


class ConfigError(SimParseError):
    """Exception raised when a command definition file cannot be loaded."""


class DuplicateCommandError(SimParseError):
    """Exception raised when a command with the same name is already registered."""
