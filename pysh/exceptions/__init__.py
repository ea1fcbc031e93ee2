"""
pysh Exception Hierarchy

All shell exceptions inherit from ShellException.

Architecture:
    ShellException (Base)
    ├── ParseError
    │   ├── MissingArgumentsError
    │   └── CommandNotFoundError
    ├── ExecutionError
    │   ├── RedirectionError
    │   ├── HomeDirectoryError
    │   └── ExternalCommandError
    └── ConfigError
"""

from .shell_exceptions import (
    ShellException,
    ParseError,
    MissingArgumentsError,
    CommandNotFoundError,
    ExecutionError,
    RedirectionError,
    HomeDirectoryError,
    ExternalCommandError,
    ConfigError,
)

__all__ = [
    # Base
    "ShellException",
    # Parse errors
    "ParseError",
    "MissingArgumentsError",
    "CommandNotFoundError",
    # Execution errors
    "ExecutionError",
    "RedirectionError",
    "HomeDirectoryError",
    "ExternalCommandError",
    # Configuration
    "ConfigError",
]
