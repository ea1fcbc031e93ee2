"""
pysh Shell Module

Provides the interactive command-line shell:
- Tokenizing and redirection extraction
- Command resolution
- Builtin and external command execution
"""

from .parser import (
    CommandParser,
    ParsedCommand,
    Redirections,
    tokenize,
    extract_redirections,
)
from .commands import (
    BUILTIN_NAMES,
    Command,
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ExternalCommand,
    is_builtin,
)
from .resolver import CommandResolver
from .executor import CommandExecutor
from .shell import Shell, create_shell

__all__ = [
    'CommandParser',
    'ParsedCommand',
    'Redirections',
    'tokenize',
    'extract_redirections',
    'BUILTIN_NAMES',
    'Command',
    'ExitCommand',
    'EchoCommand',
    'TypeCommand',
    'PwdCommand',
    'CdCommand',
    'ExternalCommand',
    'is_builtin',
    'CommandResolver',
    'CommandExecutor',
    'Shell',
    'create_shell',
]
