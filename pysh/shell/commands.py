"""
Shell Command Variants

One immutable record per kind of command the shell can run. The set is
closed: the resolver only ever builds these, and the executor handles
exactly these.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union


BUILTIN_NAMES = ('echo', 'exit', 'type', 'pwd', 'cd')


def is_builtin(name: str) -> bool:
    """Check if a command name is a shell builtin."""
    return name in BUILTIN_NAMES


@dataclass(frozen=True)
class ExitCommand:
    """Terminate the shell with a status code."""
    status: int = 0


@dataclass(frozen=True)
class EchoCommand:
    """Print arguments separated by single spaces."""
    args: Tuple[str, ...]
    stdout: Optional[str] = None
    stderr: Optional[str] = None


@dataclass(frozen=True)
class TypeCommand:
    """Report whether a name is a builtin or where it lives on the search path."""
    name: str


@dataclass(frozen=True)
class PwdCommand:
    """Print the working directory."""
    pass


@dataclass(frozen=True)
class CdCommand:
    """
    Change the working directory.

    ``path`` is the first argument as typed; ``""`` and ``"~"`` mean the
    home directory. ``args`` are the arguments left after redirection
    stripping and only feed the not-found message.
    """
    path: str
    args: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ExternalCommand:
    """Run a program found on the search path."""
    path: str
    args: Tuple[str, ...] = ()
    stdout: Optional[str] = None
    stderr: Optional[str] = None


Command = Union[
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ExternalCommand,
]
