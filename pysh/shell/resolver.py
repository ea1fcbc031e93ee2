"""
Command Resolver

Maps a command name and its raw arguments to a command variant.

Author: YSNRFD
Version: 1.0.0
"""

import os
import re
import stat
from typing import Optional, List

from .commands import (
    Command,
    ExitCommand,
    EchoCommand,
    TypeCommand,
    PwdCommand,
    CdCommand,
    ExternalCommand,
)
from .parser import extract_redirections
from pysh.core.environment import Environment
from pysh.exceptions import MissingArgumentsError, CommandNotFoundError
from pysh.logger import get_logger


EXECUTABLE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH
STATUS_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_status(text: str) -> int:
    """Parse an exit status, falling back to 0 for anything non-numeric."""
    if STATUS_PATTERN.fullmatch(text) is None:
        return 0
    return int(text)


class CommandResolver:
    """
    Resolves commands to builtins or executables on the search path.

    Builtin names are checked first, so a program on the search path can
    never shadow a builtin.

    Example:
        >>> resolver = CommandResolver(Environment())
        >>> resolver.resolve('echo', ['hi', '>', 'out.txt'])
        EchoCommand(args=('hi',), stdout='out.txt', stderr=None)
    """

    def __init__(self, environment: Optional[Environment] = None):
        self._environment = environment or Environment()
        self._logger = get_logger('resolver')
        self._builtins = {
            'exit': self._resolve_exit,
            'echo': self._resolve_echo,
            'type': self._resolve_type,
            'pwd': self._resolve_pwd,
            'cd': self._resolve_cd,
        }

    @property
    def environment(self) -> Environment:
        return self._environment

    def resolve(self, name: str, raw_args: List[str]) -> Command:
        """
        Build the command variant for a name and its arguments.

        Args:
            name: Command name, matched case-sensitively
            raw_args: Arguments as tokenized, redirections included

        Returns:
            The command variant to run

        Raises:
            MissingArgumentsError: ``echo`` or ``type`` without arguments
            CommandNotFoundError: Not a builtin and not on the search path
        """
        args, redirections = extract_redirections(raw_args)

        handler = self._builtins.get(name)
        if handler is not None:
            command = handler(args, raw_args, redirections)
            self._logger.debug(f"Resolved builtin {name}", context={'args': len(args)})
            return command

        path = self.find_executable(name)
        if path is None:
            raise CommandNotFoundError(name)

        self._logger.debug(f"Resolved {name}", context={'path': path})
        return ExternalCommand(
            path=path,
            args=tuple(args),
            stdout=redirections.stdout,
            stderr=redirections.stderr,
        )

    def find_executable(self, name: str) -> Optional[str]:
        """
        Walk the search path for an executable file called ``name``.

        Entries that do not exist or cannot be inspected are skipped.

        Returns:
            Path of the first match, or None
        """
        for directory in self._environment.search_path():
            candidate = os.path.join(directory, name)
            try:
                info = os.stat(candidate)
            except (OSError, ValueError):
                continue
            if stat.S_ISDIR(info.st_mode):
                continue
            if info.st_mode & EXECUTABLE_BITS:
                return candidate
        return None

    # Builtin resolution

    def _resolve_exit(self, args, raw_args, redirections) -> ExitCommand:
        if not args:
            return ExitCommand(0)
        return ExitCommand(parse_status(args[0]))

    def _resolve_echo(self, args, raw_args, redirections) -> EchoCommand:
        if not args:
            raise MissingArgumentsError('echo')
        return EchoCommand(
            args=tuple(args),
            stdout=redirections.stdout,
            stderr=redirections.stderr,
        )

    def _resolve_type(self, args, raw_args, redirections) -> TypeCommand:
        if not args:
            raise MissingArgumentsError('type')
        return TypeCommand(args[0])

    def _resolve_pwd(self, args, raw_args, redirections) -> PwdCommand:
        return PwdCommand()

    def _resolve_cd(self, args, raw_args, redirections) -> CdCommand:
        path = raw_args[0] if raw_args else ''
        return CdCommand(path=path, args=tuple(args))
