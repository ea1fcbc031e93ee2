"""
Command Executor

Runs resolved command variants.

Author: YSNRFD
Version: 1.0.0
"""

import os
import subprocess
import sys
from contextlib import ExitStack
from typing import Optional, Callable, TextIO, IO

from .commands import (
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
from pysh.core.environment import Environment
from pysh.exceptions import (
    ExecutionError,
    RedirectionError,
    HomeDirectoryError,
    ExternalCommandError,
)
from pysh.logger import get_logger


def open_target(path: str) -> IO[str]:
    """
    Create (or truncate) a redirection target for writing.

    Raises:
        RedirectionError: If the file cannot be created
    """
    try:
        return open(path, 'w', encoding='utf-8')
    except (OSError, ValueError) as e:
        raise RedirectionError(path, f"{path}: {describe_error(e)}") from e


def describe_error(exc: Exception) -> str:
    """Short reason for an OS-level failure (ValueError for bad paths)."""
    return getattr(exc, 'strerror', None) or str(exc)


class CommandExecutor:
    """
    Executes command variants.

    ``run`` returns the exit status of the command. Builtin failures are
    raised as ExecutionError subclasses; an external program's failure
    is only its exit status, since the program reports it itself.

    Args:
        environment: Working directory and search path access
        resolver: Used by ``type`` to search for executables
        stdout: Stream for builtin output (defaults to sys.stdout at
            the time of each call)
    """

    def __init__(
        self,
        environment: Optional[Environment] = None,
        resolver: Optional[CommandResolver] = None,
        stdout: Optional[TextIO] = None
    ):
        self._environment = environment or Environment()
        self._resolver = resolver or CommandResolver(self._environment)
        self._stdout = stdout
        self._logger = get_logger('executor')
        self._handlers: dict[type, Callable[..., int]] = {
            ExitCommand: self._run_exit,
            EchoCommand: self._run_echo,
            TypeCommand: self._run_type,
            PwdCommand: self._run_pwd,
            CdCommand: self._run_cd,
            ExternalCommand: self._run_external,
        }

    @property
    def out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    def run(self, command: Command) -> int:
        """
        Run a command.

        Args:
            command: A command variant built by the resolver

        Returns:
            Exit status

        Raises:
            SystemExit: For ``exit``
            ExecutionError: If a builtin fails or a program cannot start
        """
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Not a shell command: {command!r}")
        return handler(command)

    def _run_exit(self, command: ExitCommand) -> int:
        self._logger.debug("Exiting", context={'status': command.status})
        sys.exit(command.status)

    def _run_echo(self, command: EchoCommand) -> int:
        output = ' '.join(command.args)

        with ExitStack() as stack:
            out = self.out
            if command.stdout:
                out = stack.enter_context(open_target(command.stdout))
            if command.stderr:
                stack.enter_context(open_target(command.stderr))
            print(output, file=out)

        return 0

    def _run_type(self, command: TypeCommand) -> int:
        name = command.name

        if is_builtin(name):
            print(f"{name} is a shell builtin", file=self.out)
            return 0

        path = self._resolver.find_executable(name)
        if path is not None:
            print(path, file=self.out)
        else:
            print(f"{name}: not found", file=self.out)
        return 0

    def _run_pwd(self, command: PwdCommand) -> int:
        try:
            cwd = self._environment.getcwd()
        except OSError as e:
            raise ExecutionError(f"pwd: {describe_error(e)}") from e
        print(cwd, file=self.out)
        return 0

    def _run_cd(self, command: CdCommand) -> int:
        path = command.path

        if path in ('', '~'):
            try:
                path = self._environment.home_directory()
            except RuntimeError as e:
                raise HomeDirectoryError(str(e)) from e

        try:
            self._environment.chdir(path)
        except (OSError, ValueError) as e:
            shown = command.args[0] if command.args else command.path
            self._logger.debug(f"cd failed: {e}", context={'path': path})
            print(f"cd: {shown}: No such file or directory", file=self.out)

        return 0

    def _run_external(self, command: ExternalCommand) -> int:
        argv = [os.path.basename(command.path), *command.args]

        with ExitStack() as stack:
            stdout = None
            stderr = None
            if command.stdout:
                stdout = stack.enter_context(open_target(command.stdout))
            if command.stderr:
                stderr = stack.enter_context(open_target(command.stderr))

            self.out.flush()
            sys.stderr.flush()

            self._logger.debug(
                f"Running {command.path}",
                context={'argc': len(argv)}
            )
            try:
                result = subprocess.run(
                    argv,
                    executable=command.path,
                    stdout=stdout,
                    stderr=stderr,
                )
            except (OSError, ValueError) as e:
                self._logger.warning(
                    f"Failed to launch {command.path}: {e}",
                    context={'errno': getattr(e, 'errno', None)}
                )
                raise ExternalCommandError(command.path, describe_error(e)) from e

        return result.returncode
