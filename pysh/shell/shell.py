"""
pysh Shell Module

The interactive read-eval loop.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from typing import Optional, TextIO

from .parser import CommandParser
from .resolver import CommandResolver
from .executor import CommandExecutor
from .commands import ExternalCommand
from pysh.core.config_loader import Config, get_config
from pysh.core.environment import Environment
from pysh.exceptions import ParseError, ShellException
from pysh.logger import get_logger


INTERRUPTED_STATUS = 130
UNEXPECTED_ERROR_STATUS = 1


class Shell:
    """
    pysh Interactive Shell.

    Reads a line, resolves it to a command and runs it, until ``exit``
    or end of input.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        environment: Optional[Environment] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        self._config = config or get_config()
        self._environment = environment or Environment(
            path_variable=self._config.search.path_variable,
            separator=self._config.search.separator,
        )
        self._stdin = stdin
        self._stdout = stdout
        self._logger = get_logger('shell')
        self._parser = CommandParser()
        self._resolver = CommandResolver(self._environment)
        self._executor = CommandExecutor(self._environment, self._resolver, stdout)
        self._running = False
        self._last_status = 0

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def resolver(self) -> CommandResolver:
        return self._resolver

    @property
    def executor(self) -> CommandExecutor:
        return self._executor

    @property
    def last_status(self) -> int:
        return self._last_status

    @property
    def out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def prompt(self) -> str:
        return self._config.shell.prompt

    def run(self) -> int:
        """
        Run the interactive shell.

        This is the main REPL loop. ``exit`` leaves it by raising
        SystemExit; end of input returns the last exit status.
        """
        self._running = True
        self._logger.debug("Shell started")

        while self._running:
            line = self._read_line()
            if line is None:
                break
            try:
                self.execute_line(line)
            except KeyboardInterrupt:
                self.out.write("\n")
                self._last_status = INTERRUPTED_STATUS
            except Exception as e:
                self._logger.error(f"Shell error: {e}", context={'line': line})
                print(f"shell: error: {e}", file=self.out)
                self._last_status = UNEXPECTED_ERROR_STATUS

        self._running = False
        self._logger.debug("Shell stopped", context={'status': self._last_status})
        return self._last_status

    def _read_line(self) -> Optional[str]:
        """Print the prompt and read one line; None at end of input."""
        while True:
            self.out.write(self.prompt)
            self.out.flush()

            try:
                if self._stdin is None:
                    line = input()
                else:
                    line = self._stdin.readline()
                    if not line:
                        raise EOFError
            except EOFError:
                self.out.write("\n")
                return None
            except KeyboardInterrupt:
                self.out.write("^C\n")
                continue

            return line.rstrip('\n')

    def execute_line(self, line: str) -> int:
        """
        Parse, resolve and run one command line.

        Args:
            line: Command line string

        Returns:
            Exit status
        """
        cmd = self._parser.parse(line)

        if cmd is None:
            return self._last_status

        try:
            command = self._resolver.resolve(cmd.command, cmd.args)
        except ParseError as e:
            print(e.message, file=self.out)
            self._last_status = e.error_code
            return self._last_status

        try:
            self._last_status = self._executor.run(command)
        except ShellException as e:
            if not isinstance(command, ExternalCommand):
                print(f"Error executing command: {e}", file=self.out)
            self._last_status = e.error_code

        return self._last_status

    def stop(self) -> None:
        """Stop the shell after the current line."""
        self._running = False


def create_shell(config: Optional[Config] = None) -> Shell:
    """Factory function to create a shell."""
    return Shell(config)
