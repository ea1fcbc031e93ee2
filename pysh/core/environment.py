"""
Shell Environment

Process-wide state the shell reads and mutates: the working directory,
the environment-derived search path and the home directory. Resolver
and executor only touch that state through an Environment, so tests can
hand them a subclass backed by a temporary directory.

Author: YSNRFD
Version: 1.0.0
"""

import os
from pathlib import Path
from typing import Optional, List, Mapping


class Environment:
    """
    Access to the working directory and environment of the shell process.

    Args:
        path_variable: Name of the variable holding the search path
        separator: Separator between search path entries
        environ: Variable mapping to read from (defaults to os.environ)
    """

    def __init__(
        self,
        path_variable: str = "PATH",
        separator: str = ":",
        environ: Optional[Mapping[str, str]] = None
    ):
        self.path_variable = path_variable
        self.separator = separator
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def search_path(self) -> List[str]:
        """
        Directories to search for executables, in order.

        Read fresh on every call; empty entries are dropped.
        """
        value = self.environ.get(self.path_variable, "")
        return [entry for entry in value.split(self.separator) if entry]

    def getcwd(self) -> str:
        """Current working directory. Raises OSError if it is gone."""
        return os.getcwd()

    def chdir(self, path: str) -> None:
        """Change the working directory. Raises OSError on failure."""
        os.chdir(path)

    def home_directory(self) -> str:
        """
        Home directory of the current user.

        Raises:
            RuntimeError: If it cannot be determined
        """
        home = self.environ.get("HOME")
        if home:
            return home
        return str(Path.home())
