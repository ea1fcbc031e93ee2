"""
pysh - A small interactive command-line shell

Quoting and escaping, stdout/stderr redirection, a handful of builtins
and external programs found on the search path. Standard library only.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.shell import Shell, create_shell

__all__ = [
    'Shell',
    'create_shell',
]
