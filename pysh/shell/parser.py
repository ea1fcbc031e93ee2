"""
Command Parser Module

Turns a raw input line into a command name and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple


# Characters a backslash escapes inside double quotes.
DOUBLE_QUOTE_ESCAPABLE = frozenset('$"\\')

STDOUT_OPERATORS = frozenset(('>', '1>'))
STDERR_OPERATORS = frozenset(('2>',))


@dataclass(frozen=True)
class Redirections:
    """Output redirection targets. None means inherit the shell's stream."""
    stdout: Optional[str] = None
    stderr: Optional[str] = None


@dataclass
class ParsedCommand:
    """A tokenized command line."""
    command: str
    args: List[str] = field(default_factory=list)


def tokenize(line: str) -> List[str]:
    """
    Split a line into tokens, honoring quotes and backslash escapes.

    Single quotes keep everything literal. Inside double quotes a
    backslash only escapes ``$``, ``"`` and ``\\``; before any other
    character it is kept. Outside quotes a backslash makes the next
    character literal, including a space.

    Unterminated quotes run to the end of the line and a trailing lone
    backslash is dropped; neither is an error.

    Example:
        >>> tokenize("echo 'a b' c")
        ['echo', 'a b', 'c']
    """
    tokens: List[str] = []
    current: List[str] = []
    in_single = False
    in_double = False
    escaped = False

    for char in line:
        if escaped:
            if in_double and char not in DOUBLE_QUOTE_ESCAPABLE:
                current.append('\\')
            current.append(char)
            escaped = False
        elif char == '\\' and not in_single:
            escaped = True
        elif char == "'" and not in_double:
            in_single = not in_single
        elif char == '"' and not in_single:
            in_double = not in_double
        elif char == ' ' and not in_single and not in_double:
            if current:
                tokens.append(''.join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append(''.join(current))

    return tokens


def extract_redirections(tokens: List[str]) -> Tuple[List[str], Redirections]:
    """
    Pull ``>``, ``1>`` and ``2>`` operators and their targets out of tokens.

    The last target given for a stream wins. An operator with nothing
    after it is dropped without setting a target.

    Returns:
        The remaining tokens in order, and the redirection targets
    """
    cleaned: List[str] = []
    stdout: Optional[str] = None
    stderr: Optional[str] = None

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in STDOUT_OPERATORS or token in STDERR_OPERATORS:
            if i + 1 < len(tokens):
                if token in STDOUT_OPERATORS:
                    stdout = tokens[i + 1]
                else:
                    stderr = tokens[i + 1]
                i += 2
                continue
        else:
            cleaned.append(token)
        i += 1

    return cleaned, Redirections(stdout=stdout, stderr=stderr)


class CommandParser:
    """
    Parses shell command lines.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("cat notes.txt > copy.txt")
        >>> cmd.command, cmd.args
        ('cat', ['notes.txt', '>', 'copy.txt'])
    """

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Redirection operators stay in ``args``; they are removed at
        resolution time.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if the line has no tokens
        """
        line = line.strip()

        if not line:
            return None

        tokens = tokenize(line)

        if not tokens:
            return None

        return ParsedCommand(command=tokens[0], args=tokens[1:])
