"""
Shell Exceptions

Exceptions raised while parsing, resolving and executing shell commands.
Parse errors are reported to the user verbatim; execution errors are
reported with a generic prefix by the read loop.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell errors.

    Attributes:
        message: Human-readable error description, shown to the user
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise ShellException("something went wrong", error_code=1)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1
        self.context = context or {}

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )


class ParseError(ShellException):
    """
    A line could not be turned into a runnable command.

    Raised before anything is executed, so no state has changed.
    """
    pass


class MissingArgumentsError(ParseError):
    """
    A builtin that requires arguments was given none.

    Example:
        >>> raise MissingArgumentsError("echo")
    """

    def __init__(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.command = command
        super().__init__(
            message=f"{command}: no arguments provided",
            error_code=2,
            context=context
        )


class CommandNotFoundError(ParseError):
    """
    The command is neither a builtin nor an executable on the search path.

    Example:
        >>> raise CommandNotFoundError("frobnicate")
    """

    def __init__(
        self,
        command: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.command = command
        super().__init__(
            message=f"{command}: command not found",
            error_code=127,
            context=context
        )


class ExecutionError(ShellException):
    """
    A resolved command failed while running.
    """
    pass


class RedirectionError(ExecutionError):
    """
    A redirection target file could not be created.

    Example:
        >>> raise RedirectionError("/no/such/dir/out.txt", reason="No such file or directory")
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.path = path
        self.reason = reason
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"error opening redirection file: {reason}",
            error_code=1,
            context=ctx
        )


class HomeDirectoryError(ExecutionError):
    """
    The user's home directory could not be determined.
    """

    def __init__(
        self,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.reason = reason
        super().__init__(
            message=f"cd: unable to get home directory: {reason}",
            error_code=1,
            context=context
        )


class ExternalCommandError(ExecutionError):
    """
    An external program could not be launched.

    The read loop never prints these; the program (or the OS) is
    expected to have reported the problem on its own error stream.
    """

    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.path = path
        self.reason = reason
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"{path}: {reason}",
            error_code=126,
            context=ctx
        )


class ConfigError(ShellException):
    """
    Configuration could not be loaded or is invalid.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        self.path = path
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(
            message=message,
            error_code=78,
            context=ctx
        )
