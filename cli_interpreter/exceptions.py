"""
Custom exceptions for the interpreter.
"""

from typing import Optional


class ShellError(Exception):
    """Base exception class for interpreter errors."""

    pass


class ConfigurationError(ShellError):
    """Exception raised for configuration errors."""

    pass


class ShellEnvironmentError(ShellError):
    """Exception raised when a required environment value is missing."""

    def __init__(self, variable: str):
        self.variable = variable
        super().__init__(f"cannot resolve {variable}")


class DirectoryNotFoundError(ShellError):
    """Exception raised when a cd target is missing or not a directory."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"directory not found: {path}")


class DirectoryChangeError(ShellError):
    """Exception raised when the OS refuses to change the working directory."""

    def __init__(self, path: str, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"failed to change directory to {path}: {cause}")


class SpawnError(ShellError):
    """Exception raised when an external command cannot be launched."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"failed to run command: {command} ({cause})")


class NonZeroExitError(ShellError):
    """Exception raised when an external command exits with a failure status."""

    def __init__(
        self, command: str, exit_code: Optional[int], signal: Optional[int] = None
    ):
        self.command = command
        self.exit_code = exit_code
        self.signal = signal
        if exit_code is not None:
            detail = f"exit code: {exit_code}"
        elif signal is not None:
            detail = f"exit code: unknown (terminated by signal {signal})"
        else:
            detail = "exit code: unknown"
        super().__init__(f"command failed: {command}, {detail}")


class WaitError(ShellError):
    """Exception raised when waiting on a child process fails."""

    def __init__(self, command: str, cause: BaseException):
        self.command = command
        self.cause = cause
        super().__init__(f"failed to wait for child process {command}: {cause}")


class InputReadError(ShellError):
    """Exception raised when the next input line cannot be read."""

    def __init__(self, cause: BaseException):
        self.cause = cause
        super().__init__(f"failed to read input: {cause}")
