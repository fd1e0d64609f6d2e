"""
Use case for the cd builtin.
"""

import logging
import os
from typing import Mapping, Optional

from cli_interpreter.entities.session import Session
from cli_interpreter.exceptions import (
    DirectoryChangeError,
    DirectoryNotFoundError,
    ShellEnvironmentError,
)


class ChangeDirectoryUseCase:
    """Use case for changing the session's working directory."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            environ: Environment to read HOME from (defaults to os.environ)
            logger: Logger instance to use for logging
        """
        self._environ = environ
        self._logger = logger or logging.getLogger(__name__)

    def resolve_target(self, session: Session, args: list[str]) -> str:
        """
        Compute the directory a cd with these arguments would switch to.

        Relative paths are appended to the current directory as-is: '.', '..'
        and repeated separators are kept in the result.

        Raises:
            ShellEnvironmentError: If no argument is given and HOME is unset
        """
        if args:
            path = args[0]
        else:
            environ = self._environ if self._environ is not None else os.environ
            path = environ.get("HOME")
            if path is None:
                raise ShellEnvironmentError("HOME")

        if path.startswith(os.sep):
            return path
        return f"{session.current_directory}{os.sep}{path}"

    def execute(self, session: Session, args: list[str]) -> str:
        """
        Change the session directory and the process working directory.

        Args:
            session: Session to update
            args: cd arguments; only the first one is used

        Returns:
            The new current directory

        Raises:
            ShellEnvironmentError: If HOME is needed but unset
            DirectoryNotFoundError: If the target is missing or not a directory
            DirectoryChangeError: If the OS refuses the change
        """
        target = self.resolve_target(session, args)

        if not os.path.isdir(target):
            self._logger.info(f"cd rejected, not a directory: {target}")
            raise DirectoryNotFoundError(target)

        session.current_directory = target
        try:
            os.chdir(target)
        except OSError as e:
            self._logger.error(f"Error changing directory to {target}: {e}")
            raise DirectoryChangeError(target, e)

        self._logger.info(f"Changed directory to {target}")
        return target
