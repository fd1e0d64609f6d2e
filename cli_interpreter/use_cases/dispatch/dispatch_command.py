"""
Use case routing a parsed command to a builtin or to an external program.
"""

import logging
from typing import Optional

from cli_interpreter.entities.command import Command, ExecutionResult
from cli_interpreter.entities.session import Session
from cli_interpreter.use_cases.builtins.builtins_handler import BuiltinsHandler
from cli_interpreter.use_cases.external.run_external_command import (
    RunExternalCommandUseCase,
)


class DispatchCommandUseCase:
    """Use case for dispatching one command."""

    def __init__(
        self,
        builtins: BuiltinsHandler,
        external: RunExternalCommandUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            builtins: Table of builtin commands
            external: Use case running non-builtin commands as child processes
            logger: Logger instance to use for logging
        """
        self._builtins = builtins
        self._external = external
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: Command) -> ExecutionResult:
        """
        Run a command against a session.

        Returns:
            ExecutionResult.TERMINATE for exit, ExecutionResult.CONTINUE otherwise

        Raises:
            ShellError: Any error of the builtin or the external command
        """
        if self._builtins.handles(command.name):
            self._logger.debug(f"Dispatching builtin: {command.name}")
            return self._builtins.dispatch(
                command.name, session, list(command.arguments)
            )
        return self._external.execute(session, command)
