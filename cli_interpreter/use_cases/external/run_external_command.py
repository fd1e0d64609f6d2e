import logging
from typing import Optional

from cli_interpreter.entities.command import Command, ExecutionResult
from cli_interpreter.entities.session import Session
from cli_interpreter.exceptions import NonZeroExitError, ShellError, SpawnError
from cli_interpreter.ports.process.process_launcher_port import ProcessLauncherPort


class RunExternalCommandUseCase:
    def __init__(
        self,
        launcher: ProcessLauncherPort,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, command: Command) -> ExecutionResult:
        try:
            self._logger.info(
                f"Running external command: {command.name} in {session.current_directory}"
            )
            outcome = self._launcher.launch(
                command.name, list(command.arguments), session.current_directory
            )
        except ShellError:
            raise
        except Exception as e:
            self._logger.error(f"Error running external command: {e}")
            raise SpawnError(command.name, e)

        if not outcome.success:
            self._logger.info(
                f"{command.name} failed: exit_code={outcome.exit_code} signal={outcome.signal}"
            )
            raise NonZeroExitError(command.name, outcome.exit_code, outcome.signal)
        return ExecutionResult.CONTINUE
