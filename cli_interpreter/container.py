"""
Dependency injection container for managing interpreter dependencies.
"""

import logging

from rich.console import Console

from cli_interpreter.adapters.io.stream_line_reader import StreamLineReader
from cli_interpreter.adapters.process.local_process_launcher import (
    LocalProcessLauncher,
)
from cli_interpreter.config.settings import Settings
from cli_interpreter.entities.session import Session
from cli_interpreter.ports.io.line_reader_port import LineReaderPort
from cli_interpreter.ports.process.process_launcher_port import ProcessLauncherPort
from cli_interpreter.use_cases.builtins.builtins_handler import BuiltinsHandler
from cli_interpreter.use_cases.builtins.change_directory import (
    ChangeDirectoryUseCase,
)
from cli_interpreter.use_cases.dispatch.dispatch_command import (
    DispatchCommandUseCase,
)
from cli_interpreter.use_cases.external.run_external_command import (
    RunExternalCommandUseCase,
)
from cli_interpreter.use_cases.repl.read_eval_loop import ReadEvalLoop


class DependencyContainer:
    """
    Container for managing interpreter dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get settings instance (read from the environment on first use).

        Raises:
            ConfigurationError: If an environment value is invalid
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def set_settings(self, settings: Settings) -> None:
        """Replace the settings, e.g. after command-line overrides."""
        self._instances["settings"] = settings

    def get_console(self) -> Console:
        if "console" not in self._instances:
            color = self.get_settings().color
            self._instances["console"] = Console(
                soft_wrap=True, no_color=not color, highlight=False
            )
        return self._instances["console"]

    def get_error_console(self) -> Console:
        if "error_console" not in self._instances:
            color = self.get_settings().color
            self._instances["error_console"] = Console(
                stderr=True, soft_wrap=True, no_color=not color, highlight=False
            )
        return self._instances["error_console"]

    def get_line_reader(self) -> LineReaderPort:
        """
        Get line reader adapter instance.

        Returns:
            LineReaderPort implementation
        """
        if "line_reader" not in self._instances:
            self._instances["line_reader"] = StreamLineReader(logger=self._logger)
        return self._instances["line_reader"]

    def get_process_launcher(self) -> ProcessLauncherPort:
        """
        Get process launcher adapter instance.

        Returns:
            ProcessLauncherPort implementation
        """
        if "process_launcher" not in self._instances:
            self._instances["process_launcher"] = LocalProcessLauncher(self._logger)
        return self._instances["process_launcher"]

    def get_session(self) -> Session:
        """
        Get the session, starting in the process's working directory.
        """
        if "session" not in self._instances:
            self._instances["session"] = Session.from_process()
        return self._instances["session"]

    def get_builtins_handler(self) -> BuiltinsHandler:
        """
        Get builtin command table with injected dependencies.

        Returns:
            Configured BuiltinsHandler
        """
        if "builtins_handler" not in self._instances:
            self._instances["builtins_handler"] = BuiltinsHandler(
                self.get_console(),
                ChangeDirectoryUseCase(logger=self._logger),
                logger=self._logger,
            )
        return self._instances["builtins_handler"]

    def get_run_external_command_use_case(self) -> RunExternalCommandUseCase:
        """
        Get external command use case with injected dependencies.

        Returns:
            Configured RunExternalCommandUseCase
        """
        if "run_external_command_use_case" not in self._instances:
            self._instances["run_external_command_use_case"] = (
                RunExternalCommandUseCase(self.get_process_launcher(), self._logger)
            )
        return self._instances["run_external_command_use_case"]

    def get_dispatch_command_use_case(self) -> DispatchCommandUseCase:
        """
        Get dispatch use case with injected dependencies.

        Returns:
            Configured DispatchCommandUseCase
        """
        if "dispatch_command_use_case" not in self._instances:
            self._instances["dispatch_command_use_case"] = DispatchCommandUseCase(
                self.get_builtins_handler(),
                self.get_run_external_command_use_case(),
                self._logger,
            )
        return self._instances["dispatch_command_use_case"]

    def get_read_eval_loop(self) -> ReadEvalLoop:
        """
        Get the read-eval loop wired to the session, reader and dispatcher.

        Returns:
            Configured ReadEvalLoop
        """
        if "read_eval_loop" not in self._instances:
            settings = self.get_settings()
            self._instances["read_eval_loop"] = ReadEvalLoop(
                self.get_session(),
                self.get_line_reader(),
                self.get_dispatch_command_use_case(),
                self.get_console(),
                self.get_error_console(),
                app_name=settings.app_name,
                banner=settings.banner,
                logger=self._logger,
            )
        return self._instances["read_eval_loop"]

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
