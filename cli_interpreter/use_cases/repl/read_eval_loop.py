"""
The interpreter's read-eval loop.
"""

import logging
from typing import Optional

from rich.console import Console
from rich.markup import escape

from cli_interpreter.entities.command import Command, ExecutionResult
from cli_interpreter.entities.session import Session
from cli_interpreter.exceptions import InputReadError, ShellError
from cli_interpreter.ports.io.line_reader_port import LineReaderPort
from cli_interpreter.use_cases.dispatch.dispatch_command import DispatchCommandUseCase

FAREWELL = "Goodbye!"


class ReadEvalLoop:
    """
    Prompt, read, dispatch and report until exit or end of input.

    Errors raised while dispatching are reported on the error console and
    never end the session; only the exit builtin and end of input do.
    """

    def __init__(
        self,
        session: Session,
        reader: LineReaderPort,
        dispatcher: DispatchCommandUseCase,
        console: Console,
        error_console: Console,
        app_name: str = "cli-interpreter",
        banner: bool = True,
        logger: Optional[logging.Logger] = None,
    ):
        self._session = session
        self._reader = reader
        self._dispatcher = dispatcher
        self._console = console
        self._error_console = error_console
        self._app_name = app_name
        self._banner = banner
        self._logger = logger or logging.getLogger(__name__)

    def prompt(self) -> str:
        return f"{self._app_name}:{self._session.current_directory}$ "

    def run(self) -> int:
        """
        Run the loop.

        Returns:
            Always 0; child exit codes are not propagated.
        """
        if self._banner:
            self._console.print(
                f"Welcome to [bold cyan]{escape(self._app_name)}[/bold cyan]!"
            )
            self._console.print(
                "Type [cyan]help[/cyan] for help, [cyan]exit[/cyan] to quit."
            )

        while True:
            self._console.out(self.prompt(), end="", highlight=False)
            self._console.file.flush()

            try:
                line = self._reader.read_line()
            except InputReadError as e:
                self._report_error(e)
                continue
            except KeyboardInterrupt:
                # Drop the partial line and prompt again
                self._console.out("", highlight=False)
                continue

            if line is None:
                self._console.out("", highlight=False)
                self._console.out(FAREWELL, highlight=False)
                self._logger.info("End of input, leaving")
                return 0

            if self.step(line) is ExecutionResult.TERMINATE:
                self._console.out(FAREWELL, highlight=False)
                return 0

    def step(self, line: str) -> ExecutionResult:
        """Interpret one input line; errors are reported, not raised."""
        command = Command.parse(line)
        if command is None:
            return ExecutionResult.CONTINUE

        try:
            return self._dispatcher.execute(self._session, command)
        except ShellError as e:
            self._report_error(e)
        except Exception as e:
            self._logger.exception(f"Unexpected error running {command.name}")
            self._report_error(e)
        return ExecutionResult.CONTINUE

    def _report_error(self, error: Exception) -> None:
        self._error_console.print(
            f"[red]Error:[/red] {escape(str(error))}", soft_wrap=True, highlight=False
        )
