"""
Builtin commands executed inside the interpreter process.
"""

import logging
from typing import Callable, Optional, TypedDict

from rich.console import Console

from cli_interpreter.entities.command import ExecutionResult
from cli_interpreter.entities.session import Session
from cli_interpreter.use_cases.builtins.change_directory import ChangeDirectoryUseCase

BuiltinHandler = Callable[[Session, list[str]], ExecutionResult]


class BuiltinSpec(TypedDict):
    """Name and one-line description of a builtin."""

    name: str
    description: str


EXTERNAL_EXAMPLES: list[BuiltinSpec] = [
    {"name": "ls", "description": "List files"},
    {"name": "cat", "description": "Show file contents"},
    {"name": "grep", "description": "Search text"},
]


class BuiltinsHandler:
    """
    Lookup table of builtin commands.

    Each builtin is a method registered under its command name; dispatch goes
    through the table, so a new builtin only needs a handler and an entry.
    """

    def __init__(
        self,
        console: Console,
        change_directory: Optional[ChangeDirectoryUseCase] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._console = console
        self._logger = logger or logging.getLogger(__name__)
        self._change_directory = change_directory or ChangeDirectoryUseCase(
            logger=self._logger
        )
        self._handlers: dict[str, BuiltinHandler] = {
            "help": self._help,
            "exit": self._exit,
            "cd": self._cd,
            "pwd": self._pwd,
            "echo": self._echo,
        }
        self._specs: list[BuiltinSpec] = [
            {"name": "help", "description": "Show this help message"},
            {"name": "exit", "description": "Exit the interpreter"},
            {"name": "cd", "description": "Change the current directory"},
            {"name": "pwd", "description": "Print the current directory"},
            {"name": "echo", "description": "Print the arguments"},
        ]

    def available_builtins(self) -> list[BuiltinSpec]:
        return list(self._specs)

    def handles(self, name: str) -> bool:
        return name in self._handlers

    def dispatch(self, name: str, session: Session, args: list[str]) -> ExecutionResult:
        """
        Run the builtin registered under ``name``.

        Raises:
            ValueError: If ``name`` is not a builtin
        """
        handler = self._handlers.get(name)
        if handler is None:
            raise ValueError(f"Unknown builtin: {name}")
        self._logger.debug(f"Running builtin {name} with args {args}")
        return handler(session, args)

    def _write(self, text: str) -> None:
        # Written straight to the stream so control characters and tabs survive
        self._console.file.write(text + "\n")

    def _help(self, session: Session, args: list[str]) -> ExecutionResult:
        lines = ["Builtin commands:"]
        for spec in self.available_builtins():
            lines.append(f"  {spec['name']:<8}- {spec['description']}")
        lines.append("")
        lines.append("External commands:")
        for spec in EXTERNAL_EXAMPLES:
            lines.append(f"  {spec['name']:<8}- {spec['description']}")
        lines.append("  ...     (any system command is supported)")
        self._write("\n".join(lines))
        return ExecutionResult.CONTINUE

    def _exit(self, session: Session, args: list[str]) -> ExecutionResult:
        return ExecutionResult.TERMINATE

    def _cd(self, session: Session, args: list[str]) -> ExecutionResult:
        self._change_directory.execute(session, args)
        return ExecutionResult.CONTINUE

    def _pwd(self, session: Session, args: list[str]) -> ExecutionResult:
        self._write(session.current_directory)
        return ExecutionResult.CONTINUE

    def _echo(self, session: Session, args: list[str]) -> ExecutionResult:
        self._write(" ".join(args))
        return ExecutionResult.CONTINUE
