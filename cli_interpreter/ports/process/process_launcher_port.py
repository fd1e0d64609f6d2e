"""
Process launcher port interface defining the contract for running external commands.
"""

from abc import ABC, abstractmethod

from cli_interpreter.entities.command import ExitOutcome


class ProcessLauncherPort(ABC):
    """Port interface for launching external programs."""

    @abstractmethod
    def launch(self, name: str, args: list[str], working_dir: str) -> ExitOutcome:
        """
        Run a program and block until it terminates.

        Args:
            name: Program name, resolved through the host's command search
            args: Arguments passed through unmodified
            working_dir: Working directory of the child process

        Returns:
            ExitOutcome describing how the child ended

        Raises:
            SpawnError: If the program cannot be launched
            WaitError: If waiting on the child fails
        """
        pass
