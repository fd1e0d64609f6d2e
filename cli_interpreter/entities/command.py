from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ExecutionResult(Enum):
    """Outcome of a successful dispatch."""

    CONTINUE = "continue"
    TERMINATE = "terminate"


@dataclass(frozen=True)
class Command:
    """One tokenized input line: a command name and its arguments."""

    name: str
    arguments: list[str] = field(default_factory=list)

    @classmethod
    def parse(cls, line: str) -> Optional["Command"]:
        # split() without a separator collapses runs of whitespace and trims
        tokens = line.split()
        if not tokens:
            return None
        return cls(tokens[0], tokens[1:])


@dataclass(frozen=True)
class ExitOutcome:
    """How a child process ended: an exit code, or the signal that killed it."""

    exit_code: Optional[int]
    signal: Optional[int] = None

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitOutcome":
        # subprocess reports death by signal N as returncode -N
        if returncode < 0:
            return cls(exit_code=None, signal=-returncode)
        return cls(exit_code=returncode)
