from abc import ABC, abstractmethod
from typing import Optional


class LineReaderPort(ABC):
    @abstractmethod
    def read_line(self) -> Optional[str]:
        """
        Read the next line of input.

        Returns:
            The line (possibly with its trailing newline), or None at end of input

        Raises:
            InputReadError: If reading fails
        """
        raise NotImplementedError
