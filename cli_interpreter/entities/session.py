"""
Session domain entity.
"""

import os


class Session:
    """
    Interpreter session holding the current working directory.

    The directory is validated by whoever assigns it (the ``cd`` builtin);
    the session itself never re-checks it lazily.
    """

    def __init__(self, current_directory: str):
        """
        Initialize the Session entity.

        Args:
            current_directory: Absolute path of the starting directory
        """
        if not current_directory or not isinstance(current_directory, str):
            raise ValueError("current_directory must be a non-empty string")
        self.current_directory = current_directory

    @classmethod
    def from_process(cls) -> "Session":
        """
        Create a session starting in the process's working directory.

        Falls back to the filesystem root when the working directory cannot be
        queried (for example when it was removed).
        """
        try:
            cwd = os.getcwd()
        except OSError:
            cwd = os.path.abspath(os.sep)
        return cls(cwd)

    def __str__(self) -> str:
        return f"Session(current_directory='{self.current_directory}')"
