"""
Configuration settings for the interpreter.
"""

import logging
import os

from dotenv import load_dotenv

from cli_interpreter.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings:
    """Interpreter settings loaded from environment variables."""

    def __init__(self):
        self.app_name: str = self._get_env("CLI_INTERPRETER_APP_NAME", "cli-interpreter")
        self.log_level: str = self._get_log_level("CLI_INTERPRETER_LOG_LEVEL", "WARNING")
        self.banner: bool = self._get_flag("CLI_INTERPRETER_BANNER", True)
        self.color: bool = not os.getenv("NO_COLOR")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key, default)

    def _get_flag(self, key: str, default: bool) -> bool:
        """Get a boolean environment variable ('0', 'false', 'no', 'off' are false)."""
        val = os.getenv(key)
        if val is None:
            return default
        return val.strip().lower() not in ("0", "false", "no", "off")

    def _get_log_level(self, key: str, default: str) -> str:
        """Get a logging level name, raise error if it is not a known level."""
        value = self._get_env(key, default).strip().upper()
        if value not in _LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level in {key}: {value!r} "
                f"(expected one of {', '.join(_LOG_LEVELS)})"
            )
        return value

    def numeric_log_level(self) -> int:
        return getattr(logging, self.log_level)
