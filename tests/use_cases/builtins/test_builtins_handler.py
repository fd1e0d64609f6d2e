"""
Tests for the BuiltinsHandler.
"""

import os
from unittest.mock import MagicMock

import pytest

from cli_interpreter.entities.command import ExecutionResult
from cli_interpreter.entities.session import Session
from cli_interpreter.exceptions import DirectoryNotFoundError
from cli_interpreter.use_cases.builtins.builtins_handler import BuiltinsHandler
from cli_interpreter.use_cases.builtins.change_directory import ChangeDirectoryUseCase


class TestBuiltinsHandler:
    """Test cases for the builtin lookup table."""

    def test_handles_builtin_names(self, console):
        handler = BuiltinsHandler(console)

        for name in ("help", "exit", "cd", "pwd", "echo"):
            assert handler.handles(name)
        assert not handler.handles("ls")
        assert not handler.handles("ECHO")

    def test_available_builtins(self, console):
        handler = BuiltinsHandler(console)

        names = [spec["name"] for spec in handler.available_builtins()]
        assert names == ["help", "exit", "cd", "pwd", "echo"]

    def test_dispatch_unknown_name(self, console):
        handler = BuiltinsHandler(console)

        with pytest.raises(ValueError, match="Unknown builtin: ls"):
            handler.dispatch("ls", Session("/"), [])

    def test_echo_joins_arguments(self, console):
        handler = BuiltinsHandler(console)

        result = handler.dispatch("echo", Session("/"), ["a", "b", "c"])

        assert result is ExecutionResult.CONTINUE
        assert console.file.getvalue() == "a b c\n"

    def test_echo_without_arguments_prints_empty_line(self, console):
        handler = BuiltinsHandler(console)

        handler.dispatch("echo", Session("/"), [])

        assert console.file.getvalue() == "\n"

    def test_echo_does_not_interpret_markup(self, console):
        handler = BuiltinsHandler(console)

        handler.dispatch("echo", Session("/"), ["[bold]x[/bold]", "1.5"])

        assert console.file.getvalue() == "[bold]x[/bold] 1.5\n"

    def test_echo_keeps_control_characters(self, console):
        """Test that echo output is the arguments byte for byte."""
        handler = BuiltinsHandler(console)

        handler.dispatch("echo", Session("/"), ["a\x07b", "c\x08d", "e\tf\rg"])

        assert console.file.getvalue() == "a\x07b c\x08d e\tf\rg\n"

    def test_pwd_keeps_control_characters(self, console):
        handler = BuiltinsHandler(console)

        handler.dispatch("pwd", Session("/tmp/odd\tdir\x0b"), [])

        assert console.file.getvalue() == "/tmp/odd\tdir\x0b\n"

    def test_pwd_prints_current_directory_verbatim(self, console):
        handler = BuiltinsHandler(console)
        session = Session("/home/user/projects/../x")

        result = handler.dispatch("pwd", session, ["ignored"])

        assert result is ExecutionResult.CONTINUE
        assert console.file.getvalue() == "/home/user/projects/../x\n"

    def test_exit_terminates_regardless_of_arguments(self, console):
        handler = BuiltinsHandler(console)

        assert handler.dispatch("exit", Session("/"), []) is ExecutionResult.TERMINATE
        assert (
            handler.dispatch("exit", Session("/"), ["1", "now"])
            is ExecutionResult.TERMINATE
        )
        assert console.file.getvalue() == ""

    def test_help_uses_available_builtins(self, console):
        handler = BuiltinsHandler(console)

        handler.dispatch("help", Session("/"), [])

        out = console.file.getvalue()
        for spec in handler.available_builtins():
            assert f"  {spec['name']:<8}- {spec['description']}\n" in out

    def test_help_lists_builtins_and_external_commands(self, console):
        handler = BuiltinsHandler(console)
        session = Session("/tmp")

        result = handler.dispatch("help", session, [])

        out = console.file.getvalue()
        assert result is ExecutionResult.CONTINUE
        assert out.startswith("Builtin commands:")
        for name in ("help", "exit", "cd", "pwd", "echo"):
            assert f"  {name}" in out
        assert "External commands:" in out
        assert "any system command is supported" in out
        assert session.current_directory == "/tmp"

    def test_cd_delegates_to_use_case(self, console):
        change_directory = MagicMock(spec=ChangeDirectoryUseCase)
        handler = BuiltinsHandler(console, change_directory)
        session = Session("/")

        result = handler.dispatch("cd", session, ["projects"])

        assert result is ExecutionResult.CONTINUE
        change_directory.execute.assert_called_once_with(session, ["projects"])

    def test_cd_then_pwd(self, console, session, temp_directory):
        """Test that pwd reflects a successful cd."""
        handler = BuiltinsHandler(console, ChangeDirectoryUseCase(environ={}))

        handler.dispatch("cd", session, ["projects"])
        handler.dispatch("pwd", session, [])

        assert console.file.getvalue() == f"{temp_directory}{os.sep}projects\n"

    def test_cd_error_propagates(self, console, session):
        handler = BuiltinsHandler(console, ChangeDirectoryUseCase(environ={}))

        with pytest.raises(DirectoryNotFoundError):
            handler.dispatch("cd", session, ["nonexistent"])
