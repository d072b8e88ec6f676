"""Interactive prompt that dispatches input lines to registered commands."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from mockshell.commands import AbstractCommand
from mockshell.errors import CommandInsertError, MockShellError

_GREETING = (
    "Please enter a valid command, 'q' to quit, 'help' \n"
    "for a list of commands, or 'help <command name>' for details about a "
    "specific command name."
)


class CommandPrompt:
    """Reads commands from input and runs them until the user quits."""

    def __init__(
        self,
        file_system: Any = None,
        file_factory: Any = None,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        self.file_system = file_system
        self.file_factory = file_factory
        self._stdin = stdin
        self._out = out
        self._commands: dict[str, AbstractCommand] = {}

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def add_command(self, name: str, command: AbstractCommand) -> None:
        """Register ``command`` under ``name``; names must be unique."""
        if name in self._commands:
            raise CommandInsertError(f"a command named {name!r} already exists")
        self._commands[name] = command

    def list_commands(self) -> None:
        """Write every registered command name, one per line, sorted."""
        for name in sorted(self._commands):
            self._print(name)

    def prompt(self) -> str:
        """Ask for input and return the first non-blank line, or 'q' at end of input."""
        self._print(_GREETING)
        self._print()
        self.out.write("$  ")
        self.out.flush()
        for raw in self.stdin:
            line = raw.rstrip("\n").lstrip()
            if line:
                return line
        return "q"

    def _dispatch(self, name: str, argument: str) -> None:
        command = self._commands.get(name)
        if command is None:
            self._print("Command does not exist")
            return
        try:
            command.execute(argument)
        except MockShellError:
            self._print("Command failed")

    def _show_help(self, argument: str) -> None:
        words = argument.split()
        command = self._commands.get(words[0] if words else "")
        if command is None:
            self._print("Command does not exist")
        else:
            command.display_info()

    def run(self) -> None:
        """Prompt repeatedly, running each command, until the user enters 'q'."""
        while True:
            line = self.prompt()
            if line == "q":
                return
            if line == "help":
                self.list_commands()
            elif " " not in line:
                self._dispatch(line, "")
            else:
                name, _, argument = line.partition(" ")
                argument = argument.lstrip()
                if name == "help":
                    self._show_help(argument)
                else:
                    self._dispatch(name, argument)