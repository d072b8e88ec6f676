"""Shell commands that operate on a mock file system."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from typing import Protocol, TextIO

from mockshell.errors import (
    CommandFailedError,
    FileDoesNotExistError,
    FileNotAddedError,
    InvalidUsageError,
    MockShellError,
)
from mockshell.files import AbstractFile
from mockshell.visitors import AggregateStatisticsVisitor, BasicDisplayVisitor

_ENCODING = "latin-1"
_KIND_BY_EXTENSION = {"txt": "text", "img": "image"}


class FileSystem(Protocol):
    """What the commands need from a file system."""

    def file_names(self) -> Iterable[str]:
        """Return the names of every stored file."""

    def open_file(self, name: str) -> AbstractFile | None:
        """Open a file by name, or return None if it cannot be opened."""

    def close_file(self, file: AbstractFile) -> None:
        """Close a file previously opened."""

    def add_file(self, name: str, file: AbstractFile) -> None:
        """Store a file, raising MockShellError if that is not possible."""


class ParsingStrategy(Protocol):
    """Splits a macro command's input into one argument per step."""

    def parse(self, text: str) -> list[str]:
        """Return the arguments for each step of the macro."""


class AbstractCommand(ABC):
    """A command that the prompt can run."""

    @abstractmethod
    def execute(self, command: str) -> None:
        """Run the command with its argument string; raise on failure."""

    @abstractmethod
    def display_info(self) -> None:
        """Write usage information for the command."""


class _FileSystemCommand(AbstractCommand):
    usage = ""

    def __init__(self, file_system: FileSystem, out: TextIO | None = None) -> None:
        self.file_system = file_system
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _print(self, text: str = "") -> None:
        self.out.write(text + "\n")

    def display_info(self) -> None:
        self._print(self.usage)

    @contextmanager
    def _opened(self, name: str) -> Iterator[AbstractFile]:
        file = self.file_system.open_file(name)
        if file is None:
            raise FileDoesNotExistError(f"no such file: {name!r}")
        try:
            yield file
        finally:
            self.file_system.close_file(file)


def _split_file_argument(command: str) -> tuple[str, list[str]]:
    words = command.split()
    return (words[0] if words else ""), words[1:]


class AggregateStatsCommand(_FileSystemCommand):
    """Reports how many files and bytes the file system holds."""

    usage = (
        "as displays the file system's aggregate statistics, "
        "as can be invoked with the command : as"
    )

    def __init__(self, file_system: FileSystem, out: TextIO | None = None) -> None:
        super().__init__(file_system, out)

    def execute(self, command: str) -> None:
        if command:
            raise InvalidUsageError("as takes no arguments")
        visitor = AggregateStatisticsVisitor()
        for name in sorted(self.file_system.file_names()):
            file = self.file_system.open_file(name)
            if file is None:
                continue
            try:
                file.accept(visitor)
            finally:
                self.file_system.close_file(file)

        self._print(f"Total number of files: {visitor.text_count + visitor.image_count}")
        self._print(f"Number of text files: {visitor.text_count}")
        self._print(f"Number of image files: {visitor.image_count}")
        self._print(
            "Total number of bytes required (1 byte/char, excluding filenames): "
            f"{visitor.image_bytes + visitor.text_bytes}"
        )
        self._print(f"Number of text file bytes: {visitor.text_bytes}")
        self._print(f"Number of image file bytes: {visitor.image_bytes}")

    def display_info(self) -> None:
        super().display_info()


class CatCommand(_FileSystemCommand):
    """Replaces or extends a file's contents with lines typed by the user."""

    usage = "cat concatenates a file, cat can be invoked with the command : cat <filename> [-a]"

    def __init__(
        self,
        file_system: FileSystem,
        stdin: TextIO | None = None,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(file_system, out)
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def _read_lines(self) -> tuple[list[str], bool]:
        """Collect lines until ':wq' (save) or ':q' (discard); end of input discards."""
        lines: list[str] = []
        for raw in self.stdin:
            line = raw.rstrip("\n")
            if line == ":wq":
                return lines, True
            if line == ":q":
                return lines, False
            lines.append(line)
        return lines, False

    def execute(self, command: str) -> None:
        has_option = " " in command
        filename, rest = _split_file_argument(command)
        option = rest[0] if rest else ""
        with self._opened(filename) as file:
            if has_option:
                if option != "-a":
                    self._print("Invalid usage of cat")
                    raise InvalidUsageError(f"cat does not accept option {option!r}")
                self._print(file.read().decode(_ENCODING))

            self._print(
                "Enter data you would like to append to the existing file. "
                "Enter :wq to save the file and exit, enter :q to exit without saving"
            )
            lines, save = self._read_lines()
            if not save:
                return
            data = "\n".join(lines).encode(_ENCODING, errors="replace")
            if has_option:
                file.append(data)
            else:
                file.write(data)

    def display_info(self) -> None:
        super().display_info()


class CopyCommand(_FileSystemCommand):
    """Adds a copy of a file under a new name with the same extension."""

    usage = (
        "cp copies a file, cp can be invoked with the command : "
        "cp <file_to_copy> <new_name_with_no_extension>"
    )

    def __init__(self, file_system: FileSystem, out: TextIO | None = None) -> None:
        super().__init__(file_system, out)

    def execute(self, command: str) -> None:
        filename, rest = _split_file_argument(command)
        with self._opened(filename) as file:
            if len(rest) != 1:
                self._print("incorrect usage of cp")
                raise InvalidUsageError("cp needs exactly a source file and a new name")
            copy = file.clone(rest[0])
            try:
                self.file_system.add_file(copy.name, copy)
            except MockShellError as exc:
                raise FileNotAddedError(f"could not add {copy.name!r}") from exc

    def display_info(self) -> None:
        super().display_info()


class DisplayCommand(_FileSystemCommand):
    """Shows a file's contents, formatted or as raw data."""

    usage = "ds displays a file's contents, ds can be invoked with the command : ds <filename> [-d]"

    def __init__(self, file_system: FileSystem, out: TextIO | None = None) -> None:
        super().__init__(file_system, out)

    def execute(self, command: str) -> None:
        has_option = " " in command
        filename, rest = _split_file_argument(command)
        option = rest[0] if rest else ""
        with self._opened(filename) as file:
            if has_option:
                if option != "-d":
                    self._print("Invalid usage of ds")
                    raise InvalidUsageError(f"ds does not accept option {option!r}")
                self._print(file.read().decode(_ENCODING))
                return
            file.accept(BasicDisplayVisitor(self.out))

    def display_info(self) -> None:
        super().display_info()


def _extension(name: str) -> str:
    # Everything after the first dot; the whole name when there is none.
    return name[name.find(".") + 1:]


class LSCommand(_FileSystemCommand):
    """Lists the files in the file system, optionally with metadata."""

    usage = (
        "ls lists all files in a file system, ls can be invoked with the command : "
        "'ls' (lists all files) OR 'ls -m' (all files with metadata)"
    )
    max_file_name_length = 20

    def __init__(self, file_system: FileSystem, out: TextIO | None = None) -> None:
        super().__init__(file_system, out)

    def _padded(self, text: str) -> str:
        return text.ljust(self.max_file_name_length + 1)

    def execute(self, command: str) -> None:
        names = sorted(self.file_system.file_names())
        if not command:
            for count, name in enumerate(names, start=1):
                self.out.write(self._padded(name))
                if count % 2 == 0:
                    self.out.write("\n")
            return
        if command == "-m":
            for name in names:
                self.out.write(self._padded(name))
                with self._opened(name) as file:
                    kind = _KIND_BY_EXTENSION.get(_extension(name), "")
                    self.out.write(self._padded(kind))
                    self._print(str(file.size))
            return
        raise InvalidUsageError(f"ls does not accept {command!r}")

    def display_info(self) -> None:
        super().display_info()


class MacroCommand(_FileSystemCommand):
    """Runs several commands in sequence from a single input string."""

    usage = (
        "MacroCommand allows us to make commands that execute multiple commands "
        "in sequence from a single input string"
    )

    def __init__(
        self,
        file_system: FileSystem,
        parse_strategy: ParsingStrategy,
        out: TextIO | None = None,
    ) -> None:
        super().__init__(file_system, out)
        self.parse_strategy = parse_strategy
        self._commands: list[AbstractCommand] = []

    def add_command(self, command: AbstractCommand) -> None:
        """Append a step to the macro."""
        self._commands.append(command)

    def execute(self, command: str) -> None:
        arguments = self.parse_strategy.parse(command)
        if len(arguments) < len(self._commands):
            raise CommandFailedError("not enough arguments for every step of the macro")
        for step, argument in zip(self._commands, arguments):
            try:
                step.execute(argument)
            except MockShellError as exc:
                raise CommandFailedError(f"macro step failed on {argument!r}") from exc

    def display_info(self) -> None:
        super().display_info()