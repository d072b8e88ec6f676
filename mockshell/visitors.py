"""Visitors that inspect or display files."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from mockshell.files import AbstractFile, ImageFile

_ENCODING = "latin-1"


class AbstractFileVisitor(ABC):
    """Interface for operations applied to each kind of file."""

    @abstractmethod
    def visit_image_file(self, image_file: ImageFile) -> None:
        """Handle an image file."""

    @abstractmethod
    def visit_text_file(self, text_file: AbstractFile) -> None:
        """Handle a text file."""


class AggregateStatisticsVisitor(AbstractFileVisitor):
    """Counts files and bytes across every file it visits."""

    def __init__(self) -> None:
        self.image_count = 0
        self.text_count = 0
        self.image_bytes = 0
        self.text_bytes = 0

    def visit_image_file(self, image_file: ImageFile) -> None:
        self.image_count += 1
        dimension = image_file.dimension
        # The stored pixels plus the trailing size digit.
        self.image_bytes += dimension * dimension + 1

    def visit_text_file(self, text_file: AbstractFile) -> None:
        self.text_count += 1
        self.text_bytes += len(text_file.read())


class _WritingVisitor(AbstractFileVisitor):
    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout


class BasicDisplayVisitor(_WritingVisitor):
    """Writes a file's contents in a human-readable layout."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)

    def visit_image_file(self, image_file: ImageFile) -> None:
        text = image_file.read().decode(_ENCODING)
        size = image_file.dimension
        # Row 0 is the bottom of the picture, so rows are printed top first.
        for y in reversed(range(size)):
            self.out.write(text[y * size:(y + 1) * size] + "\n")
        self.out.write("\n")

    def visit_text_file(self, text_file: AbstractFile) -> None:
        self.out.write(text_file.read().decode(_ENCODING) + "\n")


class MetadataDisplayVisitor(_WritingVisitor):
    """Writes a file's name, size and type."""

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)

    def _show(self, file: AbstractFile, kind: str) -> None:
        self.out.write(f"file name: {file.name}\n")
        self.out.write(f"size: {file.size}\n")
        self.out.write(f"type: {kind}\n")

    def visit_image_file(self, image_file: ImageFile) -> None:
        self._show(image_file, "image")

    def visit_text_file(self, text_file: AbstractFile) -> None:
        self._show(text_file, "text")