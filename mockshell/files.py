"""File types stored by the mock file system."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from mockshell.errors import CannotAppendImageError, InvalidImageError

if TYPE_CHECKING:
    from mockshell.visitors import AbstractFileVisitor

_DIGIT_BASE = ord("0")
_IMAGE_PIXELS = frozenset(b"X ")


class AbstractFile(ABC):
    """Interface shared by every file kept in a file system."""

    @property
    @abstractmethod
    def name(self) -> str:
        """The file's name, extension included."""

    @property
    @abstractmethod
    def size(self) -> int:
        """Number of bytes of content held by the file."""

    @abstractmethod
    def read(self) -> bytes:
        """Return the file's contents."""

    @abstractmethod
    def write(self, data: bytes) -> None:
        """Replace the file's contents with ``data``."""

    @abstractmethod
    def append(self, data: bytes) -> None:
        """Add ``data`` to the end of the file's contents."""

    @abstractmethod
    def accept(self, visitor: AbstractFileVisitor) -> None:
        """Dispatch to the visitor method for this file type."""

    @abstractmethod
    def clone(self, copy_name: str) -> AbstractFile:
        """Return a copy of this file under ``copy_name`` plus its extension."""


class ImageFile(AbstractFile):
    """A square black-and-white image made of ``X`` and space pixels.

    Data written to the file ends with a single digit character giving the
    side length; the pixels before it are stored row by row.
    """

    extension = ".img"

    def __init__(self, name: str) -> None:
        self._name = name
        self._dimension = 0
        self._contents = b""

    @property
    def name(self) -> str:
        return self._name

    @property
    def size(self) -> int:
        return len(self._contents)

    @property
    def dimension(self) -> int:
        """Side length of the image."""
        return self._dimension

    def read(self) -> bytes:
        return self._contents

    def write(self, data: bytes) -> None:
        data = bytes(data)
        if not data:
            raise InvalidImageError("image data is empty")
        dimension = data[-1] - _DIGIT_BASE
        if dimension < 0:
            raise InvalidImageError("image data does not end with a size digit")
        pixel_count = dimension * dimension
        pixels = data[:pixel_count]
        if len(pixels) < pixel_count:
            raise InvalidImageError("image data is shorter than its size requires")
        if not set(pixels) <= _IMAGE_PIXELS:
            raise InvalidImageError("image pixels must be 'X' or ' '")
        self._dimension = dimension
        self._contents = pixels

    def append(self, data: bytes) -> None:
        raise CannotAppendImageError(f"cannot append to image file {self._name}")

    def accept(self, visitor: AbstractFileVisitor) -> None:
        visitor.visit_image_file(self)

    def clone(self, copy_name: str) -> ImageFile:
        copy = ImageFile(copy_name + self.extension)
        copy.write(self._contents + bytes([self._dimension + _DIGIT_BASE]))
        return copy