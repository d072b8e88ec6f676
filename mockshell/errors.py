"""Exceptions raised by the mock file system and its shell."""


class MockShellError(Exception):
    """Base class for every error raised by the package."""


class FileDoesNotExistError(MockShellError):
    """A named file is not present in the file system."""


class InvalidImageError(MockShellError):
    """Data written to an image file does not describe a valid image."""


class CannotAppendImageError(MockShellError):
    """Image files do not support appending."""


class InvalidUsageError(MockShellError):
    """A command was given arguments it does not accept."""


class CommandFailedError(MockShellError):
    """A command, or one step of a macro command, failed."""


class CommandInsertError(MockShellError):
    """A command could not be registered under the requested name."""


class FileNotAddedError(MockShellError):
    """A file could not be added to the file system."""