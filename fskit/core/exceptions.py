"""
Exceptions raised by fskit operations.

Each error also derives from the matching builtin so callers can catch
either the fskit type or the standard one.
"""


class FilesystemError(Exception):
    """Base class for all fskit errors."""


class FileNotFound(FilesystemError, FileNotFoundError):
    """A file that must exist does not."""


class FileExists(FilesystemError, FileExistsError):
    """A file that must be absent already exists."""


class DirectoryNotFound(FilesystemError, FileNotFoundError):
    """A directory that must exist does not."""


class DirectoryExists(FilesystemError, FileExistsError):
    """A directory that must be absent already exists."""


class InvalidArgument(FilesystemError, ValueError):
    """A JSON operation was given a non-json file or unparsable content."""
