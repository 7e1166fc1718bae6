"""
fskit - a convenience layer over native filesystem operations.
"""

from .core import (
    __version__,
    FilesystemError,
    FileNotFound,
    FileExists,
    DirectoryNotFound,
    DirectoryExists,
    InvalidArgument,
    AuditLogger,
    Settings,
    load_settings,
)
from .operators import FileOps, DirectoryOps, GlobFlag, WalkOption
from .factory import Factory, new_file, new_directory

__all__ = [
    "__version__",
    "FilesystemError",
    "FileNotFound",
    "FileExists",
    "DirectoryNotFound",
    "DirectoryExists",
    "InvalidArgument",
    "AuditLogger",
    "Settings",
    "load_settings",
    "FileOps",
    "DirectoryOps",
    "GlobFlag",
    "WalkOption",
    "Factory",
    "new_file",
    "new_directory",
]
