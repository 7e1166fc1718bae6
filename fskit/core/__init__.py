# fskit - Core Module
"""
Core infrastructure for fskit.
Exceptions, settings and the audit logger shared by every operator.
"""

from .exceptions import (
    FilesystemError,
    FileNotFound,
    FileExists,
    DirectoryNotFound,
    DirectoryExists,
    InvalidArgument,
)
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus
from .config import Settings, load_settings, save_settings

__all__ = [
    "FilesystemError",
    "FileNotFound",
    "FileExists",
    "DirectoryNotFound",
    "DirectoryExists",
    "InvalidArgument",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
    "Settings",
    "load_settings",
    "save_settings",
]

__version__ = "0.1.0"
