"""
Operators for fskit.

File and directory operations with existence checks and typed errors.
"""

from .file_ops import FileOps
from .directory_ops import DirectoryOps, GlobFlag, WalkOption

__all__ = ['FileOps', 'DirectoryOps', 'GlobFlag', 'WalkOption']
