"""
Directory operations module for fskit.

Directory lifecycle, listings and recursive tree operations. Leaf files are
handled by the FileOps instance the directory operator holds.

Recursive copy, move and delete walk entries in OS enumeration order and
stop on the first error. Nothing already copied, moved or deleted is undone,
so an interrupted call leaves the tree partially modified.
"""

import glob as _glob
import os
from enum import IntFlag
from typing import List, Optional

from ..core.exceptions import DirectoryExists, DirectoryNotFound, InvalidArgument
from ..core.logger import AuditLogger, ActionType, ActionStatus
from .file_ops import FileOps, PathLike


class GlobFlag(IntFlag):
    """Flags accepted by DirectoryOps.glob."""
    NONE = 0
    MARK = 1      # append a separator to directory entries
    ONLYDIR = 2   # return directories only
    NOSORT = 4    # keep enumeration order


class WalkOption(IntFlag):
    """Options for the recursive copy/move walk."""
    NONE = 0
    SKIP_HIDDEN = 1  # ignore entries whose name starts with a dot; copy only


class DirectoryOps:
    """Operations on directories and directory trees."""

    def __init__(
        self,
        file_ops: Optional[FileOps] = None,
        logger: Optional[AuditLogger] = None,
        mode: int = 0o777
    ):
        """
        Initialize DirectoryOps.

        Args:
            file_ops: Operator used for leaf files (default: a new FileOps
                sharing the logger)
            logger: Audit logger instance; nothing is recorded when None
            mode: Permission mode used by create when none is given
        """
        self.logger = logger
        self.file_ops = file_ops or FileOps(logger=logger)
        self.mode = mode

    def _record(
        self,
        action_type: ActionType,
        description: str,
        target: PathLike,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[dict] = None
    ) -> None:
        if self.logger is None:
            return
        self.logger.log_action(
            action_type=action_type,
            description=description,
            target=os.fspath(target),
            status=status,
            result=result,
            metadata=metadata
        )

    def _require(self, path: PathLike, action_type: Optional[ActionType] = None) -> None:
        if self.exists(path):
            return

        error = DirectoryNotFound(f"The directory [{os.fspath(path)}] was not found.")
        if action_type is not None:
            self._record(
                action_type,
                f"Failed {action_type.value}: {os.fspath(path)}",
                path,
                status=ActionStatus.FAILED,
                result=f"Error: {error}"
            )
        raise error

    def exists(self, path: PathLike) -> bool:
        """Return True if path is a directory."""
        return os.path.isdir(path)

    def create(self, path: PathLike, mode: Optional[int] = None, recursive: bool = False) -> bool:
        """
        Create a new directory.

        Args:
            path: Directory to create
            mode: Permission mode (default: the operator's mode, 0o777)
            recursive: Also create missing parent directories

        Returns:
            True if successful

        Raises:
            DirectoryExists: If the directory already exists
        """
        if self.exists(path):
            error = DirectoryExists(f"The directory [{os.fspath(path)}] already exists.")
            self._record(
                ActionType.CREATE,
                f"Failed create: {os.fspath(path)}",
                path,
                status=ActionStatus.FAILED,
                result=f"Error: {error}"
            )
            raise error

        mode = self.mode if mode is None else mode
        if recursive:
            os.makedirs(path, mode)
        else:
            os.mkdir(path, mode)

        self._record(
            ActionType.CREATE,
            f"Created directory: {os.fspath(path)}",
            path,
            metadata={"mode": oct(mode), "recursive": recursive}
        )
        return True

    def glob(self, path: PathLike, pattern: str = "*", flags: int = 0) -> List[str]:
        """
        Return the entries directly inside path that match pattern.

        Args:
            path: Directory to search
            pattern: Shell-style pattern (default: every entry)
            flags: GlobFlag values

        Returns:
            Sorted list of matching paths (files and directories)

        Raises:
            DirectoryNotFound: If the directory doesn't exist
        """
        self._require(path)

        flags = GlobFlag(flags)
        matches = _glob.glob(os.path.join(_glob.escape(os.fspath(path)), pattern))

        if flags & GlobFlag.ONLYDIR:
            matches = [m for m in matches if os.path.isdir(m)]
        if flags & GlobFlag.MARK:
            matches = [m + os.sep if os.path.isdir(m) else m for m in matches]
        if not flags & GlobFlag.NOSORT:
            matches.sort()

        return matches

    def files(self, path: PathLike) -> List[str]:
        """
        Return the entries of a directory whose name contains a dot.

        Directories named like files (vendor.old) are included too.
        """
        return self.glob(path, "*.*")

    def files_recursive(self, path: PathLike) -> List[str]:
        """Return every regular file under path, at any depth, unordered."""
        self._require(path)

        files = []
        for root, _dirs, names in os.walk(path):
            for name in names:
                full = os.path.join(root, name)
                if os.path.isfile(full):
                    files.append(full)
        return files

    def directories(self, path: PathLike) -> List[str]:
        """Return every directory under path, at any depth, unordered."""
        self._require(path)

        directories = []
        for root, dirs, _names in os.walk(path):
            directories.extend(os.path.join(root, d) for d in dirs)
        return directories

    def _transfer(
        self,
        path: PathLike,
        destination: PathLike,
        options: WalkOption,
        keep: bool
    ) -> bool:
        """Copy the tree at path into destination, then drop the source unless keep."""
        if not self.exists(destination):
            self.create(destination, recursive=True)

        with os.scandir(path) as entries:
            items = list(entries)

        for item in items:
            if options & WalkOption.SKIP_HIDDEN and item.name.startswith("."):
                continue

            target = os.path.join(destination, item.name)
            if item.is_dir():
                self._transfer(item.path, target, options, keep=True)
            else:
                self.file_ops.copy(item.path, target, True)

        if not keep:
            self.delete(path)

        return True

    def move(
        self,
        path: PathLike,
        destination: PathLike,
        options: Optional[WalkOption] = None,
        keep: bool = False
    ) -> bool:
        """
        Move a directory tree to a new location.

        Every entry is copied into destination (created if missing), then the
        source tree is deleted unless keep is True.

        Raises:
            DirectoryNotFound: If the source directory doesn't exist
            InvalidArgument: If SKIP_HIDDEN is given without keep
        """
        options = WalkOption(options or 0)
        action_type = ActionType.COPY if keep else ActionType.MOVE

        if options & WalkOption.SKIP_HIDDEN and not keep:
            error = InvalidArgument("SKIP_HIDDEN is only supported when copying a directory.")
            self._record(
                action_type,
                f"Failed {action_type.value}: {os.fspath(path)}",
                path,
                status=ActionStatus.FAILED,
                result=f"Error: {error}"
            )
            raise error

        self._require(path, action_type)
        self._transfer(path, destination, options, keep)

        self._record(
            action_type,
            f"{'Copied' if keep else 'Moved'} directory {os.fspath(path)} to {os.fspath(destination)}",
            destination,
            metadata={"source": os.fspath(path)}
        )
        return True

    def copy(self, path: PathLike, destination: PathLike, options: Optional[WalkOption] = None) -> bool:
        """
        Copy a directory tree to a new location; the source is never deleted.

        Raises:
            DirectoryNotFound: If the source directory doesn't exist
        """
        return self.move(path, destination, options, keep=True)

    def delete(self, path: PathLike, keep: bool = False) -> bool:
        """
        Delete a directory and everything in it.

        Args:
            path: Directory to delete
            keep: Empty the directory but leave it in place

        Returns:
            True if successful

        Raises:
            DirectoryNotFound: If the directory doesn't exist
        """
        self._require(path, ActionType.DELETE)

        with os.scandir(path) as entries:
            items = list(entries)

        for item in items:
            if item.is_dir(follow_symlinks=False):
                self.delete(item.path)
            else:
                self.file_ops.delete(item.path)

        if not keep:
            os.rmdir(path)

        self._record(
            ActionType.DELETE,
            f"{'Cleared' if keep else 'Deleted'} directory: {os.fspath(path)}",
            path,
            metadata={"keep": keep}
        )
        return True

    def clear(self, path: PathLike) -> bool:
        """Delete the contents of a directory, keeping the directory."""
        return self.delete(path, keep=True)
