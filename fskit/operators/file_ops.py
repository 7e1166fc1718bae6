"""
File operations module for fskit.

Wraps single-file OS primitives with existence checks and typed errors.
"""

import errno
import json
import mimetypes
import os
import shutil
from pathlib import Path
from typing import Any, Dict, Iterable, Optional, Tuple, Union

from ..core.exceptions import FileExists, FileNotFound, InvalidArgument
from ..core.logger import AuditLogger, ActionType, ActionStatus


PathLike = Union[str, os.PathLike]
Content = Union[str, bytes]


def _to_bytes(content: Optional[Content]) -> bytes:
    if content is None:
        return b""
    if isinstance(content, str):
        return content.encode("utf-8")
    return bytes(content)


def _split_name(path: PathLike) -> Tuple[str, str]:
    """Split a basename at its last dot, so ".bashrc" has no name and "file." no extension."""
    base = os.path.basename(os.fspath(path))
    name, dot, extension = base.rpartition(".")
    if not dot:
        return base, ""
    return name, extension


class FileOps:
    """Operations on a single file."""

    def __init__(self, logger: Optional[AuditLogger] = None, json_indent: int = 4):
        """
        Initialize FileOps.

        Args:
            logger: Audit logger instance; nothing is recorded when None
            json_indent: Indentation used by put_json
        """
        self.logger = logger
        self.json_indent = json_indent

    def _record(
        self,
        action_type: ActionType,
        description: str,
        target: PathLike,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
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

    def _fail(self, action_type: ActionType, target: PathLike, error: Exception) -> Exception:
        """Record a failed precondition and hand the error back for raising."""
        self._record(
            action_type,
            f"Failed {action_type.value}: {os.fspath(target)}",
            target,
            status=ActionStatus.FAILED,
            result=f"Error: {error}"
        )
        return error

    def _require(self, path: PathLike) -> None:
        if not self.exists(path):
            raise FileNotFound(f"The file [{os.fspath(path)}] does not exist.")

    def exists(self, path: PathLike) -> bool:
        """Return True if path is a regular file."""
        return os.path.isfile(path)

    def create(self, path: PathLike, content: Optional[Content] = None) -> int:
        """
        Create a new file.

        Args:
            path: Path where the file should be created
            content: Initial content (default: empty)

        Returns:
            Number of bytes written

        Raises:
            FileExists: If the file already exists
        """
        if self.exists(path):
            raise self._fail(
                ActionType.CREATE, path,
                FileExists(f"The file [{os.fspath(path)}] already exists.")
            )

        data = _to_bytes(content)
        written = Path(path).write_bytes(data)

        self._record(
            ActionType.CREATE,
            f"Created file: {os.fspath(path)}",
            path,
            result=f"File created ({written} bytes)"
        )
        return written

    def get(self, path: PathLike) -> bytes:
        """
        Get the contents of a file.

        Raises:
            FileNotFound: If the file doesn't exist
        """
        self._require(path)
        return Path(path).read_bytes()

    def get_text(self, path: PathLike, encoding: str = "utf-8") -> str:
        """Get the contents of a file decoded as text."""
        return self.get(path).decode(encoding)

    def put(self, path: PathLike, content: Content, overwrite: bool = True) -> int:
        """
        Write content to a file, creating it if it does not exist.

        Args:
            path: Path to the file
            content: Content to write
            overwrite: Replace the whole file if True, append if False

        Returns:
            Number of bytes written
        """
        data = _to_bytes(content)
        with open(path, "wb" if overwrite else "ab") as f:
            written = f.write(data)

        self._record(
            ActionType.WRITE,
            f"{'Wrote' if overwrite else 'Appended to'} file: {os.fspath(path)}",
            path,
            result=f"{written} bytes",
            metadata={"overwrite": overwrite}
        )
        return written

    def get_json(self, path: PathLike) -> Dict[str, Any]:
        """
        Return the contents of a json file as a dict.

        Raises:
            FileNotFound: If the file doesn't exist
            InvalidArgument: If the file is not a .json file or does not
                hold a JSON object
        """
        self._require(path)

        if self.extension(path) != "json":
            raise InvalidArgument(f"The given file [{os.fspath(path)}] is not a json file.")

        try:
            decoded = json.loads(self.get(path))
        except ValueError as e:
            raise InvalidArgument(f"The file [{os.fspath(path)}] does not contain valid json: {e}") from e

        if not isinstance(decoded, dict):
            raise InvalidArgument(f"The file [{os.fspath(path)}] does not contain a json object.")

        return decoded

    def put_json(self, path: PathLike, content: Dict[str, Any], overwrite: bool = True) -> int:
        """
        Write a dict to a json file.

        With overwrite=False the content is shallow-merged into the existing
        object, keys from content winning.

        Returns:
            Number of bytes written

        Raises:
            FileNotFound: If overwrite is False and the file doesn't exist
        """
        if not overwrite:
            if not self.exists(path):
                raise self._fail(
                    ActionType.WRITE, path,
                    FileNotFound(f"The file [{os.fspath(path)}] was not found.")
                )
            content = {**self.get_json(path), **content}

        return self.put(path, json.dumps(content, indent=self.json_indent))

    def get_require(self, path: PathLike) -> Any:
        """
        Evaluate a file as code and return its value.

        Not supported: running arbitrary files is left to the caller.

        Raises:
            FileNotFound: If the file doesn't exist
            NotImplementedError: Always, once the file is found
        """
        self._require(path)
        raise NotImplementedError(
            f"Evaluating [{os.fspath(path)}] as code is not supported; use runpy or importlib instead."
        )

    def copy(self, path: PathLike, destination: PathLike, overwrite: bool = True) -> bool:
        """
        Copy a file to a new location.

        Args:
            path: Source file path
            destination: Destination file path
            overwrite: Replace an existing destination if True

        Returns:
            True if successful

        Raises:
            FileNotFound: If the source file doesn't exist
            FileExists: If the destination exists and overwrite is False
        """
        if not self.exists(path):
            raise self._fail(
                ActionType.COPY, path,
                FileNotFound(f"The source file [{os.fspath(path)}] does not exist.")
            )

        if self.exists(destination) and not overwrite:
            raise self._fail(
                ActionType.COPY, destination,
                FileExists(f"The destination file [{os.fspath(destination)}] already exists.")
            )

        shutil.copyfile(path, destination)

        self._record(
            ActionType.COPY,
            f"Copied {os.fspath(path)} to {os.fspath(destination)}",
            destination,
            metadata={"source": os.fspath(path)}
        )
        return True

    def move(self, path: PathLike, destination: PathLike, overwrite: bool = True) -> bool:
        """
        Move a file to a new location.

        Across filesystems the file is copied and the source unlinked.

        Returns:
            True if successful

        Raises:
            FileNotFound: If the source file doesn't exist
            FileExists: If the destination exists and overwrite is False
            IsADirectoryError: If the destination is a directory
        """
        if not self.exists(path):
            raise self._fail(
                ActionType.MOVE, path,
                FileNotFound(f"The source file [{os.fspath(path)}] does not exist.")
            )

        if self.exists(destination) and not overwrite:
            raise self._fail(
                ActionType.MOVE, destination,
                FileExists(f"The destination file [{os.fspath(destination)}] already exists.")
            )

        if os.path.isdir(destination):
            raise IsADirectoryError(errno.EISDIR, "Is a directory", os.fspath(destination))

        try:
            os.replace(path, destination)
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise
            shutil.move(os.fspath(path), os.fspath(destination))

        self._record(
            ActionType.MOVE,
            f"Moved {os.fspath(path)} to {os.fspath(destination)}",
            destination,
            metadata={"source": os.fspath(path)}
        )
        return True

    def delete(self, paths: Union[PathLike, Iterable[PathLike]]) -> bool:
        """
        Delete a file or an iterable of files.

        Each path is checked as it is reached, so files deleted before a
        missing one stay deleted.

        Raises:
            FileNotFound: On the first path that is not a file
        """
        if isinstance(paths, (str, bytes, os.PathLike)):
            paths = [paths]

        for path in paths:
            if not self.exists(path):
                raise self._fail(
                    ActionType.DELETE, path,
                    FileNotFound(f"The file [{os.fspath(path)}] was not found.")
                )

            os.unlink(path)
            self._record(ActionType.DELETE, f"Deleted file: {os.fspath(path)}", path)

        return True

    def name(self, path: PathLike) -> str:
        """Return the file name without its extension."""
        self._require(path)
        return _split_name(path)[0]

    def extension(self, path: PathLike) -> str:
        """Return the file extension without the leading dot."""
        self._require(path)
        return _split_name(path)[1]

    def mime_type(self, path: PathLike) -> str:
        """
        Return the file's MIME type.

        Guessed from the extension first, then from the content.
        """
        self._require(path)

        guessed, _ = mimetypes.guess_type(os.fspath(path))
        if guessed:
            return guessed

        with open(path, "rb") as f:
            head = f.read(8192)

        if not head:
            return "inode/x-empty"
        if b"\x00" in head:
            return "application/octet-stream"
        try:
            head.decode("utf-8")
        except UnicodeDecodeError as e:
            # a multibyte character cut at the end of the sample is still text
            truncated = len(head) == 8192 and e.start >= len(head) - 3
            if not truncated:
                return "application/octet-stream"
        return "text/plain"

    def size(self, path: PathLike) -> int:
        """Return the file size in bytes."""
        self._require(path)
        return os.path.getsize(path)

    def last_modified(self, path: PathLike) -> int:
        """Return the file's modification time in seconds since the epoch."""
        self._require(path)
        return int(os.path.getmtime(path))
