"""
Factory facade for fskit.

Builds FileOps and DirectoryOps from settings and forwards the flat helper
methods to them. Holds no logic of its own.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

from .core.config import Settings, load_settings
from .core.logger import AuditLogger
from .operators.directory_ops import DirectoryOps, WalkOption
from .operators.file_ops import Content, FileOps, PathLike


class Factory:
    """Constructors and shortcuts for file and directory operations."""

    def __init__(self, settings: Optional[Settings] = None, logger: Optional[AuditLogger] = None):
        """
        Initialize the factory.

        Args:
            settings: Operator defaults (default: loaded from fskit.yaml)
            logger: Audit logger; created from settings when auditing is
                enabled and none is given
        """
        self.settings = settings or load_settings()
        if logger is None and self.settings.audit_enabled:
            logger = AuditLogger(log_path=self.settings.audit_log_path)
        self.logger = logger

        self.file = self.new_file()
        self.dir = self.new_directory()

    def new_file(self) -> FileOps:
        """Return a new FileOps configured from the settings."""
        return FileOps(logger=self.logger, json_indent=self.settings.json_indent)

    def new_directory(self) -> DirectoryOps:
        """Return a new DirectoryOps configured from the settings."""
        return DirectoryOps(
            file_ops=self.new_file(),
            logger=self.logger,
            mode=self.settings.directory_mode
        )

    # Files

    def file_exists(self, path: PathLike) -> bool:
        return self.file.exists(path)

    def create_file(self, path: PathLike, content: Optional[Content] = None) -> int:
        return self.file.create(path, content)

    def file_get_contents(self, path: PathLike) -> bytes:
        return self.file.get(path)

    def file_put_contents(self, path: PathLike, content: Content, overwrite: bool = True) -> int:
        return self.file.put(path, content, overwrite)

    def get_json(self, path: PathLike) -> Dict[str, Any]:
        return self.file.get_json(path)

    def put_json(self, path: PathLike, content: Dict[str, Any], overwrite: bool = True) -> int:
        return self.file.put_json(path, content, overwrite)

    def get_require(self, path: PathLike) -> Any:
        return self.file.get_require(path)

    def cp_file(self, path: PathLike, destination: PathLike, overwrite: bool = True) -> bool:
        return self.file.copy(path, destination, overwrite)

    def mv_file(self, path: PathLike, destination: PathLike, overwrite: bool = True) -> bool:
        return self.file.move(path, destination, overwrite)

    def unlink(self, paths: Union[PathLike, Iterable[PathLike]]) -> bool:
        return self.file.delete(paths)

    def file_name(self, path: PathLike) -> str:
        return self.file.name(path)

    def extension(self, path: PathLike) -> str:
        return self.file.extension(path)

    def mime_type(self, path: PathLike) -> str:
        return self.file.mime_type(path)

    def size(self, path: PathLike) -> int:
        return self.file.size(path)

    def last_modified(self, path: PathLike) -> int:
        return self.file.last_modified(path)

    # Directories

    def dir_exists(self, path: PathLike) -> bool:
        return self.dir.exists(path)

    def mk_dir(self, path: PathLike, mode: Optional[int] = None, recursive: bool = False) -> bool:
        return self.dir.create(path, mode, recursive)

    def mv_dir(
        self,
        path: PathLike,
        destination: PathLike,
        options: Optional[WalkOption] = None,
        keep: bool = False
    ) -> bool:
        return self.dir.move(path, destination, options, keep)

    def cp_dir(self, path: PathLike, destination: PathLike, options: Optional[WalkOption] = None) -> bool:
        return self.dir.copy(path, destination, options)

    def glob(self, path: PathLike, pattern: str = "*", flags: int = 0) -> List[str]:
        return self.dir.glob(path, pattern, flags)

    def files(self, path: PathLike) -> List[str]:
        return self.dir.files(path)

    def files_recursive(self, path: PathLike) -> List[str]:
        return self.dir.files_recursive(path)

    def directories(self, path: PathLike) -> List[str]:
        return self.dir.directories(path)

    def delete_dir(self, path: PathLike, keep: bool = False) -> bool:
        return self.dir.delete(path, keep)

    def clear_dir(self, path: PathLike) -> bool:
        return self.dir.clear(path)


def new_file(settings: Optional[Settings] = None, logger: Optional[AuditLogger] = None) -> FileOps:
    """Shortcut for Factory(settings, logger).new_file()."""
    return Factory(settings, logger).new_file()


def new_directory(settings: Optional[Settings] = None, logger: Optional[AuditLogger] = None) -> DirectoryOps:
    """Shortcut for Factory(settings, logger).new_directory()."""
    return Factory(settings, logger).new_directory()
