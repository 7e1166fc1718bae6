"""
Tests for the Factory facade.
"""

import os
import tempfile
from pathlib import Path

import pytest

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from fskit import Factory, new_file, new_directory
from fskit.core.config import Settings
from fskit.core.exceptions import DirectoryNotFound, FileNotFound
from fskit.core.logger import AuditLogger
from fskit.operators import DirectoryOps, FileOps


@pytest.fixture
def workdir():
    """Create a temporary working directory."""
    with tempfile.TemporaryDirectory() as d:
        yield d


@pytest.fixture
def factory():
    return Factory(settings=Settings())


class TestConstructors:
    """Test new_file and new_directory."""

    def test_new_file(self, factory):
        assert isinstance(factory.new_file(), FileOps)

    def test_new_directory(self, factory):
        ops = factory.new_directory()

        assert isinstance(ops, DirectoryOps)
        assert isinstance(ops.file_ops, FileOps)

    def test_each_call_returns_a_new_instance(self, factory):
        assert factory.new_file() is not factory.new_file()

    def test_settings_flow_into_operators(self):
        factory = Factory(settings=Settings(directory_mode=0o700, json_indent=2))

        assert factory.new_directory().mode == 0o700
        assert factory.new_file().json_indent == 2
        assert factory.new_directory().file_ops.json_indent == 2

    def test_module_level_shortcuts(self):
        assert isinstance(new_file(Settings()), FileOps)
        assert isinstance(new_directory(Settings()), DirectoryOps)

    def test_no_logger_unless_enabled(self, factory):
        assert factory.logger is None
        assert factory.new_file().logger is None

    def test_audit_enabled_creates_logger(self, workdir):
        log_path = os.path.join(workdir, "data", "audit.jsonl")
        factory = Factory(settings=Settings(audit_enabled=True, audit_log_path=log_path))

        assert isinstance(factory.logger, AuditLogger)
        assert factory.new_directory().logger is factory.logger
        assert os.path.exists(log_path)

    def test_explicit_logger_wins(self, workdir):
        logger = AuditLogger(log_path=os.path.join(workdir, "mine.jsonl"))
        factory = Factory(settings=Settings(audit_enabled=True), logger=logger)

        assert factory.new_file().logger is logger


class TestForwarding:
    """Test the flat helper methods."""

    def test_file_helpers(self, factory, workdir):
        path = os.path.join(workdir, "file.txt")

        assert not factory.file_exists(path)
        assert factory.create_file(path, "Hello") == 5
        assert factory.file_put_contents(path, " World", False) == 6
        assert factory.file_get_contents(path) == b"Hello World"
        assert factory.file_name(path) == "file"
        assert factory.extension(path) == "txt"
        assert factory.mime_type(path) == "text/plain"
        assert factory.size(path) == 11
        assert factory.last_modified(path) > 0

        copy = os.path.join(workdir, "copy.txt")
        moved = os.path.join(workdir, "moved.txt")
        assert factory.cp_file(path, copy)
        assert factory.mv_file(copy, moved)
        assert factory.unlink([path, moved])
        assert not factory.file_exists(path)

    def test_json_helpers(self, factory, workdir):
        path = os.path.join(workdir, "file.json")

        factory.put_json(path, {"a": 1})
        factory.put_json(path, {"b": 2}, overwrite=False)

        assert factory.get_json(path) == {"a": 1, "b": 2}

    def test_get_require(self, factory, workdir):
        with pytest.raises(FileNotFound):
            factory.get_require(os.path.join(workdir, "index.py"))

    def test_directory_helpers(self, factory, workdir):
        root = os.path.join(workdir, "app")

        assert not factory.dir_exists(root)
        assert factory.mk_dir(os.path.join(root, "views"), recursive=True)
        Path(root, "views", "home.html").write_text("<h1>home</h1>")

        assert factory.glob(root) == [os.path.join(root, "views")]
        assert factory.files(os.path.join(root, "views")) == [os.path.join(root, "views", "home.html")]
        assert factory.files_recursive(root) == [os.path.join(root, "views", "home.html")]
        assert factory.directories(root) == [os.path.join(root, "views")]

        copy = os.path.join(workdir, "copy")
        moved = os.path.join(workdir, "moved")
        assert factory.cp_dir(root, copy)
        assert factory.mv_dir(copy, moved)
        assert not factory.dir_exists(copy)

        assert factory.clear_dir(moved)
        assert factory.dir_exists(moved)
        assert factory.delete_dir(moved)
        assert not factory.dir_exists(moved)

    def test_missing_directory(self, factory, workdir):
        with pytest.raises(DirectoryNotFound):
            factory.delete_dir(os.path.join(workdir, "nope"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
