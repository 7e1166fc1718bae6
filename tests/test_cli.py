"""
Tests for the fskit command line interface.
"""

import os
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner
from rich.console import Console

# Add parent directory to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

import fskit.cli as cli
from fskit.cli import fskit


runner = CliRunner()


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Render without colour and without wrapping long paths."""
    monkeypatch.setattr(cli, "console", Console(force_terminal=False, width=300))


@pytest.fixture
def workdir():
    """Temporary directory with a settings file that enables auditing."""
    with tempfile.TemporaryDirectory() as d:
        config = os.path.join(d, "fskit.yaml")
        log_path = os.path.join(d, "audit.jsonl")
        Path(config).write_text(f"fskit:\n  audit:\n    enabled: true\n    log_path: {log_path}\n")
        Path(d, "file.txt").write_text("Hello World")
        yield d


def invoke(workdir, *args):
    return runner.invoke(fskit, ["--config", os.path.join(workdir, "fskit.yaml"), *args])


class TestInfo:

    def test_info(self, workdir):
        result = invoke(workdir, "info", os.path.join(workdir, "file.txt"))

        assert result.exit_code == 0
        assert "text/plain" in result.output
        assert "11 bytes" in result.output

    def test_info_missing(self, workdir):
        result = invoke(workdir, "info", os.path.join(workdir, "nope.txt"))

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_info_without_extension(self, workdir):
        Path(workdir, "Makefile").write_text("all:\n")

        result = invoke(workdir, "info", os.path.join(workdir, "Makefile"))

        assert result.exit_code == 0
        assert "Extension" in result.output
        assert "\u2014" not in result.output


class TestLs:

    def test_ls(self, workdir):
        os.mkdir(os.path.join(workdir, "sub"))

        result = invoke(workdir, "ls", workdir)

        assert result.exit_code == 0
        assert "file.txt" in result.output
        assert "sub" in result.output

    def test_ls_recursive(self, workdir):
        os.makedirs(os.path.join(workdir, "a", "b"))
        Path(workdir, "a", "b", "deep.txt").write_text("")

        result = invoke(workdir, "ls", workdir, "--recursive")

        assert result.exit_code == 0
        assert "deep.txt" in result.output

    def test_ls_missing(self, workdir):
        result = invoke(workdir, "ls", os.path.join(workdir, "nope"))

        assert result.exit_code == 1


class TestCpMvRm:

    def test_cp_file(self, workdir):
        result = invoke(workdir, "cp", os.path.join(workdir, "file.txt"), os.path.join(workdir, "copy.txt"))

        assert result.exit_code == 0
        assert Path(workdir, "copy.txt").read_text() == "Hello World"
        assert " -> " in result.output

    def test_cp_no_overwrite(self, workdir):
        Path(workdir, "copy.txt").write_text("Howdy")

        result = invoke(
            workdir, "cp", os.path.join(workdir, "file.txt"), os.path.join(workdir, "copy.txt"), "--no-overwrite"
        )

        assert result.exit_code == 1
        assert Path(workdir, "copy.txt").read_text() == "Howdy"

    def test_mv_directory(self, workdir):
        os.makedirs(os.path.join(workdir, "src", "nested"))
        Path(workdir, "src", "nested", "a.txt").write_text("a")

        result = invoke(workdir, "mv", os.path.join(workdir, "src"), os.path.join(workdir, "dst"))

        assert result.exit_code == 0
        assert not os.path.exists(os.path.join(workdir, "src"))
        assert Path(workdir, "dst", "nested", "a.txt").read_text() == "a"

    def test_rm_keep_root(self, workdir):
        os.makedirs(os.path.join(workdir, "build", "out"))

        result = invoke(workdir, "rm", os.path.join(workdir, "build"), "--keep-root")

        assert result.exit_code == 0
        assert os.listdir(os.path.join(workdir, "build")) == []

    def test_rm_missing_file(self, workdir):
        result = invoke(workdir, "rm", os.path.join(workdir, "nope.txt"))

        assert result.exit_code == 1


class TestAuditAndConfig:

    def test_audit_lists_operations(self, workdir):
        invoke(workdir, "cp", os.path.join(workdir, "file.txt"), os.path.join(workdir, "copy.txt"))

        result = invoke(workdir, "audit")

        assert result.exit_code == 0
        assert "copy" in result.output

    def test_audit_failed_only(self, workdir):
        invoke(workdir, "rm", os.path.join(workdir, "nope.txt"))

        result = invoke(workdir, "audit", "--failed")

        assert result.exit_code == 0
        assert "failed" in result.output

    def test_audit_empty(self, workdir):
        result = invoke(workdir, "audit")

        assert "No audit entries found" in result.output

    def test_audit_does_not_create_log(self, workdir):
        config = os.path.join(workdir, "quiet.yaml")
        log_path = os.path.join(workdir, "logs", "audit.jsonl")
        Path(config).write_text(f"fskit:\n  audit:\n    log_path: {log_path}\n")

        result = runner.invoke(fskit, ["--config", config, "audit"])

        assert result.exit_code == 0
        assert "No audit entries found" in result.output
        assert not os.path.exists(log_path)
        assert not os.path.exists(os.path.join(workdir, "logs"))

    def test_config_show(self, workdir):
        result = invoke(workdir, "config")

        assert result.exit_code == 0
        assert "Audit enabled: True" in result.output

    def test_config_init_refuses_to_overwrite(self, workdir):
        result = invoke(workdir, "config", "--init")

        assert result.exit_code == 1

    def test_config_init_writes_file(self, workdir):
        target = os.path.join(workdir, "new.yaml")

        result = runner.invoke(fskit, ["--config", target, "config", "--init"])

        assert result.exit_code == 0
        assert os.path.exists(target)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
