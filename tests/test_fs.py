"""Tests for adrscope/fs.py - filesystem access."""

import pytest

from adrscope.errors import OutputWriteError, SourceReadError
from adrscope.fs import FileSystem


class TestFileSystem:

    def test_write_creates_parents(self, tmp_path):
        target = tmp_path / "site" / "nested" / "adrs.html"
        FileSystem().write_text(target, "<html></html>")
        assert target.read_text() == "<html></html>"

    def test_read_missing_file(self, tmp_path):
        with pytest.raises(SourceReadError, match="absent.md"):
            FileSystem().read_text(tmp_path / "absent.md")

    def test_write_to_directory_fails(self, tmp_path):
        with pytest.raises(OutputWriteError):
            FileSystem().write_text(tmp_path, "content")

    def test_glob_sorted_files_only(self, tmp_path):
        (tmp_path / "b.md").write_text("b")
        (tmp_path / "a.md").write_text("a")
        (tmp_path / "dir.md").mkdir()

        assert [p.name for p in FileSystem().glob(tmp_path, "*.md")] == ["a.md", "b.md"]

    def test_glob_missing_base(self, tmp_path):
        assert FileSystem().glob(tmp_path / "missing", "*.md") == []

    def test_exists_and_create_dir(self, tmp_path):
        fs = FileSystem()
        target = tmp_path / "wiki"
        assert not fs.exists(target)
        fs.create_dir(target)
        assert fs.exists(target)
