"""Tests for entry timestamps and stat()."""

import stat as stat_mod
from datetime import timezone

import pytest

from mockfs import FileEntry, FileMetadata, MockFS


class TestTimestamps:
    """Test mtime tracking on entries."""

    def test_write_sets_aware_utc_mtime(self):
        fs = MockFS()

        fs.write_file("/f.txt", "x")

        assert fs.entries["/f.txt"].mtime.tzinfo == timezone.utc

    def test_rewrite_refreshes_mtime(self):
        fs = MockFS()
        fs.write_file("/f.txt", "one")
        first = fs.entries["/f.txt"].mtime

        fs.write_file("/f.txt", "two")

        assert fs.entries["/f.txt"].mtime >= first

    def test_ancestors_not_touched_by_later_writes(self):
        fs = MockFS()
        fs.write_file("/a/one.txt", "1")
        dir_mtime = fs.entries["/a"].mtime

        fs.write_file("/a/two.txt", "2")

        assert fs.entries["/a"].mtime == dir_mtime

    def test_ancestor_mtime_not_after_file(self):
        fs = MockFS()

        fs.write_file("/a/b/c.txt", "x")

        assert fs.entries["/a"].mtime <= fs.entries["/a/b/c.txt"].mtime

    def test_entries_are_immutable(self):
        fs = MockFS()
        fs.write_file("/f.txt", "x")

        with pytest.raises(AttributeError):
            fs.entries["/f.txt"].content = "y"  # type: ignore[misc]


class TestStat:
    """Test stat()."""

    def test_stat_file(self):
        fs = MockFS()
        fs.write_file("/file.txt", "hello world")

        meta = fs.stat("/file.txt")

        assert meta.size == 11
        assert meta.is_file is True
        assert meta.is_dir is False
        assert meta.mtime == fs.entries["/file.txt"].mtime

    def test_stat_directory(self):
        fs = MockFS()
        fs.mkdir("/d")

        meta = fs.stat("/d/")

        assert meta.is_dir is True
        assert meta.size == 0

    def test_stat_missing_raises(self):
        fs = MockFS()

        with pytest.raises(FileNotFoundError):
            fs.stat("/nonexistent.txt")

    def test_stat_result_compatible(self):
        fs = MockFS()
        fs.write_file("/f.txt", "abc")
        fs.mkdir("/d")

        file_meta = fs.stat("/f.txt")
        dir_meta = fs.stat("/d")

        assert stat_mod.S_ISREG(file_meta.st_mode)
        assert stat_mod.S_ISDIR(dir_meta.st_mode)
        assert file_meta.st_size == 3
        assert file_meta.st_mtime == file_meta.mtime.timestamp()

    def test_from_entry(self):
        entry = FileEntry(content="abcd")

        meta = FileMetadata.from_entry(entry)

        assert meta.size == 4
        assert meta.mtime == entry.mtime
