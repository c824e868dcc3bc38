"""
Unit tests for the walker and gzip helpers.
"""

import errno
import gzip
import importlib
from pathlib import Path

import pytest

from split_log.core.errors import OutputRootError
from split_log.core.processor import BatchSummary
from split_log.filesystem import (
    add_extension,
    compress,
    compress_tree,
    decompress,
    decompress_tree,
    ensure_output_root,
    find_compressed_files,
    find_dated_outputs,
    find_rotated_files,
    is_dated_output,
    is_rotated,
    output_prefix_for,
    rotation_index,
)

compress_module = importlib.import_module("split_log.filesystem.compress")


def touch(path, content=b"x\n"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(content)
    return path


class HalfWriter:
    """Writes half of what it is given, then fails like a full disk."""

    def __init__(self, f):
        self.f = f

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.f.close()

    def write(self, data):
        self.f.write(data[: len(data) // 2])
        self.f.flush()
        raise OSError(errno.ENOSPC, "No space left on device")


def half_writing_open(path, mode):
    return HalfWriter(open(path, mode))


class TestSelection:
    """Tests for file selection helpers."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("syslog.1", True),
            ("access.log.12", True),
            ("syslog", False),
            ("app.log", False),
            ("syslog.1.gz", False),
            ("syslog.1a", False),
        ],
    )
    def test_is_rotated(self, name, expected):
        assert is_rotated(Path(name)) is expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("out/syslog-2020-05-12", True),
            ("out/syslog-2020-05-12.gz", False),
            ("out/syslog-20200512", False),
            ("out/syslog", False),
        ],
    )
    def test_is_dated_output(self, name, expected):
        assert is_dated_output(Path(name)) is expected

    def test_find_functions_walk_recursively(self, tmp_path):
        """Each finder picks its own files from the whole tree, sorted."""
        touch(tmp_path / "b" / "syslog.2")
        touch(tmp_path / "a" / "syslog.1")
        touch(tmp_path / "a" / "current.log")
        touch(tmp_path / "a" / "old.3.gz")
        touch(tmp_path / "c" / "app-2020-05-12")
        (tmp_path / "d.4").mkdir()

        assert find_rotated_files(tmp_path) == [
            tmp_path / "a" / "syslog.1",
            tmp_path / "b" / "syslog.2",
        ]
        assert find_compressed_files(tmp_path) == [tmp_path / "a" / "old.3.gz"]
        assert find_dated_outputs(tmp_path) == [tmp_path / "c" / "app-2020-05-12"]

    def test_rotations_oldest_first(self, tmp_path):
        """Higher rotation indexes are older and come first, numerically."""
        for name in ["app.1", "app.2", "app.10", "other.log.1", "other.log.3"]:
            touch(tmp_path / name)

        assert [p.name for p in find_rotated_files(tmp_path)] == [
            "app.10",
            "app.2",
            "app.1",
            "other.log.3",
            "other.log.1",
        ]

    def test_rotation_index(self):
        assert rotation_index(Path("access.log.12")) == 12


class TestPaths:
    """Tests for output path helpers."""

    def test_output_prefix_mirrors_tree(self, tmp_path):
        """The relative path is re-rooted and loses its rotation index."""
        input_root = tmp_path / "var"
        output_root = tmp_path / "out"

        prefix = output_prefix_for(input_root / "log" / "apache2" / "access.log.1", input_root, output_root)

        assert prefix == output_root / "log" / "apache2" / "access.log"

    def test_add_extension(self):
        assert add_extension(Path("out/app-2020-05-12"), "gz") == Path("out/app-2020-05-12.gz")
        assert add_extension(Path("a.log"), ".gz") == Path("a.log.gz")


class TestOutputRoot:
    """Tests for ensure_output_root function."""

    def test_creates_missing_root(self, tmp_path):
        root = tmp_path / "deep" / "output"
        assert ensure_output_root(root) == root
        assert root.is_dir()

    def test_existing_directory_is_fine(self, tmp_path):
        assert ensure_output_root(tmp_path) == tmp_path

    def test_file_in_the_way(self, tmp_path):
        target = touch(tmp_path / "output")

        with pytest.raises(OutputRootError) as excinfo:
            ensure_output_root(target)

        assert "is not a directory" in str(excinfo.value)


class TestCompression:
    """Tests for compress and decompress functions."""

    def test_decompress_replaces_archive(self, tmp_path):
        archive = touch(tmp_path / "syslog.1.gz", gzip.compress(b"May 16 hello\n"))

        destination = decompress(archive)

        assert destination == tmp_path / "syslog.1"
        assert destination.read_bytes() == b"May 16 hello\n"
        assert not archive.exists()

    def test_corrupt_archive_is_left_alone(self, tmp_path):
        archive = touch(tmp_path / "broken.1.gz", b"definitely not gzip")

        with pytest.raises(OSError):
            decompress(archive)

        assert archive.exists()
        assert not (tmp_path / "broken.1").exists()

    def test_compress_replaces_file(self, tmp_path):
        dated = touch(tmp_path / "app-2020-05-12", b"line\n")

        destination = compress(dated)

        assert destination == tmp_path / "app-2020-05-12.gz"
        assert gzip.decompress(destination.read_bytes()) == b"line\n"
        assert not dated.exists()

    def test_compress_appends_to_existing_archive(self, tmp_path):
        """A second run for the same date keeps the first run's lines."""
        compress(touch(tmp_path / "app-2020-05-12", b"first run\n"))
        compress(touch(tmp_path / "app-2020-05-12", b"second run\n"))

        archive = tmp_path / "app-2020-05-12.gz"
        assert gzip.decompress(archive.read_bytes()) == b"first run\nsecond run\n"

    def test_failed_append_keeps_earlier_runs(self, tmp_path, monkeypatch):
        """A write that dies half way is cut back off the archive."""
        compress(touch(tmp_path / "app-2020-05-12", b"first run\n"))
        archive = tmp_path / "app-2020-05-12.gz"
        size = archive.stat().st_size
        dated = touch(tmp_path / "app-2020-05-12", b"second run\n")
        monkeypatch.setattr(compress_module, "open", half_writing_open, raising=False)

        with pytest.raises(OSError):
            compress(dated)

        assert archive.stat().st_size == size
        assert gzip.decompress(archive.read_bytes()) == b"first run\n"
        assert dated.read_bytes() == b"second run\n"

    def test_failed_first_write_leaves_no_archive(self, tmp_path, monkeypatch):
        dated = touch(tmp_path / "app-2020-05-12", b"only run\n")
        monkeypatch.setattr(compress_module, "open", half_writing_open, raising=False)

        with pytest.raises(OSError):
            compress(dated)

        assert not (tmp_path / "app-2020-05-12.gz").exists()
        assert dated.exists()


class TestTreePasses:
    """Tests for decompress_tree and compress_tree functions."""

    def test_decompress_tree_continues_after_failure(self, tmp_path, captured_reporter):
        reporter, out, err = captured_reporter
        touch(tmp_path / "a" / "bad.1.gz", b"garbage")
        touch(tmp_path / "b" / "good.1.gz", gzip.compress(b"2020-05-12 ok\n"))
        summary = BatchSummary()

        decompress_tree(tmp_path, reporter, summary)

        assert summary.decompressed == 1
        assert [path for path, _ in summary.failed] == [tmp_path / "a" / "bad.1.gz"]
        assert (tmp_path / "b" / "good.1").exists()
        assert "good.1.gz" in out.getvalue()
        assert "bad.1.gz" in err.getvalue()

    def test_compress_tree_only_touches_dated_files(self, tmp_path, captured_reporter):
        reporter, out, _ = captured_reporter
        touch(tmp_path / "app-2020-05-12")
        touch(tmp_path / "sub" / "app-0001-01-01")
        touch(tmp_path / "notes.txt")

        summary = compress_tree(tmp_path, reporter)

        assert summary.compressed == 2
        assert (tmp_path / "app-2020-05-12.gz").exists()
        assert (tmp_path / "sub" / "app-0001-01-01.gz").exists()
        assert (tmp_path / "notes.txt").exists()
        assert "app-2020-05-12.gz" in out.getvalue()
