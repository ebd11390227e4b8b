"""Tests for dirconfig.io.local."""

import pytest

from dirconfig.errors import FileReadError
from dirconfig.io.local import LocalFileReader


def test_local_file_reader_list_dir_sorted(tmp_path):
    (tmp_path / "b").write_text("2")
    (tmp_path / "a").write_text("1")
    (tmp_path / "sub").mkdir()
    reader = LocalFileReader()
    entries = reader.list_dir(str(tmp_path))
    assert [e.name for e in entries] == ["a", "b", "sub"]
    assert [e.is_dir for e in entries] == [False, False, True]
    assert entries[0].path == str(tmp_path / "a")


def test_local_file_reader_list_dir_missing():
    reader = LocalFileReader()
    with pytest.raises(FileNotFoundError):
        reader.list_dir("/nonexistent/config/dir")


def test_local_file_reader_list_dir_on_file_raises(tmp_path):
    f = tmp_path / "file.txt"
    f.write_text("x")
    with pytest.raises(NotADirectoryError):
        LocalFileReader().list_dir(str(f))


def test_local_file_reader_symlinked_dir_is_not_dir(tmp_path):
    target = tmp_path / "real"
    target.mkdir()
    (tmp_path / "link").symlink_to(target, target_is_directory=True)
    entries = {e.name: e for e in LocalFileReader().list_dir(str(tmp_path))}
    assert not entries["link"].is_dir
    assert entries["real"].is_dir
    with pytest.raises(FileReadError):
        LocalFileReader().read_bytes(entries["link"].path)


def test_local_file_reader_read_bytes_exists(tmp_path):
    f = tmp_path / "hello"
    f.write_bytes(b"hello \xff world")
    assert LocalFileReader().read_bytes(str(f)) == b"hello \xff world"


def test_local_file_reader_read_bytes_missing():
    with pytest.raises(FileReadError, match="error reading file") as exc:
        LocalFileReader().read_bytes("/nonexistent/path/file")
    assert isinstance(exc.value, OSError)
    assert exc.value.path == "/nonexistent/path/file"


def test_local_file_reader_read_bytes_directory(tmp_path):
    with pytest.raises(FileReadError):
        LocalFileReader().read_bytes(str(tmp_path))
