import os
import stat
import sys

import pytest

from filemeta.attributes import file_type_of, permission_string, stat_path
from filemeta.errors import AttributeLookupError


def test_permission_string_regular_file():
    assert permission_string(stat.S_IFREG | 0o754) == "-rwxr-xr--"


def test_permission_string_directory_and_symlink():
    assert permission_string(stat.S_IFDIR | 0o755) == "drwxr-xr-x"
    assert permission_string(stat.S_IFLNK | 0o777) == "lrwxrwxrwx"


def test_permission_string_no_bits():
    s = permission_string(stat.S_IFREG)
    assert s == "----------"
    assert len(s) == 10


def test_file_type_of():
    assert file_type_of(stat.S_IFREG | 0o644) == "regular file"
    assert file_type_of(stat.S_IFDIR | 0o755) == "directory"
    assert file_type_of(stat.S_IFLNK | 0o777) == "symlink"
    assert file_type_of(stat.S_IFIFO | 0o644) == "unknown"


def test_stat_path_regular_file(tmp_path):
    p = tmp_path / "data.bin"
    p.write_bytes(b"12345")
    attrs = stat_path(p)
    assert attrs.size == 5
    assert attrs.file_type == "regular file"
    assert attrs.permissions[0] == "-"
    assert attrs.modification_time == os.stat(p).st_mtime


def test_stat_path_directory(tmp_path):
    attrs = stat_path(tmp_path)
    assert attrs.file_type == "directory"
    assert attrs.permissions.startswith("d")


def test_stat_path_missing(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(AttributeLookupError) as info:
        stat_path(missing)
    assert info.value.operation == "stat"
    assert info.value.path == str(missing)
    assert str(info.value).startswith(f"stat failed for {missing}: ")


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_stat_path_symlink(tmp_path):
    target = tmp_path / "target.txt"
    target.write_text("x")
    link = tmp_path / "link"
    os.symlink(target, link)

    assert stat_path(link).file_type == "regular file"
    attrs = stat_path(link, follow_symlinks=False)
    assert attrs.file_type == "symlink"
    assert attrs.permissions.startswith("l")


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_stat_path_broken_symlink(tmp_path):
    link = tmp_path / "dangling"
    os.symlink(tmp_path / "nowhere", link)
    with pytest.raises(AttributeLookupError):
        stat_path(link)
    assert stat_path(link, follow_symlinks=False).file_type == "symlink"
