"""
Tests for path resolution and existence guards.
"""

import errno
import ntpath
import os
import posixpath
from unittest.mock import patch

import pytest

from file_manager.exceptions import PathExistsError
from file_manager.utils.paths import (
    drive_root,
    ensure_absent,
    is_directory,
    is_file,
    parent_dir,
    resolve_path,
)


class TestResolvePath:
    """Test cases for resolve_path()."""

    def test_relative_is_joined_and_normalized(self):
        """Test relative is joined and normalized."""
        assert resolve_path("b/./c/../d", "/a", posixpath) == "/a/b/d"

    def test_parent_segments(self):
        """Test parent segments."""
        assert resolve_path("..", "/a/b", posixpath) == "/a"

    def test_absolute_is_returned_unchanged(self):
        """Test absolute is returned unchanged."""
        assert resolve_path("/etc//x", "/a", posixpath) == "/etc//x"

    @pytest.mark.parametrize("raw", ["x.txt", "../y", "/abs/z", "./"])
    def test_idempotent(self, raw):
        """Test idempotent."""
        once = resolve_path(raw, "/home/user", posixpath)
        assert resolve_path(once, "/home/user", posixpath) == once

    def test_drive_token_is_plain_name_on_posix(self):
        """Test drive token is plain name on posix."""
        assert resolve_path("d:", "/home", posixpath) == "/home/d:"

    def test_windows_bare_drive_gets_separator(self):
        """Test windows bare drive gets separator."""
        assert resolve_path("d:", "C:\\Users", ntpath) == "d:\\"

    def test_windows_drive_with_separator_unchanged(self):
        """Test windows drive with separator unchanged."""
        assert resolve_path("D:\\", "C:\\Users", ntpath) == "D:\\"

    def test_windows_relative(self):
        """Test windows relative."""
        assert resolve_path("docs\\..\\music", "C:\\Users\\me", ntpath) == (
            "C:\\Users\\me\\music"
        )


class TestDriveRoot:
    """Test cases for drive_root() and parent_dir()."""

    def test_posix_root(self):
        """Test posix root."""
        assert drive_root("/home/user", posixpath) == "/"

    def test_windows_root(self):
        """Test windows root."""
        assert drive_root("C:\\Users\\me", ntpath) == "C:\\"

    def test_parent_dir(self):
        """Test parent dir."""
        assert parent_dir("/a/b", posixpath) == "/a"
        assert parent_dir("C:\\Users", ntpath) == "C:\\"


class TestGuards:
    """Test cases for the path existence guards."""

    def test_is_file_and_is_directory(self, temp_directory):
        """Test is file and is directory."""
        test_file = os.path.join(temp_directory, "test1.txt")
        subdir = os.path.join(temp_directory, "subdir")

        assert is_file(test_file)
        assert not is_directory(test_file)
        assert is_directory(subdir)
        assert not is_file(subdir)

    def test_missing_path_is_false(self, temp_directory):
        """Test missing path is false."""
        missing = os.path.join(temp_directory, "nope")
        assert not is_file(missing)
        assert not is_directory(missing)

    def test_path_below_a_file_is_false(self, temp_directory):
        """Test path below a file is false."""
        below = os.path.join(temp_directory, "test1.txt", "child")
        assert not is_file(below)

    def test_permission_error_propagates(self, temp_directory):
        """Test permission error propagates."""
        denied = PermissionError(errno.EACCES, "Permission denied")
        with patch("file_manager.utils.paths.os.stat", side_effect=denied):
            with pytest.raises(PermissionError):
                is_file(os.path.join(temp_directory, "test1.txt"))
            with pytest.raises(PermissionError):
                is_directory(temp_directory)
            with pytest.raises(PermissionError):
                ensure_absent(os.path.join(temp_directory, "x"), "copy")

    def test_ensure_absent_on_existing_path(self, temp_directory):
        """Test ensure absent on existing path."""
        with pytest.raises(PathExistsError, match="already exists"):
            ensure_absent(os.path.join(temp_directory, "test1.txt"), "rename")

    def test_ensure_absent_after_delete(self, temp_directory):
        """Test ensure absent after delete."""
        target = os.path.join(temp_directory, "test1.txt")
        os.remove(target)
        ensure_absent(target, "rename")
