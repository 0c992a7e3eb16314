"""
Tests for the LocalFileSystemAdapter.
"""

import os
from unittest.mock import patch

import pytest

from file_manager.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from file_manager.entities.file_entry import FileEntry
from file_manager.exceptions import FileRepositoryError, PathExistsError


class TestLocalFileSystemAdapter:
    """Test cases for the LocalFileSystemAdapter."""

    def test_list_entries_success(self, temp_directory, mock_logger):
        """Test listing files and directories."""
        adapter = LocalFileSystemAdapter(mock_logger)
        entries = adapter.list_entries(temp_directory)

        assert all(isinstance(e, FileEntry) for e in entries)
        by_name = {e.name: e.entry_type for e in entries}
        assert by_name == {
            "test1.txt": "file",
            "test2.py": "file",
            "subdir": "directory",
        }

    def test_list_entries_nonexistent_directory(self, mock_logger):
        """Test list entries nonexistent directory."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to list directory"):
            adapter.list_entries("/nonexistent/directory")

    def test_iter_bytes_uses_chunk_size(self, temp_directory, mock_logger):
        """Test iter bytes uses chunk size."""
        adapter = LocalFileSystemAdapter(mock_logger, chunk_size=4)
        chunks = list(adapter.iter_bytes(os.path.join(temp_directory, "test1.txt")))

        assert b"".join(chunks) == b"This is a test file."
        assert all(len(c) <= 4 for c in chunks)

    def test_create_file(self, temp_directory, mock_logger):
        """Test create file."""
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "new.txt")
        adapter.create_file(path)

        assert os.path.getsize(path) == 0

    def test_create_file_already_exists(self, temp_directory, mock_logger):
        """Test create file already exists."""
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "test1.txt")

        with pytest.raises(PathExistsError, match="File already exists"):
            adapter.create_file(path)
        # Existing content untouched
        with open(path) as f:
            assert f.read() == "This is a test file."

    def test_create_file_missing_parent(self, temp_directory, mock_logger):
        """Test create file missing parent."""
        adapter = LocalFileSystemAdapter(mock_logger)

        with pytest.raises(FileRepositoryError, match="Failed to create file"):
            adapter.create_file(os.path.join(temp_directory, "no", "such.txt"))

    def test_make_directory(self, temp_directory, mock_logger):
        """Test make directory."""
        adapter = LocalFileSystemAdapter(mock_logger)
        path = os.path.join(temp_directory, "docs")
        adapter.make_directory(path)

        assert os.path.isdir(path)
        with pytest.raises(PathExistsError, match="Directory already exists"):
            adapter.make_directory(path)

    def test_make_parent_dirs(self, temp_directory, mock_logger):
        """Test make parent dirs."""
        adapter = LocalFileSystemAdapter(mock_logger)
        adapter.make_parent_dirs(os.path.join(temp_directory, "a", "b", "c.br"))

        assert os.path.isdir(os.path.join(temp_directory, "a", "b"))

    def test_copy_file(self, temp_directory, mock_logger):
        """Test copy file."""
        adapter = LocalFileSystemAdapter(mock_logger, chunk_size=3)
        source = os.path.join(temp_directory, "test2.py")
        destination = os.path.join(temp_directory, "subdir", "test2.py")
        adapter.copy_file(source, destination)

        with open(source, "rb") as a, open(destination, "rb") as b:
            assert a.read() == b.read()

    def test_copy_file_never_overwrites(self, temp_directory, mock_logger):
        """Test copy file never overwrites."""
        adapter = LocalFileSystemAdapter(mock_logger)
        source = os.path.join(temp_directory, "test2.py")
        destination = os.path.join(temp_directory, "test1.txt")

        with pytest.raises(PathExistsError):
            adapter.copy_file(source, destination)

    def test_rename_and_delete(self, temp_directory, mock_logger):
        """Test rename and delete."""
        adapter = LocalFileSystemAdapter(mock_logger)
        source = os.path.join(temp_directory, "test1.txt")
        destination = os.path.join(temp_directory, "renamed.txt")

        adapter.rename(source, destination)
        assert not os.path.exists(source)
        adapter.delete_file(destination)
        assert not os.path.exists(destination)

    def test_delete_file_wraps_os_error(self, temp_directory, mock_logger):
        """Test delete file wraps os error."""
        adapter = LocalFileSystemAdapter(mock_logger)
        with patch(
            "file_manager.adapters.files.local_fs_adapter.os.remove",
            side_effect=PermissionError("denied"),
        ):
            with pytest.raises(FileRepositoryError, match="Failed to delete file"):
                adapter.delete_file(os.path.join(temp_directory, "test1.txt"))
