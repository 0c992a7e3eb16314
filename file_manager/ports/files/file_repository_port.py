"""
File repository port interface defining the contract for file operations.
"""

from abc import ABC, abstractmethod
from typing import Iterator

from file_manager.entities.file_entry import FileEntry


class FileRepositoryPort(ABC):
    """Port interface for file repository operations."""

    @abstractmethod
    def list_entries(self, directory: str) -> list[FileEntry]:
        """
        List all entries (files and directories) in a directory.

        Args:
            directory: Absolute path of the directory to list

        Returns:
            List of FileEntry entities, unsorted

        Raises:
            FileRepositoryError: If listing fails
        """
        pass

    @abstractmethod
    def is_file(self, path: str) -> bool:
        """
        Check whether a path is an existing regular file.

        Returns False when nothing exists at the path. Any other probe
        failure (e.g. permission denied) propagates.
        """
        pass

    @abstractmethod
    def is_directory(self, path: str) -> bool:
        """
        Check whether a path is an existing directory.

        Returns False when nothing exists at the path. Any other probe
        failure (e.g. permission denied) propagates.
        """
        pass

    @abstractmethod
    def ensure_absent(self, path: str, operation: str) -> None:
        """
        Fail if anything exists at the path.

        Args:
            path: Absolute target path
            operation: Operation name used in the error message

        Raises:
            PathExistsError: If the path already exists
        """
        pass

    @abstractmethod
    def iter_bytes(self, path: str) -> Iterator[bytes]:
        """
        Read a file incrementally.

        Args:
            path: Absolute path of the file to read

        Returns:
            Iterator over the file's chunks
        """
        pass

    @abstractmethod
    def create_file(self, path: str) -> None:
        """
        Create an empty file, failing if it already exists.

        Raises:
            PathExistsError: If the file already exists
            FileRepositoryError: If creation fails for any other reason
        """
        pass

    @abstractmethod
    def make_directory(self, path: str) -> None:
        """
        Create a directory, failing if it already exists.

        Raises:
            PathExistsError: If the directory already exists
            FileRepositoryError: If creation fails for any other reason
        """
        pass

    @abstractmethod
    def make_parent_dirs(self, path: str) -> None:
        """Create every missing parent directory of a file path."""
        pass

    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Rename a file."""
        pass

    @abstractmethod
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream-copy a file into a destination that must not exist yet.

        Args:
            source: Absolute path of the file to copy
            destination: Absolute path of the new file
        """
        pass

    @abstractmethod
    def delete_file(self, path: str) -> None:
        """Delete a file."""
        pass
