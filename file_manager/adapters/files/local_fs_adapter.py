"""
Local file system adapter implementation for file operations.
"""

import logging
import os
from typing import Iterator

from typing_extensions import override

from file_manager.entities.file_entry import FileEntry
from file_manager.exceptions import FileRepositoryError, PathExistsError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils import paths
from file_manager.utils.streams import DEFAULT_CHUNK_SIZE, copy_stream, iter_chunks


class LocalFileSystemAdapter(FileRepositoryPort):
    """Local file system implementation of the file repository port."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
            chunk_size: Number of bytes read per chunk when streaming
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size

    @override
    def list_entries(self, directory: str) -> list[FileEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            List of FileEntry entities

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            with os.scandir(directory) as it:
                return [FileEntry.from_dir_entry(entry) for entry in it]
        except OSError as e:
            raise FileRepositoryError(f"Failed to list directory: {e}")

    @override
    def is_file(self, path: str) -> bool:
        return paths.is_file(path)

    @override
    def is_directory(self, path: str) -> bool:
        return paths.is_directory(path)

    @override
    def ensure_absent(self, path: str, operation: str) -> None:
        paths.ensure_absent(path, operation)

    @override
    def iter_bytes(self, path: str) -> Iterator[bytes]:
        with open(path, "rb") as f:
            yield from iter_chunks(f, self._chunk_size)

    @override
    def create_file(self, path: str) -> None:
        """
        Create an empty file exclusively.

        Raises:
            PathExistsError: If the file already exists
            FileRepositoryError: If creation fails for any other reason
        """
        try:
            with open(path, "xb"):
                pass
        except FileExistsError:
            raise PathExistsError("File already exists")
        except OSError as e:
            raise FileRepositoryError(f"Failed to create file: {e}")
        self._logger.debug(f"Created file {path}")

    @override
    def make_directory(self, path: str) -> None:
        """
        Create a single directory.

        Raises:
            PathExistsError: If the directory already exists
            FileRepositoryError: If creation fails for any other reason
        """
        try:
            os.mkdir(path)
        except FileExistsError:
            raise PathExistsError("Directory already exists")
        except OSError as e:
            raise FileRepositoryError(f"Failed to create directory: {e}")
        self._logger.debug(f"Created directory {path}")

    @override
    def make_parent_dirs(self, path: str) -> None:
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
        except OSError as e:
            raise FileRepositoryError(f"Failed to create destination directory: {e}")

    @override
    def rename(self, source: str, destination: str) -> None:
        try:
            os.rename(source, destination)
        except OSError as e:
            raise FileRepositoryError(f"Failed to rename file: {e}")

    @override
    def copy_file(self, source: str, destination: str) -> None:
        """
        Stream-copy a file chunk by chunk.

        The destination is opened exclusively so an existing file is never
        overwritten.

        Raises:
            FileRepositoryError: If reading or writing fails
        """
        try:
            with open(source, "rb") as src, open(destination, "xb") as dst:
                copied = copy_stream(src, dst, self._chunk_size)
        except FileExistsError:
            raise PathExistsError(f"Cannot copy: target already exists: {destination}")
        except OSError as e:
            raise FileRepositoryError(f"Failed to copy file: {e}")
        self._logger.debug(f"Copied {copied} bytes from {source} to {destination}")

    @override
    def delete_file(self, path: str) -> None:
        try:
            os.remove(path)
        except OSError as e:
            raise FileRepositoryError(f"Failed to delete file: {e}")
