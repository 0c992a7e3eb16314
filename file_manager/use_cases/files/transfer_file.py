"""
Use cases for copying and moving a file into another directory.
"""

import logging
import os
from typing import Optional

from file_manager.exceptions import (
    FileRepositoryError,
    PartialMoveError,
    PathNotFoundError,
)
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class _TransferFileUseCase:
    """Shared validation for copy and move."""

    operation = "transfer"

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def _prepare(self, source: str, dest_dir: str) -> str:
        """Check both ends and return the destination file path."""
        if not self._file_repository.is_file(source):
            raise PathNotFoundError(
                f"Source file does not exist or is not a file: {source}"
            )
        if not self._file_repository.is_directory(dest_dir):
            raise PathNotFoundError(
                f"Destination directory does not exist or is not a directory: {dest_dir}"
            )
        destination = os.path.join(dest_dir, os.path.basename(source))
        self._file_repository.ensure_absent(destination, self.operation)
        return destination


class CopyFileUseCase(_TransferFileUseCase):
    """Use case for stream-copying a file into a directory under its own name."""

    operation = "copy"

    def execute(self, source: str, dest_dir: str) -> str:
        """
        Copy a file into a directory.

        Args:
            source: Absolute path of the file to copy
            dest_dir: Absolute path of the destination directory

        Returns:
            Path of the new copy

        Raises:
            PathNotFoundError: If the source or the destination directory is missing
            PathExistsError: If the destination file already exists
            FileRepositoryError: If copying fails
        """
        destination = self._prepare(source, dest_dir)
        self._logger.info(f"Copying {source} to {destination}")
        self._file_repository.copy_file(source, destination)
        return destination


class MoveFileUseCase(_TransferFileUseCase):
    """Use case for moving a file as copy-then-delete.

    A failed delete after a successful copy is reported but not rolled back,
    so the file ends up in both places rather than nowhere.
    """

    operation = "move"

    def execute(self, source: str, dest_dir: str) -> str:
        destination = self._prepare(source, dest_dir)
        self._logger.info(f"Moving {source} to {destination}")
        try:
            self._file_repository.copy_file(source, destination)
        except FileRepositoryError as e:
            raise FileRepositoryError(f"Failed to move file: {e}")

        try:
            self._file_repository.delete_file(source)
        except FileRepositoryError as e:
            self._logger.error(f"Copied {source} but could not remove it: {e}")
            raise PartialMoveError(
                f"Failed to move file: copied to {destination} but could not remove source: {e}",
                source=source,
                destination=destination,
            )
        return destination
