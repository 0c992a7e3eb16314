"""
Use case for renaming a file.
"""

import logging
from typing import Optional

from file_manager.exceptions import PathNotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class RenameFileUseCase:
    """Use case for renaming a file without overwriting anything."""

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

    def execute(self, source: str, destination: str) -> str:
        """
        Rename a file.

        Args:
            source: Absolute path of the file to rename
            destination: Absolute new path

        Returns:
            The destination path

        Raises:
            PathNotFoundError: If the source is not an existing file
            PathExistsError: If the destination already exists
            FileRepositoryError: If the rename itself fails
        """
        if not self._file_repository.is_file(source):
            raise PathNotFoundError(
                f"Source file does not exist or is not a file: {source}"
            )
        self._file_repository.ensure_absent(destination, "rename")

        self._logger.info(f"Renaming {source} to {destination}")
        self._file_repository.rename(source, destination)
        return destination
