"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from file_manager.entities.file_entry import FileEntry
from file_manager.exceptions import FileRepositoryError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class ListDirectoryUseCase:
    """Use case for listing a directory, directories first then by name."""

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

    def execute(self, directory: str) -> list[FileEntry]:
        """
        List all entries in a directory.

        Args:
            directory: Path to the directory to list

        Returns:
            FileEntry entities sorted by type, then name

        Raises:
            FileRepositoryError: If listing fails
        """
        try:
            self._logger.info(f"Listing directory: {directory}")
            entries = sorted(
                self._file_repository.list_entries(directory),
                key=FileEntry.sort_key,
            )
            self._logger.info(f"Found {len(entries)} entries")
            return entries
        except FileRepositoryError:
            raise
        except OSError as e:
            self._logger.error(f"Error listing directory: {e}")
            raise FileRepositoryError(f"Failed to list directory: {str(e)}")
