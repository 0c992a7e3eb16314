"""
Use case for deleting a file.
"""

import logging
from typing import Optional

from file_manager.exceptions import PathNotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class RemoveFileUseCase:
    """Use case for deleting a single regular file."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        if not self._file_repository.is_file(path):
            raise PathNotFoundError(f"Not a file or does not exist: {path}")
        self._logger.info(f"Removing file: {path}")
        self._file_repository.delete_file(path)
        return path
