"""
Use cases for creating empty files and directories.
"""

import logging
from typing import Optional

from file_manager.ports.files.file_repository_port import FileRepositoryPort


class CreateFileUseCase:
    """Use case for creating an empty file that must not exist yet."""

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

    def execute(self, path: str) -> str:
        """
        Create an empty file.

        Args:
            path: Absolute path of the file to create

        Returns:
            The created path

        Raises:
            PathExistsError: If something already exists at the path
            FileRepositoryError: If creation fails for any other reason
        """
        self._logger.info(f"Creating file: {path}")
        self._file_repository.create_file(path)
        return path


class MakeDirectoryUseCase:
    """Use case for creating a directory that must not exist yet."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> str:
        """
        Create a directory; the parent must already exist.

        Raises:
            PathExistsError: If something already exists at the path
            FileRepositoryError: If creation fails for any other reason
        """
        self._logger.info(f"Creating directory: {path}")
        self._file_repository.make_directory(path)
        return path
