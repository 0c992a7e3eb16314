"""
Use cases for moving the session's current directory.
"""

import logging
import os
from types import ModuleType
from typing import Optional

from file_manager.exceptions import PathNotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort
from file_manager.utils.paths import drive_root, parent_dir


class GoUpUseCase:
    """Use case for moving one level up from the current directory."""

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        self._logger = logger or logging.getLogger(__name__)
        self._pathmod = pathmod

    def execute(self, current_dir: str) -> str:
        """
        Compute the parent of the current directory.

        Args:
            current_dir: Absolute current directory

        Returns:
            The parent directory, or ``current_dir`` itself when already at the root
        """
        if drive_root(current_dir, self._pathmod) == current_dir:
            self._logger.info(f"Already at root: {current_dir}")
            return current_dir
        return parent_dir(current_dir, self._pathmod)


class ChangeDirectoryUseCase:
    """Use case for switching to another directory."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
        pathmod: ModuleType = os.path,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            logger: Logger instance to use for logging
            pathmod: Path flavour used to normalize the target
        """
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)
        self._pathmod = pathmod

    def execute(self, target: str, raw_target: str | None = None) -> str:
        """
        Validate a target directory.

        Args:
            target: Absolute path of the directory to switch to
            raw_target: Path as the user typed it, used in the error message

        Returns:
            The normalized target path

        Raises:
            PathNotFoundError: If the target is not an existing directory
        """
        if not self._file_repository.is_directory(target):
            raise PathNotFoundError(
                f"'{raw_target or target}' is not a directory or does not exist"
            )
        normalized = self._pathmod.normpath(target)
        self._logger.info(f"Changing directory to {normalized}")
        return normalized
