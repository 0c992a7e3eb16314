"""
Use case for computing a file's SHA-256 digest.
"""

import hashlib
import logging
from typing import Optional

from file_manager.exceptions import FileRepositoryError, PathNotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort

HASH_ALGORITHM = "sha256"


class HashFileUseCase:
    """Use case for hashing a file chunk by chunk."""

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
        Compute the SHA-256 digest of a file.

        Args:
            path: Absolute path of the file to hash

        Returns:
            Lowercase hex digest

        Raises:
            PathNotFoundError: If the path is not an existing file
            FileRepositoryError: If reading fails
        """
        if not self._file_repository.is_file(path):
            raise PathNotFoundError(f"Not a file or does not exist: {path}")

        digest = hashlib.new(HASH_ALGORITHM)
        try:
            for chunk in self._file_repository.iter_bytes(path):
                digest.update(chunk)
        except OSError as e:
            self._logger.error(f"Error hashing file: {e}")
            raise FileRepositoryError(
                f"Failed to calculate hash for {path}: {str(e)}"
            )
        return digest.hexdigest()
