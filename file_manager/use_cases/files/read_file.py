"""
Use case for streaming a file's contents.
"""

import logging
from typing import Iterator, Optional

from file_manager.exceptions import FileRepositoryError, PathNotFoundError
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class ReadFileUseCase:
    """Use case behind ``cat``."""

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_repository = file_repository
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, path: str) -> Iterator[bytes]:
        """
        Open a file for chunked reading.

        The existence check runs immediately; reading happens as the
        returned iterator is consumed.

        Raises:
            PathNotFoundError: If the path is not an existing file
            FileRepositoryError: While iterating, if opening or reading fails
        """
        if not self._file_repository.is_file(path):
            raise PathNotFoundError(f"{path} is not a file or does not exist")
        self._logger.info(f"Reading file: {path}")
        return self._stream(path)

    def _stream(self, path: str) -> Iterator[bytes]:
        try:
            yield from self._file_repository.iter_bytes(path)
        except OSError as e:
            self._logger.error(f"Error reading file: {e}")
            raise FileRepositoryError(f"Failed to read file: {e}")
