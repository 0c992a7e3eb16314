"""
Use cases for Brotli-compressing and decompressing files.
"""

import logging
from typing import Optional

from file_manager.exceptions import CompressionError, PathNotFoundError
from file_manager.ports.files.compression_port import CompressionPort
from file_manager.ports.files.file_repository_port import FileRepositoryPort


class _ArchiveUseCase:
    operation = "archive"

    def __init__(
        self,
        file_repository: FileRepositoryPort,
        compression: CompressionPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_repository: Repository for file operations
            compression: Streaming compression adapter
            logger: Logger instance to use for logging
        """
        self._file_repository = file_repository
        self._compression = compression
        self._logger = logger or logging.getLogger(__name__)

    def _prepare(self, source: str, destination: str) -> None:
        if not self._file_repository.is_file(source):
            raise PathNotFoundError(
                f"Source file does not exist or is not a file: {source}"
            )
        self._file_repository.ensure_absent(destination, self.operation)
        self._file_repository.make_parent_dirs(destination)


class CompressFileUseCase(_ArchiveUseCase):
    """Use case for compressing a file into a new destination."""

    operation = "compress"

    def execute(self, source: str, destination: str) -> str:
        """
        Compress ``source`` into ``destination``.

        Missing parent directories of the destination are created.

        Raises:
            PathNotFoundError: If the source is not an existing file
            PathExistsError: If the destination already exists
            CompressionError: If the transform fails
        """
        self._prepare(source, destination)
        self._logger.info(f"Compressing {source} to {destination}")
        try:
            self._compression.compress_file(source, destination)
        except CompressionError as e:
            self._logger.error(f"Error compressing file: {e}")
            raise CompressionError(f"Compression failed: {e}")
        return destination


class DecompressFileUseCase(_ArchiveUseCase):
    """Use case for decompressing a file; the adapter discards partial output on failure."""

    operation = "decompress"

    def execute(self, source: str, destination: str) -> str:
        self._prepare(source, destination)
        self._logger.info(f"Decompressing {source} to {destination}")
        try:
            self._compression.decompress_file(source, destination)
        except CompressionError as e:
            self._logger.error(f"Error decompressing file: {e}")
            raise CompressionError(f"Decompression failed: {e}")
        return destination
