"""
Compression port interface for streaming file compression.
"""

from abc import ABC, abstractmethod


class CompressionPort(ABC):
    """Port interface for compressing and decompressing files."""

    @abstractmethod
    def compress_file(self, source: str, destination: str) -> None:
        """
        Compress a file into a new destination file.

        Args:
            source: Absolute path of the file to compress
            destination: Absolute path of the compressed file to create

        Raises:
            PathExistsError: If the destination already exists
            CompressionError: If the transform or the I/O fails
        """
        pass

    @abstractmethod
    def decompress_file(self, source: str, destination: str) -> None:
        """
        Decompress a file into a new destination file.

        Output created by this call is removed again if decompression fails.

        Args:
            source: Absolute path of the compressed file
            destination: Absolute path of the file to create

        Raises:
            PathExistsError: If the destination already exists
            CompressionError: If the transform or the I/O fails
        """
        pass
