"""
Brotli adapter implementation of the compression port.
"""

import logging
import os

import brotli
from typing_extensions import override

from file_manager.exceptions import CompressionError, PathExistsError
from file_manager.ports.files.compression_port import CompressionPort
from file_manager.utils.streams import DEFAULT_CHUNK_SIZE, transform_stream


class _BrotliDecoder:
    """Adapts ``brotli.Decompressor`` to the process/finish transform protocol."""

    def __init__(self) -> None:
        self._decompressor = brotli.Decompressor()

    def process(self, data: bytes) -> bytes:
        return self._decompressor.process(data)

    def finish(self) -> bytes:
        if not self._decompressor.is_finished():
            raise CompressionError("Unexpected end of compressed data")
        return b""


class BrotliCompressionAdapter(CompressionPort):
    """Streams files through Brotli compressor/decompressor objects."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        quality: int = 11,
    ):
        """
        Initialize the adapter.

        Args:
            logger: Logger instance to use for logging
            chunk_size: Number of bytes read per chunk
            quality: Brotli quality level, 0 (fastest) to 11 (smallest)
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)
        self._chunk_size = chunk_size
        self._quality = quality

    @override
    def compress_file(self, source: str, destination: str) -> None:
        try:
            with open(source, "rb") as src, open(destination, "xb") as dst:
                transform_stream(
                    src,
                    dst,
                    brotli.Compressor(quality=self._quality),
                    self._chunk_size,
                )
        except FileExistsError:
            raise PathExistsError(f"Cannot compress: target already exists: {destination}")
        except (OSError, brotli.error) as e:
            raise CompressionError(f"Failed to compress file: {e}")
        self._logger.debug(f"Compressed {source} into {destination}")

    @override
    def decompress_file(self, source: str, destination: str) -> None:
        """
        Decompress ``source`` into a newly created ``destination``.

        On failure the destination is removed, but only if this call created it.
        """
        created = False
        try:
            with open(source, "rb") as src:
                with open(destination, "xb") as dst:
                    created = True
                    transform_stream(src, dst, _BrotliDecoder(), self._chunk_size)
        except FileExistsError:
            raise PathExistsError(
                f"Cannot decompress: target already exists: {destination}"
            )
        except CompressionError:
            self._discard(destination, created)
            raise
        except (OSError, brotli.error) as e:
            self._discard(destination, created)
            raise CompressionError(f"Failed to decompress file: {e}")
        self._logger.debug(f"Decompressed {source} into {destination}")

    def _discard(self, destination: str, created: bool) -> None:
        if not created:
            return
        try:
            os.remove(destination)
        except OSError as e:
            self._logger.warning(f"Could not remove partial output {destination}: {e}")
