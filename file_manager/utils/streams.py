"""Chunked stream helpers.

Every helper pulls one chunk from the source, pushes it fully through the
transform and into the sink, and only then reads the next chunk.
"""

from __future__ import annotations

import codecs
from typing import BinaryIO, Callable, Iterable, Iterator, Protocol

DEFAULT_CHUNK_SIZE = 64 * 1024


class ByteTransform(Protocol):
    """Incremental byte transform such as a compressor or decompressor."""

    def process(self, data: bytes) -> bytes: ...

    def finish(self) -> bytes: ...


def iter_chunks(stream: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[bytes]:
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            return
        yield chunk


def copy_stream(
    source: BinaryIO, sink: BinaryIO, chunk_size: int = DEFAULT_CHUNK_SIZE
) -> int:
    """Copy ``source`` into ``sink``; return the number of bytes copied."""
    total = 0
    for chunk in iter_chunks(source, chunk_size):
        sink.write(chunk)
        total += len(chunk)
    return total


def transform_stream(
    source: BinaryIO,
    sink: BinaryIO,
    transform: ByteTransform,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> None:
    for chunk in iter_chunks(source, chunk_size):
        out = transform.process(chunk)
        if out:
            sink.write(out)
    tail = transform.finish()
    if tail:
        sink.write(tail)


def decode_chunks(
    chunks: Iterable[bytes],
    write: Callable[[str], object],
    encoding: str = "utf-8",
) -> None:
    """Decode ``chunks`` incrementally and hand each piece of text to ``write``."""
    decoder = codecs.getincrementaldecoder(encoding)(errors="replace")
    for chunk in chunks:
        text = decoder.decode(chunk)
        if text:
            write(text)
    tail = decoder.decode(b"", final=True)
    if tail:
        write(tail)
