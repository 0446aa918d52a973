"""Line-oriented FASTQ reader.

``open(path)`` returns a ``Reader`` over a plain or gzip-compressed file; the
format is detected from the leading magic bytes, not the file extension.
Opening the same path again starts a fresh pass from offset zero. The special
path ``-`` reads standard input, which can be traversed only once.
"""

from __future__ import annotations

import builtins
import gzip
import io
import sys
import zlib
from typing import BinaryIO, Optional

from fqlint.core.errors import FastqOpenError, FastqReadError
from .record import Record

GZIP_MAGIC = b"\x1f\x8b"
STDIN_PATH = "-"


def _chomp(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


class Reader:
    """Reads four-line records from a binary stream.

    Args:
        stream: Binary stream positioned at the first record.
        src: Path used in error messages.
        owned: Streams the reader must close, outermost first.
    """

    def __init__(
        self,
        stream: BinaryIO,
        src: str = "<stream>",
        owned: Optional[list] = None,
    ) -> None:
        self._stream = stream
        self._owned = [stream] if owned is None else owned
        self.src = src

    def read_record(self, record: Record) -> int:
        """Clear ``record`` and fill it with the next entry.

        Returns:
            Number of bytes consumed, ``0`` at end of stream. A truncated last
            record leaves its missing lines empty.

        Raises:
            FastqReadError: If the underlying stream fails.
        """
        record.clear()
        total = 0
        for buf in (record.name, record.sequence, record.plus_line, record.quality_scores):
            try:
                line = self._stream.readline()
            except (OSError, EOFError, zlib.error) as e:
                raise FastqReadError(self.src, str(e)) from e
            if not line:
                break
            total += len(line)
            buf.extend(_chomp(line))
        return total

    def close(self) -> None:
        for stream in self._owned:
            stream.close()
        self._owned = []

    def __enter__(self) -> "Reader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()


def is_reopenable(path: str) -> bool:
    """Return True if ``open(path)`` can be called again for a second pass."""
    return path != STDIN_PATH


def open(path: str) -> Reader:  # pylint: disable=redefined-builtin
    """Open a FASTQ file, transparently decompressing gzip input.

    Raises:
        FastqOpenError: If the file cannot be opened or its header read.
    """
    owned: list = []
    try:
        if path == STDIN_PATH:
            raw = sys.stdin.buffer
            if not hasattr(raw, "peek"):
                raw = io.BufferedReader(raw)  # type: ignore[arg-type]
        else:
            raw = builtins.open(path, "rb")
            owned.append(raw)
        magic = raw.peek(2)[:2]
    except OSError as e:
        for stream in owned:
            stream.close()
        raise FastqOpenError(path, e.strerror or str(e)) from e

    if magic == GZIP_MAGIC:
        stream = gzip.GzipFile(fileobj=raw, mode="rb")
        # GzipFile does not close the file object it wraps
        return Reader(stream, path, owned=[stream] + owned)  # type: ignore[arg-type]
    return Reader(raw, path, owned=owned)  # type: ignore[arg-type]


__all__ = ["Reader", "open", "is_reopenable", "GZIP_MAGIC", "STDIN_PATH"]
