"""In-memory FASTQ record.

A ``Record`` is a reusable scratch buffer: a scan loop allocates one, the reader
clears and refills it for every entry, and ``reset()`` normalizes the name
before any validator looks at it. The record itself performs no validation.
"""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, str]


def _to_bytearray(value: BytesLike) -> bytearray:
    if isinstance(value, str):
        return bytearray(value.encode("ascii"))
    return bytearray(value)


class Record:
    """One four-line FASTQ entry.

    Attributes:
        name: Name line including the leading ``@``.
        sequence: Residue codes.
        plus_line: Separator line including the leading ``+``.
        quality_scores: One encoded quality symbol per residue.

    Examples:
        >>> r = Record("@fqlib/1", "ACGT", "+", "FQLB")
        >>> r.reset()
        >>> bytes(r.name)
        b'@fqlib'
    """

    __slots__ = ("name", "sequence", "plus_line", "quality_scores")

    def __init__(
        self,
        name: BytesLike = b"",
        sequence: BytesLike = b"",
        plus_line: BytesLike = b"",
        quality_scores: BytesLike = b"",
    ) -> None:
        self.name = _to_bytearray(name)
        self.sequence = _to_bytearray(sequence)
        self.plus_line = _to_bytearray(plus_line)
        self.quality_scores = _to_bytearray(quality_scores)

    def clear(self) -> None:
        """Empty all four buffers in place."""
        del self.name[:]
        del self.sequence[:]
        del self.plus_line[:]
        del self.quality_scores[:]

    def reset(self) -> None:
        """Strip the interleave or metadata suffix from the name.

        Everything from the last ``/`` or space to the end is removed, so
        ``@fqlib/1`` and ``@fqlib 1`` both become ``@fqlib``. Call once after
        each fill.
        """
        pos = max(self.name.rfind(b"/"), self.name.rfind(b" "))
        if pos >= 0:
            del self.name[pos:]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return (
            self.name == other.name
            and self.sequence == other.sequence
            and self.plus_line == other.plus_line
            and self.quality_scores == other.quality_scores
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Record(name={bytes(self.name)!r}, sequence={bytes(self.sequence)!r}, "
            f"plus_line={bytes(self.plus_line)!r}, "
            f"quality_scores={bytes(self.quality_scores)!r})"
        )


__all__ = ["Record"]
