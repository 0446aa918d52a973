"""Shared pytest configuration, fixtures, and utilities for FASTQ lint testing."""

import gzip
import random
from pathlib import Path
from typing import Iterable, List, Tuple

import pytest

from fqlint.core.enums import LintMode
from fqlint.validation.models import ValidationIssue
from fqlint.validation.reporter import ErrorReporter


def fastq_text(records: Iterable[Tuple[str, str, str, str]]) -> str:
    """Render (name, sequence, plus_line, quality) tuples as FASTQ text."""
    return "".join(f"{n}\n{s}\n{p}\n{q}\n" for n, s, p, q in records)


def good_records(count: int, mate: str = "1") -> List[Tuple[str, str, str, str]]:
    """Well-formed records named @read0/<mate>, @read1/<mate>, ..."""
    return [(f"@read{i}/{mate}", "ACGT", "+", "FFFF") for i in range(count)]


def random_records(count: int, length: int = 100, seed: int = 0) -> List[Tuple[str, str, str, str]]:
    """Well-formed records with random sequences, so gzip output is not trivially small."""
    rng = random.Random(seed)
    records = []
    for i in range(count):
        sequence = "".join(rng.choice("ACGT") for _ in range(length))
        records.append((f"@read{i}", sequence, "+", "F" * length))
    return records


class RecordingReporter(ErrorReporter):
    """ErrorReporter in log mode that also keeps every handled issue."""

    def __init__(self, lint_mode: LintMode = LintMode.LOG) -> None:
        super().__init__(lint_mode)
        self.handled: List[Tuple[ValidationIssue, str, int]] = []

    def handle(self, issue: ValidationIssue, pathname: str, record_counter: int) -> None:
        self.handled.append((issue, pathname, record_counter))
        super().handle(issue, pathname, record_counter)

    def codes(self) -> List[str]:
        return [issue.code for issue, _, _ in self.handled]


@pytest.fixture
def write_fastq(tmp_path: Path):
    """Factory writing FASTQ records (or raw text) to a file under tmp_path."""

    def _write(name: str, records=None, text: str = None, compress: bool = False) -> Path:
        content = text if text is not None else fastq_text(records or [])
        path = tmp_path / name
        if compress:
            with gzip.open(path, "wb") as f:
                f.write(content.encode("ascii"))
        else:
            path.write_bytes(content.encode("ascii"))
        return path

    return _write


@pytest.fixture
def reporter() -> RecordingReporter:
    """Log-mode reporter that records what it handled."""
    return RecordingReporter()


@pytest.fixture
def damaged_gzip(write_fastq):
    """Factory writing a gzip FASTQ whose deflate stream is damaged.

    ``how="corrupt"`` overwrites bytes 40..199 of the compressed file with 0xFF;
    ``how="truncated"`` cuts the compressed file in half.
    """

    def _write(name: str, how: str = "corrupt") -> Path:
        path = write_fastq(name, random_records(500), compress=True)
        data = bytearray(path.read_bytes())
        if how == "corrupt":
            data[40:200] = b"\xff" * 160
        elif how == "truncated":
            data = data[: len(data) // 2]
        else:
            raise ValueError(f"Unknown damage: {how}")
        path.write_bytes(bytes(data))
        return path

    return _write
