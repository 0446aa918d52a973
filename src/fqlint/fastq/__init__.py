"""FASTQ record model and reader."""

from __future__ import annotations

from .reader import STDIN_PATH, Reader, is_reopenable, open
from .record import Record

__all__ = ["Record", "Reader", "open", "is_reopenable", "STDIN_PATH"]
