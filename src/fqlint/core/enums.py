"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum, IntEnum


class ValidationLevel(str, Enum):
    """Strictness tier of a validator.

    Values are strings to ease CLI and YAML interchange. Members compare by
    strictness (``LOW < MEDIUM < HIGH``), not alphabetically.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _LEVEL_RANKS[self.value]

    def __lt__(self, other):  # type: ignore[override]
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):  # type: ignore[override]
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):  # type: ignore[override]
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):  # type: ignore[override]
        if not isinstance(other, ValidationLevel):
            return NotImplemented
        return self.rank >= other.rank


_LEVEL_RANKS = {"low": 0, "medium": 1, "high": 2}


class LineType(IntEnum):
    """Line role within a four-line record; the value is its 0-based offset."""

    NAME = 0
    SEQUENCE = 1
    PLUS_LINE = 2
    QUALITY_SCORES = 3


class LintMode(str, Enum):
    """Failure policy for content errors."""

    PANIC = "panic"  # stop at the first error
    LOG = "log"  # log every error and keep scanning


__all__ = ["ValidationLevel", "LineType", "LintMode"]
