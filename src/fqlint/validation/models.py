"""Validation data models.

This module defines core data structures for validation results:
- ValidationIssue: One content violation found in one record
- LintReport: Aggregated outcome of a lint run
"""

from __future__ import annotations

import json
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional

from fqlint.core.enums import LineType


@dataclass(frozen=True)
class ValidationIssue:
    """A content violation reported by a validator.

    Attributes:
        code: Stable validator code (e.g., "S002").
        name: Validator name (e.g., "AlphabetValidator").
        message: Human-readable description of the violation.
        line_type: Which of the four record lines triggered it.
        col_no: Optional 1-based column within that line.

    Examples:
        >>> ValidationIssue(
        ...     code="S002",
        ...     name="AlphabetValidator",
        ...     message="Invalid character: m",
        ...     line_type=LineType.SEQUENCE,
        ...     col_no=76,
        ... )
    """

    code: str
    name: str
    message: str
    line_type: LineType
    col_no: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate field constraints."""
        if self.col_no is not None and self.col_no < 1:
            raise ValueError(f"col_no is 1-based, got {self.col_no}")


@dataclass
class LintReport:
    """Aggregated results of a lint run.

    Attributes:
        sources: Input paths, primary first.
        record_count: Records read from the primary source in pass 1.
        issues_by_code: Number of reported issues per validator code.
        paired: True if two synchronized streams were validated.

    Examples:
        >>> report = LintReport(sources=["r1.fastq"], record_count=10)
        >>> report.has_errors()
        False
    """

    sources: List[str]
    record_count: int = 0
    issues_by_code: Counter = field(default_factory=Counter)
    paired: bool = False

    def has_errors(self) -> bool:
        return self.get_error_count() > 0

    def get_error_count(self) -> int:
        """Total number of reported issues across all validators."""
        return sum(self.issues_by_code.values())

    def summary(self) -> str:
        """Generate a concise text summary of the run.

        Examples:
            >>> print(report.summary())
            Lint Summary:
              Sources: r1.fastq, r2.fastq (paired)
              Records: 1000
              Issues: 3 (S002: 2, S007: 1)
        """
        mode = "paired" if self.paired else "single"
        errors = self.get_error_count()
        detail = ", ".join(f"{code}: {n}" for code, n in sorted(self.issues_by_code.items()))
        issues = f"{errors} ({detail})" if errors else "0"
        return (
            f"Lint Summary:\n"
            f"  Sources: {', '.join(self.sources)} ({mode})\n"
            f"  Records: {self.record_count}\n"
            f"  Issues: {issues}"
        )

    def to_json(self) -> str:
        """Generate a JSON summary of the run."""
        report_data = {
            "sources": list(self.sources),
            "paired": self.paired,
            "record_count": self.record_count,
            "error_count": self.get_error_count(),
            "issues_by_code": dict(sorted(self.issues_by_code.items())),
        }
        return json.dumps(report_data, indent=2)
