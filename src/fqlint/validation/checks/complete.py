"""Record completeness validation check.

A record is complete when none of its four lines is empty. Truncated files
leave the trailing lines of the last record empty.
"""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class CompleteValidator:
    """Validate that all four lines of a record are non-empty."""

    code = "S004"
    name = "CompleteValidator"
    level = ValidationLevel.LOW

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        fields = (
            ("name", record.name, LineType.NAME),
            ("sequence", record.sequence, LineType.SEQUENCE),
            ("plus line", record.plus_line, LineType.PLUS_LINE),
            ("quality", record.quality_scores, LineType.QUALITY_SCORES),
        )
        for label, value, line_type in fields:
            if not value:
                return ValidationIssue(
                    self.code,
                    self.name,
                    f"Incomplete record: {label} cannot be empty",
                    line_type,
                )
        return None
