"""Sequence/quality length consistency check."""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class ConsistentSeqQualValidator:
    """Validate that there is exactly one quality score per residue."""

    code = "S005"
    name = "ConsistentSeqQualValidator"
    level = ValidationLevel.MEDIUM

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        seq_len = len(record.sequence)
        qual_len = len(record.quality_scores)

        if seq_len != qual_len:
            return ValidationIssue(
                self.code,
                self.name,
                f"Sequence length ({seq_len}) differs from quality length ({qual_len})",
                LineType.QUALITY_SCORES,
            )
        return None
