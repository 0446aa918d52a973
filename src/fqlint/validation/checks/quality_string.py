"""Quality score encoding check.

Quality symbols must be printable ASCII from ``!`` (33) to ``~`` (126), which
covers both Phred+33 and Phred+64 encodings.
"""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..config import QUALITY_SCORE_MAX, QUALITY_SCORE_MIN
from ..models import ValidationIssue


class QualityStringValidator:
    """Validate that every quality symbol is in the encodable range."""

    code = "S006"
    name = "QualityStringValidator"
    level = ValidationLevel.MEDIUM

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        for i, b in enumerate(record.quality_scores):
            if b < QUALITY_SCORE_MIN or b > QUALITY_SCORE_MAX:
                return ValidationIssue(
                    self.code,
                    self.name,
                    f"Invalid character: {chr(b)}",
                    LineType.QUALITY_SCORES,
                    i + 1,
                )
        return None
