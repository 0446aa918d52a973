"""Paired-read name agreement check."""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class NamesValidator:
    """Validate that both mates carry the same normalized name.

    Names are compared after ``Record.reset()``, so ``@read/1`` and
    ``@read/2`` are considered equal.
    """

    code = "P001"
    name = "NamesValidator"
    level = ValidationLevel.MEDIUM

    def validate(self, r1: Record, r2: Record) -> Optional[ValidationIssue]:
        if r1.name != r2.name:
            return ValidationIssue(
                self.code,
                self.name,
                f"Names mismatch: '{r1.name.decode('ascii', 'replace')}' != "
                f"'{r2.name.decode('ascii', 'replace')}'",
                LineType.NAME,
            )
        return None
