"""Sequence alphabet validation check.

Residues must be one of ``A``, ``C``, ``G``, ``T`` or ``N`` in either case.
"""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..config import SEQUENCE_ALPHABET
from ..models import ValidationIssue


class AlphabetValidator:
    """Validate that every residue belongs to the nucleotide alphabet."""

    code = "S002"
    name = "AlphabetValidator"
    level = ValidationLevel.LOW

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        """Report the first residue outside the alphabet, with its column."""
        # Fast path: delete every legal residue and see if anything remains
        if not record.sequence.translate(None, SEQUENCE_ALPHABET):
            return None

        for i, b in enumerate(record.sequence):
            if b not in SEQUENCE_ALPHABET:
                return ValidationIssue(
                    self.code,
                    self.name,
                    f"Invalid character: {chr(b)}",
                    LineType.SEQUENCE,
                    i + 1,
                )
        return None
