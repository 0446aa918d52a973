"""Plus line validators.

The third line of a record separates the sequence from the quality scores. It
must start with ``+`` and may repeat the read name.
"""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class PlusLineValidator:
    """Validate that the plus line starts with ``+``."""

    code = "S001"
    name = "PlusLineValidator"
    level = ValidationLevel.LOW

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        if not record.plus_line.startswith(b"+"):
            return ValidationIssue(self.code, self.name, "Missing + prefix", LineType.PLUS_LINE)
        return None


class PlusLineNameValidator:
    """Validate that a name repeated on the plus line matches the name line.

    A bare ``+`` always passes. Otherwise the text after ``+`` is normalized the
    same way as record names and compared with the name minus its ``@``.
    """

    code = "S008"
    name = "PlusLineNameValidator"
    level = ValidationLevel.HIGH

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        if not record.plus_line.startswith(b"+") or len(record.plus_line) == 1:
            return None

        repeated = bytes(record.plus_line[1:])
        pos = max(repeated.rfind(b"/"), repeated.rfind(b" "))
        if pos >= 0:
            repeated = repeated[:pos]

        if repeated != bytes(record.name[1:]):
            return ValidationIssue(
                self.code,
                self.name,
                f"Plus line name '{repeated.decode('ascii', 'replace')}' does not match "
                f"name line '{record.name[1:].decode('ascii', 'replace')}'",
                LineType.PLUS_LINE,
                2,
            )
        return None
