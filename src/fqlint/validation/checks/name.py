"""Name line validation check."""

from __future__ import annotations

from typing import Optional

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class NameValidator:
    """Validate that the name line starts with ``@``."""

    code = "S003"
    name = "NameValidator"
    level = ValidationLevel.HIGH

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        if not record.name.startswith(b"@"):
            return ValidationIssue(self.code, self.name, "Missing @ prefix", LineType.NAME)
        return None
