"""Validator interfaces.

This module defines the protocols that all record validators implement. There
are two kinds:

- ``SingleReadValidator`` looks at one record.
- ``PairedReadValidator`` looks at read 1 and read 2 of the same pair.

Each validator is an independent object carrying its own ``code``, ``name`` and
``level`` plus one ``validate`` operation. Validators return ``None`` on success
and a ``ValidationIssue`` on failure; they never raise for bad content.

To implement a new validator:

1. Create a new file in this directory (e.g., `my_validator.py`)
2. Define a class with ``code``, ``name``, ``level`` and ``validate()``
3. Use a code not taken by another validator ("S" for single, "P" for paired)
4. Add an instance to the catalog in registry.py

Example:
    ```python
    # checks/my_validator.py
    from typing import Optional
    from fqlint.core.enums import LineType, ValidationLevel
    from fqlint.fastq import Record
    from ..models import ValidationIssue

    class MyValidator:
        code = "S100"
        name = "MyValidator"
        level = ValidationLevel.MEDIUM

        def validate(self, record: Record) -> Optional[ValidationIssue]:
            if not record.sequence:
                return ValidationIssue(self.code, self.name, "...", LineType.SEQUENCE)
            return None
    ```
"""

from __future__ import annotations

from typing import Optional, Protocol

from fqlint.core.enums import ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class SingleReadValidator(Protocol):
    """Protocol for validators that inspect one record.

    Attributes:
        code: Stable identifier used in reports and ``--disable-validator``.
        name: Human-readable rule name.
        level: Strictness tier; active when ``level <= ceiling``.
    """

    code: str
    name: str
    level: ValidationLevel

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        """Check one normalized record.

        Returns:
            None if the record passes, otherwise the first violation found.
        """
        ...


class PairedReadValidator(Protocol):
    """Protocol for validators that inspect both mates of a pair.

    Issues are reported against read 1's source and position.
    """

    code: str
    name: str
    level: ValidationLevel

    def validate(self, r1: Record, r2: Record) -> Optional[ValidationIssue]:
        """Check a pair of normalized records.

        Returns:
            None if the pair passes, otherwise the violation found.
        """
        ...


__all__ = ["SingleReadValidator", "PairedReadValidator"]
