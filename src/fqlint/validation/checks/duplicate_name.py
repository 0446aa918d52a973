"""Duplicate read name detection.

Whether a name is duplicated is only known after the whole file has been seen,
while diagnostics must point at the original lines. The validator therefore
works in two passes:

1. ``insert()`` is called for every primary record during the main scan and
   counts normalized names. Nothing is reported.
2. The primary source is read again from the start and ``validate()`` reports
   every record whose name was counted more than once.

For a source that cannot be reopened (standard input), construct the validator
with ``retain_names=True`` and use ``replay()`` for the second pass instead.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, List, Optional, Tuple

from fqlint.core.enums import LineType, ValidationLevel
from fqlint.fastq import Record
from ..models import ValidationIssue


class DuplicateNameValidator:
    """Report records whose normalized name occurs more than once."""

    code = "S007"
    name = "DuplicateNameValidator"
    level = ValidationLevel.HIGH

    def __init__(self, retain_names: bool = False) -> None:
        self._counts: Counter = Counter()
        self._names: Optional[List[bytes]] = [] if retain_names else None

    def insert(self, record: Record) -> None:
        name = bytes(record.name)
        self._counts[name] += 1
        if self._names is not None:
            self._names.append(name)

    def count(self, name: bytes) -> int:
        return self._counts[bytes(name)]

    def validate(self, record: Record) -> Optional[ValidationIssue]:
        return self._check(bytes(record.name))

    def replay(self) -> Iterator[Tuple[int, ValidationIssue]]:
        """Yield ``(record_counter, issue)`` for duplicates seen in pass 1.

        Raises:
            RuntimeError: If the validator was built without ``retain_names``.
        """
        if self._names is None:
            raise RuntimeError("replay() requires retain_names=True")
        for record_counter, name in enumerate(self._names):
            issue = self._check(name)
            if issue is not None:
                yield record_counter, issue

    def _check(self, name: bytes) -> Optional[ValidationIssue]:
        if self._counts[name] > 1:
            return ValidationIssue(
                self.code,
                self.name,
                f"Duplicate found: '{name.decode('ascii', 'replace')}'",
                LineType.NAME,
            )
        return None
