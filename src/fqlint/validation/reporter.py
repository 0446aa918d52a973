"""Error reporting for content violations.

Turns a ``ValidationIssue`` plus its position into a diagnostic line and
applies the run's failure policy.
"""

from __future__ import annotations

import logging
from collections import Counter

from fqlint.core.enums import LintMode
from fqlint.core.errors import LintAborted
from .models import ValidationIssue

logger = logging.getLogger(__name__)


def build_error_message(issue: ValidationIssue, pathname: str, record_counter: int) -> str:
    """Format an issue as ``<path>:<line>:[<col>:] [<code>] <name>: <message>``.

    Args:
        issue: The violation to report.
        pathname: Source the record was read from.
        record_counter: 0-based index of the record in that source.

    Examples:
        >>> issue = ValidationIssue(
        ...     "S002", "AlphabetValidator", "Invalid character: m", LineType.SEQUENCE, 76
        ... )
        >>> build_error_message(issue, "in.fastq", 2)
        'in.fastq:10:76: [S002] AlphabetValidator: Invalid character: m'
    """
    line_no = record_counter * 4 + int(issue.line_type) + 1
    message = f"{pathname}:{line_no}:"

    if issue.col_no is not None:
        message += f"{issue.col_no}:"

    message += f" [{issue.code}] {issue.name}: {issue.message}"
    return message


class ErrorReporter:
    """Apply the lint mode to each reported issue.

    In panic mode the first issue raises ``LintAborted``. In log mode every
    issue is logged at ERROR level and scanning continues.

    Attributes:
        lint_mode: Failure policy for this run.
        issues_by_code: Number of issues handled per validator code.
    """

    def __init__(self, lint_mode: LintMode) -> None:
        self.lint_mode = lint_mode
        self.issues_by_code: Counter = Counter()

    def handle(self, issue: ValidationIssue, pathname: str, record_counter: int) -> None:
        message = build_error_message(issue, pathname, record_counter)
        self.issues_by_code[issue.code] += 1

        if self.lint_mode == LintMode.PANIC:
            raise LintAborted(message)

        logger.error("%s", message)
