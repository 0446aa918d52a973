"""Validation system for fqlint.

This module provides the record validation framework:

- **Models**: ValidationIssue, LintReport - validation result data structures
- **Checks**: Individual validator implementations (see validation/checks/)
- **Config**: Rule constants, run defaults and YAML config (import from .config)
- **Registry**: filter_validators() - validator catalog and selection
- **Reporter**: build_error_message(), ErrorReporter - diagnostics and lint mode
- **Runner**: lint_files(), lint_single(), lint_pair() - scan orchestration

Usage:
    >>> from fqlint.validation import LintOptions, lint_files
    >>> from fqlint.core.enums import LintMode
    >>> report = lint_files("r1.fastq.gz", "r2.fastq.gz", LintOptions(lint_mode=LintMode.LOG))
    >>> print(report.summary())
"""

from __future__ import annotations

from .models import LintReport, ValidationIssue
from .config import LintOptions, load_config
from .registry import filter_validators
from .reporter import ErrorReporter, build_error_message
from .runner import lint_files, lint_pair, lint_single

__all__ = [
    # Data models
    "ValidationIssue",
    "LintReport",
    # Configuration
    "LintOptions",
    "load_config",
    # Validator selection
    "filter_validators",
    # Reporting
    "ErrorReporter",
    "build_error_message",
    # Runner functions
    "lint_files",
    "lint_single",
    "lint_pair",
]
