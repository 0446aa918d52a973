"""Lint orchestration.

This module drives the scan over one or two FASTQ streams:
- lint_single(): one stream, every active single-read validator per record
- lint_pair(): two streams read in lockstep, single- and paired-read validators
- lint_files(): open the sources, pick the pipeline, return a LintReport

Both pipelines finish with the duplicate-name second pass over the primary
source unless S007 is disabled.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from fqlint import fastq
from fqlint.core.errors import DesyncError
from fqlint.fastq import Reader, Record
from .checks.duplicate_name import DuplicateNameValidator
from .config import LintOptions
from .models import LintReport
from .registry import filter_validators
from .reporter import ErrorReporter

logger = logging.getLogger(__name__)

Opener = Callable[[str], Reader]


def _duplicate_validator(r1_src: str, options: LintOptions) -> Optional[DuplicateNameValidator]:
    """Build the duplicate-name validator, or None if S007 is disabled."""
    if DuplicateNameValidator.code in options.disabled_validators:
        logger.info("enabled special validators: []")
        return None
    logger.info(
        'enabled special validators: ["[%s] %s"]',
        DuplicateNameValidator.code,
        DuplicateNameValidator.name,
    )
    return DuplicateNameValidator(retain_names=not fastq.is_reopenable(r1_src))


def _duplicate_pass(
    validator: DuplicateNameValidator,
    r1_src: str,
    reporter: ErrorReporter,
    opener: Opener,
) -> None:
    """Second pass: report every record whose name was seen more than once."""
    logger.info("starting validation (pass 2)")

    if not fastq.is_reopenable(r1_src):
        for record_counter, issue in validator.replay():
            reporter.handle(issue, r1_src, record_counter)
        return

    record = Record()
    record_counter = 0

    with opener(r1_src) as reader:
        while reader.read_record(record):
            record.reset()

            issue = validator.validate(record)
            if issue is not None:
                reporter.handle(issue, r1_src, record_counter)

            record_counter += 1

    logger.info("read %d records", record_counter)


def lint_single(
    reader: Reader,
    r1_src: str,
    options: LintOptions,
    reporter: ErrorReporter,
    opener: Opener = fastq.open,
) -> LintReport:
    """Validate a single-end stream.

    Args:
        reader: Open reader over ``r1_src``.
        r1_src: Path used in diagnostics and for the second pass.
        options: Run settings (levels, disabled codes).
        reporter: Receives every issue; raises in panic mode.
        opener: Reopens ``r1_src`` for the duplicate-name pass.

    Returns:
        LintReport for the run.

    Raises:
        LintAborted: First issue in panic mode.
        FastqReadError, FastqOpenError: On I/O failure.
    """
    single_read_validators, _ = filter_validators(
        options.single_read_validation_level, None, options.disabled_validators
    )
    duplicate_name_validator = _duplicate_validator(r1_src, options)

    logger.info("starting validation (pass 1)")

    record = Record()
    record_counter = 0

    while reader.read_record(record):
        record.reset()

        if duplicate_name_validator is not None:
            duplicate_name_validator.insert(record)

        for validator in single_read_validators:
            issue = validator.validate(record)
            if issue is not None:
                reporter.handle(issue, r1_src, record_counter)

        record_counter += 1

    logger.info("read %d records", record_counter)

    if duplicate_name_validator is not None:
        _duplicate_pass(duplicate_name_validator, r1_src, reporter, opener)

    return LintReport(
        sources=[r1_src],
        record_count=record_counter,
        issues_by_code=reporter.issues_by_code,
    )


def lint_pair(
    reader_1: Reader,
    reader_2: Reader,
    r1_src: str,
    r2_src: str,
    options: LintOptions,
    reporter: ErrorReporter,
    opener: Opener = fastq.open,
) -> LintReport:
    """Validate a pair of streams in lockstep.

    Issues from read 2 are reported against ``r2_src``; paired-read issues
    against ``r1_src``. Both use the same record counter.

    Raises:
        DesyncError: If one stream ends before the other (always fatal).
        LintAborted: First issue in panic mode.
        FastqReadError, FastqOpenError: On I/O failure.
    """
    single_read_validators, paired_read_validators = filter_validators(
        options.single_read_validation_level,
        options.paired_read_validation_level,
        options.disabled_validators,
    )
    duplicate_name_validator = _duplicate_validator(r1_src, options)

    logger.info("starting validation (pass 1)")

    b = Record()
    d = Record()
    record_counter = 0

    while True:
        r1_len = reader_1.read_record(b)
        r2_len = reader_2.read_record(d)

        if r1_len == 0 and r2_len > 0:
            raise DesyncError(r1_src, r2_src)
        elif r2_len == 0 and r1_len > 0:
            raise DesyncError(r2_src, r1_src)
        elif r1_len == 0 and r2_len == 0:
            break

        b.reset()
        d.reset()

        if duplicate_name_validator is not None:
            duplicate_name_validator.insert(b)

        for validator in single_read_validators:
            issue = validator.validate(b)
            if issue is not None:
                reporter.handle(issue, r1_src, record_counter)

            issue = validator.validate(d)
            if issue is not None:
                reporter.handle(issue, r2_src, record_counter)

        for paired_validator in paired_read_validators:
            issue = paired_validator.validate(b, d)
            if issue is not None:
                reporter.handle(issue, r1_src, record_counter)

        record_counter += 1

    logger.info("read %d * 2 records", record_counter)

    if duplicate_name_validator is not None:
        _duplicate_pass(duplicate_name_validator, r1_src, reporter, opener)

    return LintReport(
        sources=[r1_src, r2_src],
        record_count=record_counter,
        issues_by_code=reporter.issues_by_code,
        paired=True,
    )


def lint_files(
    r1_src: str,
    r2_src: Optional[str] = None,
    options: Optional[LintOptions] = None,
    reporter: Optional[ErrorReporter] = None,
    opener: Opener = fastq.open,
) -> LintReport:
    """Open the inputs and run the single or paired pipeline.

    Args:
        r1_src: Primary input path (``-`` for standard input).
        r2_src: Optional mate input path; switches to paired mode.
        options: Run settings; defaults to ``LintOptions()``.
        reporter: Issue sink; defaults to one using ``options.lint_mode``.
        opener: Function opening a path as a Reader.

    Returns:
        LintReport for the run.

    Examples:
        >>> report = lint_files("r1.fastq", "r2.fastq", LintOptions(lint_mode=LintMode.LOG))
        >>> print(report.summary())
    """
    if options is None:
        options = LintOptions()
    if reporter is None:
        reporter = ErrorReporter(options.lint_mode)

    with opener(r1_src) as reader_1:
        if r2_src is None:
            logger.info("validating single end read")
            return lint_single(reader_1, r1_src, options, reporter, opener)

        logger.info("validating paired end reads")
        with opener(r2_src) as reader_2:
            return lint_pair(reader_1, reader_2, r1_src, r2_src, options, reporter, opener)
