"""Validator catalog and filter.

This module declares the validator catalog and selects the active set for a
run:
- SINGLE_READ_VALIDATORS / PAIRED_READ_VALIDATORS: catalogs in report order
- filter_validators(): active validators for a level ceiling and disable-list
- describe_validators(): catalog listing for the CLI

The duplicate-name validator (S007) is not in the catalog. It needs two passes
and is handled by the runner; it is active unless its code is disabled.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from fqlint.core.enums import ValidationLevel
from .checks import PairedReadValidator, SingleReadValidator
from .checks.alphabet import AlphabetValidator
from .checks.complete import CompleteValidator
from .checks.consistent_seq_qual import ConsistentSeqQualValidator
from .checks.duplicate_name import DuplicateNameValidator
from .checks.name import NameValidator
from .checks.names import NamesValidator
from .checks.plus_line import PlusLineNameValidator, PlusLineValidator
from .checks.quality_string import QualityStringValidator

logger = logging.getLogger(__name__)

# Declaration order is the order in which issues on one record are reported
SINGLE_READ_VALIDATORS: Tuple[SingleReadValidator, ...] = (
    PlusLineValidator(),
    AlphabetValidator(),
    NameValidator(),
    CompleteValidator(),
    ConsistentSeqQualValidator(),
    QualityStringValidator(),
    PlusLineNameValidator(),
)

PAIRED_READ_VALIDATORS: Tuple[PairedReadValidator, ...] = (
    NamesValidator(),
)


def known_codes() -> List[str]:
    """All validator codes, including the duplicate-name validator."""
    codes = [v.code for v in SINGLE_READ_VALIDATORS]
    codes.append(DuplicateNameValidator.code)
    codes.extend(v.code for v in PAIRED_READ_VALIDATORS)
    return codes


def filter_validators(
    single_read_validation_level: ValidationLevel,
    paired_read_validation_level: Optional[ValidationLevel] = None,
    disabled_validators: Iterable[str] = (),
) -> Tuple[List[SingleReadValidator], List[PairedReadValidator]]:
    """Select the active validators for a run.

    Args:
        single_read_validation_level: Ceiling for single-read validators.
        paired_read_validation_level: Ceiling for paired-read validators, or
            None to select no paired-read validators.
        disabled_validators: Codes to exclude regardless of level.

    Returns:
        (single-read validators, paired-read validators), each in catalog order.

    Examples:
        >>> single, paired = filter_validators(ValidationLevel.LOW)
        >>> [v.code for v in single]
        ['S001', 'S002', 'S004']
        >>> paired
        []
    """
    disabled = set(disabled_validators)

    unknown = disabled - set(known_codes())
    for code in sorted(unknown):
        logger.warning("Ignoring unknown validator code: %s", code)

    single = [
        v
        for v in SINGLE_READ_VALIDATORS
        if v.code not in disabled and v.level <= single_read_validation_level
    ]

    paired: List[PairedReadValidator] = []
    if paired_read_validation_level is not None:
        paired = [
            v
            for v in PAIRED_READ_VALIDATORS
            if v.code not in disabled and v.level <= paired_read_validation_level
        ]

    return single, paired


def describe_validators() -> List[Tuple[str, str, str, str]]:
    """List ``(code, level, name, description)`` for every validator."""
    validators: list = list(SINGLE_READ_VALIDATORS)
    validators.append(DuplicateNameValidator)
    validators.extend(PAIRED_READ_VALIDATORS)

    rows = []
    for v in validators:
        doc = (v.__doc__ or "").strip().splitlines()
        rows.append((v.code, v.level.value, v.name, doc[0] if doc else ""))
    return rows
