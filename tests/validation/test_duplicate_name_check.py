"""Tests for the two-pass DuplicateNameValidator."""

import pytest

from fqlint.core.enums import LineType
from fqlint.fastq import Record
from fqlint.validation.checks.duplicate_name import DuplicateNameValidator


def _normalized(name: str) -> Record:
    record = Record(name, "ACGT", "+", "FFFF")
    record.reset()
    return record


def test_insert_counts_normalized_names():
    validator = DuplicateNameValidator()
    for name in ("@A/1", "@B/1", "@A 2"):
        validator.insert(_normalized(name))

    assert validator.count(b"@A") == 2
    assert validator.count(b"@B") == 1
    assert validator.count(b"@C") == 0


def test_validate_flags_only_repeated_names():
    validator = DuplicateNameValidator()
    records = [_normalized(n) for n in ("@A", "@B", "@A")]
    for record in records:
        validator.insert(record)

    results = [validator.validate(r) for r in records]

    assert results[1] is None
    for issue in (results[0], results[2]):
        assert issue is not None
        assert issue.code == "S007"
        assert issue.line_type == LineType.NAME
        assert "@A" in issue.message


def test_nothing_flagged_before_insertion():
    assert DuplicateNameValidator().validate(_normalized("@A")) is None


def test_replay_yields_positions_of_duplicates():
    validator = DuplicateNameValidator(retain_names=True)
    for name in ("@A", "@B", "@A", "@C"):
        validator.insert(_normalized(name))

    positions = [counter for counter, _ in validator.replay()]

    assert positions == [0, 2]


def test_replay_requires_retained_names():
    with pytest.raises(RuntimeError):
        list(DuplicateNameValidator().replay())
