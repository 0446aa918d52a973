"""Tests for the lint CLI commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from conftest import good_records
from fqlint.interfaces.cli.main import build_parser, cmd_lint, cmd_validators


def _args(r1_src, r2_src=None, **kwargs) -> argparse.Namespace:
    defaults = dict(
        lint_mode=None,
        single_read_validation_level=None,
        paired_read_validation_level=None,
        disable_validator=None,
        config=None,
        report_json=None,
    )
    defaults.update(kwargs)
    return argparse.Namespace(r1_src=str(r1_src), r2_src=r2_src and str(r2_src), **defaults)


class TestBuildParser:
    """Tests for argument parsing."""

    def test_lint_defaults(self):
        args = build_parser().parse_args(["lint", "r1.fastq"])

        assert args.r1_src == "r1.fastq"
        assert args.r2_src is None
        assert args.lint_mode is None
        assert args.disable_validator is None
        assert args.func is cmd_lint

    def test_lint_all_options(self):
        args = build_parser().parse_args(
            [
                "lint",
                "--lint-mode",
                "LOG",
                "--single-read-validation-level",
                "low",
                "--paired-read-validation-level",
                "medium",
                "--disable-validator",
                "S007",
                "--disable-validator",
                "S002",
                "r1.fastq",
                "r2.fastq",
            ]
        )

        assert args.lint_mode == "log"
        assert args.single_read_validation_level == "low"
        assert args.paired_read_validation_level == "medium"
        assert args.disable_validator == ["S007", "S002"]
        assert args.r2_src == "r2.fastq"

    def test_invalid_level_is_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["lint", "--single-read-validation-level", "max", "r1.fq"])


class TestCmdLint:
    """Tests for cmd_lint function."""

    def test_clean_single_file(self, write_fastq, capsys):
        path = write_fastq("in.fastq", good_records(3))

        assert cmd_lint(_args(path)) == 0
        assert "Records: 3" in capsys.readouterr().out

    def test_panic_mode_exits_non_zero_with_message(self, write_fastq, capsys):
        path = write_fastq("in.fastq", [("@r0", "ACGT", "+", "FFFF"), ("@r1", "AmGT", "+", "FFFF")])

        assert cmd_lint(_args(path)) == 1
        assert capsys.readouterr().err.strip() == (
            f"{path}:6:2: [S002] AlphabetValidator: Invalid character: m"
        )

    def test_log_mode_completes_with_zero(self, write_fastq):
        path = write_fastq("in.fastq", [("@r0", "AxGT", "+", "FFFF"), ("@r1", "AmGT", "+", "FFF")])

        assert cmd_lint(_args(path, lint_mode="log")) == 0

    def test_disabled_validator_is_not_reported(self, write_fastq):
        path = write_fastq("in.fastq", [("@r0", "AxGT", "+", "FFFF")])

        assert cmd_lint(_args(path, disable_validator=["S002"])) == 0

    def test_level_ceiling(self, write_fastq):
        # Missing @ prefix is only checked at high level
        path = write_fastq("in.fastq", [("r0", "ACGT", "+", "FFFF")])

        assert cmd_lint(_args(path, single_read_validation_level="medium")) == 0
        assert cmd_lint(_args(path)) == 1

    def test_paired_desync_exits_2(self, write_fastq):
        r1 = write_fastq("r1.fastq", good_records(1, "1"))
        r2 = write_fastq("r2.fastq", good_records(2, "2"))

        assert cmd_lint(_args(r1, r2, lint_mode="log")) == 2

    @pytest.mark.parametrize("how", ["corrupt", "truncated"])
    def test_damaged_gzip_exits_2(self, damaged_gzip, how):
        path = damaged_gzip("in.fastq.gz", how)

        assert cmd_lint(_args(path)) == 2
        assert cmd_lint(_args(path, lint_mode="log")) == 2

    def test_missing_input_exits_2(self, tmp_path):
        assert cmd_lint(_args(tmp_path / "missing.fastq")) == 2

    def test_config_file_supplies_defaults(self, write_fastq, tmp_path):
        path = write_fastq("in.fastq", [("@A", "ACGT", "+", "FFFF"), ("@A", "ACGT", "+", "FFFF")])
        config = tmp_path / "fqlint.yaml"
        config.write_text("disable_validators: [S007]\n", encoding="utf-8")

        assert cmd_lint(_args(path)) == 1
        assert cmd_lint(_args(path, config=str(config))) == 0

    def test_command_line_overrides_config(self, write_fastq, tmp_path):
        path = write_fastq("in.fastq", [("@r0", "AxGT", "+", "FFFF")])
        config = tmp_path / "fqlint.yaml"
        config.write_text("lint_mode: panic\n", encoding="utf-8")

        assert cmd_lint(_args(path, config=str(config))) == 1
        assert cmd_lint(_args(path, config=str(config), lint_mode="log")) == 0

    def test_invalid_config_exits_2(self, write_fastq, tmp_path):
        path = write_fastq("in.fastq", good_records(1))
        config = tmp_path / "fqlint.yaml"
        config.write_text("lint_mode: explode\n", encoding="utf-8")

        assert cmd_lint(_args(path, config=str(config))) == 2

    def test_report_json(self, write_fastq, tmp_path):
        path = write_fastq("in.fastq", [("@r0", "AxGT", "+", "FFFF"), ("@r1", "ACGT", "+", "FFFF")])
        report_path = tmp_path / "reports" / "lint.json"

        assert cmd_lint(_args(path, lint_mode="log", report_json=str(report_path))) == 0

        data = json.loads(Path(report_path).read_text(encoding="utf-8"))
        assert data["record_count"] == 2
        assert data["issues_by_code"] == {"S002": 1}


def test_cmd_validators_lists_catalog(capsys):
    assert cmd_validators(argparse.Namespace()) == 0

    out = capsys.readouterr().out
    for code in ("S001", "S002", "S003", "S004", "S005", "S006", "S007", "S008", "P001"):
        assert code in out
