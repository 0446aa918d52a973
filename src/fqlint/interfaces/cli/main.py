import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import colorlog

from fqlint.core.enums import LintMode, ValidationLevel
from fqlint.core.errors import ConfigError, FqlintError, LintAborted

LINT_MODE_CHOICES = [m.value for m in LintMode]
VALIDATION_LEVEL_CHOICES = [level.value for level in ValidationLevel]

try:
    from fqlint import __version__ as _PACKAGE_VERSION
except ImportError:  # pragma: no cover
    _PACKAGE_VERSION = "unknown"  # type: ignore[assignment]


def setup_logging(
    verbose: bool = False, warnings_only: bool = False, errors_only: bool = False
) -> None:
    logger = logging.getLogger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    log_format = "%(asctime)s:%(levelname)s:%(name)s: %(message)s"
    log_colors = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold_red",
    }
    stream_handler = colorlog.StreamHandler()
    formatter = colorlog.ColoredFormatter(f"%(log_color)s{log_format}", log_colors=log_colors)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)
    if errors_only:
        logger.setLevel(logging.ERROR)
    elif warnings_only:
        logger.setLevel(logging.WARNING)
    else:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)


def cmd_lint(args: argparse.Namespace) -> int:
    """Validate one FASTQ file or a pair of mate files.

    Options given on the command line override values from --config.

    Returns:
        0 if the scan completed (issues may have been logged in log mode)
        1 if a content error stopped the scan in panic mode
        2 on I/O, pairing or configuration errors
    """
    from fqlint.validation import load_config, lint_files

    config_path = getattr(args, "config", None)
    try:
        options = load_config(Path(config_path) if config_path else None)
    except ConfigError as e:
        logging.error("%s", e)
        return 2

    disabled = getattr(args, "disable_validator", None)
    options = options.with_overrides(
        lint_mode=LintMode(args.lint_mode) if getattr(args, "lint_mode", None) else None,
        single_read_validation_level=(
            ValidationLevel(args.single_read_validation_level)
            if getattr(args, "single_read_validation_level", None)
            else None
        ),
        paired_read_validation_level=(
            ValidationLevel(args.paired_read_validation_level)
            if getattr(args, "paired_read_validation_level", None)
            else None
        ),
        disabled_validators=(options.disabled_validators | set(disabled)) if disabled else None,
    )

    r2_src = getattr(args, "r2_src", None)

    logging.info("fqlint lint start")

    try:
        report = lint_files(args.r1_src, r2_src, options)
    except LintAborted as e:
        print(e.message, file=sys.stderr)
        return 1
    except FqlintError as e:
        logging.error("%s", e)
        return 2

    logging.info("fqlint lint end")

    if report.has_errors():
        logging.warning(
            "Lint finished with %d issues in %d records",
            report.get_error_count(),
            report.record_count,
        )
    print(report.summary())

    report_json = getattr(args, "report_json", None)
    if report_json:
        report_path = Path(report_json)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        with open(report_path, "w", encoding="utf-8") as f:
            f.write(report.to_json())
        logging.info("JSON report saved: %s", report_path)

    return 0


def cmd_validators(args: argparse.Namespace) -> int:
    """Print the validator catalog."""
    from fqlint.validation.registry import describe_validators

    for code, level, name, description in describe_validators():
        print(f"{code}  {level:<6}  {name:<28}  {description}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="fqlint",
        description=f"FASTQ validator (v{_PACKAGE_VERSION})",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {_PACKAGE_VERSION}")
    p.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    p.add_argument(
        "--warnings-only",
        action="store_true",
        help="Show only warnings and errors (overrides --verbose)",
    )
    p.add_argument(
        "--errors-only",
        action="store_true",
        help="Show only errors (overrides --warnings-only and --verbose)",
    )

    sub = p.add_subparsers(dest="command", required=True)

    p_lint = sub.add_parser("lint", help="Validate a FASTQ file or a pair of mate files")
    p_lint.add_argument(
        "--lint-mode",
        type=str.lower,
        choices=LINT_MODE_CHOICES,
        default=None,
        help="panic: stop at the first error (default); log: report every error",
    )
    p_lint.add_argument(
        "--single-read-validation-level",
        type=str.lower,
        choices=VALIDATION_LEVEL_CHOICES,
        default=None,
        help="Strictest single-read validators to run (default: high)",
    )
    p_lint.add_argument(
        "--paired-read-validation-level",
        type=str.lower,
        choices=VALIDATION_LEVEL_CHOICES,
        default=None,
        help="Strictest paired-read validators to run (default: high). Paired mode only.",
    )
    p_lint.add_argument(
        "--disable-validator",
        action="append",
        default=None,
        metavar="CODE",
        help="Disable a validator by code (e.g. S007). May be repeated.",
    )
    p_lint.add_argument(
        "--config",
        required=False,
        default=None,
        help="YAML file with default lint options",
    )
    p_lint.add_argument(
        "--report-json",
        required=False,
        default=None,
        help="Write a JSON summary of the run to this path",
    )
    p_lint.add_argument("r1_src", metavar="R1", help="FASTQ input (use - for stdin)")
    p_lint.add_argument(
        "r2_src",
        metavar="R2",
        nargs="?",
        default=None,
        help="Mate FASTQ input; enables paired-end validation",
    )
    p_lint.set_defaults(func=cmd_lint)

    p_validators = sub.add_parser("validators", help="List available validators")
    p_validators.set_defaults(func=cmd_validators)

    return p


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(
        verbose=bool(args.verbose),
        warnings_only=bool(getattr(args, "warnings_only", False)),
        errors_only=bool(getattr(args, "errors_only", False)),
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
