"""Validation configuration.

This module centralizes rule constants, run defaults and the optional YAML
configuration file.

Config file keys (all optional):
    lint_mode: "panic" | "log"
    single_read_validation_level: "low" | "medium" | "high"
    paired_read_validation_level: "low" | "medium" | "high"
    disable_validators: list of validator codes

Example:
    ```yaml
    lint_mode: log
    single_read_validation_level: medium
    disable_validators:
      - S007
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional

import yaml

from fqlint.core.enums import LintMode, ValidationLevel
from fqlint.core.errors import ConfigError

# ============================================================================
# RULE CONSTANTS
# ============================================================================

SEQUENCE_ALPHABET = b"ACGTNacgtn"

# Printable ASCII range used by Phred+33 and Phred+64 encodings
QUALITY_SCORE_MIN = ord("!")
QUALITY_SCORE_MAX = ord("~")


# ============================================================================
# RUN DEFAULTS
# ============================================================================

DEFAULT_LINT_MODE = LintMode.PANIC
DEFAULT_VALIDATION_LEVEL = ValidationLevel.HIGH

_CONFIG_KEYS = {
    "lint_mode",
    "single_read_validation_level",
    "paired_read_validation_level",
    "disable_validators",
}


@dataclass(frozen=True)
class LintOptions:
    """Settings for one lint run, fixed before scanning starts.

    Attributes:
        lint_mode: Failure policy for content errors.
        single_read_validation_level: Ceiling for single-read validators.
        paired_read_validation_level: Ceiling for paired-read validators.
        disabled_validators: Codes excluded regardless of level.
    """

    lint_mode: LintMode = DEFAULT_LINT_MODE
    single_read_validation_level: ValidationLevel = DEFAULT_VALIDATION_LEVEL
    paired_read_validation_level: ValidationLevel = DEFAULT_VALIDATION_LEVEL
    disabled_validators: FrozenSet[str] = field(default_factory=frozenset)

    def with_overrides(self, **overrides: Any) -> "LintOptions":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if "disabled_validators" in changes:
            changes["disabled_validators"] = frozenset(changes["disabled_validators"])
        return replace(self, **changes)


# ============================================================================
# HELPER FUNCTIONS
# ============================================================================


def parse_level(value: str) -> ValidationLevel:
    """Parse a validation level name (case-insensitive).

    Raises:
        ConfigError: If the name is not a known level.

    Examples:
        >>> parse_level("Medium")
        <ValidationLevel.MEDIUM: 'medium'>
    """
    try:
        return ValidationLevel(str(value).lower())
    except ValueError:
        valid = ", ".join(level.value for level in ValidationLevel)
        raise ConfigError(f"Invalid validation level '{value}'. Valid levels: {valid}") from None


def parse_lint_mode(value: str) -> LintMode:
    """Parse a lint mode name (case-insensitive).

    Raises:
        ConfigError: If the name is not a known mode.
    """
    try:
        return LintMode(str(value).lower())
    except ValueError:
        valid = ", ".join(mode.value for mode in LintMode)
        raise ConfigError(f"Invalid lint mode '{value}'. Valid modes: {valid}") from None


def _parse_codes(value: Any) -> FrozenSet[str]:
    if isinstance(value, str):
        return frozenset([value])
    if isinstance(value, Iterable):
        return frozenset(str(code) for code in value)
    raise ConfigError(f"disable_validators must be a list of codes, got {value!r}")


def options_from_mapping(data: Dict[str, Any]) -> LintOptions:
    """Build ``LintOptions`` from a config mapping, defaulting missing keys.

    Raises:
        ConfigError: On unknown keys or invalid values.
    """
    unknown = set(data) - _CONFIG_KEYS
    if unknown:
        raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")

    options = LintOptions()
    if "lint_mode" in data:
        options = replace(options, lint_mode=parse_lint_mode(data["lint_mode"]))
    if "single_read_validation_level" in data:
        options = replace(
            options,
            single_read_validation_level=parse_level(data["single_read_validation_level"]),
        )
    if "paired_read_validation_level" in data:
        options = replace(
            options,
            paired_read_validation_level=parse_level(data["paired_read_validation_level"]),
        )
    if data.get("disable_validators") is not None:
        options = replace(options, disabled_validators=_parse_codes(data["disable_validators"]))
    return options


def load_config(path: Optional[Path]) -> LintOptions:
    """Load lint options from a YAML file.

    Args:
        path: Config file path, or None for built-in defaults.

    Raises:
        ConfigError: If the file is missing, unparsable or has invalid values.
    """
    if path is None:
        return LintOptions()
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to read config file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")
    return options_from_mapping(data)
