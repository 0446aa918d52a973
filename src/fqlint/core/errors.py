"""Exceptions raised by fqlint.

Content problems found by validators are never raised; they are returned as
``ValidationIssue`` values. The exceptions below stop a run.
"""

from __future__ import annotations


class FqlintError(Exception):
    """Base class for all fqlint errors."""


class LintAborted(FqlintError):
    """A content error was found while running in panic mode.

    Attributes:
        message: The formatted diagnostic line for the offending record.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FastqOpenError(FqlintError):
    """An input file could not be opened."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not open file: {path}: {reason}")
        self.path = path


class FastqReadError(FqlintError):
    """A record could not be read from an open input."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Could not read record from file: {path}: {reason}")
        self.path = path


class DesyncError(FqlintError):
    """One stream of a pair ended before the other."""

    def __init__(self, ended_src: str, other_src: str) -> None:
        super().__init__(f"{ended_src} unexpectedly ended before {other_src}")
        self.ended_src = ended_src
        self.other_src = other_src


class ConfigError(FqlintError):
    """Invalid configuration file or option value."""


__all__ = [
    "FqlintError",
    "LintAborted",
    "FastqOpenError",
    "FastqReadError",
    "DesyncError",
    "ConfigError",
]
