"""Custom exception hierarchy and exit codes for the CLI."""
from __future__ import annotations

from enum import IntEnum
from typing import Any


class InvalidRangeError(ValueError):
    """Lower bound orders after the upper bound in strict mode."""

    def __init__(self, lower: Any, upper: Any) -> None:
        super().__init__(f"lower bound {lower!r} exceeds upper bound {upper!r}")
        self.lower = lower
        self.upper = upper


class ConfigError(Exception):
    """Configuration or IO error."""


class CaseFileError(ConfigError):
    """A YAML case file could not be parsed or validated."""


class ExitCode(IntEnum):
    """Exit codes for different error categories."""

    UNKNOWN = 1
    CONFIG = 2
    RANGE = 3
    CHECK = 4


__all__ = [
    "InvalidRangeError",
    "ConfigError",
    "CaseFileError",
    "ExitCode",
]
