"""YAML case files describing expected clamp results.

A case file lists inputs and the value :func:`core.clamp` should produce::

    cases:
      - name: above range
        value: 20
        lower: 1
        upper: 10
        expected: 10
        value_type: int
      - name: inverted bounds rejected
        value: 5
        lower: 10
        upper: 1
        strict: true
        expect_error: true
        value_type: int

Every value is parsed with :func:`parsing.parse_value` so YAML scalars and
quoted strings behave the same.  ``expect_error: true`` replaces
``expected``, is only valid for strict cases and asserts that
:class:`InvalidRangeError` is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from .core import clamp, clamp_strict
from .errors import CaseFileError, ConfigError, InvalidRangeError
from .parsing import ValueType, parse_value

__all__ = ["ClampCase", "CaseResult", "load_cases", "run_case", "run_cases"]

logger = logging.getLogger(__name__)


class ClampCase(BaseModel):
    """Single entry of a case file."""

    name: str
    value: Any
    lower: Any
    upper: Any
    expected: Any = None
    expect_error: bool = False
    strict: bool = False
    value_type: ValueType = "float"

    @model_validator(mode="after")
    def _check_values(self) -> "ClampCase":
        if self.expect_error:
            if not self.strict:
                raise ValueError("expect_error requires strict: true")
            if self.expected is not None:
                raise ValueError("expect_error and expected are mutually exclusive")
        elif self.expected is None:
            raise ValueError("expected is required unless expect_error is set")
        fields = ["value", "lower", "upper"]
        if not self.expect_error:
            fields.append("expected")
        for name in fields:
            try:
                parse_value(getattr(self, name), self.value_type)
            except ConfigError as exc:
                raise ValueError(f"{name}: {exc}") from exc
        return self

    def typed(self, name: str) -> Any:
        return parse_value(getattr(self, name), self.value_type)


class _CaseFile(BaseModel):
    cases: list[ClampCase] = Field(default_factory=list)


@dataclass
class CaseResult:
    """Outcome of evaluating a :class:`ClampCase`."""

    case: ClampCase
    passed: bool
    actual: Any
    raised: bool = False

    def describe(self) -> str:
        status = "PASS" if self.passed else "FAIL"
        detail = "raised InvalidRangeError" if self.raised else f"got {self.actual!r}"
        if not self.passed:
            wanted = "InvalidRangeError" if self.case.expect_error else repr(self.case.expected)
            detail += f", expected {wanted}"
        return f"{status} {self.case.name}: {detail}"


def load_cases(path: Path) -> list[ClampCase]:
    """Load and validate the cases listed in *path*.

    Raises
    ------
    CaseFileError
        If the file is unreadable, not YAML or does not match the schema.
    """

    try:
        raw = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as exc:
        raise CaseFileError(f"cannot read case file {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise CaseFileError(f"case file {path} must contain a mapping with a 'cases' list")
    try:
        return _CaseFile(**raw).cases
    except ValidationError as exc:
        raise CaseFileError(f"invalid case file {path}: {exc}") from exc


def run_case(case: ClampCase) -> CaseResult:
    value, lower, upper = case.typed("value"), case.typed("lower"), case.typed("upper")
    actual: Any = None
    raised = False
    if case.strict:
        try:
            actual = clamp_strict(value, lower, upper)
        except InvalidRangeError:
            raised = True
    else:
        actual = clamp(value, lower, upper)

    if case.expect_error:
        passed = raised
    else:
        passed = not raised and actual == case.typed("expected")
    logger.debug("case %s: actual=%r raised=%s passed=%s", case.name, actual, raised, passed)
    return CaseResult(case, passed, actual, raised)


def run_cases(cases: Sequence[ClampCase]) -> list[CaseResult]:
    results = [run_case(c) for c in cases]
    failed = sum(not r.passed for r in results)
    logger.info("ran %d clamp cases, %d failed", len(results), failed)
    return results
