"""Validation outcome and report types, and the final report renderer."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar, TextIO, Union


@dataclass(frozen=True)
class ValidationTarget:
    path: Path
    content: str


@dataclass(frozen=True)
class Valid:
    path: str
    ok: ClassVar[bool] = True


@dataclass(frozen=True)
class Invalid:
    path: str
    message: str
    ok: ClassVar[bool] = False


ValidationOutcome = Union[Valid, Invalid]


@dataclass
class ValidationReport:
    valid_count: int = 0
    failures: list[Invalid] = field(default_factory=list)

    def record(self, outcome: ValidationOutcome) -> None:
        if isinstance(outcome, Invalid):
            self.failures.append(outcome)
        else:
            self.valid_count += 1

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def total(self) -> int:
        return self.valid_count + len(self.failures)


def format_success_line(path: str) -> str:
    return f"✓ {path}"


def render_report(report: ValidationReport, stream: TextIO | None = None) -> int:
    """Write the failure section and verdict; return the process exit code."""
    out = stream if stream is not None else sys.stdout
    if report.failures:
        print("", file=out)
        for failure in report.failures:
            print(f"✗ {failure.path}: invalid SQL", file=out)
            print(f"  {failure.message}", file=out)
        print(f"\n✗ {len(report.failures)} SQL errors found", file=out)
        out.flush()
        return 1

    print(f"✓ All {report.valid_count} SQL files validated", file=out)
    out.flush()
    return 0


__all__ = [
    "Invalid",
    "Valid",
    "ValidationOutcome",
    "ValidationReport",
    "ValidationTarget",
    "format_success_line",
    "render_report",
]
