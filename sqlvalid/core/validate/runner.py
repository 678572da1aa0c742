"""Sequential validation of every discovered ``.sql`` file."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import TextIO

from ..dialects import Dialect
from ..discover import discover
from ..errors import SQLValidationError
from ..registry import ValidatorFn, get_validator
from ...logging import outcome_to_loggable
from .report import Invalid, Valid, ValidationOutcome, ValidationReport, ValidationTarget, format_success_line

logger = logging.getLogger(__name__)

READ_FAILURE_MESSAGE = "failed to read"


def read_target(path: Path) -> ValidationTarget:
    # Undecodable bytes are replaced: only OSError counts as a failed read.
    content = path.read_text(encoding="utf-8", errors="replace")
    return ValidationTarget(path=path, content=content)


def validate_target(target: ValidationTarget, validator: ValidatorFn) -> ValidationOutcome:
    try:
        validator(target.content)
    except SQLValidationError as exc:
        return Invalid(path=str(target.path), message=str(exc))
    return Valid(path=str(target.path))


def validate_path(path: Path, validator: ValidatorFn) -> tuple[ValidationOutcome, ValidationTarget | None]:
    try:
        target = read_target(path)
    except OSError as exc:
        logger.debug("Could not read %s: %s", path, exc)
        return Invalid(path=str(path), message=READ_FAILURE_MESSAGE), None
    return validate_target(target, validator), target


def run_validation(
    root: str | Path,
    *,
    dialect: Dialect | str = Dialect.POSTGRES,
    stream: TextIO | None = None,
) -> ValidationReport:
    """Validate every ``.sql`` file under ``root`` in discovery order.

    A ``✓ <path>`` line is written to ``stream`` as soon as a file passes.
    Failures are only collected; ``render_report`` prints them afterwards.
    ``WalkError`` from discovery propagates and ends the run.
    """
    out = stream if stream is not None else sys.stdout
    resolved = Dialect.coerce(dialect)
    validator = get_validator(resolved)
    report = ValidationReport()

    for path in discover(root):
        outcome, target = validate_path(path, validator)
        report.record(outcome)
        if outcome.ok:
            print(format_success_line(outcome.path), file=out, flush=True)

        loggable = outcome_to_loggable(
            outcome,
            dialect=resolved,
            content=target.content if target is not None else None,
        )
        if loggable is not None:
            logger.debug("Validated SQL file:\n%s", json.dumps(loggable, ensure_ascii=False, indent=2))

    return report


__all__ = ["READ_FAILURE_MESSAGE", "read_target", "run_validation", "validate_path", "validate_target"]
