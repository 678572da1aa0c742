"""Stable public API facade for the sqlvalid core."""


from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from .dialects import Dialect
from .discover import discover as _discover
from .registry import get_validator
from .validate import (
    ValidationOutcome,
    ValidationReport,
    ValidationTarget,
    render_report,
    run_validation,
    validate_path,
    validate_target,
)


def discover(root: str | Path) -> Iterator[Path]:
    return _discover(root)


def validate_sql(sql: str, *, dialect: Dialect | str = Dialect.POSTGRES) -> ValidationOutcome:
    """Validate one SQL string; the outcome path is ``"<string>"``."""
    validator = get_validator(Dialect.coerce(dialect))
    return validate_target(ValidationTarget(path=Path("<string>"), content=sql), validator)


def validate_file(path: str | Path, *, dialect: Dialect | str = Dialect.POSTGRES) -> ValidationOutcome:
    validator = get_validator(Dialect.coerce(dialect))
    outcome, _ = validate_path(Path(path), validator)
    return outcome


def validate_tree(
    root: str | Path,
    *,
    dialect: Dialect | str = Dialect.POSTGRES,
    stream: TextIO | None = None,
) -> ValidationReport:
    return run_validation(root, dialect=dialect, stream=stream)


__all__ = [
    "discover",
    "render_report",
    "validate_file",
    "validate_sql",
    "validate_tree",
]
