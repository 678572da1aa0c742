from .report import (
    Invalid,
    Valid,
    ValidationOutcome,
    ValidationReport,
    ValidationTarget,
    format_success_line,
    render_report,
)
from .runner import READ_FAILURE_MESSAGE, read_target, run_validation, validate_path, validate_target

__all__ = [
    "Invalid",
    "READ_FAILURE_MESSAGE",
    "Valid",
    "ValidationOutcome",
    "ValidationReport",
    "ValidationTarget",
    "format_success_line",
    "read_target",
    "render_report",
    "run_validation",
    "validate_path",
    "validate_target",
]
