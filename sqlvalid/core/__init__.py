"""Core engine API.

The core layer has no CLI concerns and is safe to import from scripts, tests
and the command-line frontend.
"""

from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Dialect": ("sqlvalid.core.dialects", "Dialect"),
    "Invalid": ("sqlvalid.core.validate", "Invalid"),
    "SQLValidationError": ("sqlvalid.core.errors", "SQLValidationError"),
    "Valid": ("sqlvalid.core.validate", "Valid"),
    "ValidationReport": ("sqlvalid.core.validate", "ValidationReport"),
    "WalkError": ("sqlvalid.core.errors", "WalkError"),
    "discover": ("sqlvalid.core.api", "discover"),
    "get_validator": ("sqlvalid.core.registry", "get_validator"),
    "list_validators": ("sqlvalid.core.registry", "list_validators"),
    "register_validator": ("sqlvalid.core.registry", "register_validator"),
    "render_report": ("sqlvalid.core.api", "render_report"),
    "validate_file": ("sqlvalid.core.api", "validate_file"),
    "validate_sql": ("sqlvalid.core.api", "validate_sql"),
    "validate_tree": ("sqlvalid.core.api", "validate_tree"),
}

__all__ = [
    "Dialect",
    "Invalid",
    "SQLValidationError",
    "Valid",
    "ValidationReport",
    "WalkError",
    "discover",
    "get_validator",
    "list_validators",
    "register_validator",
    "render_report",
    "validate_file",
    "validate_sql",
    "validate_tree",
]


def __getattr__(name: str) -> Any:
    target = _LAZY_EXPORTS.get(name)
    if target is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module_name, attribute_name = target
    module = __import__(module_name, fromlist=[attribute_name])
    value = getattr(module, attribute_name)
    globals()[name] = value
    return value
