"""Public package entrypoint for sqlvalid.

This package provides a stable import surface for the SQL validation core,
plus the command-line frontend.
"""

from importlib.metadata import PackageNotFoundError, version
from typing import Any

_LAZY_EXPORTS: dict[str, tuple[str, str]] = {
    "Dialect": ("sqlvalid.core", "Dialect"),
    "ValidationReport": ("sqlvalid.core", "ValidationReport"),
    "discover": ("sqlvalid.core", "discover"),
    "render_report": ("sqlvalid.core", "render_report"),
    "validate_file": ("sqlvalid.core", "validate_file"),
    "validate_sql": ("sqlvalid.core", "validate_sql"),
    "validate_tree": ("sqlvalid.core", "validate_tree"),
}

try:
    __version__ = version("sqlvalid")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "Dialect",
    "ValidationReport",
    "__version__",
    "discover",
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
