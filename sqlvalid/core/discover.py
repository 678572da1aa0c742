"""Discovery of ``.sql`` files under a root directory."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from .errors import WalkError

SQL_SUFFIX = ".sql"


def is_sql_name(name: str) -> bool:
    # Literal, case-sensitive suffix: "QUERY.SQL" is not a candidate.
    return name.endswith(SQL_SUFFIX)


def _list_dir(directory: Path) -> list[Path]:
    try:
        return sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as exc:
        raise WalkError(str(directory), exc) from exc


def _walk(directory: Path) -> Iterator[Path]:
    for entry in _list_dir(directory):
        if entry.is_symlink() and entry.is_dir():
            continue
        if entry.is_dir():
            yield from _walk(entry)
        elif entry.is_file() and is_sql_name(entry.name):
            yield entry


def discover(root: str | Path) -> Iterator[Path]:
    """Yield ``.sql`` files under ``root`` depth-first, in lexical order.

    Directories are recursed into at their sorted position among their
    siblings; symlinked directories are not followed. A directory listing
    failure raises ``WalkError`` and ends the walk.
    """
    root_path = Path(root)
    if root_path.is_dir():
        yield from _walk(root_path)
        return
    if root_path.is_file():
        if is_sql_name(root_path.name):
            yield root_path
        return
    try:
        root_path.stat()
    except OSError as exc:
        raise WalkError(str(root_path), exc) from exc


__all__ = ["SQL_SUFFIX", "discover", "is_sql_name"]
