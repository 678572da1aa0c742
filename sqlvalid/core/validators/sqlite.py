"""SQLite syntax validation against a throwaway in-memory database.

SQLite has no syntax-only mode: compiling a statement also resolves the
tables it references. Statements that are not schema definitions are
therefore compiled against a small fixed schema (``users`` and ``posts``) so
that ordinary queries over those names do not fail as unknown tables. Any
other table reference is reported as an error.

Each call owns its own database, so tables never leak between files.
"""

from __future__ import annotations

import logging
import sqlite3

from ..errors import SetupError, SQLSyntaxError

logger = logging.getLogger(__name__)

SYNTHETIC_SCHEMA: tuple[str, ...] = (
    "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT, active INTEGER)",
    "CREATE TABLE posts (id INTEGER PRIMARY KEY, user_id INTEGER, title TEXT)",
)

_SCHEMA_KEYWORDS = ("CREATE", "ALTER", "DROP")
_SKIPPED_CHARS = " \t\n\f\r;"


def is_schema_statement(sql: str) -> bool:
    return sql.strip().upper().startswith(_SCHEMA_KEYWORDS)


def strip_leading_trivia(sql: str) -> str:
    """Drop leading whitespace, comments and empty ``;`` statements.

    SQLite skips these before compiling, so text made only of them holds no
    statement at all.
    """
    pos = 0
    length = len(sql)
    while pos < length:
        if sql[pos] in _SKIPPED_CHARS:
            pos += 1
        elif sql.startswith("--", pos):
            newline = sql.find("\n", pos)
            pos = length if newline < 0 else newline + 1
        elif sql.startswith("/*", pos):
            # An unterminated block comment runs to the end of the text.
            close = sql.find("*/", pos + 2)
            pos = length if close < 0 else close + 2
        else:
            break
    return sql[pos:]


def first_statement(sql: str) -> str:
    """Return the text up to and including the first complete statement.

    Without a complete statement the whole text is returned. Semicolons inside
    string literals, comments and trigger bodies do not end a statement.
    """
    start = 0
    while True:
        end = sql.find(";", start)
        if end < 0:
            return sql
        candidate = sql[: end + 1]
        if sqlite3.complete_statement(candidate):
            return candidate
        start = end + 1


def _compile(conn: sqlite3.Connection, statement: str) -> None:
    # EXPLAIN compiles the statement and returns its program without running it.
    if statement.strip().upper().startswith("EXPLAIN"):
        text = statement
    else:
        text = f"EXPLAIN {statement}"
    cursor = conn.execute(text)
    cursor.close()


def validate_sqlite(sql: str) -> None:
    """Raise ``SQLValidationError`` unless ``sql`` compiles under SQLite."""
    try:
        conn = sqlite3.connect(":memory:")
    except sqlite3.Error as exc:
        raise SetupError(f"cannot open sqlite: {exc}") from exc

    try:
        if not is_schema_statement(sql):
            for ddl in SYNTHETIC_SCHEMA:
                try:
                    conn.execute(ddl)
                except sqlite3.Error as exc:
                    raise SetupError(f"setup error: {exc}") from exc

        statement = first_statement(strip_leading_trivia(sql))
        if not statement:
            logger.debug("no statement in SQL text, nothing to compile")
            return
        try:
            _compile(conn, statement)
        except sqlite3.Error as exc:
            raise SQLSyntaxError(f"SQL error: {exc}") from exc
    finally:
        conn.close()


__all__ = [
    "SYNTHETIC_SCHEMA",
    "first_statement",
    "is_schema_statement",
    "strip_leading_trivia",
    "validate_sqlite",
]
