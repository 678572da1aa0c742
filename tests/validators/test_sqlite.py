import sqlite3
from pathlib import Path

import pytest

from sqlvalid.core.errors import SetupError, SQLSyntaxError, SQLValidationError
from sqlvalid.core.validators import SYNTHETIC_SCHEMA, validate_sqlite
from sqlvalid.core.validators.sqlite import first_statement, is_schema_statement, strip_leading_trivia
from tests._sql_files import sql_files


@pytest.mark.parametrize("path", sql_files("sqlite", "valid"), ids=lambda p: p.name)
def test_sqlite_accepts_valid_fixtures(path: Path) -> None:
    validate_sqlite(path.read_text(encoding="utf-8"))


@pytest.mark.parametrize("path", sql_files("sqlite", "invalid"), ids=lambda p: p.name)
def test_sqlite_rejects_invalid_fixtures(path: Path) -> None:
    with pytest.raises(SQLValidationError):
        validate_sqlite(path.read_text(encoding="utf-8"))


def test_synthetic_schema_is_fixed() -> None:
    assert SYNTHETIC_SCHEMA == (
        "CREATE TABLE users (id INTEGER PRIMARY KEY, name TEXT, email TEXT, active INTEGER)",
        "CREATE TABLE posts (id INTEGER PRIMARY KEY, user_id INTEGER, title TEXT)",
    )


def test_sqlite_errors_are_prefixed() -> None:
    with pytest.raises(SQLSyntaxError) as excinfo:
        validate_sqlite("SELECT * FROM nonexistent_table")

    assert str(excinfo.value) == "SQL error: no such table: nonexistent_table"


def test_schema_statements_are_checked_without_synthetic_tables() -> None:
    with pytest.raises(SQLSyntaxError, match="no such table: users"):
        validate_sqlite("DROP TABLE users")

    validate_sqlite("  create table users (id INTEGER)")


def test_each_call_gets_a_fresh_database() -> None:
    validate_sqlite("CREATE TABLE audit_log (id INTEGER PRIMARY KEY, note TEXT)")

    with pytest.raises(SQLSyntaxError, match="no such table: audit_log"):
        validate_sqlite("SELECT note FROM audit_log")


def test_statement_is_compiled_not_executed() -> None:
    # Executing would fail on the UNIQUE constraint of the second row.
    validate_sqlite("INSERT INTO users (id, name) VALUES (1, 'a'), (1, 'b')")


def test_setup_failure_is_reported_as_setup_error(monkeypatch) -> None:
    monkeypatch.setattr(
        "sqlvalid.core.validators.sqlite.SYNTHETIC_SCHEMA",
        ("CREATE TABLE users (id INTEGER)", "CREATE TABLE users (id INTEGER)"),
    )

    with pytest.raises(SetupError) as excinfo:
        validate_sqlite("SELECT 1")

    assert str(excinfo.value) == "setup error: table users already exists"


def test_open_failure_is_reported_as_setup_error(monkeypatch) -> None:
    def fail_connect(*args, **kwargs):
        raise sqlite3.OperationalError("unable to open database file")

    monkeypatch.setattr("sqlvalid.core.validators.sqlite.sqlite3.connect", fail_connect)

    with pytest.raises(SetupError, match="^cannot open sqlite: unable to open database file$"):
        validate_sqlite("SELECT 1")


def test_sqlite_accepts_empty_text() -> None:
    validate_sqlite("")
    validate_sqlite("\n\t ")


@pytest.mark.parametrize(
    "sql",
    [
        "-- just a comment\n",
        "/* header */\n-- note",
        "/* never closed",
        ";;\n",
        "-- placeholder\n;\n",
    ],
)
def test_sqlite_accepts_text_without_statements(sql: str) -> None:
    validate_sqlite(sql)


def test_sqlite_skips_leading_empty_statements() -> None:
    validate_sqlite(";SELECT * FROM users;")
    validate_sqlite(" ; -- first\n/* second */ ;SELECT name FROM users")

    with pytest.raises(SQLSyntaxError, match=r'^SQL error: near "SELECTT": syntax error$'):
        validate_sqlite("; -- x\n ;SELECTT 1")


def test_strip_leading_trivia() -> None:
    assert strip_leading_trivia("  -- a\n/* b */ ; SELECT 1") == "SELECT 1"
    assert strip_leading_trivia("SELECT 1 -- trailing") == "SELECT 1 -- trailing"
    assert strip_leading_trivia("- 1") == "- 1"
    assert strip_leading_trivia("-- only") == ""
    assert strip_leading_trivia("/* open") == ""


def test_sqlite_accepts_explicit_explain() -> None:
    validate_sqlite("EXPLAIN QUERY PLAN SELECT * FROM users WHERE id = 1")


def test_is_schema_statement_uses_trimmed_uppercased_prefix() -> None:
    assert is_schema_statement("create table t (id int)")
    assert is_schema_statement("\n  Alter TABLE t ADD COLUMN c")
    assert is_schema_statement("DROP INDEX idx")
    assert not is_schema_statement("SELECT 1")
    assert not is_schema_statement("-- comment\nCREATE TABLE t (id int)")


def test_first_statement_stops_at_first_complete_statement() -> None:
    assert first_statement("SELECT 1; SELECT 2;") == "SELECT 1;"
    assert first_statement("SELECT 'a;b'; SELECT 2") == "SELECT 'a;b';"
    assert first_statement("SELECT 1") == "SELECT 1"


def test_first_statement_keeps_trigger_body_together() -> None:
    sql = (
        "CREATE TRIGGER t AFTER INSERT ON users BEGIN "
        "UPDATE users SET active = 1; "
        "END; SELECT 1;"
    )

    assert first_statement(sql) == (
        "CREATE TRIGGER t AFTER INSERT ON users BEGIN "
        "UPDATE users SET active = 1; "
        "END;"
    )


def test_only_the_first_statement_is_compiled() -> None:
    validate_sqlite("SELECT * FROM users; SELECT * FROM nonexistent_table;")
