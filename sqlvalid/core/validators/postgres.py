"""PostgreSQL syntax validation.

Parsing is done by ``libpg_query`` through ``pglast``: the same grammar the
PostgreSQL server uses, without needing a server.
"""

from pglast.parser import ParseError, parse_sql_json

from ..errors import SQLSyntaxError


def validate_postgres(sql: str) -> None:
    """Raise ``SQLSyntaxError`` unless ``sql`` parses as PostgreSQL."""
    try:
        parse_sql_json(sql)
    except ParseError as exc:
        # args are (message, location); only the message is reported.
        message = exc.args[0] if exc.args else str(exc)
        raise SQLSyntaxError(str(message)) from exc


__all__ = ["validate_postgres"]
