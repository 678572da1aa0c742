"""Exception types raised by the validation core and CLI."""


class SqlvalidError(Exception):
    """Base class for errors raised by sqlvalid."""


class UsageError(SqlvalidError):
    """The command line is missing its required directory argument."""


class WalkError(SqlvalidError):
    """Listing a directory failed; the whole walk is aborted."""

    def __init__(self, path: str, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"failed to walk {path}: {cause.strerror or cause}")


class SQLValidationError(SqlvalidError):
    """A single file failed validation. ``str(exc)`` is the reported message."""


class SQLSyntaxError(SQLValidationError):
    pass


class SetupError(SQLValidationError):
    pass


__all__ = [
    "SQLSyntaxError",
    "SQLValidationError",
    "SetupError",
    "SqlvalidError",
    "UsageError",
    "WalkError",
]
