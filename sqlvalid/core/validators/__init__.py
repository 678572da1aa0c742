"""Syntax validators, one per supported dialect."""

from .postgres import validate_postgres
from .sqlite import SYNTHETIC_SCHEMA, validate_sqlite

__all__ = ["SYNTHETIC_SCHEMA", "validate_postgres", "validate_sqlite"]
