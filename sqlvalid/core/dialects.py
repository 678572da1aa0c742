"""SQL dialects a run can be validated against."""

from __future__ import annotations

from enum import Enum


class Dialect(str, Enum):
    POSTGRES = "postgres"
    SQLITE = "sqlite"

    @classmethod
    def coerce(cls, value: "Dialect | str") -> "Dialect":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            raise ValueError(f"dialect must be one of: {supported}") from exc

    @classmethod
    def from_flag(cls, use_sqlite: bool) -> "Dialect":
        return cls.SQLITE if use_sqlite else cls.POSTGRES


__all__ = ["Dialect"]
