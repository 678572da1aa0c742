"""Shared runtime settings for the command-line frontend.

This module owns environment-backed diagnostic settings. The validation core
does not read the environment; it receives the dialect as an argument.
"""

import os
from dataclasses import dataclass
from functools import lru_cache

LOG_VERBOSITIES = ("low", "medium", "high", "extrahigh")


@dataclass(frozen=True)
class Settings:
    debug: bool
    log_verbosity: str


def _env_bool(name: str, default: bool = False) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


def _env_choice(name: str, default: str, *, allowed: set[str]) -> str:
    val = os.getenv(name)
    if val is None:
        return default
    normalized = val.strip().lower()
    if normalized in allowed:
        return normalized
    return default


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings(
        debug=_env_bool("SQLVALID_DEBUG", default=False),
        log_verbosity=_env_choice(
            "SQLVALID_LOG_VERBOSITY",
            default="medium",
            allowed=set(LOG_VERBOSITIES),
        ),
    )


__all__ = ["LOG_VERBOSITIES", "Settings", "get_settings"]
