from typing import TYPE_CHECKING, Any

from ..config import LOG_VERBOSITIES, get_settings
from ..core.dialects import Dialect

if TYPE_CHECKING:
    from ..core.validate.report import ValidationOutcome

_DEFAULT_PREVIEW_LIMITS = {
    "medium": 160,
    "high": 240,
}


def _truncate_sql(value: str | None, *, limit: int) -> str:
    text = str(value or "").strip()
    if len(text) <= limit:
        return text
    return f"{text[:limit].rstrip()}... [truncated]"


def _normalize_verbosity(verbosity: str) -> str:
    normalized = str(verbosity or "").strip().lower()
    if normalized in LOG_VERBOSITIES:
        return normalized
    return "medium"


def outcome_to_loggable(
    outcome: "ValidationOutcome",
    *,
    dialect: Dialect,
    content: str | None = None,
    verbosity: str | None = None,
    debug_enabled: bool | None = None,
) -> dict[str, Any] | None:
    settings = get_settings()
    if debug_enabled is None:
        debug_enabled = settings.debug

    if not debug_enabled:
        return None

    resolved_verbosity = verbosity if verbosity is not None else settings.log_verbosity
    level = _normalize_verbosity(resolved_verbosity)

    data: dict[str, Any] = {"path": outcome.path, "valid": outcome.ok}
    if level == "low":
        return data

    data["dialect"] = dialect.value
    data["message"] = getattr(outcome, "message", None)
    if level == "extrahigh":
        data["sql"] = content
        return data

    data["sql"] = _truncate_sql(content, limit=_DEFAULT_PREVIEW_LIMITS[level])
    return data
