"""Minimal registry mapping a dialect key to its syntax validator."""


from collections.abc import Callable
from dataclasses import dataclass, field

from .dialects import Dialect

ValidatorFn = Callable[[str], None]


def _normalize_key(key: Dialect | str) -> str:
    if isinstance(key, Dialect):
        return key.value
    return str(key).strip().lower()


@dataclass
class Registry:
    validators: dict[str, ValidatorFn] = field(default_factory=dict)

    def register_validator(self, key: Dialect | str, handler: ValidatorFn) -> None:
        self.validators[_normalize_key(key)] = handler

    def get_validator(self, key: Dialect | str) -> ValidatorFn:
        normalized = _normalize_key(key)
        handler = self.validators.get(normalized)
        if handler is None:
            raise KeyError(f"No validator registered for dialect: {normalized}")
        return handler

    def list_validators(self) -> list[str]:
        return sorted(self.validators.keys())


_registry = Registry()


def register_validator(key: Dialect | str, handler: ValidatorFn) -> None:
    _registry.register_validator(key, handler)


def get_validator(key: Dialect | str) -> ValidatorFn:
    return _registry.get_validator(key)


def list_validators() -> list[str]:
    return _registry.list_validators()


def _register_defaults() -> None:
    from .validators import validate_postgres, validate_sqlite

    defaults = {
        Dialect.POSTGRES: validate_postgres,
        Dialect.SQLITE: validate_sqlite,
    }
    for dialect, handler in defaults.items():
        if dialect.value not in _registry.validators:
            _registry.register_validator(dialect, handler)


_register_defaults()


__all__ = [
    "Registry",
    "ValidatorFn",
    "get_validator",
    "list_validators",
    "register_validator",
]
