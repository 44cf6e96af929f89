from __future__ import annotations

from ..core.exceptions import ConfigurationError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is empty")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"{field_name} is not a number: {value!r}") from None
    if number < 0:
        raise ConfigurationError(f"{field_name} must not be negative: {number}")
    return number
