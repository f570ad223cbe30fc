from __future__ import annotations

from ..core.exceptions import InvalidInputError


def require_positive(value: float, field_name: str) -> float:
    if value is None or value <= 0:
        raise InvalidInputError(f"{field_name} must be greater than 0, got {value!r}")
    return value


def require_non_negative(value: float, field_name: str) -> float:
    if value is None or value < 0:
        raise InvalidInputError(f"{field_name} must not be negative, got {value!r}")
    return value


def require_between(value: float, field_name: str, low: float, high: float) -> float:
    if value is None or not low <= value <= high:
        raise InvalidInputError(f"{field_name} must be between {low} and {high}, got {value!r}")
    return value


def require_weekday_index(value: int, field_name: str = "weekday") -> int:
    if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value <= 6:
        raise InvalidInputError(f"{field_name} must be a weekday index 0..6 (0=Sunday), got {value!r}")
    return value
