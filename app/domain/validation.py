"""Numeric guards shared by value objects, entities and domain services."""

import math
from typing import Any

from app.domain.errors import InvalidAssumption


def require_finite(field: str, value: Any) -> None:
    """Reject booleans, non-numbers, NaN and infinities."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidAssumption(field, value, "value must be a finite number")


def require_non_negative(field: str, value: Any) -> None:
    """Reject anything that is not a finite number >= 0."""
    require_finite(field, value)
    if value < 0:
        raise InvalidAssumption(field, value, "value cannot be negative")


def require_rate(field: str, value: Any) -> None:
    """Reject non-finite rates and rates below -100%."""
    require_finite(field, value)
    if value < -100:
        raise InvalidAssumption(field, value, "rate cannot be below -100%")
