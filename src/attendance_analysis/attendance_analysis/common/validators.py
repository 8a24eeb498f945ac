from __future__ import annotations

from typing import Any

from ..core.constants import MINUTES_PER_DAY
from ..core.exceptions import ValidationError


def require_positive_int(value: Any, field_name: str) -> int:
    # bool is an int subclass; a checkbox value is never a duration.
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"{field_name} must be a positive integer, got {value!r}")
    return value


def require_minute_of_day(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < MINUTES_PER_DAY:
        raise ValidationError(f"{field_name} must be a minute of day in [0, {MINUTES_PER_DAY}), got {value!r}")
    return value
