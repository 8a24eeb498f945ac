from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Iterator, Union

from ..core.constants import DATE_FORMAT, TIMESTAMP_FORMAT
from ..core.exceptions import ValidationError

DateLike = Union[date, datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid date {value!r}, expected YYYY-MM-DD") from e


def parse_timestamp(value: str) -> datetime:
    """Parse a punch timestamp (YYYY-MM-DD HH:MM:SS).

    Malformed values are not recovered: the error aborts the whole run.
    """
    try:
        return datetime.strptime(value, TIMESTAMP_FORMAT)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Malformed punch timestamp {value!r}") from e


def format_timestamp(value: datetime) -> str:
    return value.strftime(TIMESTAMP_FORMAT)


def minutes_since_midnight(moment: Union[datetime, time]) -> int:
    """hours * 60 + minutes; seconds are ignored."""
    return moment.hour * 60 + moment.minute


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def _as_date(value: DateLike) -> date:
    return value.date() if isinstance(value, datetime) else value


def is_weekend(value: DateLike) -> bool:
    return _as_date(value).weekday() >= 5


def is_saturday(value: DateLike) -> bool:
    return _as_date(value).weekday() == 5


def is_sunday(value: DateLike) -> bool:
    return _as_date(value).weekday() == 6


def is_within_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive on both ends, compared at calendar-day granularity."""
    return _as_date(start) <= _as_date(value) <= _as_date(end)


def each_day(start: DateLike, end: DateLike) -> Iterator[date]:
    current = _as_date(start)
    last = _as_date(end)
    while current <= last:
        yield current
        current += timedelta(days=1)


def now_local() -> datetime:
    """Current local time; the only clock read outside the engine."""
    return datetime.now()
