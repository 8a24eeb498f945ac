"""Fortnight reporting periods (1st-15th and 16th-end of month)."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ..core.exceptions import ValidationError
from ..punches.model import PunchRecord


@dataclass(frozen=True)
class Period:
    start: date
    end: date
    fortnight: int

    @property
    def month(self) -> date:
        return self.start.replace(day=1)

    def to_dict(self) -> dict:
        return {
            "start": self.start.isoformat(),
            "end": self.end.isoformat(),
            "month": self.month.strftime("%Y-%m"),
            "fortnight": self.fortnight,
        }


def fortnight_range(month: date, fortnight: int) -> Period:
    if fortnight not in (1, 2):
        raise ValidationError(f"Fortnight must be 1 or 2, got {fortnight!r}")
    if fortnight == 1:
        return Period(start=month.replace(day=1), end=month.replace(day=15), fortnight=1)
    last_day = calendar.monthrange(month.year, month.month)[1]
    return Period(start=month.replace(day=16), end=month.replace(day=last_day), fortnight=2)


def fortnight_of(day: date) -> Period:
    return fortnight_range(day, 1 if day.day <= 15 else 2)


def next_fortnight(period: Period) -> Period:
    if period.fortnight == 1:
        return fortnight_range(period.month, 2)
    month = period.month
    if month.month == 12:
        return fortnight_range(date(month.year + 1, 1, 1), 1)
    return fortnight_range(date(month.year, month.month + 1, 1), 1)


def previous_fortnight(period: Period) -> Period:
    if period.fortnight == 2:
        return fortnight_range(period.month, 1)
    month = period.month
    if month.month == 1:
        return fortnight_range(date(month.year - 1, 12, 1), 2)
    return fortnight_range(date(month.year, month.month - 1, 1), 2)


def default_period(punches: Iterable[PunchRecord]) -> Period:
    """The fortnight containing the earliest punch; what a fresh upload opens on."""
    days = [p.work_date for p in punches]
    if not days:
        raise ValidationError("No punches to derive a period from")
    return fortnight_of(min(days))
