from __future__ import annotations

from datetime import date
from typing import Iterable, List, Optional, Sequence

from ..common.datetime_utils import each_day, is_saturday, is_sunday, is_within_range, minutes_since_midnight
from ..core.constants import MISSING_RECORD_TOLERANCE_MINUTES
from ..core.enums import DayStatus, PunchKind
from ..preferences.model import AnalysisConfig
from ..punches.model import PunchRecord
from ..schedules.model import Schedule
from .evaluator import evaluate_day
from .model import AnalysisResult, DayDetail, Holiday
from .service import round_half, weekend_hours


def holidays_in_range(holidays: Iterable[Holiday], start: date, end: date) -> List[Holiday]:
    return sorted((h for h in holidays if is_within_range(h.day, start, end)), key=lambda h: h.day)


def _first_minute(punches: Sequence[PunchRecord], kind: PunchKind) -> Optional[int]:
    punch = next((p for p in punches if p.kind == kind), None)
    return minutes_since_midnight(punch.timestamp) if punch else None


def has_missing_records(punches: Sequence[PunchRecord], schedule: Schedule) -> bool:
    """Weekday looks incomplete: no entry, no exit, or either far off schedule."""
    entry = _first_minute(punches, PunchKind.IN)
    exit_ = _first_minute(punches, PunchKind.OUT)
    if entry is None or exit_ is None:
        return True
    very_late = entry > schedule.start_time + MISSING_RECORD_TOLERANCE_MINUTES
    very_early = exit_ < schedule.end_time - MISSING_RECORD_TOLERANCE_MINUTES
    return very_late or very_early


def day_status(*, is_saturday_: bool, has_records: bool, missing: bool, is_holiday: bool) -> DayStatus:
    if is_saturday_:
        return DayStatus.SATURDAY_WORKED if has_records else DayStatus.SATURDAY_EMPTY
    if is_holiday:
        return DayStatus.HOLIDAY
    if not has_records:
        return DayStatus.NO_RECORDS
    if missing:
        return DayStatus.INCOMPLETE
    return DayStatus.COMPLETE


def build_day_details(
    result: AnalysisResult,
    start: date,
    end: date,
    config: AnalysisConfig,
    holidays: Iterable[Holiday] = (),
) -> List[DayDetail]:
    """Per-day view of one employee's period; Sundays are left out."""
    holiday_days = {h.day for h in holidays}
    if config.show_all_days:
        days = list(each_day(start, end))
    else:
        days = sorted(d for d in result.daily_records if is_within_range(d, start, end))

    details: List[DayDetail] = []
    for day in days:
        if is_sunday(day):
            continue
        punches = result.daily_records.get(day, [])
        saturday = is_saturday(day)
        has_records = bool(punches)
        missing = not saturday and has_missing_records(punches, result.schedule)
        is_holiday = day in holiday_days

        details.append(
            DayDetail(
                day=day,
                punches=punches,
                evaluation=evaluate_day(punches, result.schedule, config),
                saturday_hours=round_half(weekend_hours(punches)) if saturday else 0.0,
                is_saturday=saturday,
                has_records=has_records,
                has_missing_records=missing,
                is_holiday=is_holiday,
                status=day_status(is_saturday_=saturday, has_records=has_records, missing=missing, is_holiday=is_holiday),
            )
        )
    return details
