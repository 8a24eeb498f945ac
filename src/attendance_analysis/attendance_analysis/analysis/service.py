from __future__ import annotations

import logging
import math
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Sequence, Set

from ..common.datetime_utils import is_weekend, is_within_range, minutes_between
from ..preferences.model import DEFAULT_CONFIG, AnalysisConfig
from ..punches.duplicate_filter import filter_duplicates
from ..punches.model import PunchRecord
from ..schedules.classifier import classify_schedule
from .evaluator import DailyEvaluator
from .model import AnalysisResult

logger = logging.getLogger(__name__)


def round_half(value: float) -> float:
    """Round to the nearest 0.5, halves going up."""
    return math.floor(value * 2 + 0.5) / 2


def company_workdays(punches: Iterable[PunchRecord], start: date, end: date) -> Set[date]:
    """Weekdays in [start, end] on which anybody punched."""
    days: Set[date] = set()
    for p in punches:
        day = p.work_date
        if not is_weekend(day) and is_within_range(day, start, end):
            days.add(day)
    return days


def group_by_employee(punches: Iterable[PunchRecord]) -> Dict[str, List[PunchRecord]]:
    # Exact name match is the identity key: two people sharing a name merge.
    grouped: Dict[str, List[PunchRecord]] = {}
    for p in punches:
        grouped.setdefault(p.employee_name, []).append(p)
    return grouped


def group_by_day(punches: Iterable[PunchRecord]) -> Dict[date, List[PunchRecord]]:
    grouped: Dict[date, List[PunchRecord]] = defaultdict(list)
    for p in punches:
        grouped[p.work_date].append(p)
    return dict(grouped)


def weekend_hours(punches: Sequence[PunchRecord]) -> float:
    if len(punches) < 2:
        return 0.0
    return minutes_between(punches[0].timestamp, punches[-1].timestamp) / 60


class PeriodAnalysisService:
    """Use case: aggregate attendance metrics for every employee in a period."""

    def __init__(self, *, evaluator: DailyEvaluator | None = None):
        self._evaluator = evaluator or DailyEvaluator()

    def analyze_period(
        self,
        punches: Sequence[PunchRecord],
        start: date,
        end: date,
        config: AnalysisConfig = DEFAULT_CONFIG,
    ) -> List[AnalysisResult]:
        workdays = company_workdays(punches, start, end)
        results = [
            self._analyze_employee(name, records, start, end, config, workdays)
            for name, records in group_by_employee(punches).items()
        ]
        logger.info(
            "Analyzed %d employee(s) over %s..%s (%d company workday(s))",
            len(results), start.isoformat(), end.isoformat(), len(workdays),
        )
        return results

    def _analyze_employee(
        self,
        name: str,
        punches: List[PunchRecord],
        start: date,
        end: date,
        config: AnalysisConfig,
        workdays: Set[date],
    ) -> AnalysisResult:
        filtered = filter_duplicates(punches, config.duplicate_threshold_minutes)
        schedule = classify_schedule(filtered, config)
        daily = group_by_day(filtered)
        logger.debug("%s: %d punch(es), %s schedule", name, len(filtered), schedule.kind.value)

        late_days = 0
        late_minutes = 0
        late_hours = 0.0
        overtime_hours = 0.0
        saturday_hours = 0.0
        days_registered = 0
        worked_weekdays: Set[date] = set()

        for day, records in daily.items():
            if not is_within_range(day, start, end):
                continue
            days_registered += 1

            if is_weekend(day):
                saturday_hours += weekend_hours(records)
                continue

            worked_weekdays.add(day)
            outcome = self._evaluator.evaluate(records, schedule, config)
            if outcome.late_minutes > 0:
                late_days += 1
                late_minutes += outcome.late_minutes
                late_hours += outcome.late_hours
            overtime_hours += outcome.overtime_hours

        rounded_overtime = round_half(overtime_hours)
        rounded_saturday = round_half(saturday_hours)

        return AnalysisResult(
            name=name,
            schedule=schedule,
            days_registered=days_registered,
            absences=len(workdays - worked_weekdays),
            late_days=late_days,
            late_minutes=late_minutes,
            late_hours=late_hours,
            overtime_hours=rounded_overtime,
            saturday_hours=rounded_saturday,
            total_hours=rounded_overtime + rounded_saturday,
            daily_records=daily,
        )


def analyze_period(
    punches: Sequence[PunchRecord],
    start: date,
    end: date,
    config: AnalysisConfig = DEFAULT_CONFIG,
) -> List[AnalysisResult]:
    return PeriodAnalysisService().analyze_period(punches, start, end, config)
