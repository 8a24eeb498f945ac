from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import is_saturday, minutes_between, minutes_since_midnight
from ..core.constants import FULL_WORKDAY_MINUTES
from ..preferences.model import AnalysisConfig, Thresholds
from ..punches.duplicate_filter import filter_duplicates
from ..punches.model import PunchRecord
from ..schedules.model import Schedule
from .factory import ArrivalStrategyFactory
from .model import DayEvaluation
from .strategies.base import late_credit


def break_minutes(punches: Sequence[PunchRecord]) -> Optional[int]:
    """Length of the first break-out/break-in pair, or None when either is missing."""
    start = next((p for p in punches if p.is_break_start), None)
    end = next((p for p in punches if p.is_break_end), None)
    if start is None or end is None:
        return None
    return minutes_between(start.timestamp, end.timestamp)


def overtime_credit(departure: int, schedule: Schedule, thresholds: Thresholds) -> float:
    if departure < schedule.end_time:
        return 0.0
    if departure >= schedule.end_time + thresholds.full_hour:
        return 1.0
    if departure >= schedule.end_time + thresholds.half_hour:
        return 0.5
    return 0.0


class DailyEvaluator:
    """Lateness, overtime and lunch overrun for a single employee-day."""

    def __init__(self, *, strategy_factory: ArrivalStrategyFactory | None = None):
        self._factory = strategy_factory or ArrivalStrategyFactory()

    def evaluate(self, punches: Iterable[PunchRecord], schedule: Schedule, config: AnalysisConfig) -> DayEvaluation:
        records = filter_duplicates(punches, config.duplicate_threshold_minutes)
        if not records:
            return DayEvaluation()

        first = records[0].timestamp
        last = records[-1].timestamp

        # Saturday hours are tallied by the aggregator, never here.
        if is_saturday(first):
            return DayEvaluation()

        lunch = break_minutes(records)
        worked = minutes_between(first, last)
        if lunch is not None:
            worked -= lunch

        strategy = self._factory.for_schedule(schedule)
        decision = strategy.decide_arrival(
            arrival=minutes_since_midnight(first),
            schedule=schedule,
            late_thresholds=config.late_thresholds,
        )
        late_minutes = decision.late_minutes
        late_hours = decision.late_hours
        overtime_hours = 0.0

        if worked >= FULL_WORKDAY_MINUTES:
            overtime_hours += decision.early_arrival_credit
            overtime_hours += overtime_credit(minutes_since_midnight(last), schedule, config.overtime_thresholds)

        if lunch is not None and lunch > config.lunch_duration:
            excess = lunch - config.lunch_duration
            late_minutes += excess
            late_hours += late_credit(excess, config.late_thresholds)

        return DayEvaluation(late_minutes=late_minutes, overtime_hours=overtime_hours, late_hours=late_hours)


_default_evaluator = DailyEvaluator()


def evaluate_day(punches: Iterable[PunchRecord], schedule: Schedule, config: AnalysisConfig) -> DayEvaluation:
    """Evaluate one day without running the whole period (drill-down entry point)."""
    return _default_evaluator.evaluate(punches, schedule, config)
